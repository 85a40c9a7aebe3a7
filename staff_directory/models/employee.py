# models/employee.py
from __future__ import annotations
import math
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Dict

from staff_directory.config import DEFAULT_STATUS
from staff_directory.utils.date_helper import from_iso, to_iso

# fields a draft carries; id and timestamps belong to the store
DRAFT_FIELDS = ("name", "email", "role", "department", "status", "phone", "salary", "hire_date")
REQUIRED_FIELDS = ("name", "email", "role", "department")


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    email: str
    role: str
    department: str
    hire_date: date
    created_at: datetime
    updated_at: datetime
    status: str = DEFAULT_STATUS
    phone: str = ""
    salary: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "department": self.department,
            "status": self.status,
            "phone": self.phone,
            "salary": self.salary,
            "hireDate": self.hire_date.isoformat(),
            "createdAt": to_iso(self.created_at),
            "updatedAt": to_iso(self.updated_at),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Employee":
        # KeyError/ValueError/TypeError propagate; the loader treats them as a corrupt slot
        salary = float(data.get("salary") or 0)
        if math.isnan(salary) or math.isinf(salary) or salary < 0:
            raise ValueError(f"salary must be a non-negative number, got {salary!r}")
        created_at = from_iso(data["createdAt"])
        updated_at = from_iso(data["updatedAt"])
        if created_at > updated_at:
            raise ValueError("createdAt is later than updatedAt")
        return Employee(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            role=data["role"],
            department=data["department"],
            status=data.get("status") or DEFAULT_STATUS,
            phone=data.get("phone") or "",
            salary=salary,
            hire_date=date.fromisoformat(data["hireDate"][:10]),
            created_at=created_at,
            updated_at=updated_at,
        )

    def to_draft(self) -> Dict[str, str]:
        """Form-ready copy: every draft field as text."""
        if not self.salary:
            salary = ""
        elif float(self.salary).is_integer():
            salary = str(int(self.salary))
        else:
            salary = str(self.salary)
        return {
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "department": self.department,
            "status": self.status,
            "phone": self.phone,
            "salary": salary,
            "hire_date": self.hire_date.isoformat(),
        }

    def with_changes(self, **changes) -> "Employee":
        return replace(self, **changes)
