# logic/query.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List

from staff_directory.models.employee import Employee


def _matches_search(emp: Employee, term: str) -> bool:
    if not term:
        return True
    term = term.lower()
    return term in emp.name.lower() or term in emp.email.lower() or term in emp.role.lower()


def filter_employees(employees: Iterable[Employee], search_term: str = "",
                     department: str = "", status: str = "") -> List[Employee]:
    """
    Records passing every criterion, in input order.
    - search_term: case-insensitive substring of name, email or role ('' = all)
    - department / status: exact match ('' or None = all)
    """
    return [
        e for e in employees
        if _matches_search(e, search_term or "")
        and (not department or e.department == department)
        and (not status or e.status == status)
    ]


@dataclass(frozen=True)
class EmployeeFilter:
    search_term: str = ""
    department: str = ""
    status: str = ""

    @property
    def is_active(self) -> bool:
        return bool(self.search_term or self.department or self.status)

    def apply(self, employees: Iterable[Employee]) -> List[Employee]:
        return filter_employees(employees, self.search_term, self.department, self.status)
