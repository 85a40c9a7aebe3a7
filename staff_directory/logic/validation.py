# logic/validation.py
from __future__ import annotations
from datetime import date
from typing import Any, Dict, Mapping, Optional

from staff_directory.config import DEFAULT_STATUS, Choices
from staff_directory.exceptions import ValidationError
from staff_directory.models.employee import REQUIRED_FIELDS
from staff_directory.utils.parse_utils import parse_hire_date, parse_salary


def _text(draft: Mapping[str, Any], key: str) -> str:
    value = draft.get(key)
    return "" if value is None else str(value).strip()


def validate_draft(draft: Mapping[str, Any], choices: Optional[Choices] = None) -> None:
    """
    Raise ValidationError when the draft cannot be committed.
    - missing: name/email/role/department blank
    - invalid: role/department/status outside the allowed sets, negative salary,
      unreadable hire date
    A blank status is allowed; it falls back to the default.
    """
    missing = {key for key in REQUIRED_FIELDS if not _text(draft, key)}

    invalid = set()
    if choices is not None:
        allowed = {
            "role": choices.roles,
            "department": choices.departments,
            "status": choices.statuses,
        }
        for key, values in allowed.items():
            value = _text(draft, key)
            if value and values and value not in values:
                invalid.add(key)
    if parse_salary(draft.get("salary")) is None:
        invalid.add("salary")
    if parse_hire_date(draft.get("hire_date"), default=date.min) is None:
        invalid.add("hire_date")

    if missing or invalid:
        raise ValidationError(missing_fields=missing, invalid_fields=invalid)


def normalize_draft(draft: Mapping[str, Any], today: date) -> Dict[str, Any]:
    """Validated draft -> Employee field values (everything except id and timestamps)."""
    return {
        "name": _text(draft, "name"),
        "email": _text(draft, "email"),
        "role": _text(draft, "role"),
        "department": _text(draft, "department"),
        "status": _text(draft, "status") or DEFAULT_STATUS,
        "phone": _text(draft, "phone"),
        "salary": parse_salary(draft.get("salary")),
        "hire_date": parse_hire_date(draft.get("hire_date"), default=today),
    }
