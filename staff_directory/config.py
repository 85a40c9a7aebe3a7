# config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

# package root = .../staff_directory
BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = Path(os.environ.get("STAFF_DIRECTORY_DATA_DIR") or BASE_DIR / "data")
EMP_FILE = DATA_DIR / "staffgrid-employees.json"

LOG_LEVEL = os.environ.get("STAFF_DIRECTORY_LOG_LEVEL", "INFO").upper()

DEPARTMENTS = (
    "Engineering", "Marketing", "Sales", "HR", "Finance", "Operations", "Design", "Legal",
)
ROLES = (
    "Software Engineer", "Senior Engineer", "Tech Lead", "Manager", "Director",
    "Marketing Specialist", "Sales Representative", "HR Coordinator", "Analyst",
    "Designer", "Product Manager", "DevOps Engineer", "QA Engineer",
)
STATUS_ACTIVE = "Active"
STATUS_INACTIVE = "Inactive"
STATUS_ON_LEAVE = "On Leave"
STATUS_TERMINATED = "Terminated"
STATUSES = (STATUS_ACTIVE, STATUS_INACTIVE, STATUS_ON_LEAVE, STATUS_TERMINATED)
DEFAULT_STATUS = STATUS_ACTIVE


@dataclass(frozen=True)
class Choices:
    """Allowed values for the enumerated fields. An empty tuple accepts any non-blank value."""
    roles: Tuple[str, ...] = ()
    departments: Tuple[str, ...] = ()
    statuses: Tuple[str, ...] = STATUSES


DEFAULT_CHOICES = Choices(roles=ROLES, departments=DEPARTMENTS, statuses=STATUSES)
