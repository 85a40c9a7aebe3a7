# logic/stats.py
from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable

from staff_directory.config import STATUS_ACTIVE, STATUS_ON_LEAVE
from staff_directory.models.employee import Employee


@dataclass(frozen=True)
class DirectoryStats:
    total: int = 0
    active_count: int = 0
    on_leave_count: int = 0
    department_count: int = 0
    status_counts: Dict[str, int] = field(default_factory=dict)


def summarize(employees: Iterable[Employee]) -> DirectoryStats:
    """Summary over the whole collection, never the filtered view."""
    employees = list(employees)
    by_status = Counter(e.status for e in employees)
    return DirectoryStats(
        total=len(employees),
        active_count=by_status[STATUS_ACTIVE],
        on_leave_count=by_status[STATUS_ON_LEAVE],
        department_count=len({e.department for e in employees}),
        status_counts=dict(by_status),
    )
