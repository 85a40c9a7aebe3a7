# logic/record_store.py
from __future__ import annotations
import logging
import uuid
from datetime import datetime, timedelta
from typing import Any, Callable, List, Mapping, Optional, Tuple

from staff_directory.config import Choices
from staff_directory.data.data_manager import JsonSlot
from staff_directory.exceptions import NotFoundError, PersistenceWriteError
from staff_directory.logic.validation import normalize_draft, validate_draft
from staff_directory.models.employee import Employee
from staff_directory.utils.date_helper import utc_now

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class RecordStore:
    """
    Owns the employee collection and mirrors it to a JsonSlot after every change.

    - create/update/delete either fully apply (memory + storage) or leave the
      collection untouched; a failed write is rolled back and re-raised
    - list() returns an immutable snapshot in insertion order
    - `choices` limits role/department/status; None checks presence only
    """

    def __init__(self, slot: JsonSlot,
                 choices: Optional[Choices] = None,
                 id_factory: Callable[[], str] = _new_id,
                 clock: Callable[[], datetime] = utc_now):
        self._slot = slot
        self.choices = choices
        self._id_factory = id_factory
        self._clock = clock
        self._employees: List[Employee] = list(slot.load())

    # ---------- reads ----------
    def list(self) -> Tuple[Employee, ...]:
        return tuple(self._employees)

    def get(self, employee_id: str) -> Employee:
        return self._employees[self._index_of(employee_id)]

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id) -> bool:
        return any(e.id == employee_id for e in self._employees)

    # ---------- mutations ----------
    def create(self, draft: Mapping[str, Any]) -> Employee:
        validate_draft(draft, self.choices)
        now = self._clock()
        emp = Employee(
            id=self._unique_id(),
            created_at=now,
            updated_at=now,
            **normalize_draft(draft, today=now.date()),
        )
        self._commit(self._employees + [emp])
        logger.info("Created employee %s (%s)", emp.id, emp.name)
        return emp

    def update(self, employee_id: str, draft: Mapping[str, Any]) -> Employee:
        idx = self._index_of(employee_id)
        validate_draft(draft, self.choices)
        current = self._employees[idx]
        now = self._clock()
        if now <= current.updated_at:
            # clock did not advance (coarse resolution or skew); keep updated_at strictly increasing
            now = current.updated_at + timedelta(microseconds=1)
        emp = current.with_changes(updated_at=now, **normalize_draft(draft, today=now.date()))
        employees = list(self._employees)
        employees[idx] = emp
        self._commit(employees)
        logger.info("Updated employee %s (%s)", emp.id, emp.name)
        return emp

    def delete(self, employee_id: str) -> None:
        idx = self._index_of(employee_id)
        removed = self._employees[idx]
        self._commit(self._employees[:idx] + self._employees[idx + 1:])
        logger.info("Deleted employee %s (%s)", removed.id, removed.name)

    # ---------- internals ----------
    def _index_of(self, employee_id: str) -> int:
        for i, e in enumerate(self._employees):
            if e.id == employee_id:
                return i
        raise NotFoundError(employee_id)

    def _unique_id(self) -> str:
        taken = {e.id for e in self._employees}
        new_id = self._id_factory()
        while new_id in taken:
            logger.debug("Generated id %s already taken, drawing again", new_id)
            new_id = self._id_factory()
        return new_id

    def _commit(self, employees: List[Employee]) -> None:
        previous = self._employees
        self._employees = employees
        try:
            self._slot.save(self._employees)
        except PersistenceWriteError:
            self._employees = previous
            logger.exception("Could not persist employees, change rolled back")
            raise
