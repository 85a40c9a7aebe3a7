# exceptions.py
from __future__ import annotations
from typing import Iterable


class StaffDirectoryError(Exception):
    """Base class for every error raised by the directory engine."""


class ValidationError(StaffDirectoryError):
    """A draft is missing required fields or carries values outside the allowed sets."""

    def __init__(self, missing_fields: Iterable[str] = (), invalid_fields: Iterable[str] = ()):
        self.missing_fields = frozenset(missing_fields)
        self.invalid_fields = frozenset(invalid_fields)
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        parts = []
        if self.missing_fields:
            parts.append("Please fill in all required fields: " + ", ".join(sorted(self.missing_fields)))
        if self.invalid_fields:
            parts.append("Please correct invalid fields: " + ", ".join(sorted(self.invalid_fields)))
        return "; ".join(parts) or "Invalid employee data"


class NotFoundError(StaffDirectoryError):
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__(f"Employee not found: {employee_id}")


class PersistenceReadError(StaffDirectoryError):
    """The storage file could not be read or decoded. Logged by the loader, never raised to callers."""


class PersistenceWriteError(StaffDirectoryError):
    """The storage file could not be written."""
