# logic/edit_session.py
from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Tuple

from staff_directory.config import DEFAULT_STATUS, Choices
from staff_directory.exceptions import ValidationError
from staff_directory.logic.record_store import RecordStore
from staff_directory.logic.validation import validate_draft
from staff_directory.models.employee import DRAFT_FIELDS, Employee

logger = logging.getLogger(__name__)

MODE_NEW = "new"
MODE_EDITING = "editing"

# enumerated draft field -> Choices attribute
CHOICE_FIELDS = {"role": "roles", "department": "departments", "status": "statuses"}


def blank_draft() -> Dict[str, str]:
    draft = {key: "" for key in DRAFT_FIELDS}
    draft["status"] = DEFAULT_STATUS
    return draft


class EditSession:
    """
    Scratch state behind the add/edit form.
    Two modes: 'new' and 'editing' (keeps the record id so commit routes to update).
    Commit success and cancel both return to a blank 'new' session.
    """

    def __init__(self, store: RecordStore, choices: Optional[Choices] = None):
        self._store = store
        self.choices = choices if choices is not None else store.choices
        self.editing_id: Optional[str] = None
        self.draft: Dict[str, Any] = blank_draft()

    @property
    def mode(self) -> str:
        return MODE_NEW if self.editing_id is None else MODE_EDITING

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def start_new(self) -> None:
        self.editing_id = None
        self.draft = blank_draft()

    def start_edit(self, employee_id: str) -> None:
        emp = self._store.get(employee_id)
        self.editing_id = emp.id
        self.draft = emp.to_draft()

    def set_field(self, name: str, value: Any) -> None:
        if name not in DRAFT_FIELDS:
            raise KeyError(f"Unknown employee field: {name}")
        self.draft[name] = value

    def options_for(self, name: str) -> Tuple[str, ...]:
        """
        Allowed values for an enumerated field, plus the draft's current value when
        it is not among them (records stored before the choice list changed).
        """
        allowed = tuple(getattr(self.choices, CHOICE_FIELDS[name], ())) if self.choices else ()
        current = str(self.draft.get(name) or "").strip()
        if current and current not in allowed:
            return allowed + (current,)
        return allowed

    def validate(self) -> None:
        validate_draft(self.draft, self.choices)

    def commit(self) -> Employee:
        try:
            self.validate()
        except ValidationError as exc:
            logger.warning("Rejected employee draft: %s", exc)
            raise
        if self.editing_id is None:
            emp = self._store.create(self.draft)
        else:
            emp = self._store.update(self.editing_id, self.draft)
        self.start_new()
        return emp

    def cancel(self) -> None:
        self.start_new()
