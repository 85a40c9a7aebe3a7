"""End-to-end walk through the directory: create, reject, filter, delete, restart."""

import pytest

from conftest import ada_draft
from staff_directory.config import DEFAULT_CHOICES
from staff_directory.exceptions import NotFoundError, ValidationError
from staff_directory.logic.edit_session import EditSession
from staff_directory.logic.query import filter_employees
from staff_directory.logic.record_store import RecordStore
from staff_directory.logic.stats import summarize


def test_ada_lifecycle(store, clock):
    ada = store.create(ada_draft())
    assert ada.status == "Active"
    assert ada.salary == 0
    assert ada.hire_date == clock.now.date()

    with pytest.raises(ValidationError) as excinfo:
        store.create(ada_draft(email=""))
    assert excinfo.value.missing_fields == {"email"}
    assert len(store.list()) == 1

    assert filter_employees(store.list(), department="Engineering") == [ada]
    assert filter_employees(store.list(), department="Sales") == []

    store.delete(ada.id)
    assert store.list() == ()
    stats = summarize(store.list())
    assert stats.total == 0
    assert stats.department_count == 0
    with pytest.raises(NotFoundError):
        store.delete(ada.id)


def test_session_edits_survive_restart(slot, clock):
    store = RecordStore(slot, choices=DEFAULT_CHOICES, clock=clock)
    session = EditSession(store)
    for key, value in ada_draft(salary="90000").items():
        session.set_field(key, value)
    ada = session.commit()

    clock.tick(30)
    session.start_edit(ada.id)
    session.set_field("department", "Design")
    session.set_field("role", "Designer")
    session.commit()

    reopened = RecordStore(slot, choices=DEFAULT_CHOICES, clock=clock)
    [restored] = reopened.list()
    assert restored.id == ada.id
    assert restored.department == "Design"
    assert restored.salary == 90000.0
    assert restored.created_at == ada.created_at
    assert restored.updated_at > ada.updated_at
    assert summarize(reopened.list()).active_count == 1
