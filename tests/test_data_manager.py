"""JsonSlot tests — whole-collection JSON storage.

Tests cover:
    - save/load round trip (empty and populated, order kept)
    - soft failure on missing, blank, corrupt and malformed files
    - atomic replace and write errors
    - default-slot helpers honour config.EMP_FILE
    - unreadable files are moved aside instead of overwritten
"""

import json
from datetime import date, datetime, timezone

import pytest

from conftest import ada_draft
from staff_directory import config
from staff_directory.data.data_manager import JsonSlot, load_employees, save_employees
from staff_directory.exceptions import PersistenceWriteError
from staff_directory.logic.record_store import RecordStore
from staff_directory.models.employee import Employee


def _emp(emp_id, name, **kw):
    ts = datetime(2024, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)
    fields = dict(
        id=emp_id, name=name, email=f"{emp_id}@x.com", role="Analyst",
        department="Finance", hire_date=date(2023, 7, 1), created_at=ts, updated_at=ts,
    )
    fields.update(kw)
    return Employee(**fields)


def _stored(**overrides):
    record = {
        "id": "1", "name": "Ada Lovelace", "email": "ada@x.com",
        "role": "Software Engineer", "department": "Engineering", "status": "Active",
        "phone": "", "salary": 0, "hireDate": "2024-06-10",
        "createdAt": "2024-06-10T08:00:00+00:00", "updatedAt": "2024-06-10T08:00:00+00:00",
    }
    record.update(overrides)
    return json.dumps([record])


# -- round trip ---------------------------------------------------------------

def test_round_trip_empty(slot):
    slot.save([])
    assert slot.load() == []


def test_round_trip_preserves_records_and_order(slot):
    employees = [
        _emp("b", "Grace Hopper", salary=120000.0, status="On Leave", phone="555-0101"),
        _emp("a", "Alan Turing"),
        _emp("c", "Katherine Johnson", salary=99999.5),
    ]
    slot.save(employees)
    assert slot.load() == employees


def test_saved_file_uses_camel_case_keys(slot):
    slot.save([_emp("a", "Alan Turing", salary=10.0)])
    data = json.loads(slot.path.read_text(encoding="utf-8"))
    assert isinstance(data, list)
    assert set(data[0]) == {
        "id", "name", "email", "role", "department", "status", "phone",
        "salary", "hireDate", "createdAt", "updatedAt",
    }
    assert data[0]["salary"] == 10.0
    assert data[0]["hireDate"] == "2023-07-01"


def test_save_replaces_previous_content(slot):
    slot.save([_emp("a", "Alan Turing"), _emp("b", "Grace Hopper")])
    slot.save([_emp("c", "Katherine Johnson")])
    assert [e.id for e in slot.load()] == ["c"]
    assert not slot.path.with_suffix(".json.tmp").exists()


def test_save_creates_parent_directory(tmp_path):
    slot = JsonSlot(tmp_path / "nested" / "dir" / "employees.json")
    slot.save([_emp("a", "Alan Turing")])
    assert slot.path.exists()


# -- soft load failures -------------------------------------------------------

def test_load_missing_file_is_empty(slot):
    assert not slot.path.exists()
    assert slot.load() == []


@pytest.mark.parametrize("content", [
    "",
    "   \n",
    "{not json",
    '{"id": "a"}',
    "[1, 2]",
    '[{"id": "a", "name": "No Email"}]',
    '[{"id": "a", "name": "n", "email": "e", "role": "r", "department": "d",'
    ' "hireDate": "not-a-date", "createdAt": "x", "updatedAt": "y"}]',
    _stored(salary=-500),
    _stored(salary=float("nan")),
    _stored(salary=float("inf")),
    _stored(createdAt="2024-06-11T08:00:00+00:00", updatedAt="2024-06-10T08:00:00+00:00"),
])
def test_load_unusable_content_is_empty(slot, content):
    slot.path.write_text(content, encoding="utf-8")
    assert slot.load() == []


def test_load_logs_warning_on_corrupt_file(slot, caplog):
    slot.path.write_text("{broken", encoding="utf-8")
    with caplog.at_level("WARNING"):
        assert slot.load() == []
    assert "starting empty" in caplog.text


def test_load_accepts_javascript_timestamps(slot):
    slot.path.write_text(json.dumps([{
        "id": "1718000000000", "name": "Ada Lovelace", "email": "ada@x.com",
        "role": "Software Engineer", "department": "Engineering", "status": "Active",
        "phone": "", "salary": 0, "hireDate": "2024-06-10",
        "createdAt": "2024-06-10T08:00:00.000Z", "updatedAt": "2024-06-10T08:00:00.000Z",
    }]), encoding="utf-8")
    [emp] = slot.load()
    assert emp.id == "1718000000000"
    assert emp.created_at == datetime(2024, 6, 10, 8, 0, tzinfo=timezone.utc)
    assert emp.salary == 0.0


# -- write failures -----------------------------------------------------------

def test_save_into_unwritable_location_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    slot = JsonSlot(blocker / "employees.json")
    with pytest.raises(PersistenceWriteError):
        slot.save([_emp("a", "Alan Turing")])


# -- default slot -------------------------------------------------------------

def test_default_slot_helpers_use_configured_file(tmp_path, monkeypatch):
    target = tmp_path / "default.json"
    monkeypatch.setattr(config, "EMP_FILE", target)
    save_employees([_emp("a", "Alan Turing")])
    assert target.exists()
    assert [e.name for e in load_employees()] == ["Alan Turing"]


# -- unreadable file is kept --------------------------------------------------

def test_unreadable_file_is_moved_aside(slot):
    good = json.loads(_stored())[0]
    bad = dict(good, id="2", hireDate=None)
    original = json.dumps([good, bad, dict(good, id="3")])
    slot.path.write_text(original, encoding="utf-8")
    assert slot.load() == []
    assert not slot.path.exists()
    assert slot.corrupt_path.read_text(encoding="utf-8") == original


def test_save_after_unreadable_load_leaves_corrupt_copy(slot, clock):
    slot.path.write_text("{broken", encoding="utf-8")
    store = RecordStore(slot, clock=clock)
    store.create(ada_draft())
    assert [e.name for e in slot.load()] == ["Ada Lovelace"]
    assert slot.corrupt_path.read_text(encoding="utf-8") == "{broken"


def test_blank_file_is_not_moved_aside(slot):
    slot.path.write_text("", encoding="utf-8")
    assert slot.load() == []
    assert slot.path.exists()
    assert not slot.corrupt_path.exists()
