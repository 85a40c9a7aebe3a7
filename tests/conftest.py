"""Shared fixtures: a temp-file slot, a controllable clock, a slot that cannot write."""

from datetime import datetime, timedelta, timezone

import pytest

from staff_directory.config import DEFAULT_CHOICES
from staff_directory.data.data_manager import JsonSlot
from staff_directory.exceptions import PersistenceWriteError
from staff_directory.logic.record_store import RecordStore


class FakeClock:
    """Returns a fixed instant; tick() moves it forward."""

    def __init__(self, start=datetime(2024, 3, 5, 9, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        return self.now

    def tick(self, seconds=1):
        self.now = self.now + timedelta(seconds=seconds)


class FailingSlot(JsonSlot):
    """Loads normally, refuses every write once `broken` is set."""

    def __init__(self, path):
        super().__init__(path)
        self.broken = False

    def save(self, employees):
        if self.broken:
            raise PersistenceWriteError("disk full")
        super().save(employees)


def ada_draft(**overrides):
    draft = {
        "name": "Ada Lovelace",
        "email": "ada@x.com",
        "role": "Software Engineer",
        "department": "Engineering",
    }
    draft.update(overrides)
    return draft


@pytest.fixture
def slot(tmp_path):
    return JsonSlot(tmp_path / "employees.json")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(slot, clock):
    return RecordStore(slot, choices=DEFAULT_CHOICES, clock=clock)
