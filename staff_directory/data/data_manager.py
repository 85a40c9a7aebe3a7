# data/data_manager.py
from __future__ import annotations
import json
import logging
import os
from contextlib import suppress
from pathlib import Path
from typing import Iterable, List, Optional

from staff_directory import config
from staff_directory.exceptions import PersistenceReadError, PersistenceWriteError
from staff_directory.models.employee import Employee

logger = logging.getLogger(__name__)


def _safe_json_load(path: Path, default):
    """Missing or blank file -> default. Decoding errors become PersistenceReadError."""
    if not path.exists():
        return default
    try:
        raw = path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        raise PersistenceReadError(f"cannot read {path}: {exc}") from exc
    if not raw:
        return default
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PersistenceReadError(f"{path} is not valid JSON: {exc}") from exc


def _safe_json_save(path: Path, data) -> None:
    # write to a sibling temp file, then swap it in so readers never see half a file
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp, path)
    except (OSError, TypeError, ValueError) as exc:
        with suppress(OSError):
            tmp.unlink()
        raise PersistenceWriteError(f"cannot write {path}: {exc}") from exc


def _decode_employees(data) -> List[Employee]:
    if not isinstance(data, list):
        raise PersistenceReadError(f"expected a JSON array, got {type(data).__name__}")
    employees = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise PersistenceReadError(f"record #{i} is not an object")
        try:
            employees.append(Employee.from_dict(item))
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise PersistenceReadError(f"record #{i} is malformed: {exc!r}") from exc
    return employees


class JsonSlot:
    """
    The durable slot: one JSON file holding the whole employee collection.
    Read whole, written whole.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else config.EMP_FILE

    def load(self) -> List[Employee]:
        """Never raises: an absent or unreadable slot yields an empty collection."""
        try:
            employees = _decode_employees(_safe_json_load(self.path, default=[]))
        except PersistenceReadError as exc:
            logger.warning("Ignoring stored employees, starting empty: %s", exc)
            self._set_aside()
            return []
        logger.debug("Loaded %d employees from %s", len(employees), self.path)
        return employees

    def _set_aside(self) -> None:
        """Move an unusable file to <file>.corrupt so the next save cannot destroy it."""
        if not self.path.exists():
            return
        target = self.corrupt_path
        try:
            os.replace(self.path, target)
        except OSError:
            logger.exception("Could not move %s aside", self.path)
            return
        logger.warning("Moved unreadable employee file to %s", target)

    @property
    def corrupt_path(self) -> Path:
        return self.path.with_suffix(self.path.suffix + ".corrupt")

    def save(self, employees: Iterable[Employee]) -> None:
        payload = [e.to_dict() for e in employees]
        _safe_json_save(self.path, payload)
        logger.debug("Saved %d employees to %s", len(payload), self.path)

    def __repr__(self) -> str:
        return f"JsonSlot({str(self.path)!r})"


# ---------- default slot ----------
def load_employees() -> List[Employee]:
    return JsonSlot().load()


def save_employees(employees: Iterable[Employee]) -> None:
    JsonSlot().save(employees)
