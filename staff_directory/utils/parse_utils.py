# utils/parse_utils.py
from __future__ import annotations
import math
from datetime import date, datetime
from typing import Optional


def parse_salary(text) -> Optional[float]:
    """
    '52000' -> 52000.0
    '', None, 'abc', 'nan', 'inf' -> 0.0
    negative values -> None (rejected by validation)
    """
    if text is None:
        return 0.0
    if isinstance(text, bool):
        return 0.0
    if isinstance(text, (int, float)):
        value = float(text)
    else:
        raw = str(text).strip().replace(",", "")
        if not raw:
            return 0.0
        try:
            value = float(raw)
        except ValueError:
            return 0.0
    if math.isnan(value) or math.isinf(value):
        return 0.0
    if value < 0:
        return None
    return value


def parse_hire_date(text, default: date) -> Optional[date]:
    """
    '2024-03-05' -> date(2024, 3, 5)
    '' or None -> default
    anything else -> None (rejected by validation)
    """
    if isinstance(text, datetime):
        return text.date()
    if isinstance(text, date):
        return text
    if text is None or not str(text).strip():
        return default
    try:
        return date.fromisoformat(str(text).strip())
    except ValueError:
        return None


def initials(name: str) -> str:
    """'Ada Lovelace' -> 'AL'"""
    return "".join(part[0] for part in name.split() if part).upper()
