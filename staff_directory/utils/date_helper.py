# utils/date_helper.py
from __future__ import annotations
from datetime import date, datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(dt: datetime) -> str:
    """Aware datetime -> '2024-03-05T09:12:00.123456+00:00'."""
    return dt.isoformat()


def from_iso(text: str) -> datetime:
    """
    ISO-8601 -> aware datetime.
    - A trailing 'Z' (JavaScript toISOString) is accepted.
    - Naive values are taken as UTC.
    """
    dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_hire_date(d: Optional[date]) -> str:
    """date(2024, 3, 5) -> 'Mar 05, 2024', None -> 'N/A'."""
    if d is None:
        return "N/A"
    return d.strftime("%b %d, %Y")
