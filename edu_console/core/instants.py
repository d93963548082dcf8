from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any


def is_datelike(value: Any) -> bool:
    return isinstance(value, (date, datetime))


def as_instant(value: Any) -> float:
    """
    POSIX timestamp of a date or datetime. Naive datetimes and plain dates
    are read as UTC (a date is its midnight).
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc).timestamp()
