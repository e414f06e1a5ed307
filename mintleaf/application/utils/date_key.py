from __future__ import annotations

import re
from collections.abc import Iterator
from datetime import date, datetime, timedelta

from mintleaf.application.exceptions import InvalidDateError

_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

ONE_DAY = timedelta(days=1)


def to_key(value: date | datetime) -> str:
    """Return the canonical YYYY-MM-DD key of a calendar day.

    Keys are fixed-width and zero-padded, so string order equals chronological order.
    """
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        raise InvalidDateError(f"Not a calendar date: {value!r}")
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def from_key(key: str) -> date:
    """Parse a YYYY-MM-DD key back into a date."""
    if not isinstance(key, str) or not _KEY_PATTERN.match(key):
        raise InvalidDateError(f"Not a date key: {key!r}")
    try:
        return date.fromisoformat(key)
    except ValueError as e:
        raise InvalidDateError(f"Not a date key: {key!r}") from e


def to_date(value: date | datetime | str) -> date:
    if isinstance(value, str):
        return from_key(value)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidDateError(f"Not a calendar date: {value!r}")


def compare(a: date | datetime | str, b: date | datetime | str) -> int:
    """Compare two days: -1, 0 or 1."""
    key_a = to_key(to_date(a))
    key_b = to_key(to_date(b))
    return (key_a > key_b) - (key_a < key_b)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end, inclusive."""
    current = start
    while current <= end:
        yield current
        current += ONE_DAY
