from __future__ import annotations

from collections.abc import Collection
from datetime import date, datetime

from mintleaf.application.utils.date_key import to_date, to_key


def is_selectable(
    day: date | datetime | str,
    blackout_dates: Collection[str],
    not_before: date | datetime | None = None,
) -> bool:
    """Guest rule: a day is bookable unless blacked out or strictly before the cutoff.

    The cutoff defaults to today, so the current day is still selectable.
    """
    candidate = to_date(day)
    cutoff = to_date(not_before) if not_before is not None else date.today()
    if to_key(candidate) in blackout_dates:
        return False
    return candidate >= cutoff


def is_blacked_out(day: date | datetime | str, blackout_dates: Collection[str]) -> bool:
    """Admin editor rule: no past-date cutoff, only blackout membership."""
    return to_key(to_date(day)) in blackout_dates


def toggle_blackout(blackout_dates: Collection[str], day: date | datetime | str) -> frozenset[str]:
    """Return the blackout set with the day's membership flipped."""
    key = to_key(to_date(day))
    current = frozenset(blackout_dates)
    if key in current:
        return current - {key}
    return current | {key}
