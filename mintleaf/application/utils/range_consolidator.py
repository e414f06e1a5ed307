from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, datetime

from mintleaf.application.utils.date_key import ONE_DAY, iter_days, to_date
from mintleaf.domain.entities.calendar import DateRangeBlock


def consolidate_ranges(dates: Iterable[date | datetime | str]) -> list[DateRangeBlock]:
    """Merge individually selected days into minimal contiguous inclusive blocks.

    Blocks come back ordered by start date with at least one gap day between
    them. An empty selection yields an empty list.
    """
    ordered = sorted({to_date(d) for d in dates})
    if not ordered:
        return []

    blocks: list[DateRangeBlock] = []
    start = end = ordered[0]
    for current in ordered[1:]:
        # calendar-day step, never elapsed seconds
        if current == end + ONE_DAY:
            end = current
            continue
        blocks.append(DateRangeBlock(start_date=start, end_date=end))
        start = end = current
    blocks.append(DateRangeBlock(start_date=start, end_date=end))
    return blocks


def expand_ranges(blocks: Iterable[DateRangeBlock]) -> list[date]:
    """Flatten blocks back into the individual days they cover."""
    days: list[date] = []
    for block in blocks:
        days.extend(iter_days(block.start_date, block.end_date))
    return days


def toggle_selection(selected: Sequence[date], day: date | datetime | str) -> list[date]:
    """Add a day to a selection, or remove it if already selected. Result is sorted."""
    target = to_date(day)
    current = [to_date(d) for d in selected]
    if target in current:
        return sorted(d for d in current if d != target)
    return sorted([*current, target])
