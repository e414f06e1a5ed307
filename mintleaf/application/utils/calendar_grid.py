from __future__ import annotations

import calendar
from datetime import date, timedelta

from mintleaf.domain.entities.calendar import CalendarCell

WEEK_LENGTH = 7
SHORT_GRID = 5 * WEEK_LENGTH
FULL_GRID = 6 * WEEK_LENGTH


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by delta months, e.g. for previous/next navigation."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def build_month_grid(year: int, month: int, fill_adjacent: bool = False) -> list[CalendarCell]:
    """Monday-first display grid for one month, 35 or 42 cells long.

    Padding cells carry no date unless fill_adjacent is set, in which case they
    carry the neighbouring month's dates (still marked as outside the month).
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be 1..12, got {month}")

    first = date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]
    # date.weekday() is already Monday=0
    offset = first.weekday()

    cells: list[CalendarCell] = []
    for i in range(offset, 0, -1):
        padding_date = first - timedelta(days=i) if fill_adjacent else None
        cells.append(CalendarCell(date=padding_date, in_current_month=False))

    for day in range(1, days_in_month + 1):
        cells.append(CalendarCell(date=date(year, month, day), in_current_month=True))

    grid_size = FULL_GRID if len(cells) > SHORT_GRID else SHORT_GRID
    last = date(year, month, days_in_month)
    for i in range(1, grid_size - len(cells) + 1):
        padding_date = last + timedelta(days=i) if fill_adjacent else None
        cells.append(CalendarCell(date=padding_date, in_current_month=False))

    return cells
