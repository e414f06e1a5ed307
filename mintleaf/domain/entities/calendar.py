from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class CalendarCell:
    date: date | None = None  # None marks a padding cell
    in_current_month: bool = False


@dataclass(frozen=True)
class DateRangeBlock:
    start_date: date
    end_date: date  # inclusive

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1
