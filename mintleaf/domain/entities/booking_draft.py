from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class WizardStep(str, Enum):
    selecting_date = "selecting_date"
    entering_details = "entering_details"
    confirmed = "confirmed"


DEFAULT_HEADCOUNT = "2"


@dataclass
class BookingDraft:
    name: str = ""
    headcount: str = DEFAULT_HEADCOUNT  # raw form value, parsed on submit
    phone: str = ""
    email: str = ""
    occasion: str = ""
    source: str = ""  # "heard from" answer
    day: date | None = None
    start_time: str = ""  # HH:MM
    end_time: str = ""  # HH:MM, optional

    def clear_times(self) -> None:
        self.start_time = ""
        self.end_time = ""
