from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, time, timedelta

from email_validator import EmailNotValidError, validate_email

from mintleaf.application.exceptions import ValidationError
from mintleaf.domain.entities.booking_draft import BookingDraft
from mintleaf.domain.entities.reservation_settings import BookableWindow, ReservationSettings

_PHONE_PATTERN = re.compile(r"^\+?[0-9\s\-()]+$")
_TIME_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")

MIN_PHONE_DIGITS = 7


@dataclass(frozen=True)
class DraftCheck:
    errors: list[ValidationError] = field(default_factory=list)
    headcount: int | None = None
    start: datetime | None = None
    end: datetime | None = None

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error_map(self) -> dict[str, str]:
        return {e.field: e.message for e in self.errors}


def parse_time_of_day(value: str | None) -> time | None:
    """Parse HH:MM (24h). Returns None when the value is not a time."""
    match = _TIME_PATTERN.match((value or "").strip())
    if not match:
        return None
    return time(int(match.group(1)), int(match.group(2)))


def is_valid_email(value: str | None) -> bool:
    """Syntax check only; the domain is never looked up."""
    try:
        validate_email((value or "").strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_phone(value: str | None) -> bool:
    """Permissive shape check: digits, + and separators, with at least 7 digits."""
    candidate = (value or "").strip()
    if not _PHONE_PATTERN.match(candidate):
        return False
    return sum(ch.isdigit() for ch in candidate) >= MIN_PHONE_DIGITS


def _parse_headcount(value: str | int | None) -> int | None:
    text = str(value).strip() if value is not None else ""
    # int() accepts exactly the decimal characters
    if not text.isdecimal():
        return None
    return int(text)


def _within_window(start: time, window: BookableWindow) -> bool:
    opens = parse_time_of_day(window.start)
    closes = parse_time_of_day(window.end)
    if opens is None or closes is None:
        return True
    if opens < closes:
        return opens <= start < closes
    # window running past midnight, e.g. 18:00-02:00
    return start >= opens or start < closes


def validate_draft(
    draft: BookingDraft,
    settings: ReservationSettings | None = None,
    default_duration_minutes: int = 120,
) -> DraftCheck:
    """Check every booking field at once and resolve the start/end datetimes.

    Without an end time the default duration is applied to the start.
    """
    errors: list[ValidationError] = []

    if draft.day is None:
        errors.append(ValidationError("day", "Please choose a day."))

    if not draft.name.strip():
        errors.append(ValidationError("name", "Name is required."))

    headcount = _parse_headcount(draft.headcount)
    if headcount is None or headcount < 1:
        errors.append(ValidationError("headcount", "Headcount must be a whole number of at least 1."))
        headcount = None

    if not draft.email.strip():
        errors.append(ValidationError("email", "Email is required."))
    elif not is_valid_email(draft.email):
        errors.append(ValidationError("email", "Email address is not valid."))

    if not is_valid_phone(draft.phone):
        errors.append(ValidationError("phone", "Phone number must contain at least 7 digits."))

    if settings is not None:
        options = settings.guest_form
        if draft.occasion and options.occasion_options and draft.occasion not in options.occasion_options:
            errors.append(ValidationError("occasion", "Unknown occasion."))
        if draft.source and options.heard_from_options and draft.source not in options.heard_from_options:
            errors.append(ValidationError("source", "Unknown option."))

    start_tod = parse_time_of_day(draft.start_time)
    end_tod = None
    if not draft.start_time.strip():
        errors.append(ValidationError("start_time", "Start time is required."))
    elif start_tod is None:
        errors.append(ValidationError("start_time", "Start time must be HH:MM."))
    elif settings is not None and settings.bookable_window is not None:
        if not _within_window(start_tod, settings.bookable_window):
            window = settings.bookable_window
            errors.append(
                ValidationError("start_time", f"Bookings start between {window.start} and {window.end}.")
            )

    if draft.end_time.strip():
        end_tod = parse_time_of_day(draft.end_time)
        if end_tod is None:
            errors.append(ValidationError("end_time", "End time must be HH:MM."))
        elif start_tod is not None and end_tod <= start_tod:
            errors.append(ValidationError("end_time", "End time must be after the start time."))

    if errors or draft.day is None or start_tod is None:
        return DraftCheck(errors=errors, headcount=headcount)

    start = datetime.combine(draft.day, start_tod)
    if end_tod is not None:
        end = datetime.combine(draft.day, end_tod)
    else:
        end = start + timedelta(minutes=default_duration_minutes)
    return DraftCheck(errors=[], headcount=headcount, start=start, end=end)
