from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import date, datetime

from mintleaf.application.exceptions import StorageWriteError
from mintleaf.application.ports.reservation_store import ReservationStorePort
from mintleaf.application.utils.availability import is_selectable
from mintleaf.application.utils.booking_validation import validate_draft
from mintleaf.application.utils.contact_normalizer import normalize_email, normalize_phone
from mintleaf.application.utils.date_key import to_date, to_key
from mintleaf.domain.entities.booking_draft import BookingDraft, WizardStep
from mintleaf.domain.entities.reservation import Reservation
from mintleaf.domain.entities.reservation_settings import ReservationSettings

EDITABLE_FIELDS = ("name", "headcount", "phone", "email", "occasion", "source", "start_time", "end_time")


@dataclass(frozen=True)
class WizardResult:
    action: str  # "day_selected", "day_rejected", "back", "details_updated", "invalid", "booked", "storage_error", "reset", "invalid_transition"
    step: WizardStep
    errors: dict[str, str] = field(default_factory=dict)
    message: str | None = None
    reference_code: str | None = None


class BookingWizard:
    """Guest booking flow: pick a day, enter details, confirm.

    The draft is mutable and scoped to one interactive session. Only submit()
    touches the store, with exactly one write per successful booking.
    """

    def __init__(
        self,
        unit_id: str,
        store: ReservationStorePort,
        settings: ReservationSettings | None = None,
        country_code: str = "+36",
        trunk_prefix: str = "06",
        default_duration_minutes: int = 120,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._unit_id = unit_id
        self._store = store
        self._settings = settings if settings is not None else store.get_settings(unit_id)
        self._country_code = country_code
        self._trunk_prefix = trunk_prefix
        self._default_duration_minutes = default_duration_minutes
        self._clock = clock
        self._step = WizardStep.selecting_date
        self._draft = BookingDraft()
        self._reference_code: str | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def unit_id(self) -> str:
        return self._unit_id

    @property
    def step(self) -> WizardStep:
        return self._step

    @property
    def draft(self) -> BookingDraft:
        return replace(self._draft)

    @property
    def settings(self) -> ReservationSettings:
        return self._settings

    @property
    def reference_code(self) -> str | None:
        return self._reference_code

    def select_day(self, day: date | datetime | str) -> WizardResult:
        if self._step == WizardStep.confirmed:
            return self._invalid_transition("select_day")

        chosen = to_date(day)
        today = self._clock().date()
        if not is_selectable(chosen, self._settings.blackout_dates, not_before=today):
            self._logger.info(
                "Day rejected",
                extra={"unit_id": self._unit_id, "day": to_key(chosen), "step": self._step.value},
            )
            return WizardResult(
                action="day_rejected",
                step=self._step,
                errors={"day": "This day is not available for booking."},
            )

        if self._draft.day is not None and self._draft.day != chosen:
            self._draft.clear_times()
        self._draft.day = chosen
        self._step = WizardStep.entering_details
        return WizardResult(action="day_selected", step=self._step)

    def back(self) -> WizardResult:
        if self._step != WizardStep.entering_details:
            return self._invalid_transition("back")
        self._step = WizardStep.selecting_date
        return WizardResult(action="back", step=self._step)

    def update_details(self, **fields: str | int | None) -> WizardResult:
        if self._step != WizardStep.entering_details:
            return self._invalid_transition("update_details")

        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown booking fields: {', '.join(sorted(unknown))}")

        for name, value in fields.items():
            setattr(self._draft, name, "" if value is None else str(value))
        return WizardResult(action="details_updated", step=self._step)

    def submit(self) -> WizardResult:
        if self._step != WizardStep.entering_details:
            return self._invalid_transition("submit")

        check = validate_draft(self._draft, self._settings, self._default_duration_minutes)
        if not check.is_valid:
            errors = check.error_map()
            self._logger.info(
                "Booking validation failed",
                extra={"unit_id": self._unit_id, "field": ",".join(errors)},
            )
            return WizardResult(action="invalid", step=self._step, errors=errors)

        reservation = Reservation(
            unit_id=self._unit_id,
            name=self._draft.name.strip(),
            headcount=check.headcount,
            phone=normalize_phone(self._draft.phone, self._country_code, self._trunk_prefix),
            email=normalize_email(self._draft.email),
            start_time=check.start,
            end_time=check.end,
            created_at=self._clock(),
            occasion=self._draft.occasion,
            source=self._draft.source,
        )

        try:
            reference_code = self._store.create_reservation(reservation)
        except StorageWriteError as e:
            self._logger.error(
                "Error creating reservation",
                extra={"unit_id": self._unit_id, "error": str(e)},
            )
            return WizardResult(
                action="storage_error",
                step=self._step,
                message="Something went wrong while sending the booking. Please try again.",
            )

        self._reference_code = reference_code
        self._step = WizardStep.confirmed
        self._logger.info(
            "Reservation created",
            extra={"unit_id": self._unit_id, "reference_code": reference_code},
        )
        return WizardResult(action="booked", step=self._step, reference_code=reference_code)

    def reset(self) -> WizardResult:
        if self._step != WizardStep.confirmed:
            return self._invalid_transition("reset")
        self._draft = BookingDraft()
        self._reference_code = None
        self._step = WizardStep.selecting_date
        return WizardResult(action="reset", step=self._step)

    def _invalid_transition(self, operation: str) -> WizardResult:
        return WizardResult(
            action="invalid_transition",
            step=self._step,
            message=f"Cannot {operation.replace('_', ' ')} while {self._step.value.replace('_', ' ')}.",
        )
