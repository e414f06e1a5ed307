"""
Tests for the guest booking wizard state machine.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest

from mintleaf.application.exceptions import StorageWriteError
from mintleaf.application.use_cases.booking_wizard import BookingWizard
from mintleaf.domain.entities.booking_draft import BookingDraft, WizardStep
from mintleaf.domain.entities.reservation import Reservation
from mintleaf.domain.entities.reservation_settings import BookableWindow, ReservationSettings
from mintleaf.infrastructure.store.memory_store import MemoryReservationStore

NOW = datetime(2024, 6, 1, 10, 0)
UNIT_ID = "unit_budapest"

VALID_DETAILS = {
    "name": "Kiss Anna",
    "headcount": "4",
    "phone": "06 30 123 4567",
    "email": " Anna.Kiss@Example.com ",
    "occasion": "Vacsora",
    "start_time": "18:00",
}


class CountingStore(MemoryReservationStore):
    def __init__(self, failures: int = 0) -> None:
        super().__init__()
        self.writes = 0
        self._failures = failures

    def create_reservation(self, reservation: Reservation) -> str:
        if self._failures:
            self._failures -= 1
            raise StorageWriteError("store unavailable")
        self.writes += 1
        return super().create_reservation(reservation)


def _wizard(store: CountingStore | None = None) -> tuple[BookingWizard, CountingStore]:
    store = store or CountingStore()
    store.save_settings(ReservationSettings(unit_id=UNIT_ID, blackout_dates=frozenset({"2024-06-05"})))
    return BookingWizard(unit_id=UNIT_ID, store=store, clock=lambda: NOW), store


def _wizard_with_details(store: CountingStore | None = None, **overrides: str) -> tuple[BookingWizard, CountingStore]:
    wizard, store = _wizard(store)
    assert wizard.select_day("2024-06-07").action == "day_selected"
    wizard.update_details(**{**VALID_DETAILS, **overrides})
    return wizard, store


def test_starts_selecting_date_with_empty_draft():
    wizard, _ = _wizard()
    assert wizard.step == WizardStep.selecting_date
    assert wizard.draft == BookingDraft()


def test_blacked_out_day_is_rejected():
    wizard, _ = _wizard()
    result = wizard.select_day(date(2024, 6, 5))
    assert result.action == "day_rejected"
    assert "day" in result.errors
    assert wizard.step == WizardStep.selecting_date
    assert wizard.draft.day is None


def test_past_day_is_rejected_but_today_is_not():
    wizard, _ = _wizard()
    assert wizard.select_day("2024-05-31").step == WizardStep.selecting_date
    assert wizard.select_day("2024-06-01").step == WizardStep.entering_details


def test_missing_email_keeps_details_step():
    wizard, store = _wizard_with_details(email="")
    result = wizard.submit()
    assert result.action == "invalid"
    assert result.step == WizardStep.entering_details
    assert "email" in result.errors
    assert store.writes == 0


def test_valid_submission_writes_exactly_one_pending_reservation():
    wizard, store = _wizard_with_details()
    result = wizard.submit()

    assert result.action == "booked"
    assert wizard.step == WizardStep.confirmed
    assert store.writes == 1

    (reservation,) = store.list_reservations(UNIT_ID)
    assert reservation.reference_code == result.reference_code
    assert reservation.status == "pending"
    assert reservation.phone == "+36301234567"
    assert reservation.email == "anna.kiss@example.com"
    assert reservation.headcount == 4
    assert reservation.start_time == datetime(2024, 6, 7, 18, 0)
    # no end time given: default two hours
    assert reservation.end_time == datetime(2024, 6, 7, 20, 0)
    assert reservation.created_at == NOW

    assert wizard.submit().action == "invalid_transition"
    assert store.writes == 1


def test_explicit_end_time_is_used():
    wizard, store = _wizard_with_details(end_time="21:30")
    assert wizard.submit().action == "booked"
    assert store.list_reservations(UNIT_ID)[0].end_time == datetime(2024, 6, 7, 21, 30)


@pytest.mark.parametrize("end_time", ["17:00", "18:00"])
def test_end_time_must_be_after_start(end_time):
    wizard, store = _wizard_with_details(end_time=end_time)
    result = wizard.submit()
    assert set(result.errors) == {"end_time"}
    assert store.writes == 0


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"name": "   "}, "name"),
        ({"headcount": "0"}, "headcount"),
        ({"headcount": "four"}, "headcount"),
        ({"headcount": "²"}, "headcount"),
        ({"email": "anna@"}, "email"),
        ({"email": "a@b..c"}, "email"),
        ({"email": "anna@example.com,"}, "email"),
        ({"email": "a@b.c)"}, "email"),
        ({"email": "Anna <anna@example.com>"}, "email"),
        ({"phone": "12-34-5"}, "phone"),
        ({"phone": "call me"}, "phone"),
        ({"phone": "06.30.123.4567"}, "phone"),
        ({"start_time": ""}, "start_time"),
        ({"start_time": "25:00"}, "start_time"),
        ({"start_time": "09:00"}, "start_time"),  # before the bookable window opens
        ({"occasion": "Wedding"}, "occasion"),
    ],
)
def test_each_field_is_gated(overrides, field):
    wizard, store = _wizard_with_details(**overrides)
    result = wizard.submit()
    assert result.step == WizardStep.entering_details
    assert field in result.errors
    assert store.writes == 0


def test_storage_error_keeps_state_for_manual_retry():
    wizard, store = _wizard_with_details(CountingStore(failures=1))

    failed = wizard.submit()
    assert failed.action == "storage_error"
    assert failed.message
    assert wizard.step == WizardStep.entering_details
    assert store.writes == 0

    retried = wizard.submit()
    assert retried.action == "booked"
    assert store.writes == 1


def test_back_keeps_typed_details():
    wizard, _ = _wizard_with_details(end_time="21:00")
    assert wizard.back().step == WizardStep.selecting_date
    assert wizard.draft.name == "Kiss Anna"

    wizard.select_day("2024-06-07")
    assert wizard.draft.start_time == "18:00"
    assert wizard.draft.end_time == "21:00"


def test_changing_the_day_clears_only_times():
    wizard, _ = _wizard_with_details(end_time="21:00")
    wizard.back()
    wizard.select_day("2024-06-08")

    draft = wizard.draft
    assert draft.day == date(2024, 6, 8)
    assert draft.start_time == "" and draft.end_time == ""
    assert draft.name == "Kiss Anna"
    assert draft.phone == "06 30 123 4567"


def test_reset_clears_draft_after_confirmation():
    wizard, _ = _wizard_with_details()
    wizard.submit()

    result = wizard.reset()
    assert result.step == WizardStep.selecting_date
    assert wizard.draft == BookingDraft()
    assert wizard.reference_code is None


def test_transitions_from_wrong_state_do_nothing():
    wizard, store = _wizard()
    assert wizard.reset().action == "invalid_transition"
    assert wizard.back().action == "invalid_transition"
    assert wizard.submit().action == "invalid_transition"
    assert wizard.update_details(name="x").action == "invalid_transition"
    assert wizard.step == WizardStep.selecting_date
    assert store.writes == 0


def test_unknown_detail_field_is_a_programming_error():
    wizard, _ = _wizard()
    wizard.select_day("2024-06-07")
    with pytest.raises(ValueError):
        wizard.update_details(favourite_table="12")


def test_settings_are_read_from_store_when_not_given():
    wizard, _ = _wizard()
    assert wizard.settings.blackout_dates == frozenset({"2024-06-05"})


@pytest.mark.parametrize(
    "start_time, accepted",
    [("18:00", True), ("23:30", True), ("01:59", True), ("02:00", False), ("12:00", False)],
)
def test_window_running_past_midnight(start_time, accepted):
    """A late-night window admits starts on both sides of midnight."""
    store = CountingStore()
    store.save_settings(ReservationSettings(unit_id=UNIT_ID, bookable_window=BookableWindow(start="18:00", end="02:00")))
    wizard = BookingWizard(unit_id=UNIT_ID, store=store, clock=lambda: NOW)
    wizard.select_day("2024-06-07")
    wizard.update_details(**{**VALID_DETAILS, "start_time": start_time})

    result = wizard.submit()

    assert (result.action == "booked") is accepted
    assert ("start_time" in result.errors) is not accepted
