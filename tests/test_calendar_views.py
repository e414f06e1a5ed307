from __future__ import annotations

from datetime import date

from mintleaf.application.use_cases.blackout_editor import BlackoutEditorUseCase
from mintleaf.application.use_cases.calendar_views import CalendarViewsUseCase
from mintleaf.domain.entities.reservation_settings import ReservationSettings
from mintleaf.infrastructure.store.memory_store import MemoryReservationStore

UNIT_ID = "unit_budapest"
TODAY = date(2024, 6, 10)


def _store(*blackout: str) -> MemoryReservationStore:
    store = MemoryReservationStore()
    store.save_settings(ReservationSettings(unit_id=UNIT_ID, blackout_dates=frozenset(blackout)))
    return store


def test_guest_month_marks_selectable_days():
    """Past and blacked-out days are not selectable, today is."""
    views = CalendarViewsUseCase(_store("2024-06-12"))
    days = views.guest_month(UNIT_ID, 2024, 6, today=TODAY)

    # June 2024 starts on a Saturday
    assert len(days) == 35
    assert all(d.date is None for d in days[:5])
    by_key = {d.key: d for d in days if d.date is not None}

    assert not by_key["2024-06-09"].selectable
    assert by_key["2024-06-10"].selectable and by_key["2024-06-10"].is_today
    assert not by_key["2024-06-12"].selectable and by_key["2024-06-12"].blacked_out
    assert by_key["2024-06-30"].selectable


def test_guest_month_adjacent_days_are_never_selectable():
    views = CalendarViewsUseCase(_store(), fill_adjacent=True)
    days = views.guest_month(UNIT_ID, 2024, 7, today=TODAY)

    padding = [d for d in days if not d.in_current_month]
    assert padding
    assert all(d.date is not None for d in days)
    assert not any(d.selectable for d in padding)


def test_blackout_month_has_no_past_cutoff():
    store = _store("2024-06-01")
    views = CalendarViewsUseCase(store)
    days = {d.key: d for d in views.blackout_month(UNIT_ID, 2024, 6, today=TODAY) if d.date}

    assert days["2024-06-01"].blacked_out
    assert days["2024-06-01"].selectable
    assert days["2024-06-02"].selectable


def test_blackout_toggle_updates_calendar():
    store = _store()
    editor = BlackoutEditorUseCase(store)
    views = CalendarViewsUseCase(store)

    settings = editor.toggle(UNIT_ID, "2024-06-20")
    assert settings.blackout_dates == frozenset({"2024-06-20"})
    guest = {d.key: d for d in views.guest_month(UNIT_ID, 2024, 6, today=TODAY) if d.date}
    assert not guest["2024-06-20"].selectable

    settings = editor.toggle(UNIT_ID, date(2024, 6, 20))
    assert settings.blackout_dates == frozenset()
    assert store.get_settings(UNIT_ID).blackout_dates == frozenset()


def test_toggle_keeps_other_settings():
    store = MemoryReservationStore()
    store.save_settings(ReservationSettings(unit_id=UNIT_ID, daily_capacity=40, kitchen_open="12:00"))

    updated = BlackoutEditorUseCase(store).toggle(UNIT_ID, "2023-12-24")

    assert updated.daily_capacity == 40
    assert updated.kitchen_open == "12:00"
    assert "2023-12-24" in updated.blackout_dates
