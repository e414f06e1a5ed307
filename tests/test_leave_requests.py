"""
Tests for leave request submission and the leave calendar.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest

from mintleaf.application.exceptions import ValidationError
from mintleaf.application.use_cases.calendar_views import CalendarViewsUseCase
from mintleaf.application.use_cases.leave_requests import SubmitLeaveRequestUseCase, requests_by_date
from mintleaf.domain.entities.calendar import DateRangeBlock
from mintleaf.infrastructure.store.memory_store import MemoryReservationStore

UNIT_ID = "unit_budapest"
NOW = datetime(2024, 2, 20, 9, 30)


def _use_case(store: MemoryReservationStore) -> SubmitLeaveRequestUseCase:
    return SubmitLeaveRequestUseCase(store, clock=lambda: NOW)


def test_one_request_per_contiguous_block():
    store = MemoryReservationStore()
    submission = _use_case(store).execute(
        UNIT_ID,
        "user_1",
        "Nagy Péter",
        ["2024-03-05", "2024-03-01", "2024-03-02", "2024-03-03"],
        note="  family trip ",
    )

    assert submission.blocks == [
        DateRangeBlock(date(2024, 3, 1), date(2024, 3, 3)),
        DateRangeBlock(date(2024, 3, 5), date(2024, 3, 5)),
    ]
    stored = store.list_leave_requests(UNIT_ID)
    assert len(stored) == 2
    assert {r.id for r in stored} == {r.id for r in submission.requests}
    assert all(r.id for r in submission.requests)
    first = submission.requests[0]
    assert first.status == "pending"
    assert first.note == "family trip"
    assert first.created_at == NOW
    assert first.user_name == "Nagy Péter"


def test_empty_selection_is_rejected():
    store = MemoryReservationStore()
    with pytest.raises(ValidationError) as exc_info:
        _use_case(store).execute(UNIT_ID, "user_1", "Nagy Péter", [])
    assert exc_info.value.field == "dates"
    assert store.list_leave_requests(UNIT_ID) == []


def test_requests_by_date_covers_every_day():
    store = MemoryReservationStore()
    use_case = _use_case(store)
    use_case.execute(UNIT_ID, "user_1", "Nagy Péter", ["2024-02-28", "2024-02-29", "2024-03-01"])
    use_case.execute(UNIT_ID, "user_2", "Szabó Éva", ["2024-02-29"])

    index = requests_by_date(store.list_leave_requests(UNIT_ID))

    assert sorted(index) == ["2024-02-28", "2024-02-29", "2024-03-01"]
    assert [r.user_id for r in index["2024-02-29"]] == ["user_1", "user_2"]


def test_leave_month_counts_requests_including_padding():
    store = MemoryReservationStore()
    _use_case(store).execute(UNIT_ID, "user_1", "Nagy Péter", ["2024-02-29", "2024-03-01"])

    days = CalendarViewsUseCase(store).leave_month(UNIT_ID, 2024, 3, today=date(2024, 2, 20))
    by_key = {d.key: d for d in days}

    # March 2024 starts on a Friday, so February padding is filled in
    assert days[0].date == date(2024, 2, 26)
    assert by_key["2024-02-29"].request_count == 1
    assert not by_key["2024-02-29"].in_current_month
    assert by_key["2024-03-01"].request_count == 1
    assert by_key["2024-03-02"].request_count == 0
