"""
Tests for canonical day keys.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest

from mintleaf.application.exceptions import InvalidDateError
from mintleaf.application.utils.date_key import compare, from_key, iter_days, to_date, to_key


def test_to_key_zero_pads_month_and_day():
    assert to_key(date(2024, 6, 1)) == "2024-06-01"
    assert to_key(date(987, 1, 9)) == "0987-01-09"


def test_to_key_uses_calendar_day_of_datetime():
    assert to_key(datetime(2024, 12, 31, 23, 59)) == "2024-12-31"


@pytest.mark.parametrize("value", [None, float("nan"), "2024-06-01", 20240601])
def test_to_key_rejects_non_dates(value):
    with pytest.raises(InvalidDateError):
        to_key(value)


def test_from_key_is_strict():
    assert from_key("2024-02-29") == date(2024, 2, 29)
    for bad in ("2023-02-29", "2024-6-1", "01/06/2024", ""):
        with pytest.raises(InvalidDateError):
            from_key(bad)


def test_key_order_matches_chronological_order():
    days = [date(2023, 12, 31), date(2024, 1, 1), date(2024, 1, 10), date(2024, 10, 1)]
    assert sorted(to_key(d) for d in reversed(days)) == [to_key(d) for d in days]


def test_compare():
    assert compare(date(2024, 6, 1), "2024-06-01") == 0
    assert compare("2024-06-01", date(2024, 6, 2)) == -1
    assert compare(datetime(2024, 6, 3, 8, 0), date(2024, 6, 2)) == 1


def test_iter_days_is_inclusive_across_month_end():
    days = list(iter_days(date(2024, 2, 28), date(2024, 3, 1)))
    assert days == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]
    assert list(iter_days(date(2024, 3, 2), date(2024, 3, 1))) == []


def test_to_date_accepts_keys_and_datetimes():
    assert to_date("2024-06-05") == date(2024, 6, 5)
    assert to_date(datetime(2024, 6, 5, 12)) == date(2024, 6, 5)
