from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from mintleaf.application.ports.reservation_store import ReservationStorePort
from mintleaf.application.use_cases.leave_requests import requests_by_date
from mintleaf.application.utils.availability import is_blacked_out, is_selectable
from mintleaf.application.utils.calendar_grid import build_month_grid
from mintleaf.application.utils.date_key import to_key


@dataclass(frozen=True)
class CalendarDay:
    date: date | None
    in_current_month: bool
    selectable: bool = False
    blacked_out: bool = False
    is_today: bool = False
    request_count: int = 0

    @property
    def key(self) -> str | None:
        return to_key(self.date) if self.date is not None else None


class CalendarViewsUseCase:
    """Month views shared by the guest calendar, the blackout editor and leave requests."""

    def __init__(self, store: ReservationStorePort, fill_adjacent: bool = False) -> None:
        self._store = store
        self._fill_adjacent = fill_adjacent

    def guest_month(self, unit_id: str, year: int, month: int, today: date | None = None) -> list[CalendarDay]:
        today = today or date.today()
        blackout = self._store.get_settings(unit_id).blackout_dates
        days: list[CalendarDay] = []
        for cell in build_month_grid(year, month, self._fill_adjacent):
            if cell.date is None:
                days.append(CalendarDay(date=None, in_current_month=False))
                continue
            days.append(
                CalendarDay(
                    date=cell.date,
                    in_current_month=cell.in_current_month,
                    # padding days from adjacent months are shown but never bookable
                    selectable=cell.in_current_month and is_selectable(cell.date, blackout, today),
                    blacked_out=is_blacked_out(cell.date, blackout),
                    is_today=cell.date == today,
                )
            )
        return days

    def blackout_month(self, unit_id: str, year: int, month: int, today: date | None = None) -> list[CalendarDay]:
        today = today or date.today()
        blackout = self._store.get_settings(unit_id).blackout_dates
        return [
            CalendarDay(
                date=cell.date,
                in_current_month=cell.in_current_month,
                selectable=cell.date is not None and cell.in_current_month,
                blacked_out=cell.date is not None and is_blacked_out(cell.date, blackout),
                is_today=cell.date == today,
            )
            for cell in build_month_grid(year, month, self._fill_adjacent)
        ]

    def leave_month(self, unit_id: str, year: int, month: int, today: date | None = None) -> list[CalendarDay]:
        today = today or date.today()
        index = requests_by_date(self._store.list_leave_requests(unit_id))
        # leave selection always shows adjacent days, like the request form does
        return [
            CalendarDay(
                date=cell.date,
                in_current_month=cell.in_current_month,
                selectable=cell.in_current_month,
                is_today=cell.date == today,
                request_count=len(index.get(to_key(cell.date), [])) if cell.date is not None else 0,
            )
            for cell in build_month_grid(year, month, fill_adjacent=True)
        ]
