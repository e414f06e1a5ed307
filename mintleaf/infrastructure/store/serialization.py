"""
Document mapping shared by the store adapters.

Field names follow the documents the console already writes
(reservation_settings/{unit}, units/{unit}/reservations, requests).
Datetimes stay native here; each adapter encodes them for its own wire format.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any

from mintleaf.domain.entities.leave_request import LeaveRequest
from mintleaf.domain.entities.reservation import Reservation
from mintleaf.domain.entities.reservation_settings import (
    BookableWindow,
    GuestFormSettings,
    ReservationSettings,
    ThemeConfig,
)

_THEME_FIELDS = {
    "primary": "primary",
    "surface": "surface",
    "background": "background",
    "textPrimary": "text_primary",
    "textSecondary": "text_secondary",
    "accent": "accent",
    "success": "success",
    "danger": "danger",
    "radius": "radius",
    "elevation": "elevation",
    "typographyScale": "typography_scale",
}


def as_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    return datetime.fromisoformat(str(value))


def as_date(value: Any) -> date:
    if isinstance(value, str) and len(value) == 10:
        return date.fromisoformat(value)
    return as_datetime(value).date()


def theme_to_dict(theme: ThemeConfig) -> dict[str, Any]:
    return {doc_key: getattr(theme, attr) for doc_key, attr in _THEME_FIELDS.items()}


def theme_from_dict(data: dict[str, Any] | None) -> ThemeConfig:
    data = data or {}
    values = {attr: data[doc_key] for doc_key, attr in _THEME_FIELDS.items() if data.get(doc_key) is not None}
    return ThemeConfig(**values)


def settings_to_dict(settings: ReservationSettings) -> dict[str, Any]:
    window = settings.bookable_window
    return {
        "blackoutDates": sorted(settings.blackout_dates),
        "dailyCapacity": settings.daily_capacity,
        "bookableWindow": {"from": window.start, "to": window.end} if window else None,
        "kitchenOpen": settings.kitchen_open,
        "barClose": settings.bar_close,
        "guestForm": {
            "occasionOptions": list(settings.guest_form.occasion_options),
            "heardFromOptions": list(settings.guest_form.heard_from_options),
        },
        "theme": theme_to_dict(settings.theme),
    }


def settings_from_dict(unit_id: str, data: dict[str, Any] | None) -> ReservationSettings:
    """Stored settings merged over the defaults; missing document means all defaults."""
    if not data:
        return ReservationSettings(unit_id=unit_id)

    defaults = BookableWindow()
    raw_window = data.get("bookableWindow") or {}
    window = BookableWindow(
        start=raw_window.get("from") or defaults.start,
        end=raw_window.get("to") or defaults.end,
    )

    form_defaults = GuestFormSettings()
    raw_form = data.get("guestForm") or {}
    guest_form = GuestFormSettings(
        occasion_options=tuple(raw_form.get("occasionOptions") or form_defaults.occasion_options),
        heard_from_options=tuple(raw_form.get("heardFromOptions") or form_defaults.heard_from_options),
    )

    capacity = data.get("dailyCapacity")
    return ReservationSettings(
        unit_id=unit_id,
        blackout_dates=frozenset(data.get("blackoutDates") or []),
        daily_capacity=int(capacity) if capacity is not None else None,
        bookable_window=window,
        kitchen_open=data.get("kitchenOpen"),
        bar_close=data.get("barClose"),
        guest_form=guest_form,
        theme=theme_from_dict(data.get("theme")),
    )


def reservation_to_dict(reservation: Reservation) -> dict[str, Any]:
    return {
        "unitId": reservation.unit_id,
        "name": reservation.name,
        "headcount": reservation.headcount,
        "occasion": reservation.occasion,
        "source": reservation.source,
        "startTime": reservation.start_time,
        "endTime": reservation.end_time,
        "phone": reservation.phone,
        "email": reservation.email,
        "status": reservation.status,
        "createdAt": reservation.created_at,
        "referenceCode": reservation.reference_code,
    }


def reservation_from_dict(data: dict[str, Any]) -> Reservation:
    return Reservation(
        unit_id=data.get("unitId", ""),
        name=data.get("name", ""),
        headcount=int(data.get("headcount") or 0),
        phone=data.get("phone", ""),
        email=data.get("email", ""),
        start_time=as_datetime(data["startTime"]),
        end_time=as_datetime(data["endTime"]),
        created_at=as_datetime(data["createdAt"]),
        occasion=data.get("occasion") or "",
        source=data.get("source") or "",
        status=data.get("status") or "pending",
        reference_code=data.get("referenceCode"),
    )


def leave_request_to_dict(request: LeaveRequest) -> dict[str, Any]:
    return {
        "unitId": request.unit_id,
        "userId": request.user_id,
        "userName": request.user_name,
        "startDate": as_datetime(request.start_date),
        "endDate": as_datetime(request.end_date),
        "note": request.note,
        "status": request.status,
        "createdAt": request.created_at,
    }


def leave_request_from_dict(data: dict[str, Any], request_id: str | None = None) -> LeaveRequest:
    return LeaveRequest(
        unit_id=data.get("unitId", ""),
        user_id=data.get("userId", ""),
        user_name=data.get("userName", ""),
        start_date=as_date(data["startDate"]),
        end_date=as_date(data["endDate"]),
        created_at=as_datetime(data["createdAt"]),
        note=data.get("note") or "",
        status=data.get("status") or "pending",
        id=request_id or data.get("id"),
    )
