from __future__ import annotations

import time
import uuid
from collections.abc import Callable
from dataclasses import replace
from typing import TYPE_CHECKING

from mintleaf.application.ports.reservation_store import ReservationStorePort
from mintleaf.application.ports.session_store import WizardSessionStorePort
from mintleaf.domain.entities.leave_request import LeaveRequest
from mintleaf.domain.entities.reservation import Reservation
from mintleaf.domain.entities.reservation_settings import ReservationSettings

if TYPE_CHECKING:
    from mintleaf.application.use_cases.booking_wizard import BookingWizard


def new_reference_code() -> str:
    """Short opaque code guests can quote, e.g. 'A1B2C3D4E5'."""
    return uuid.uuid4().hex[:10].upper()


class MemoryReservationStore(ReservationStorePort):
    def __init__(self) -> None:
        self._settings: dict[str, ReservationSettings] = {}
        self._reservations: dict[str, list[Reservation]] = {}
        self._leave_requests: dict[str, list[LeaveRequest]] = {}

    def get_settings(self, unit_id: str) -> ReservationSettings:
        return self._settings.get(unit_id, ReservationSettings(unit_id=unit_id))

    def save_settings(self, settings: ReservationSettings) -> None:
        self._settings[settings.unit_id] = settings

    def create_reservation(self, reservation: Reservation) -> str:
        reference_code = reservation.reference_code or new_reference_code()
        self._reservations.setdefault(reservation.unit_id, []).append(
            replace(reservation, reference_code=reference_code)
        )
        return reference_code

    def list_reservations(self, unit_id: str) -> list[Reservation]:
        return list(self._reservations.get(unit_id, []))

    def create_leave_requests(self, requests: list[LeaveRequest]) -> list[str]:
        ids: list[str] = []
        for request in requests:
            request_id = uuid.uuid4().hex
            self._leave_requests.setdefault(request.unit_id, []).append(replace(request, id=request_id))
            ids.append(request_id)
        return ids

    def list_leave_requests(self, unit_id: str) -> list[LeaveRequest]:
        return list(self._leave_requests.get(unit_id, []))


class MemoryWizardSessionStore(WizardSessionStorePort):
    """Wizards kept in process memory, dropped after ttl_seconds without use."""

    def __init__(self, ttl_seconds: int = 1800, clock: Callable[[], float] = time.time) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: dict[str, tuple["BookingWizard", float]] = {}

    def _sweep(self, now: float) -> None:
        expired = [sid for sid, (_, expires_at) in self._sessions.items() if expires_at <= now]
        for session_id in expired:
            del self._sessions[session_id]

    def add(self, wizard: "BookingWizard") -> str:
        now = self._clock()
        self._sweep(now)
        session_id = uuid.uuid4().hex
        self._sessions[session_id] = (wizard, now + self._ttl_seconds)
        return session_id

    def get(self, session_id: str) -> "BookingWizard | None":
        now = self._clock()
        entry = self._sessions.get(session_id)
        if entry is None:
            return None
        wizard, expires_at = entry
        if expires_at <= now:
            del self._sessions[session_id]
            return None
        self._sessions[session_id] = (wizard, now + self._ttl_seconds)
        return wizard

    def discard(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)
