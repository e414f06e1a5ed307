"""
Tests for in-memory wizard session expiry.
"""

from __future__ import annotations

from datetime import datetime

from mintleaf.application.use_cases.booking_wizard import BookingWizard
from mintleaf.infrastructure.store.memory_store import MemoryReservationStore, MemoryWizardSessionStore


class FakeClock:
    def __init__(self) -> None:
        self.now = 1_000.0

    def __call__(self) -> float:
        return self.now


def _wizard() -> BookingWizard:
    return BookingWizard(unit_id="unit_budapest", store=MemoryReservationStore(), clock=lambda: datetime(2024, 6, 1))


def test_idle_sessions_are_swept_on_add():
    """Abandoned sessions do not accumulate."""
    clock = FakeClock()
    sessions = MemoryWizardSessionStore(ttl_seconds=60, clock=clock)
    first = sessions.add(_wizard())
    sessions.add(_wizard())
    assert len(sessions) == 2

    clock.now += 61
    latest = sessions.add(_wizard())

    assert len(sessions) == 1
    assert sessions.get(first) is None
    assert sessions.get(latest) is not None


def test_get_keeps_active_session_alive():
    clock = FakeClock()
    sessions = MemoryWizardSessionStore(ttl_seconds=60, clock=clock)
    wizard = _wizard()
    session_id = sessions.add(wizard)

    clock.now += 45
    assert sessions.get(session_id) is wizard
    clock.now += 45
    assert sessions.get(session_id) is wizard

    clock.now += 60
    assert sessions.get(session_id) is None
    assert len(sessions) == 0


def test_discard_removes_session():
    sessions = MemoryWizardSessionStore()
    session_id = sessions.add(_wizard())

    sessions.discard(session_id)
    sessions.discard(session_id)

    assert sessions.get(session_id) is None
    assert len(sessions) == 0
