import logging

from mintleaf.application.ports.reservation_store import ReservationStorePort
from mintleaf.application.ports.session_store import WizardSessionStorePort
from mintleaf.application.use_cases.blackout_editor import BlackoutEditorUseCase
from mintleaf.application.use_cases.booking_wizard import BookingWizard
from mintleaf.application.use_cases.calendar_views import CalendarViewsUseCase
from mintleaf.application.use_cases.leave_requests import SubmitLeaveRequestUseCase
from mintleaf.core.config import settings
from mintleaf.infrastructure.store.firestore_store import FirestoreReservationStore
from mintleaf.infrastructure.store.json_store import JsonReservationStore
from mintleaf.infrastructure.store.memory_store import MemoryReservationStore, MemoryWizardSessionStore

logger = logging.getLogger(__name__)

_reservation_store: ReservationStorePort | None = None
_session_store: WizardSessionStorePort | None = None


def _store_provider() -> str:
    provider = settings.STORE_PROVIDER.strip().lower()
    if provider:
        return provider
    if settings.FIRESTORE_PROJECT_ID:
        return "firestore"
    if settings.ENV.lower() in {"dev", "local"}:
        return "json"
    return "memory"


def get_reservation_store() -> ReservationStorePort:
    global _reservation_store
    if _reservation_store is None:
        provider = _store_provider()
        logger.info("Using %s reservation store", provider)
        if provider == "firestore":
            _reservation_store = FirestoreReservationStore()
        elif provider == "json":
            _reservation_store = JsonReservationStore(data_dir=settings.DATA_DIR)
        elif provider == "memory":
            _reservation_store = MemoryReservationStore()
        else:
            raise ValueError(f"Unknown STORE_PROVIDER: {provider}")
    return _reservation_store


def get_session_store() -> WizardSessionStorePort:
    global _session_store
    if _session_store is None:
        _session_store = MemoryWizardSessionStore(ttl_seconds=settings.WIZARD_SESSION_TTL_MINUTES * 60)
    return _session_store


def reset_stores(
    reservation_store: ReservationStorePort | None = None,
    session_store: WizardSessionStorePort | None = None,
) -> None:
    """Swap the process-wide stores, e.g. for tests or a local harness."""
    global _reservation_store, _session_store
    _reservation_store = reservation_store
    _session_store = session_store


def new_booking_wizard(unit_id: str) -> BookingWizard:
    return BookingWizard(
        unit_id=unit_id,
        store=get_reservation_store(),
        country_code=settings.PHONE_COUNTRY_CODE,
        trunk_prefix=settings.PHONE_TRUNK_PREFIX,
        default_duration_minutes=settings.DEFAULT_BOOKING_DURATION_MINUTES,
    )


def get_calendar_views() -> CalendarViewsUseCase:
    return CalendarViewsUseCase(
        store=get_reservation_store(),
        fill_adjacent=settings.CALENDAR_FILL_ADJACENT_DAYS,
    )


def get_blackout_editor() -> BlackoutEditorUseCase:
    return BlackoutEditorUseCase(store=get_reservation_store())


def get_leave_request_use_case() -> SubmitLeaveRequestUseCase:
    return SubmitLeaveRequestUseCase(store=get_reservation_store())
