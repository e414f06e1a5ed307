import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query

from mintleaf.api.v1.schemas import (
    BookingDraftSchema,
    CalendarDaySchema,
    CalendarMonthSchema,
    DetailsUpdateSchema,
    SelectDayRequestSchema,
    WizardResultSchema,
    WizardSessionSchema,
)
from mintleaf.application.exceptions import InvalidDateError, StorageError
from mintleaf.application.ports.session_store import WizardSessionStorePort
from mintleaf.application.use_cases.booking_wizard import BookingWizard, WizardResult
from mintleaf.application.use_cases.calendar_views import CalendarDay, CalendarViewsUseCase
from mintleaf.wiring.dependencies import get_calendar_views, get_session_store, new_booking_wizard

router = APIRouter()
logger = logging.getLogger(__name__)

_ERROR_STATUS = {
    "day_rejected": 422,
    "invalid": 422,
    "invalid_transition": 409,
    "storage_error": 502,
}


def to_day_schema(day: CalendarDay) -> CalendarDaySchema:
    return CalendarDaySchema(key=day.key, **asdict(day))


def _session_schema(session_id: str, wizard: BookingWizard) -> WizardSessionSchema:
    guest_form = wizard.settings.guest_form
    return WizardSessionSchema(
        session_id=session_id,
        unit_id=wizard.unit_id,
        step=wizard.step,
        draft=BookingDraftSchema(**asdict(wizard.draft)),
        reference_code=wizard.reference_code,
        occasion_options=list(guest_form.occasion_options),
        heard_from_options=list(guest_form.heard_from_options),
    )


def _result_schema(session_id: str, result: WizardResult) -> WizardResultSchema:
    schema = WizardResultSchema(session_id=session_id, **asdict(result))
    status_code = _ERROR_STATUS.get(result.action)
    if status_code is not None:
        raise HTTPException(status_code=status_code, detail=schema.model_dump(mode="json"))
    return schema


def _get_wizard(session_id: str, sessions: WizardSessionStorePort) -> BookingWizard:
    wizard = sessions.get(session_id)
    if wizard is None:
        raise HTTPException(status_code=404, detail="Booking session not found")
    return wizard


@router.get("/units/{unit_id}/calendar", response_model=CalendarMonthSchema)
def guest_calendar(
    unit_id: str,
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    views: CalendarViewsUseCase = Depends(get_calendar_views),
):
    try:
        days = views.guest_month(unit_id, year, month)
    except StorageError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return CalendarMonthSchema(unit_id=unit_id, year=year, month=month, days=[to_day_schema(d) for d in days])


@router.post("/units/{unit_id}/booking-sessions", response_model=WizardSessionSchema, status_code=201)
def create_session(unit_id: str, sessions: WizardSessionStorePort = Depends(get_session_store)):
    try:
        wizard = new_booking_wizard(unit_id)
    except StorageError as e:
        raise HTTPException(status_code=502, detail=str(e))
    session_id = sessions.add(wizard)
    logger.info("Booking session created", extra={"unit_id": unit_id, "session_id": session_id})
    return _session_schema(session_id, wizard)


@router.get("/booking-sessions/{session_id}", response_model=WizardSessionSchema)
def get_session(session_id: str, sessions: WizardSessionStorePort = Depends(get_session_store)):
    return _session_schema(session_id, _get_wizard(session_id, sessions))


@router.post("/booking-sessions/{session_id}/day", response_model=WizardResultSchema)
def select_day(
    session_id: str,
    req: SelectDayRequestSchema,
    sessions: WizardSessionStorePort = Depends(get_session_store),
):
    wizard = _get_wizard(session_id, sessions)
    try:
        result = wizard.select_day(req.date)
    except InvalidDateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _result_schema(session_id, result)


@router.post("/booking-sessions/{session_id}/back", response_model=WizardResultSchema)
def back(session_id: str, sessions: WizardSessionStorePort = Depends(get_session_store)):
    return _result_schema(session_id, _get_wizard(session_id, sessions).back())


@router.patch("/booking-sessions/{session_id}/details", response_model=WizardResultSchema)
def update_details(
    session_id: str,
    req: DetailsUpdateSchema,
    sessions: WizardSessionStorePort = Depends(get_session_store),
):
    wizard = _get_wizard(session_id, sessions)
    return _result_schema(session_id, wizard.update_details(**req.model_dump(exclude_unset=True)))


@router.post("/booking-sessions/{session_id}/submit", response_model=WizardResultSchema)
def submit(session_id: str, sessions: WizardSessionStorePort = Depends(get_session_store)):
    return _result_schema(session_id, _get_wizard(session_id, sessions).submit())


@router.post("/booking-sessions/{session_id}/reset", response_model=WizardResultSchema)
def reset(session_id: str, sessions: WizardSessionStorePort = Depends(get_session_store)):
    return _result_schema(session_id, _get_wizard(session_id, sessions).reset())


@router.delete("/booking-sessions/{session_id}", status_code=204)
def discard_session(session_id: str, sessions: WizardSessionStorePort = Depends(get_session_store)):
    _get_wizard(session_id, sessions)
    sessions.discard(session_id)
    logger.info("Booking session discarded", extra={"session_id": session_id})
