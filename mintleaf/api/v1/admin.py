from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query

from mintleaf.api.v1.booking import to_day_schema
from mintleaf.api.v1.schemas import (
    BlackoutToggleSchema,
    CalendarMonthSchema,
    ContrastCheckSchema,
    ThemeReviewSchema,
    ThemeSchema,
)
from mintleaf.application.exceptions import InvalidColorError, InvalidDateError, StorageError
from mintleaf.application.ports.reservation_store import ReservationStorePort
from mintleaf.application.use_cases.blackout_editor import BlackoutEditorUseCase
from mintleaf.application.use_cases.calendar_views import CalendarViewsUseCase
from mintleaf.application.use_cases.theme_review import review_theme
from mintleaf.application.utils.date_key import from_key
from mintleaf.core.config import settings
from mintleaf.domain.entities.reservation_settings import ThemeConfig
from mintleaf.wiring.dependencies import get_blackout_editor, get_calendar_views, get_reservation_store

router = APIRouter()


def _review(theme: ThemeConfig) -> ThemeReviewSchema:
    threshold = settings.CONTRAST_WARNING_THRESHOLD
    try:
        checks = review_theme(theme, threshold)
    except InvalidColorError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ThemeReviewSchema(
        theme=ThemeSchema(**asdict(theme)),
        threshold=threshold,
        checks=[ContrastCheckSchema(**asdict(c)) for c in checks],
        warnings=[c.pair for c in checks if c.low_contrast],
    )


@router.get("/units/{unit_id}/blackout-calendar", response_model=CalendarMonthSchema)
def blackout_calendar(
    unit_id: str,
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    views: CalendarViewsUseCase = Depends(get_calendar_views),
):
    try:
        days = views.blackout_month(unit_id, year, month)
    except StorageError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return CalendarMonthSchema(unit_id=unit_id, year=year, month=month, days=[to_day_schema(d) for d in days])


@router.post("/units/{unit_id}/blackout-days/{date_key}/toggle", response_model=BlackoutToggleSchema)
def toggle_blackout_day(
    unit_id: str,
    date_key: str,
    editor: BlackoutEditorUseCase = Depends(get_blackout_editor),
):
    try:
        updated = editor.toggle(unit_id, from_key(date_key))
    except InvalidDateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return BlackoutToggleSchema(
        unit_id=unit_id,
        date=date_key,
        blacked_out=date_key in updated.blackout_dates,
        blackout_dates=sorted(updated.blackout_dates),
    )


@router.get("/units/{unit_id}/theme/contrast", response_model=ThemeReviewSchema)
def review_stored_theme(unit_id: str, store: ReservationStorePort = Depends(get_reservation_store)):
    try:
        theme = store.get_settings(unit_id).theme
    except StorageError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _review(theme)


@router.post("/units/{unit_id}/theme/contrast", response_model=ThemeReviewSchema)
def review_proposed_theme(unit_id: str, req: ThemeSchema):
    return _review(ThemeConfig(**req.model_dump()))
