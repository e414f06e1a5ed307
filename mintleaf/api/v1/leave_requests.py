from fastapi import APIRouter, Depends, HTTPException, Query

from mintleaf.api.v1.booking import to_day_schema
from mintleaf.api.v1.schemas import (
    CalendarMonthSchema,
    DateRangeBlockSchema,
    LeaveRequestCreateSchema,
    LeaveSubmissionSchema,
)
from mintleaf.application.exceptions import InvalidDateError, StorageError, ValidationError
from mintleaf.application.use_cases.calendar_views import CalendarViewsUseCase
from mintleaf.application.use_cases.leave_requests import SubmitLeaveRequestUseCase
from mintleaf.wiring.dependencies import get_calendar_views, get_leave_request_use_case

router = APIRouter()


@router.post("/units/{unit_id}/leave-requests", response_model=LeaveSubmissionSchema, status_code=201)
def submit_leave_request(
    unit_id: str,
    req: LeaveRequestCreateSchema,
    uc: SubmitLeaveRequestUseCase = Depends(get_leave_request_use_case),
):
    try:
        submission = uc.execute(
            unit_id=unit_id,
            user_id=req.user_id,
            user_name=req.user_name,
            selected_dates=req.dates,
            note=req.note,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail={e.field: e.message})
    except InvalidDateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return LeaveSubmissionSchema(
        blocks=[DateRangeBlockSchema(start_date=b.start_date, end_date=b.end_date) for b in submission.blocks],
        request_ids=[r.id for r in submission.requests if r.id],
    )


@router.get("/units/{unit_id}/leave-calendar", response_model=CalendarMonthSchema)
def leave_calendar(
    unit_id: str,
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    views: CalendarViewsUseCase = Depends(get_calendar_views),
):
    try:
        days = views.leave_month(unit_id, year, month)
    except StorageError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return CalendarMonthSchema(unit_id=unit_id, year=year, month=month, days=[to_day_schema(d) for d in days])
