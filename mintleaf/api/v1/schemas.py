import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field

from mintleaf.domain.entities.booking_draft import WizardStep


class CalendarDaySchema(BaseModel):
    date: dt.date | None = None
    key: str | None = None
    in_current_month: bool
    selectable: bool = False
    blacked_out: bool = False
    is_today: bool = False
    request_count: int = 0


class CalendarMonthSchema(BaseModel):
    unit_id: str
    year: int
    month: int
    days: list[CalendarDaySchema]


class BookingDraftSchema(BaseModel):
    name: str = ""
    headcount: str = ""
    phone: str = ""
    email: str = ""
    occasion: str = ""
    source: str = ""
    day: dt.date | None = None
    start_time: str = ""
    end_time: str = ""


class WizardSessionSchema(BaseModel):
    session_id: str
    unit_id: str
    step: WizardStep
    draft: BookingDraftSchema
    reference_code: str | None = None
    occasion_options: list[str] = Field(default_factory=list)
    heard_from_options: list[str] = Field(default_factory=list)


class WizardResultSchema(BaseModel):
    session_id: str
    action: str
    step: WizardStep
    errors: dict[str, str] = Field(default_factory=dict)
    message: str | None = None
    reference_code: str | None = None


class SelectDayRequestSchema(BaseModel):
    date: str = Field(description="Day as YYYY-MM-DD")


class DetailsUpdateSchema(BaseModel):
    name: str | None = None
    headcount: str | int | None = None
    phone: str | None = None
    email: str | None = None
    occasion: str | None = None
    source: str | None = None
    start_time: str | None = None
    end_time: str | None = None


class BlackoutToggleSchema(BaseModel):
    unit_id: str
    date: str
    blacked_out: bool
    blackout_dates: list[str]


class LeaveRequestCreateSchema(BaseModel):
    user_id: str
    user_name: str
    dates: list[str] = Field(default_factory=list)
    note: str = ""


class DateRangeBlockSchema(BaseModel):
    start_date: dt.date
    end_date: dt.date


class LeaveSubmissionSchema(BaseModel):
    blocks: list[DateRangeBlockSchema]
    request_ids: list[str]


class ThemeSchema(BaseModel):
    primary: str = "#16a34a"
    surface: str = "#ffffff"
    background: str = "#f9fafb"
    text_primary: str = "#1f2937"
    text_secondary: str = "#4b5563"
    accent: str = "#10b981"
    success: str = "#22c55e"
    danger: str = "#ef4444"
    radius: Literal["sm", "md", "lg"] = "lg"
    elevation: Literal["low", "mid", "high"] = "mid"
    typography_scale: Literal["S", "M", "L"] = "M"


class ContrastCheckSchema(BaseModel):
    pair: str
    background: str
    foreground: str
    ratio: float
    low_contrast: bool


class ThemeReviewSchema(BaseModel):
    theme: ThemeSchema
    threshold: float
    checks: list[ContrastCheckSchema]
    warnings: list[str]
