from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class LeaveRequest:
    unit_id: str
    user_id: str
    user_name: str
    start_date: date
    end_date: date  # inclusive
    created_at: datetime
    note: str = ""  # visible to administrators only
    status: str = "pending"  # "pending", "approved", "rejected"
    id: str | None = None  # assigned by the store
