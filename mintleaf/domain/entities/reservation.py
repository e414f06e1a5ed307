from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Reservation:
    unit_id: str
    name: str
    headcount: int
    phone: str  # normalized, E.164-like
    email: str  # normalized
    start_time: datetime  # naive local wall-clock
    end_time: datetime
    created_at: datetime
    occasion: str = ""
    source: str = ""
    status: str = "pending"  # "pending", "confirmed", "cancelled"
    reference_code: str | None = None  # assigned by the store
