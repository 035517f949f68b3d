from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import HalfDay


@dataclass(frozen=True)
class LeaveRecord:
    """Domain entity: one leave day (full or half) of one employee."""

    record_id: Optional[str]
    user_id: str
    username: str
    display_name: str
    work_date: date
    half_day: HalfDay
    reason: str
    created_at: Optional[datetime] = None

    @property
    def is_full_day(self) -> bool:
        return self.half_day.is_full

    @property
    def leave_type_label(self) -> str:
        return "Full Day" if self.is_full_day else "Half Day"

    @property
    def leave_days(self) -> float:
        return 1.0 if self.is_full_day else 0.5


@dataclass(frozen=True)
class NewLeave:
    user_id: str
    username: str
    display_name: str
    work_date: date
    half_day: HalfDay
    reason: str


@dataclass(frozen=True)
class LeaveChanges:
    half_day: Optional[HalfDay] = None
    work_date: Optional[date] = None
    reason: Optional[str] = None
