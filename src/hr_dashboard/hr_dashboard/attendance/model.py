from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import DayStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day.

    Note: username/display_name are denormalized copies taken when the record was written.
    """

    record_id: Optional[str]
    user_id: str
    username: str
    display_name: str
    work_date: date
    first_half_present: bool
    second_half_present: bool
    created_at: Optional[datetime] = None
    note: Optional[str] = None

    @property
    def is_full_day(self) -> bool:
        return self.first_half_present and self.second_half_present

    @property
    def is_half_day(self) -> bool:
        return self.first_half_present != self.second_half_present

    @property
    def is_absent(self) -> bool:
        return not self.first_half_present and not self.second_half_present

    @property
    def day_status(self) -> DayStatus:
        if self.is_full_day:
            return DayStatus.FULL_DAY
        if self.is_half_day:
            return DayStatus.HALF_DAY
        return DayStatus.ABSENT

    @property
    def presence_label(self) -> str:
        """Row badge: which half was attended."""
        if self.is_full_day:
            return "Full Day"
        if self.first_half_present:
            return "First Half"
        if self.second_half_present:
            return "Second Half"
        return "Absent"

    @property
    def presence_value(self) -> float:
        if self.is_full_day:
            return 1.0
        if self.is_half_day:
            return 0.5
        return 0.0


@dataclass(frozen=True)
class NewAttendance:
    user_id: str
    username: str
    display_name: str
    work_date: date
    first_half_present: bool
    second_half_present: bool
    note: Optional[str] = None


@dataclass(frozen=True)
class AttendanceChanges:
    """Mutable fields of an existing record. None means "leave unchanged"."""

    first_half_present: Optional[bool] = None
    second_half_present: Optional[bool] = None
    work_date: Optional[date] = None
    note: Optional[str] = None
