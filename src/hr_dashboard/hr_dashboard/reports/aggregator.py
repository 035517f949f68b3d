from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional

from ..attendance.model import AttendanceRecord
from ..common.filters import in_window
from ..leaves.model import LeaveRecord
from .calculator.base import PresenceCalculator
from .calculator.standard_calculator import StandardPresenceCalculator


def format_days(value: float) -> str:
    """1.0 -> '1', 1.5 -> '1.5'."""
    return f"{value:g}"


@dataclass
class EmployeeSummary:
    """Per-employee accumulation over a date window (derived, never persisted)."""

    user_id: str
    username: str
    display_name: str
    present_days: float = 0.0
    half_days: float = 0.0
    leave_days: float = 0.0

    @property
    def attendance_rate(self) -> float:
        total = self.present_days + self.leave_days
        if total <= 0:
            return 0.0
        return (self.present_days / total) * 100

    @property
    def rate_label(self) -> str:
        return f"{self.attendance_rate:.1f}%"

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "username": self.username,
            "displayName": self.display_name,
            "presentDays": self.present_days,
            "halfDays": self.half_days,
            "leaveDays": self.leave_days,
            "attendanceRate": round(self.attendance_rate, 1),
        }


class AttendanceAggregator:
    def __init__(self, calculator: Optional[PresenceCalculator] = None):
        self._calculator = calculator or StandardPresenceCalculator()

    @staticmethod
    def _summary_for(summaries: Dict[str, EmployeeSummary], record) -> EmployeeSummary:
        s = summaries.get(record.user_id)
        if not s:
            s = EmployeeSummary(
                user_id=record.user_id,
                username=record.username,
                display_name=record.display_name,
            )
            summaries[record.user_id] = s
        return s

    def summarize(
        self,
        attendance: Iterable[AttendanceRecord],
        leaves: Iterable[LeaveRecord],
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Dict[str, EmployeeSummary]:
        summaries: Dict[str, EmployeeSummary] = {}

        for r in attendance:
            if not in_window(r.work_date, start, end):
                continue
            s = self._summary_for(summaries, r)
            s.present_days += self._calculator.present_credit(r)
            s.half_days += self._calculator.half_day_credit(r)

        for leave in leaves:
            if not in_window(leave.work_date, start, end):
                continue
            s = self._summary_for(summaries, leave)
            s.leave_days += self._calculator.leave_credit(leave)

        return summaries


def ordered(summaries: Mapping[str, EmployeeSummary]) -> List[EmployeeSummary]:
    return sorted(summaries.values(), key=lambda s: (-s.attendance_rate, s.display_name.lower(), s.user_id))
