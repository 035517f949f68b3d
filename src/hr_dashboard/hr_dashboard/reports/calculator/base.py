from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import AttendanceRecord
from ...leaves.model import LeaveRecord


class PresenceCalculator(ABC):
    """Calculator interface (Strategy Pattern for summary credits)."""

    def present_credit(self, record: AttendanceRecord) -> float:
        return record.presence_value

    @abstractmethod
    def half_day_credit(self, record: AttendanceRecord) -> float:
        raise NotImplementedError

    def leave_credit(self, leave: LeaveRecord) -> float:
        return leave.leave_days
