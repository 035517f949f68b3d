from __future__ import annotations

from .base import PresenceCalculator
from ...attendance.model import AttendanceRecord


class StandardPresenceCalculator(PresenceCalculator):
    """Standard rule: a half-present day adds 0.5 to half days (reports page)."""

    def half_day_credit(self, record: AttendanceRecord) -> float:
        return 0.5 if record.is_half_day else 0.0
