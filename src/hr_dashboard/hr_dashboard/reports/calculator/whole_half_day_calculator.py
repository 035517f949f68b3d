from __future__ import annotations

from .base import PresenceCalculator
from ...attendance.model import AttendanceRecord


class WholeHalfDayCalculator(PresenceCalculator):
    """Counts each half-present day as one half day (employee table)."""

    def half_day_credit(self, record: AttendanceRecord) -> float:
        return 1.0 if record.is_half_day else 0.0
