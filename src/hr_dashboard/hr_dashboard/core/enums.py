from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Derived classification of one attendance day."""

    FULL_DAY = "Full Day"
    HALF_DAY = "Half Day"
    ABSENT = "Absent"


class HalfDay(str, Enum):
    """Leave classification as sent by the HR API.

    HALF is the legacy encoding used before first/second were split.
    """

    FULL = "full"
    FIRST = "first"
    SECOND = "second"
    HALF = "half"

    @property
    def is_full(self) -> bool:
        return self is HalfDay.FULL


class AttendanceStatusFilter(str, Enum):
    ALL = "all"
    FULL = "full"
    HALF = "half"
    FIRST_HALF = "first-half"
    SECOND_HALF = "second-half"
    ABSENT = "absent"


class LeaveTypeFilter(str, Enum):
    ALL = "all"
    FULL = "full"
    HALF = "half"
    FIRST = "first"
    SECOND = "second"


class EmployeeStatus(str, Enum):
    """Today's status shown on the employee overview."""

    PRESENT = "present"
    ABSENT = "absent"
    ON_LEAVE = "on-leave"


class ReportType(str, Enum):
    ATTENDANCE = "attendance"
    LEAVES = "leaves"
    SUMMARY = "summary"


class DateRangePreset(str, Enum):
    TODAY = "today"
    YESTERDAY = "yesterday"
    LAST_7_DAYS = "last7days"
    LAST_30_DAYS = "last30days"
    THIS_MONTH = "thisMonth"


class HalfDayCounting(str, Enum):
    """How a half-present day counts toward ``halfDays`` in summaries."""

    HALF = "half"
    WHOLE = "whole"
