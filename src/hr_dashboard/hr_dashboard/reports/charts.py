"""Reshape records into the point lists the chart widgets consume."""

from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Dict, Iterable, List

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_iso
from ..core.constants import CHART_DATE_FORMAT, EMPLOYEE_CHART_DAYS, LEAVE_CHART_TOP, TREND_CHART_DAYS
from ..core.enums import DayStatus
from ..leaves.model import LeaveRecord


def _label(day: date) -> str:
    return day.strftime(CHART_DATE_FORMAT)


def attendance_trend(records: Iterable[AttendanceRecord], *, days: int = TREND_CHART_DAYS) -> List[dict]:
    """Present headcount per date (full = 1, half = 0.5), latest ``days`` dates."""

    totals: Dict[date, float] = {}
    for r in records:
        totals[r.work_date] = totals.get(r.work_date, 0.0) + r.presence_value

    points = sorted(totals.items())[-days:] if days > 0 else []
    return [{"date": _label(d), "isoDate": format_iso(d), "present": v} for d, v in points]


def employee_attendance_series(records: Iterable[AttendanceRecord], *, days: int = EMPLOYEE_CHART_DAYS) -> List[dict]:
    ordered = sorted(records, key=lambda r: r.work_date)
    tail = ordered[-days:] if days > 0 else []
    return [
        {
            "date": _label(r.work_date),
            "isoDate": format_iso(r.work_date),
            "attendance": r.presence_value,
            "label": r.day_status.value,
        }
        for r in tail
    ]


def attendance_summary_pie(records: Iterable[AttendanceRecord]) -> List[dict]:
    counts = Counter(r.day_status for r in records)
    slices = [{"name": status.value, "value": counts.get(status, 0)} for status in DayStatus]
    return [s for s in slices if s["value"] > 0]


def leave_distribution(leaves: Iterable[LeaveRecord], *, top: int = LEAVE_CHART_TOP) -> List[dict]:
    per_employee: Dict[str, dict] = {}
    for leave in leaves:
        item = per_employee.get(leave.user_id)
        if not item:
            item = {"name": leave.display_name, "value": 0.0}
            per_employee[leave.user_id] = item
        item["value"] += leave.leave_days

    ranked = sorted(per_employee.values(), key=lambda x: (-x["value"], x["name"]))
    return ranked[:top]
