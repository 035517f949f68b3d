from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Mapping, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.concurrency import fetch_concurrently
from ..common.datetime_utils import format_iso, parse_query_date, resolve_preset
from ..common.filters import within_window
from ..core.constants import RECENT_ACTIVITY_LIMIT, RECENT_ACTIVITY_PER_KIND
from ..core.enums import DateRangePreset, ReportType
from ..core.exceptions import ValidationError
from ..exports.csv_exporter import CsvExport, export_filename
from ..exports.layouts import ATTENDANCE_REPORT, LEAVES_REPORT, SUMMARY_REPORT
from ..leaves.model import LeaveRecord
from ..leaves.repository import LeaveRepository
from .aggregator import AttendanceAggregator, EmployeeSummary, ordered
from .charts import attendance_summary_pie, attendance_trend, leave_distribution


@dataclass(frozen=True)
class DateWindow:
    start: date
    end: date

    @classmethod
    def from_query(cls, args: Mapping[str, str], *, today: date) -> "DateWindow":
        """Explicit ``from``/``to`` win over ``preset``; default is the current month."""

        preset_s = (args.get("preset") or DateRangePreset.THIS_MONTH.value).strip()
        try:
            preset = DateRangePreset(preset_s)
        except ValueError:
            raise ValidationError(f"Unknown date range preset: {preset_s}")

        start, end = resolve_preset(preset, today)
        start = parse_query_date(args.get("from"), "from") or start
        end = parse_query_date(args.get("to"), "to") or end
        if end < start:
            raise ValidationError("'to' must be on or after 'from'")
        return cls(start=start, end=end)

    def to_dict(self) -> dict:
        return {"from": format_iso(self.start), "to": format_iso(self.end)}


@dataclass(frozen=True)
class ReportData:
    report_type: ReportType
    window: DateWindow
    attendance: List[AttendanceRecord]
    leaves: List[LeaveRecord]
    summary: List[EmployeeSummary]
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def charts(self) -> dict:
        return {
            "attendanceSummary": attendance_summary_pie(self.attendance),
            "leaveDistribution": leave_distribution(self.leaves),
        }


class ReportService:
    """Use case: date-window reports (attendance / leaves / per-employee summary)."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        *,
        aggregator: Optional[AttendanceAggregator] = None,
    ):
        self._attendance = attendance
        self._leaves = leaves
        self._aggregator = aggregator or AttendanceAggregator()

    def build_report(self, *, report_type: ReportType, window: DateWindow) -> ReportData:
        fetched = fetch_concurrently(
            {
                "attendance": self._attendance.list_all,
                "leaves": self._leaves.list_all,
            }
        )
        attendance = sorted(within_window(fetched["attendance"], window.start, window.end), key=lambda r: r.work_date)
        leaves = sorted(within_window(fetched["leaves"], window.start, window.end), key=lambda r: r.work_date)

        summaries = self._aggregator.summarize(attendance, leaves, start=window.start, end=window.end)
        return ReportData(
            report_type=report_type,
            window=window,
            attendance=attendance,
            leaves=leaves,
            summary=ordered(summaries),
            errors=fetched.errors,
        )

    @staticmethod
    def to_csv(data: ReportData) -> CsvExport:
        filename = export_filename(data.report_type.value, start=data.window.start, end=data.window.end)
        if data.report_type == ReportType.ATTENDANCE:
            return ATTENDANCE_REPORT.render(data.attendance, filename=filename)
        if data.report_type == ReportType.LEAVES:
            return LEAVES_REPORT.render(data.leaves, filename=filename)
        return SUMMARY_REPORT.render(data.summary, filename=filename)


@dataclass(frozen=True)
class DashboardOverview:
    today: date
    total_employees: int
    today_attendance: int
    today_leaves: int
    recent_activity: List[dict]
    trend: List[dict]
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def today_rate(self) -> float:
        if self.total_employees <= 0:
            return 0.0
        return round(self.today_attendance / self.total_employees * 100, 1)

    def to_dict(self) -> dict:
        return {
            "date": format_iso(self.today),
            "totalEmployees": self.total_employees,
            "todayAttendance": self.today_attendance,
            "todayLeaves": self.today_leaves,
            "attendanceRate": self.today_rate,
            "recentActivity": self.recent_activity,
            "attendanceTrend": self.trend,
        }


def recent_activity(attendance: List[AttendanceRecord], leaves: List[LeaveRecord]) -> List[dict]:
    """Last few attendance and leave entries merged, newest ``createdAt`` first."""

    items = []
    for r in attendance[-RECENT_ACTIVITY_PER_KIND:]:
        items.append(
            (
                r.created_at,
                {
                    "type": "attendance",
                    "displayName": r.display_name,
                    "username": r.username,
                    "date": format_iso(r.work_date),
                    "status": r.day_status.value,
                },
            )
        )
    for leave in leaves[-RECENT_ACTIVITY_PER_KIND:]:
        items.append(
            (
                leave.created_at,
                {
                    "type": "leave",
                    "displayName": leave.display_name,
                    "username": leave.username,
                    "date": format_iso(leave.work_date),
                    "status": f"{leave.leave_type_label} Leave",
                    "reason": leave.reason,
                },
            )
        )

    # Records without a timestamp sort last.
    items.sort(key=lambda pair: (pair[0] is not None, pair[0].timestamp() if pair[0] else 0), reverse=True)
    return [payload for _, payload in items[:RECENT_ACTIVITY_LIMIT]]


class DashboardService:
    def __init__(self, attendance: AttendanceRepository, leaves: LeaveRepository):
        self._attendance = attendance
        self._leaves = leaves

    def overview(self, *, today: date) -> DashboardOverview:
        fetched = fetch_concurrently(
            {
                "attendance": self._attendance.list_all,
                "leaves": self._leaves.list_all,
            }
        )
        attendance: List[AttendanceRecord] = fetched["attendance"]
        leaves: List[LeaveRecord] = fetched["leaves"]

        employee_ids = {r.user_id for r in attendance} | {leave.user_id for leave in leaves}
        return DashboardOverview(
            today=today,
            total_employees=len(employee_ids),
            today_attendance=sum(1 for r in attendance if r.work_date == today),
            today_leaves=sum(1 for leave in leaves if leave.work_date == today),
            recent_activity=recent_activity(attendance, leaves),
            trend=attendance_trend(attendance),
            errors=fetched.errors,
        )
