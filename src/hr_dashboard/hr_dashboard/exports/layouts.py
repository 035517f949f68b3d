"""Column layouts of every CSV the dashboard exports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, List, Sequence, Tuple, TypeVar

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_iso
from ..leaves.model import LeaveRecord
from ..reports.aggregator import EmployeeSummary, format_days
from .csv_exporter import CsvExport, to_csv

T = TypeVar("T")


def _presence(flag: bool) -> str:
    return "Present" if flag else "Absent"


def _time(record: AttendanceRecord) -> str:
    return record.created_at.strftime("%H:%M") if record.created_at else ""


@dataclass(frozen=True)
class CsvLayout(Generic[T]):
    headers: Tuple[str, ...]
    row: Callable[[T], Sequence[Any]]
    quoted_columns: Tuple[str, ...] = field(default_factory=tuple)

    def rows(self, items: Iterable[T]) -> List[Sequence[Any]]:
        return [self.row(item) for item in items]

    def render(self, items: Iterable[T], *, filename: str) -> CsvExport:
        rows = self.rows(items)
        return CsvExport(
            filename=filename,
            content=to_csv(self.headers, rows, quoted_columns=self.quoted_columns),
            row_count=len(rows),
        )


ATTENDANCE_PAGE: CsvLayout[AttendanceRecord] = CsvLayout(
    headers=("Name", "Username", "Date", "Time", "Status", "First Half", "Second Half", "Note"),
    row=lambda r: (
        r.display_name,
        r.username,
        format_iso(r.work_date),
        _time(r),
        r.presence_label,
        _presence(r.first_half_present),
        _presence(r.second_half_present),
        r.note or "",
    ),
    quoted_columns=("Note",),
)

LEAVES_PAGE: CsvLayout[LeaveRecord] = CsvLayout(
    headers=("Name", "Username", "Date", "Leave Type", "Reason", "Applied On"),
    row=lambda r: (
        r.display_name,
        r.username,
        format_iso(r.work_date),
        r.leave_type_label,
        r.reason,
        format_iso(r.created_at.date()) if r.created_at else "",
    ),
    quoted_columns=("Reason",),
)

ATTENDANCE_REPORT: CsvLayout[AttendanceRecord] = CsvLayout(
    headers=("Date", "Employee", "Username", "First Half", "Second Half", "Status"),
    row=lambda r: (
        format_iso(r.work_date),
        r.display_name,
        r.username,
        _presence(r.first_half_present),
        _presence(r.second_half_present),
        r.day_status.value,
    ),
)

LEAVES_REPORT: CsvLayout[LeaveRecord] = CsvLayout(
    headers=("Date", "Employee", "Username", "Leave Type", "Reason"),
    row=lambda r: (
        format_iso(r.work_date),
        r.display_name,
        r.username,
        r.leave_type_label,
        r.reason,
    ),
    quoted_columns=("Reason",),
)

SUMMARY_REPORT: CsvLayout[EmployeeSummary] = CsvLayout(
    headers=("Employee", "Username", "Present Days", "Half Days", "Leave Days", "Attendance Rate"),
    row=lambda s: (
        s.display_name,
        s.username,
        format_days(s.present_days),
        format_days(s.half_days),
        format_days(s.leave_days),
        s.rate_label,
    ),
)
