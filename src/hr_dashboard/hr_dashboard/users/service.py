from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.concurrency import fetch_concurrently
from ..common.datetime_utils import format_iso
from ..common.filters import matches_search, normalize_term
from ..common.validators import require_non_empty
from ..core.enums import EmployeeStatus
from ..core.exceptions import ApiError, AuthenticationError, NotFoundError
from ..leaves.model import LeaveRecord
from ..leaves.repository import LeaveRepository
from ..reports.aggregator import AttendanceAggregator, EmployeeSummary
from ..reports.charts import employee_attendance_series
from .model import Employee, EmployeeOverview
from .repository import UserRepository


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after sign-in."""

    email: str
    name: str


class AuthService:
    """Use case: sign-in gated by an allow-list of email addresses."""

    def __init__(self, allowed_emails: Iterable[str]):
        self._allowed = {e.strip().lower() for e in allowed_emails if e and e.strip()}

    def is_allowed(self, email: Optional[str]) -> bool:
        return bool(email) and email.strip().lower() in self._allowed

    def authenticate(self, email: Optional[str], name: Optional[str] = None) -> SessionUser:
        email = require_non_empty(email, "Email").lower()
        if not self.is_allowed(email):
            raise AuthenticationError("This account is not allowed to access the dashboard")
        return SessionUser(email=email, name=(name or "").strip() or email)


def build_overview(
    attendance: Iterable[AttendanceRecord],
    leaves: Iterable[LeaveRecord],
    *,
    today: date,
) -> List[EmployeeOverview]:
    rows: Dict[str, EmployeeOverview] = {}

    def row_for(record) -> EmployeeOverview:
        row = rows.get(record.user_id)
        if not row:
            row = EmployeeOverview(
                user_id=record.user_id,
                username=record.username,
                display_name=record.display_name,
            )
            rows[record.user_id] = row
        return row

    for r in attendance:
        row = row_for(r)
        row.attendance_count += 1
        row.seen(r.work_date)
        if r.work_date == today and r.is_full_day and row.status != EmployeeStatus.ON_LEAVE:
            row.status = EmployeeStatus.PRESENT

    for leave in leaves:
        row = row_for(leave)
        row.leave_count += 1
        row.seen(leave.work_date)
        if leave.work_date == today:
            row.status = EmployeeStatus.ON_LEAVE

    return sorted(rows.values(), key=lambda x: x.display_name.lower())


@dataclass(frozen=True)
class EmployeeDetail:
    employee: Employee
    attendance: List[AttendanceRecord]
    leaves: List[LeaveRecord]
    summary: EmployeeSummary
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def total_days(self) -> int:
        return len(self.attendance) + len(self.leaves)

    def stats(self) -> dict:
        return {
            "totalDays": self.total_days,
            "presentDays": self.summary.present_days,
            "leaveDays": self.summary.leave_days,
            "attendanceRate": round(self.summary.attendance_rate, 1),
        }


class EmployeeService:
    """Use cases: employee list with counts, employee detail with stats."""

    def __init__(
        self,
        users: UserRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        *,
        aggregator: Optional[AttendanceAggregator] = None,
    ):
        self._users = users
        self._attendance = attendance
        self._leaves = leaves
        self._aggregator = aggregator or AttendanceAggregator()

    def overview(self, *, today: date, search_term: str = "") -> Tuple[List[EmployeeOverview], Dict[str, str]]:
        fetched = fetch_concurrently(
            {
                "attendance": self._attendance.list_all,
                "leaves": self._leaves.list_all,
            }
        )
        rows = build_overview(fetched["attendance"], fetched["leaves"], today=today)
        term = normalize_term(search_term)
        return [r for r in rows if matches_search(term, r.display_name, r.username)], fetched.errors

    def detail(self, user_id: str) -> EmployeeDetail:
        user_id = require_non_empty(user_id, "Employee")
        fetched = fetch_concurrently(
            {
                "attendance": self._attendance.list_all,
                "leaves": self._leaves.list_all,
                "users": self._users.list_all,
            }
        )
        if "users" in fetched.errors:
            raise ApiError(fetched.errors["users"])
        employee = next((u for u in fetched["users"] if u.user_id == user_id), None)
        if not employee:
            raise NotFoundError("Employee not found")

        attendance = sorted((r for r in fetched["attendance"] if r.user_id == user_id), key=lambda r: r.work_date)
        leaves = sorted((r for r in fetched["leaves"] if r.user_id == user_id), key=lambda r: r.work_date)

        summary = self._aggregator.summarize(attendance, leaves).get(user_id) or EmployeeSummary(
            user_id=employee.user_id,
            username=employee.username,
            display_name=employee.display_name,
        )
        return EmployeeDetail(
            employee=employee,
            attendance=attendance,
            leaves=leaves,
            summary=summary,
            errors=fetched.errors,
        )

    @staticmethod
    def overview_to_dict(row: EmployeeOverview) -> dict:
        return {
            "userId": row.user_id,
            "username": row.username,
            "displayName": row.display_name,
            "attendanceCount": row.attendance_count,
            "leaveCount": row.leave_count,
            "lastSeen": format_iso(row.last_seen),
            "status": row.status.value,
        }

    @staticmethod
    def chart(detail: EmployeeDetail) -> List[dict]:
        return employee_attendance_series(detail.attendance)
