from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .api.connection import ApiConfig, ApiConnection
from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_PAGE_LIMIT
from .core.enums import HalfDayCounting
from .leaves.http_leave_repository import HttpLeaveRepository
from .leaves.service import LeaveService
from .reports.aggregator import AttendanceAggregator
from .reports.calculator.factory import calculator_for
from .reports.service import DashboardService, ReportService
from .users.http_user_repository import HttpUserRepository
from .users.service import AuthService, EmployeeService


@dataclass(frozen=True)
class Container:
    conn: ApiConnection

    users_repo: HttpUserRepository
    attendance_repo: HttpAttendanceRepository
    leaves_repo: HttpLeaveRepository

    auth_service: AuthService
    attendance_service: AttendanceService
    leave_service: LeaveService
    employee_service: EmployeeService
    report_service: ReportService
    dashboard_service: DashboardService


def build_container(
    *,
    api_config: dict,
    admin_delete_password: str,
    allowed_emails: Iterable[str],
    half_day_counting: str = HalfDayCounting.HALF.value,
    page_limit: int = DEFAULT_PAGE_LIMIT,
) -> Container:
    conn = ApiConnection.get_instance(ApiConfig.from_dict(api_config))

    users_repo = HttpUserRepository(conn)
    attendance_repo = HttpAttendanceRepository(conn, page_limit=page_limit)
    leaves_repo = HttpLeaveRepository(conn, page_limit=page_limit)

    aggregator = AttendanceAggregator(calculator_for(half_day_counting))

    return Container(
        conn=conn,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        auth_service=AuthService(allowed_emails),
        attendance_service=AttendanceService(attendance_repo, admin_password=admin_delete_password),
        leave_service=LeaveService(leaves_repo, admin_password=admin_delete_password),
        employee_service=EmployeeService(users_repo, attendance_repo, leaves_repo, aggregator=aggregator),
        report_service=ReportService(attendance_repo, leaves_repo, aggregator=aggregator),
        dashboard_service=DashboardService(attendance_repo, leaves_repo),
    )
