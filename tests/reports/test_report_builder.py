import csv
import io
from datetime import date, datetime

import pytest

from src.hr_dashboard.hr_dashboard.core.enums import HalfDay, ReportType
from src.hr_dashboard.hr_dashboard.core.exceptions import ApiError, ValidationError
from src.hr_dashboard.hr_dashboard.reports.service import (
    DashboardService,
    DateWindow,
    ReportService,
    recent_activity,
)


def test_date_window_defaults_to_current_month():
    window = DateWindow.from_query({}, today=date(2025, 2, 10))
    assert (window.start, window.end) == (date(2025, 2, 1), date(2025, 2, 28))


def test_explicit_from_to_override_preset():
    window = DateWindow.from_query({"preset": "today", "from": "2025-01-01"}, today=date(2025, 2, 10))
    assert (window.start, window.end) == (date(2025, 1, 1), date(2025, 2, 10))
    assert window.to_dict() == {"from": "2025-01-01", "to": "2025-02-10"}


def test_date_window_rejects_reversed_range_and_unknown_preset():
    with pytest.raises(ValidationError):
        DateWindow.from_query({"from": "2025-02-10", "to": "2025-02-01"}, today=date(2025, 2, 10))
    with pytest.raises(ValidationError):
        DateWindow.from_query({"preset": "lastYear"}, today=date(2025, 2, 10))


@pytest.fixture
def service(attendance_repo, leaves_repo, attendance_factory, leave_factory):
    for r in [
        attendance_factory("u1", date(2025, 3, 3), True, True, name="Alice"),
        attendance_factory("u2", date(2025, 3, 3), True, False, name="Bob"),
        attendance_factory("u1", date(2025, 4, 1), True, True, name="Alice"),
    ]:
        attendance_repo.records[r.record_id] = r
    for leave in [leave_factory("u2", date(2025, 3, 4), HalfDay.FULL, name="Bob", reason='Said "hi", left')]:
        leaves_repo.records[leave.record_id] = leave
    return ReportService(attendance_repo, leaves_repo)


MARCH = DateWindow(date(2025, 3, 1), date(2025, 3, 31))


def test_report_is_limited_to_the_window(service):
    data = service.build_report(report_type=ReportType.ATTENDANCE, window=MARCH)
    assert len(data.attendance) == 2
    assert [s.user_id for s in data.summary] == ["u1", "u2"]
    assert data.errors == {}
    assert data.charts["attendanceSummary"] == [{"name": "Full Day", "value": 1}, {"name": "Half Day", "value": 1}]


def test_summary_csv_parses_back(service):
    data = service.build_report(report_type=ReportType.SUMMARY, window=MARCH)
    export = service.to_csv(data)

    assert export.filename == "summary_report_2025-03-01_to_2025-03-31.csv"
    rows = list(csv.reader(io.StringIO(export.content)))
    assert rows[0] == ["Employee", "Username", "Present Days", "Half Days", "Leave Days", "Attendance Rate"]
    assert rows[1] == ["Alice", "useru1", "1", "0", "0", "100.0%"]
    assert rows[2] == ["Bob", "useru2", "0.5", "0.5", "1", "33.3%"]
    assert export.row_count == len(rows) - 1


def test_leaves_csv_keeps_quoted_reason(service):
    data = service.build_report(report_type=ReportType.LEAVES, window=MARCH)
    export = service.to_csv(data)
    rows = list(csv.reader(io.StringIO(export.content)))
    assert rows[1] == ["2025-03-04", "Bob", "useru2", "Full Day", 'Said "hi", left']


def test_report_survives_failed_fetch(service, leaves_repo):
    leaves_repo.fail_with = ApiError("List leaves: request timed out")
    data = service.build_report(report_type=ReportType.SUMMARY, window=MARCH)
    assert data.leaves == []
    assert "leaves" in data.errors
    assert len(data.attendance) == 2


def test_dashboard_overview(attendance_repo, leaves_repo, attendance_factory, leave_factory):
    today = date(2025, 3, 3)
    for r in [
        attendance_factory("u1", today, created_at=datetime(2025, 3, 3, 8, 0)),
        attendance_factory("u2", date(2025, 3, 2), created_at=datetime(2025, 3, 2, 8, 0)),
    ]:
        attendance_repo.records[r.record_id] = r
    leave = leave_factory("u3", today, HalfDay.FIRST, created_at=datetime(2025, 3, 3, 9, 0))
    leaves_repo.records[leave.record_id] = leave

    overview = DashboardService(attendance_repo, leaves_repo).overview(today=today)
    body = overview.to_dict()
    assert body["totalEmployees"] == 3
    assert body["todayAttendance"] == 1
    assert body["todayLeaves"] == 1
    assert body["attendanceRate"] == 33.3
    assert body["recentActivity"][0]["type"] == "leave"
    assert body["recentActivity"][0]["status"] == "Half Day Leave"
    assert len(body["attendanceTrend"]) == 2


def test_dashboard_rate_is_zero_without_employees(attendance_repo, leaves_repo):
    overview = DashboardService(attendance_repo, leaves_repo).overview(today=date(2025, 3, 3))
    assert overview.today_rate == 0.0
    assert overview.recent_activity == []


def test_recent_activity_is_capped(attendance_factory, leave_factory):
    attendance = [attendance_factory("u1", date(2025, 3, d), created_at=datetime(2025, 3, d, 8)) for d in range(1, 8)]
    leaves = [leave_factory("u2", date(2025, 3, d), created_at=datetime(2025, 3, d, 9)) for d in range(1, 8)]
    items = recent_activity(attendance, leaves)
    assert len(items) == 8
    assert items[0] == {
        "type": "leave",
        "displayName": "User u2",
        "username": "useru2",
        "date": "2025-03-07",
        "status": "Full Day Leave",
        "reason": "Personal",
    }


def test_recent_activity_labels_absent_attendance(attendance_factory):
    absent = attendance_factory("u1", date(2025, 3, 3), False, False, created_at=datetime(2025, 3, 3, 8))
    half = attendance_factory("u2", date(2025, 3, 3), False, True, created_at=datetime(2025, 3, 3, 7))
    items = recent_activity([absent, half], [])
    assert [i["status"] for i in items] == ["Absent", "Half Day"]
