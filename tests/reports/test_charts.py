from datetime import date, timedelta

from src.hr_dashboard.hr_dashboard.core.enums import HalfDay
from src.hr_dashboard.hr_dashboard.reports.charts import (
    attendance_summary_pie,
    attendance_trend,
    employee_attendance_series,
    leave_distribution,
)


def test_trend_keeps_latest_days(attendance_factory):
    start = date(2025, 3, 1)
    records = [attendance_factory("u1", start + timedelta(days=i)) for i in range(10)]
    records.append(attendance_factory("u2", date(2025, 3, 10), True, False))

    points = attendance_trend(records)
    assert len(points) == 7
    assert points[0]["isoDate"] == "2025-03-04"
    assert points[-1] == {"date": "Mar 10", "isoDate": "2025-03-10", "present": 1.5}


def test_employee_series_values(attendance_factory):
    records = [
        attendance_factory("u1", date(2025, 3, 2), False, False),
        attendance_factory("u1", date(2025, 3, 1), True, True),
        attendance_factory("u1", date(2025, 3, 3), False, True),
    ]
    series = employee_attendance_series(records)
    assert [p["attendance"] for p in series] == [1.0, 0.0, 0.5]
    assert [p["label"] for p in series] == ["Full Day", "Absent", "Half Day"]


def test_summary_pie_omits_empty_slices(attendance_factory):
    records = [attendance_factory(first=True, second=True), attendance_factory(first=True, second=False)]
    assert attendance_summary_pie(records) == [
        {"name": "Full Day", "value": 1},
        {"name": "Half Day", "value": 1},
    ]


def test_leave_distribution_top_five(leave_factory):
    leaves = []
    for i in range(7):
        for d in range(i + 1):
            leaves.append(leave_factory(f"u{i}", date(2025, 3, 1) + timedelta(days=d), HalfDay.FULL))
    leaves.append(leave_factory("u0", date(2025, 3, 20), HalfDay.FIRST))

    dist = leave_distribution(leaves)
    assert len(dist) == 5
    assert dist[0] == {"name": "User u6", "value": 7.0}
    assert [p["value"] for p in dist] == [7.0, 6.0, 5.0, 4.0, 3.0]
