from datetime import date

import pytest

from src.hr_dashboard.hr_dashboard.core.enums import HalfDay
from src.hr_dashboard.hr_dashboard.reports.aggregator import AttendanceAggregator, EmployeeSummary, format_days, ordered
from src.hr_dashboard.hr_dashboard.reports.calculator.factory import calculator_for
from src.hr_dashboard.hr_dashboard.reports.calculator.standard_calculator import StandardPresenceCalculator
from src.hr_dashboard.hr_dashboard.reports.calculator.whole_half_day_calculator import WholeHalfDayCalculator


@pytest.fixture
def month(attendance_factory, leave_factory):
    attendance = [
        attendance_factory("u1", date(2025, 3, 3), True, True),
        attendance_factory("u1", date(2025, 3, 4), True, False),
        attendance_factory("u1", date(2025, 3, 20), True, True),
        attendance_factory("u2", date(2025, 3, 3), False, False),
    ]
    leaves = [
        leave_factory("u1", date(2025, 3, 5), HalfDay.FULL),
        leave_factory("u2", date(2025, 3, 6), HalfDay.SECOND),
    ]
    return attendance, leaves


def test_summary_with_standard_rule(month):
    attendance, leaves = month
    summaries = AttendanceAggregator(StandardPresenceCalculator()).summarize(attendance, leaves)

    u1 = summaries["u1"]
    assert (u1.present_days, u1.half_days, u1.leave_days) == (2.5, 0.5, 1.0)
    assert u1.attendance_rate == pytest.approx(2.5 / 3.5 * 100)
    assert u1.rate_label == "71.4%"

    u2 = summaries["u2"]
    assert (u2.present_days, u2.leave_days) == (0.0, 0.5)
    assert u2.attendance_rate == 0.0


def test_whole_rule_only_changes_half_days(month):
    attendance, leaves = month
    summaries = AttendanceAggregator(WholeHalfDayCalculator()).summarize(attendance, leaves)
    assert summaries["u1"].half_days == 1.0
    assert summaries["u1"].present_days == 2.5


def test_calculator_factory():
    assert isinstance(calculator_for("whole"), WholeHalfDayCalculator)
    assert isinstance(calculator_for("half"), StandardPresenceCalculator)
    with pytest.raises(ValueError):
        calculator_for("quarter")


def test_window_is_inclusive(month):
    attendance, leaves = month
    summaries = AttendanceAggregator().summarize(attendance, leaves, start=date(2025, 3, 4), end=date(2025, 3, 5))
    assert summaries["u1"].present_days == 0.5
    assert summaries["u1"].leave_days == 1.0
    assert "u2" not in summaries


def test_widening_the_window_never_loses_days(month):
    attendance, leaves = month
    aggregator = AttendanceAggregator()
    windows = [
        (date(2025, 3, 4), date(2025, 3, 4)),
        (date(2025, 3, 3), date(2025, 3, 6)),
        (date(2025, 3, 1), date(2025, 3, 31)),
    ]
    previous = 0.0
    for start, end in windows:
        summaries = aggregator.summarize(attendance, leaves, start=start, end=end)
        total = sum(s.present_days + s.leave_days for s in summaries.values())
        assert total >= previous
        for s in summaries.values():
            assert 0.0 <= s.attendance_rate <= 100.0
        previous = total


def test_empty_summary_rate_is_zero():
    assert EmployeeSummary("u9", "nobody", "Nobody").attendance_rate == 0.0


def test_ordered_by_rate_then_name():
    a = EmployeeSummary("u1", "a", "Zed", present_days=1)
    b = EmployeeSummary("u2", "b", "Amy", present_days=1)
    c = EmployeeSummary("u3", "c", "Bo", present_days=1, leave_days=1)
    assert [s.user_id for s in ordered({"u1": a, "u2": b, "u3": c})] == ["u2", "u1", "u3"]


def test_format_days():
    assert format_days(1.0) == "1"
    assert format_days(1.5) == "1.5"


def test_summary_to_dict_rounds_rate():
    s = EmployeeSummary("u1", "alice", "Alice", present_days=2, leave_days=1)
    assert s.to_dict()["attendanceRate"] == 66.7
