import csv
import io
from datetime import date, datetime

import pytest

from src.hr_dashboard.hr_dashboard.core.enums import HalfDay
from src.hr_dashboard.hr_dashboard.exports.csv_exporter import escape_field, export_filename, to_csv
from src.hr_dashboard.hr_dashboard.exports.layouts import ATTENDANCE_PAGE, LEAVES_PAGE


@pytest.mark.parametrize(
    "value, expected",
    [
        ("plain", "plain"),
        ("a,b", '"a,b"'),
        ('say "hi"', '"say ""hi"""'),
        ("two\nlines", '"two\nlines"'),
        (None, ""),
        (1.5, "1.5"),
    ],
)
def test_escape_field(value, expected):
    assert escape_field(value) == expected


def test_forced_quotes_for_free_text_columns():
    content = to_csv(("Name", "Note"), [("Alice", "late")], quoted_columns=("Note",))
    assert content == 'Name,Note\nAlice,"late"'


def test_export_filenames():
    assert export_filename("attendance", date(2025, 3, 1)) == "attendance_2025-03-01.csv"
    assert (
        export_filename("leaves", start=date(2025, 3, 1), end=date(2025, 3, 31))
        == "leaves_report_2025-03-01_to_2025-03-31.csv"
    )
    with pytest.raises(ValueError):
        export_filename("attendance")


def test_attendance_page_export_parses_back(attendance_factory):
    records = [
        attendance_factory("u1", date(2025, 3, 3), True, True, name="Nguyen, Alice",
                           created_at=datetime(2025, 3, 3, 8, 5), note='said "ok"'),
        attendance_factory("u2", date(2025, 3, 3), False, True, name="Bob"),
    ]
    export = ATTENDANCE_PAGE.render(records, filename="attendance_2025-03-03.csv")

    rows = list(csv.reader(io.StringIO(export.content)))
    assert rows[0] == ["Name", "Username", "Date", "Time", "Status", "First Half", "Second Half", "Note"]
    assert rows[1] == ["Nguyen, Alice", "useru1", "2025-03-03", "08:05", "Full Day", "Present", "Present", 'said "ok"']
    assert rows[2] == ["Bob", "useru2", "2025-03-03", "", "Second Half", "Absent", "Present", ""]
    assert export.row_count == 2


def test_leaves_page_export_parses_back(leave_factory):
    leave = leave_factory("u1", date(2025, 3, 4), HalfDay.FIRST, reason="Doctor,\nmorning",
                          created_at=datetime(2025, 3, 1, 10, 0))
    export = LEAVES_PAGE.render([leave], filename="leaves_2025-03-04.csv")

    rows = list(csv.reader(io.StringIO(export.content)))
    assert rows == [
        ["Name", "Username", "Date", "Leave Type", "Reason", "Applied On"],
        ["User u1", "useru1", "2025-03-04", "Half Day", "Doctor,\nmorning", "2025-03-01"],
    ]


def test_empty_export_has_only_headers():
    export = LEAVES_PAGE.render([], filename="leaves_2025-03-04.csv")
    assert export.content == "Name,Username,Date,Leave Type,Reason,Applied On"
    assert export.row_count == 0
