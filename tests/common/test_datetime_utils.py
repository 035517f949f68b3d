from datetime import date, datetime, timezone

import pytest

from src.hr_dashboard.hr_dashboard.common.datetime_utils import (
    normalize_date,
    parse_query_date,
    parse_timestamp,
    resolve_preset,
)
from src.hr_dashboard.hr_dashboard.core.enums import DateRangePreset
from src.hr_dashboard.hr_dashboard.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2025-03-01", date(2025, 3, 1)),
        ("2025-03-01T00:00:00.000Z", date(2025, 3, 1)),
        (datetime(2025, 3, 1, 23, 59), date(2025, 3, 1)),
        ("", None),
        ("not a date", None),
        (None, None),
    ],
)
def test_normalize_date(raw, expected):
    assert normalize_date(raw) == expected


def test_parse_timestamp_accepts_trailing_z():
    assert parse_timestamp("2025-03-01T08:30:00Z") == datetime(2025, 3, 1, 8, 30, tzinfo=timezone.utc)
    assert parse_timestamp("garbage") is None


def test_parse_query_date():
    assert parse_query_date(" ", "date") is None
    with pytest.raises(ValidationError, match="date must be a date"):
        parse_query_date("2025/03/01", "date")


@pytest.mark.parametrize(
    "preset, expected",
    [
        (DateRangePreset.TODAY, (date(2025, 3, 15), date(2025, 3, 15))),
        (DateRangePreset.YESTERDAY, (date(2025, 3, 14), date(2025, 3, 14))),
        (DateRangePreset.LAST_7_DAYS, (date(2025, 3, 9), date(2025, 3, 15))),
        (DateRangePreset.LAST_30_DAYS, (date(2025, 2, 14), date(2025, 3, 15))),
        (DateRangePreset.THIS_MONTH, (date(2025, 3, 1), date(2025, 3, 31))),
    ],
)
def test_resolve_preset(preset, expected):
    assert resolve_preset(preset, date(2025, 3, 15)) == expected
