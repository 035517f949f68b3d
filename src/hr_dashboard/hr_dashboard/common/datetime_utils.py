from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Optional, Tuple, Union

from ..core.constants import ISO_DATE_FORMAT
from ..core.enums import DateRangePreset
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def normalize_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """Coerce the API's date field into a calendar date.

    The HR API sends either ``2025-03-01`` or a full ISO timestamp such as
    ``2025-03-01T00:00:00.000Z``. Only the calendar part is kept.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None
    try:
        return parse_iso_date(text[:10])
    except ValueError:
        return None


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_iso(value: Optional[date]) -> str:
    return value.strftime(ISO_DATE_FORMAT) if value else ""


def parse_query_date(value: Optional[str], field_name: str) -> Optional[date]:
    """Parse an optional ``yyyy-MM-dd`` query parameter."""

    v = (value or "").strip()
    if not v:
        return None
    try:
        return parse_iso_date(v)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (yyyy-MM-dd)")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def month_bounds(day: date) -> Tuple[date, date]:
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def resolve_preset(preset: DateRangePreset, today: date) -> Tuple[date, date]:
    """Turn a named range into an inclusive (from, to) pair."""

    if preset == DateRangePreset.TODAY:
        return today, today
    if preset == DateRangePreset.YESTERDAY:
        yesterday = today - timedelta(days=1)
        return yesterday, yesterday
    if preset == DateRangePreset.LAST_7_DAYS:
        return today - timedelta(days=6), today
    if preset == DateRangePreset.LAST_30_DAYS:
        return today - timedelta(days=29), today
    return month_bounds(today)
