from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from ..common.datetime_utils import parse_query_date
from ..common.filters import matches_date, matches_search, normalize_term
from ..core.enums import AttendanceStatusFilter
from ..core.exceptions import ValidationError
from .model import AttendanceRecord

_STATUS_PREDICATES: Dict[AttendanceStatusFilter, Callable[[AttendanceRecord], bool]] = {
    AttendanceStatusFilter.ALL: lambda r: True,
    AttendanceStatusFilter.FULL: lambda r: r.is_full_day,
    AttendanceStatusFilter.HALF: lambda r: r.is_half_day,
    AttendanceStatusFilter.FIRST_HALF: lambda r: r.first_half_present,
    AttendanceStatusFilter.SECOND_HALF: lambda r: r.second_half_present,
    AttendanceStatusFilter.ABSENT: lambda r: r.is_absent,
}


@dataclass(frozen=True)
class AttendanceCriteria:
    search_term: str = ""
    work_date: Optional[date] = None
    status: AttendanceStatusFilter = AttendanceStatusFilter.ALL

    @classmethod
    def from_query(cls, args: Mapping[str, str]) -> "AttendanceCriteria":
        status_s = (args.get("status") or AttendanceStatusFilter.ALL.value).strip()
        try:
            status = AttendanceStatusFilter(status_s)
        except ValueError:
            raise ValidationError(f"Unknown attendance status filter: {status_s}")

        return cls(
            search_term=args.get("search") or "",
            work_date=parse_query_date(args.get("date"), "date"),
            status=status,
        )


def matches(record: AttendanceRecord, criteria: AttendanceCriteria) -> bool:
    term = normalize_term(criteria.search_term)
    return (
        matches_search(term, record.display_name, record.username)
        and matches_date(record.work_date, criteria.work_date)
        and _STATUS_PREDICATES[criteria.status](record)
    )


def filter_attendance(records: Iterable[AttendanceRecord], criteria: AttendanceCriteria) -> List[AttendanceRecord]:
    return [r for r in records if matches(r, criteria)]
