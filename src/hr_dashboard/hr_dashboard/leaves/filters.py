from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Mapping, Optional

from ..common.datetime_utils import parse_query_date
from ..common.filters import matches_date, matches_search, normalize_term
from ..core.enums import HalfDay, LeaveTypeFilter
from ..core.exceptions import ValidationError
from .model import LeaveRecord


def _matches_type(record: LeaveRecord, wanted: LeaveTypeFilter) -> bool:
    if wanted == LeaveTypeFilter.ALL:
        return True
    if wanted == LeaveTypeFilter.FULL:
        return record.is_full_day
    if wanted == LeaveTypeFilter.HALF:
        return not record.is_full_day
    return record.half_day == HalfDay(wanted.value)


@dataclass(frozen=True)
class LeaveCriteria:
    search_term: str = ""
    work_date: Optional[date] = None
    leave_type: LeaveTypeFilter = LeaveTypeFilter.ALL

    @classmethod
    def from_query(cls, args: Mapping[str, str]) -> "LeaveCriteria":
        type_s = (args.get("status") or LeaveTypeFilter.ALL.value).strip()
        try:
            leave_type = LeaveTypeFilter(type_s)
        except ValueError:
            raise ValidationError(f"Unknown leave type filter: {type_s}")

        return cls(
            search_term=args.get("search") or "",
            work_date=parse_query_date(args.get("date"), "date"),
            leave_type=leave_type,
        )


def matches(record: LeaveRecord, criteria: LeaveCriteria) -> bool:
    term = normalize_term(criteria.search_term)
    return (
        matches_search(term, record.display_name, record.username, record.reason)
        and matches_date(record.work_date, criteria.work_date)
        and _matches_type(record, criteria.leave_type)
    )


def filter_leaves(records: Iterable[LeaveRecord], criteria: LeaveCriteria) -> List[LeaveRecord]:
    return [r for r in records if matches(r, criteria)]
