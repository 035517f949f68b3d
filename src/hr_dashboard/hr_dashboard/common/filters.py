"""Predicates shared by the attendance and leave filter engines.

All filters are pure: they never mutate or invent records.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional, Protocol, TypeVar


class HasEmployee(Protocol):
    username: str
    display_name: str


class Dated(Protocol):
    work_date: date


D = TypeVar("D", bound=Dated)


def normalize_term(term: Optional[str]) -> str:
    return (term or "").strip().lower()


def matches_search(term: str, *fields: Optional[str]) -> bool:
    """Case-insensitive substring match against any field. Empty term matches all."""
    if not term:
        return True
    return any(term in (f or "").lower() for f in fields)


def matches_date(value: date, wanted: Optional[date]) -> bool:
    return wanted is None or value == wanted


def in_window(value: date, start: Optional[date], end: Optional[date]) -> bool:
    if start and value < start:
        return False
    if end and value > end:
        return False
    return True


def within_window(records: Iterable[D], start: Optional[date], end: Optional[date]) -> List[D]:
    return [r for r in records if in_window(r.work_date, start, end)]
