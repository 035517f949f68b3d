from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from ..api.connection import ApiConnection
from ..api.envelope import parse_record
from ..api.http_base import fetch_all_pages, fetch_collection, send
from ..common.datetime_utils import format_iso, normalize_date, parse_timestamp
from ..common.paging import RecordPage
from ..core.constants import DEFAULT_PAGE_LIMIT
from ..core.enums import HalfDay
from .model import LeaveChanges, LeaveRecord, NewLeave
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


def parse_half_day(value: Any) -> HalfDay:
    """Unknown or missing classifications count as a half day, as the dashboard always did."""
    try:
        return HalfDay(str(value or "").strip().lower())
    except ValueError:
        return HalfDay.HALF


def to_leave_record(raw: Dict[str, Any]) -> Optional[LeaveRecord]:
    work_date = normalize_date(raw.get("date"))
    if work_date is None:
        logger.warning("Skipping leave record %s with unreadable date %r", raw.get("_id") or raw.get("id"), raw.get("date"))
        return None

    record_id = raw.get("_id") or raw.get("id")
    return LeaveRecord(
        record_id=str(record_id) if record_id else None,
        user_id=str(raw.get("userId") or ""),
        username=str(raw.get("username") or ""),
        display_name=str(raw.get("displayName") or ""),
        work_date=work_date,
        half_day=parse_half_day(raw.get("halfDay")),
        reason=str(raw.get("reason") or ""),
        created_at=parse_timestamp(raw.get("createdAt")),
    )


class HttpLeaveRepository(LeaveRepository):
    def __init__(self, conn: ApiConnection, *, page_limit: int = DEFAULT_PAGE_LIMIT):
        self._conn = conn
        self._page_limit = int(page_limit)

    @property
    def _url(self) -> str:
        return self._conn.url(self._conn.config.leaves_path)

    @staticmethod
    def _filters(work_date: Optional[date], user_id: Optional[str]) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if work_date:
            params["date"] = format_iso(work_date)
        if user_id:
            params["userId"] = user_id
        return params

    @staticmethod
    def _to_records(items: List[Dict[str, Any]]) -> List[LeaveRecord]:
        records = (to_leave_record(item) for item in items)
        return [r for r in records if r is not None]

    def list_page(
        self,
        *,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        work_date: Optional[date] = None,
        user_id: Optional[str] = None,
    ) -> RecordPage[LeaveRecord]:
        params = self._filters(work_date, user_id)
        if page:
            params["page"] = int(page)
        if limit:
            params["limit"] = int(limit)

        result = fetch_collection(self._conn, self._url, description="List leaves", params=params)
        return RecordPage(items=self._to_records(result.items), pagination=result.pagination)

    def list_all(self, *, work_date: Optional[date] = None, user_id: Optional[str] = None) -> Sequence[LeaveRecord]:
        items = fetch_all_pages(
            self._conn,
            self._url,
            description="List leaves",
            params=self._filters(work_date, user_id),
            limit=self._page_limit,
        )
        return self._to_records(items)

    def create(self, draft: NewLeave) -> Optional[LeaveRecord]:
        payload = {
            "userId": draft.user_id,
            "username": draft.username,
            "displayName": draft.display_name,
            "date": format_iso(draft.work_date),
            "halfDay": draft.half_day.value,
            "reason": draft.reason,
        }
        body = send(self._conn, "POST", self._url, description="Create leave", json=payload)
        raw = parse_record(body)
        return to_leave_record(raw) if raw else None

    def update(self, record_id: str, changes: LeaveChanges) -> Optional[LeaveRecord]:
        payload: Dict[str, Any] = {}
        if changes.half_day is not None:
            payload["halfDay"] = changes.half_day.value
        if changes.work_date is not None:
            payload["date"] = format_iso(changes.work_date)
        if changes.reason is not None:
            payload["reason"] = changes.reason

        body = send(
            self._conn,
            "PUT",
            self._conn.url(self._conn.config.leaves_path, record_id),
            description="Update leave",
            json=payload,
        )
        raw = parse_record(body)
        return to_leave_record(raw) if raw else None

    def delete(self, record_id: str) -> None:
        send(
            self._conn,
            "DELETE",
            self._conn.url(self._conn.config.leaves_path, record_id),
            description="Delete leave",
        )
