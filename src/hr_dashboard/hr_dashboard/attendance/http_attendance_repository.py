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
from .model import AttendanceChanges, AttendanceRecord, NewAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def to_attendance_record(raw: Dict[str, Any]) -> Optional[AttendanceRecord]:
    work_date = normalize_date(raw.get("date"))
    if work_date is None:
        logger.warning("Skipping attendance record %s with unreadable date %r", raw.get("_id") or raw.get("id"), raw.get("date"))
        return None

    record_id = raw.get("_id") or raw.get("id")
    return AttendanceRecord(
        record_id=str(record_id) if record_id else None,
        user_id=str(raw.get("userId") or ""),
        username=str(raw.get("username") or ""),
        display_name=str(raw.get("displayName") or ""),
        work_date=work_date,
        first_half_present=bool(raw.get("firstHalfPresent")),
        second_half_present=bool(raw.get("secondHalfPresent")),
        created_at=parse_timestamp(raw.get("createdAt")),
        note=raw.get("note") or None,
    )


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, conn: ApiConnection, *, page_limit: int = DEFAULT_PAGE_LIMIT):
        self._conn = conn
        self._page_limit = int(page_limit)

    @property
    def _url(self) -> str:
        return self._conn.url(self._conn.config.attendance_path)

    @staticmethod
    def _filters(work_date: Optional[date], user_id: Optional[str]) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if work_date:
            params["date"] = format_iso(work_date)
        if user_id:
            params["userId"] = user_id
        return params

    @staticmethod
    def _to_records(items: List[Dict[str, Any]]) -> List[AttendanceRecord]:
        records = (to_attendance_record(item) for item in items)
        return [r for r in records if r is not None]

    def list_page(
        self,
        *,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        work_date: Optional[date] = None,
        user_id: Optional[str] = None,
    ) -> RecordPage[AttendanceRecord]:
        params = self._filters(work_date, user_id)
        if page:
            params["page"] = int(page)
        if limit:
            params["limit"] = int(limit)

        result = fetch_collection(self._conn, self._url, description="List attendance", params=params)
        return RecordPage(items=self._to_records(result.items), pagination=result.pagination)

    def list_all(self, *, work_date: Optional[date] = None, user_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        items = fetch_all_pages(
            self._conn,
            self._url,
            description="List attendance",
            params=self._filters(work_date, user_id),
            limit=self._page_limit,
        )
        return self._to_records(items)

    def create(self, draft: NewAttendance) -> Optional[AttendanceRecord]:
        payload = {
            "userId": draft.user_id,
            "username": draft.username,
            "displayName": draft.display_name,
            "date": format_iso(draft.work_date),
            "firstHalfPresent": draft.first_half_present,
            "secondHalfPresent": draft.second_half_present,
        }
        if draft.note:
            payload["note"] = draft.note

        body = send(self._conn, "POST", self._url, description="Create attendance", json=payload)
        raw = parse_record(body)
        return to_attendance_record(raw) if raw else None

    def update(self, record_id: str, changes: AttendanceChanges) -> Optional[AttendanceRecord]:
        payload: Dict[str, Any] = {}
        if changes.first_half_present is not None:
            payload["firstHalfPresent"] = changes.first_half_present
        if changes.second_half_present is not None:
            payload["secondHalfPresent"] = changes.second_half_present
        if changes.work_date is not None:
            payload["date"] = format_iso(changes.work_date)
        if changes.note is not None:
            payload["note"] = changes.note

        body = send(
            self._conn,
            "PUT",
            self._conn.url(self._conn.config.attendance_path, record_id),
            description="Update attendance",
            json=payload,
        )
        raw = parse_record(body)
        return to_attendance_record(raw) if raw else None

    def delete(self, record_id: str) -> None:
        send(
            self._conn,
            "DELETE",
            self._conn.url(self._conn.config.attendance_path, record_id),
            description="Delete attendance",
        )
