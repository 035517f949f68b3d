from __future__ import annotations

from typing import Any, Dict, Optional

from flask import Flask

from ..common.datetime_utils import format_iso, parse_query_date
from ..common.record_view import RecordView, register_record_view
from ..common.validators import parse_bool
from ..container import Container
from ..exports.layouts import ATTENDANCE_PAGE
from .filters import AttendanceCriteria, filter_attendance
from .model import AttendanceRecord


def to_json(r: AttendanceRecord) -> Dict[str, Any]:
    return {
        "id": r.record_id,
        "userId": r.user_id,
        "username": r.username,
        "displayName": r.display_name,
        "date": format_iso(r.work_date),
        "firstHalfPresent": r.first_half_present,
        "secondHalfPresent": r.second_half_present,
        "createdAt": r.created_at.isoformat() if r.created_at else None,
        "note": r.note,
        "status": r.day_status.value,
        "presence": r.presence_label,
    }


def _optional_bool(data: Dict[str, Any], key: str) -> Optional[bool]:
    return parse_bool(data[key], key) if key in data else None


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def create(data: Dict[str, Any]):
        return service.create(
            user_id=data.get("userId"),
            username=data.get("username"),
            display_name=data.get("displayName"),
            work_date=parse_query_date(data.get("date"), "Date"),
            first_half_present=parse_bool(data.get("firstHalfPresent"), "firstHalfPresent"),
            second_half_present=parse_bool(data.get("secondHalfPresent"), "secondHalfPresent"),
            note=data.get("note"),
        )

    def update(record_id: str, data: Dict[str, Any]):
        return service.update(
            record_id,
            first_half_present=_optional_bool(data, "firstHalfPresent"),
            second_half_present=_optional_bool(data, "secondHalfPresent"),
            work_date=parse_query_date(data.get("date"), "Date"),
            note=data.get("note"),
        )

    register_record_view(
        app,
        RecordView(
            domain="attendance",
            label="attendance record",
            url_prefix="/api/attendance",
            list_page=service.list_page,
            list_all=service.list_all,
            parse_criteria=AttendanceCriteria.from_query,
            apply_filter=filter_attendance,
            to_json=to_json,
            layout=ATTENDANCE_PAGE,
            create=create,
            update=update,
            delete=lambda record_id, password: service.delete(record_id, password=password),
        ),
    )
