from __future__ import annotations

from typing import Any, Dict

from flask import Flask

from ..common.datetime_utils import format_iso, parse_query_date
from ..common.record_view import RecordView, register_record_view
from ..container import Container
from ..exports.layouts import LEAVES_PAGE
from .filters import LeaveCriteria, filter_leaves
from .model import LeaveRecord


def to_json(r: LeaveRecord) -> Dict[str, Any]:
    return {
        "id": r.record_id,
        "userId": r.user_id,
        "username": r.username,
        "displayName": r.display_name,
        "date": format_iso(r.work_date),
        "halfDay": r.half_day.value,
        "leaveType": r.leave_type_label,
        "reason": r.reason,
        "createdAt": r.created_at.isoformat() if r.created_at else None,
    }


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    def create(data: Dict[str, Any]):
        return service.create(
            user_id=data.get("userId"),
            username=data.get("username"),
            display_name=data.get("displayName"),
            work_date=parse_query_date(data.get("date"), "Date"),
            half_day=data.get("halfDay"),
            reason=data.get("reason"),
        )

    def update(record_id: str, data: Dict[str, Any]):
        return service.update(
            record_id,
            half_day=data.get("halfDay"),
            work_date=parse_query_date(data.get("date"), "Date"),
            reason=data.get("reason"),
        )

    register_record_view(
        app,
        RecordView(
            domain="leaves",
            label="leave record",
            url_prefix="/api/leaves",
            list_page=service.list_page,
            list_all=service.list_all,
            parse_criteria=LeaveCriteria.from_query,
            apply_filter=filter_leaves,
            to_json=to_json,
            layout=LEAVES_PAGE,
            create=create,
            update=update,
            delete=lambda record_id, password: service.delete(record_id, password=password),
        ),
    )
