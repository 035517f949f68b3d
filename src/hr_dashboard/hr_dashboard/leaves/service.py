from __future__ import annotations

from datetime import date
from typing import List, Optional

from ..common.delete_flow import DeleteFlow
from ..common.paging import RecordPage
from ..common.validators import require_non_empty, require_present
from ..core.enums import HalfDay
from ..core.exceptions import ValidationError
from .model import LeaveChanges, LeaveRecord, NewLeave
from .repository import LeaveRepository


def parse_leave_type(value: Optional[str]) -> HalfDay:
    try:
        return HalfDay(str(value or "").strip().lower())
    except ValueError:
        raise ValidationError("Leave type must be one of: full, first, second, half")


class LeaveService:
    """Use cases: list/filter, create, update, delete leave records."""

    def __init__(self, leaves: LeaveRepository, *, admin_password: str):
        self._leaves = leaves
        self._admin_password = admin_password

    def list_page(
        self,
        *,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        work_date: Optional[date] = None,
        user_id: Optional[str] = None,
    ) -> RecordPage[LeaveRecord]:
        return self._leaves.list_page(page=page, limit=limit, work_date=work_date, user_id=user_id)

    def list_all(self) -> List[LeaveRecord]:
        return list(self._leaves.list_all())

    def create(
        self,
        *,
        user_id: Optional[str],
        username: Optional[str],
        display_name: Optional[str],
        work_date: Optional[date],
        half_day: Optional[str],
        reason: Optional[str],
    ) -> Optional[LeaveRecord]:
        user_id = require_non_empty(user_id, "Employee")
        work_date = require_present(work_date, "Date")

        draft = NewLeave(
            user_id=user_id,
            username=str(username or "").strip(),
            display_name=str(display_name or "").strip(),
            work_date=work_date,
            half_day=parse_leave_type(half_day),
            reason=str(reason or "").strip(),
        )
        return self._leaves.create(draft)

    def update(
        self,
        record_id: str,
        *,
        half_day: Optional[str] = None,
        work_date: Optional[date] = None,
        reason: Optional[str] = None,
    ) -> Optional[LeaveRecord]:
        record_id = require_non_empty(record_id, "Record ID")
        changes = LeaveChanges(
            half_day=parse_leave_type(half_day) if half_day is not None else None,
            work_date=work_date,
            reason=str(reason).strip() if reason is not None else None,
        )
        if changes == LeaveChanges():
            raise ValidationError("Nothing to update")
        return self._leaves.update(record_id, changes)

    def delete(self, record_id: Optional[str], *, password: Optional[str]) -> str:
        flow = DeleteFlow(admin_password=self._admin_password, delete=self._leaves.delete, label="leave record")
        flow.open(record_id)
        flow.enter_password(password)
        return flow.confirm()
