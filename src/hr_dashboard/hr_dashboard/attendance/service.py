from __future__ import annotations

from datetime import date
from typing import List, Optional

from ..common.delete_flow import DeleteFlow
from ..common.paging import RecordPage
from ..common.validators import require_non_empty, require_present
from ..core.exceptions import ValidationError
from .model import AttendanceChanges, AttendanceRecord, NewAttendance
from .repository import AttendanceRepository


class AttendanceService:
    """Use cases: list/filter, create, update, delete attendance records."""

    def __init__(self, attendance: AttendanceRepository, *, admin_password: str):
        self._attendance = attendance
        self._admin_password = admin_password

    def list_page(
        self,
        *,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        work_date: Optional[date] = None,
        user_id: Optional[str] = None,
    ) -> RecordPage[AttendanceRecord]:
        return self._attendance.list_page(page=page, limit=limit, work_date=work_date, user_id=user_id)

    def list_all(self) -> List[AttendanceRecord]:
        return list(self._attendance.list_all())

    def create(
        self,
        *,
        user_id: Optional[str],
        username: Optional[str],
        display_name: Optional[str],
        work_date: Optional[date],
        first_half_present: bool,
        second_half_present: bool,
        note: Optional[str] = None,
    ) -> Optional[AttendanceRecord]:
        user_id = require_non_empty(user_id, "Employee")
        work_date = require_present(work_date, "Date")
        if not first_half_present and not second_half_present:
            raise ValidationError("Mark at least one half of the day as present")

        draft = NewAttendance(
            user_id=user_id,
            username=str(username or "").strip(),
            display_name=str(display_name or "").strip(),
            work_date=work_date,
            first_half_present=bool(first_half_present),
            second_half_present=bool(second_half_present),
            note=str(note or "").strip() or None,
        )
        return self._attendance.create(draft)

    def update(
        self,
        record_id: str,
        *,
        first_half_present: Optional[bool] = None,
        second_half_present: Optional[bool] = None,
        work_date: Optional[date] = None,
        note: Optional[str] = None,
    ) -> Optional[AttendanceRecord]:
        record_id = require_non_empty(record_id, "Record ID")
        changes = AttendanceChanges(
            first_half_present=first_half_present,
            second_half_present=second_half_present,
            work_date=work_date,
            note=str(note).strip() if note is not None else None,
        )
        if changes == AttendanceChanges():
            raise ValidationError("Nothing to update")
        return self._attendance.update(record_id, changes)

    def delete(self, record_id: Optional[str], *, password: Optional[str]) -> str:
        flow = DeleteFlow(admin_password=self._admin_password, delete=self._attendance.delete, label="attendance record")
        flow.open(record_id)
        flow.enter_password(password)
        return flow.confirm()
