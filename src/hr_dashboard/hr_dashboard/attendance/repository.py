from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..common.paging import RecordPage
from .model import AttendanceChanges, AttendanceRecord, NewAttendance


class AttendanceRepository(Protocol):
    """Repository interface for attendance records.

    Note (DIP): services depend on this interface, not on the HTTP implementation.
    """

    def list_page(
        self,
        *,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        work_date: Optional[date] = None,
        user_id: Optional[str] = None,
    ) -> RecordPage[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self, *, work_date: Optional[date] = None, user_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(self, draft: NewAttendance) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def update(self, record_id: str, changes: AttendanceChanges) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def delete(self, record_id: str) -> None:
        raise NotImplementedError
