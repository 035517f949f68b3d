from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..common.paging import RecordPage
from .model import LeaveChanges, LeaveRecord, NewLeave


class LeaveRepository(Protocol):
    def list_page(
        self,
        *,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        work_date: Optional[date] = None,
        user_id: Optional[str] = None,
    ) -> RecordPage[LeaveRecord]:
        raise NotImplementedError

    def list_all(self, *, work_date: Optional[date] = None, user_id: Optional[str] = None) -> Sequence[LeaveRecord]:
        raise NotImplementedError

    def create(self, draft: NewLeave) -> Optional[LeaveRecord]:
        raise NotImplementedError

    def update(self, record_id: str, changes: LeaveChanges) -> Optional[LeaveRecord]:
        raise NotImplementedError

    def delete(self, record_id: str) -> None:
        raise NotImplementedError
