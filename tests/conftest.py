from __future__ import annotations

import itertools
from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.hr_dashboard.hr_dashboard.attendance.model import AttendanceChanges, AttendanceRecord, NewAttendance
from src.hr_dashboard.hr_dashboard.common.paging import RecordPage
from src.hr_dashboard.hr_dashboard.core.enums import HalfDay
from src.hr_dashboard.hr_dashboard.core.exceptions import ApiError
from src.hr_dashboard.hr_dashboard.leaves.model import LeaveChanges, LeaveRecord, NewLeave
from src.hr_dashboard.hr_dashboard.users.model import Employee


def make_attendance(
    user_id: str = "u1",
    work_date: date = date(2025, 3, 3),
    first: bool = True,
    second: bool = True,
    *,
    record_id: Optional[str] = None,
    name: Optional[str] = None,
    username: Optional[str] = None,
    created_at: Optional[datetime] = None,
    note: Optional[str] = None,
) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=record_id or f"a-{user_id}-{work_date.isoformat()}",
        user_id=user_id,
        username=username or f"user{user_id}",
        display_name=name or f"User {user_id}",
        work_date=work_date,
        first_half_present=first,
        second_half_present=second,
        created_at=created_at,
        note=note,
    )


def make_leave(
    user_id: str = "u1",
    work_date: date = date(2025, 3, 4),
    half_day: HalfDay = HalfDay.FULL,
    *,
    record_id: Optional[str] = None,
    name: Optional[str] = None,
    username: Optional[str] = None,
    reason: str = "Personal",
    created_at: Optional[datetime] = None,
) -> LeaveRecord:
    return LeaveRecord(
        record_id=record_id or f"l-{user_id}-{work_date.isoformat()}",
        user_id=user_id,
        username=username or f"user{user_id}",
        display_name=name or f"User {user_id}",
        work_date=work_date,
        half_day=half_day,
        reason=reason,
        created_at=created_at,
    )


class InMemoryAttendance:
    def __init__(self, records=()):
        self.records = {r.record_id: r for r in records}
        self.calls = []
        self.fail_with: Optional[ApiError] = None
        self._ids = itertools.count(1)

    def _check(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with:
            raise self.fail_with

    def list_page(self, *, page=None, limit=None, work_date=None, user_id=None):
        self._check("list_page")
        items = [r for r in self.records.values() if work_date is None or r.work_date == work_date]
        return RecordPage(items=items)

    def list_all(self, *, work_date=None, user_id=None):
        self._check("list_all")
        return list(self.records.values())

    def create(self, draft: NewAttendance):
        self._check("create")
        record = AttendanceRecord(
            record_id=f"new-{next(self._ids)}",
            user_id=draft.user_id,
            username=draft.username,
            display_name=draft.display_name,
            work_date=draft.work_date,
            first_half_present=draft.first_half_present,
            second_half_present=draft.second_half_present,
            note=draft.note,
        )
        self.records[record.record_id] = record
        return record

    def update(self, record_id: str, changes: AttendanceChanges):
        self._check("update")
        current = self.records.get(record_id)
        if current is None:
            raise ApiError("Update attendance: 404 Not Found", status_code=404)
        updated = replace(current, **{k: v for k, v in vars(changes).items() if v is not None})
        self.records[record_id] = updated
        return updated

    def delete(self, record_id: str) -> None:
        self._check("delete")
        self.records.pop(record_id, None)


class InMemoryLeaves:
    def __init__(self, records=()):
        self.records = {r.record_id: r for r in records}
        self.calls = []
        self.fail_with: Optional[ApiError] = None
        self._ids = itertools.count(1)

    def _check(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with:
            raise self.fail_with

    def list_page(self, *, page=None, limit=None, work_date=None, user_id=None):
        self._check("list_page")
        return RecordPage(items=list(self.records.values()))

    def list_all(self, *, work_date=None, user_id=None):
        self._check("list_all")
        return list(self.records.values())

    def create(self, draft: NewLeave):
        self._check("create")
        record = LeaveRecord(
            record_id=f"new-{next(self._ids)}",
            user_id=draft.user_id,
            username=draft.username,
            display_name=draft.display_name,
            work_date=draft.work_date,
            half_day=draft.half_day,
            reason=draft.reason,
        )
        self.records[record.record_id] = record
        return record

    def update(self, record_id: str, changes: LeaveChanges):
        self._check("update")
        current = self.records.get(record_id)
        if current is None:
            raise ApiError("Update leave: 404 Not Found", status_code=404)
        updated = replace(current, **{k: v for k, v in vars(changes).items() if v is not None})
        self.records[record_id] = updated
        return updated

    def delete(self, record_id: str) -> None:
        self._check("delete")
        self.records.pop(record_id, None)


class InMemoryUsers:
    def __init__(self, employees=()):
        self.employees = list(employees)
        self.fail_with: Optional[ApiError] = None

    def list_all(self):
        if self.fail_with:
            raise self.fail_with
        return list(self.employees)


def make_employee(user_id: str = "u1", name: Optional[str] = None) -> Employee:
    return Employee(user_id=user_id, username=f"user{user_id}", display_name=name or f"User {user_id}")


@pytest.fixture
def attendance_factory():
    return make_attendance


@pytest.fixture
def leave_factory():
    return make_leave


@pytest.fixture
def employee_factory():
    return make_employee


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def leaves_repo():
    return InMemoryLeaves()


@pytest.fixture
def users_repo():
    return InMemoryUsers()
