from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: an entry of the remote user directory."""

    user_id: str
    username: str
    display_name: str
    email: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "username": self.username,
            "displayName": self.display_name,
            "email": self.email,
        }


@dataclass
class EmployeeOverview:
    """Read-model for the employee list (counts and today's status)."""

    user_id: str
    username: str
    display_name: str
    attendance_count: int = 0
    leave_count: int = 0
    last_seen: Optional[date] = None
    status: EmployeeStatus = EmployeeStatus.ABSENT

    def seen(self, day: date) -> None:
        if self.last_seen is None or day > self.last_seen:
            self.last_seen = day
