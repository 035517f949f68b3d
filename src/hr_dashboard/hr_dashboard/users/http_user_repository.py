from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

from ..api.connection import ApiConnection
from ..api.http_base import fetch_collection
from .model import Employee
from .repository import UserRepository

logger = logging.getLogger(__name__)


def to_employee(raw: Dict[str, Any]) -> Optional[Employee]:
    user_id = raw.get("userId") or raw.get("_id") or raw.get("id")
    if not user_id:
        logger.warning("Skipping directory entry without userId: %r", raw.get("username"))
        return None
    return Employee(
        user_id=str(user_id),
        username=str(raw.get("username") or ""),
        display_name=str(raw.get("displayName") or raw.get("username") or ""),
        email=raw.get("email") or None,
    )


class HttpUserRepository(UserRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_all(self) -> Sequence[Employee]:
        result = fetch_collection(
            self._conn,
            self._conn.url(self._conn.config.users_path),
            description="List users",
            keys=("data", "users"),
        )
        employees = (to_employee(item) for item in result.items)
        return [e for e in employees if e is not None]
