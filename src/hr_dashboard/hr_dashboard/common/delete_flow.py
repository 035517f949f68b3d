from __future__ import annotations

import hmac
import logging
from enum import Enum
from typing import Callable, Optional

from ..core.exceptions import ApiError, AuthorizationError, ValidationError

logger = logging.getLogger(__name__)


class DeleteState(str, Enum):
    IDLE = "idle"
    CONFIRM_DIALOG_OPEN = "confirm_dialog_open"
    PASSWORD_ENTERED = "password_entered"
    DELETING = "deleting"


class DeleteFlow:
    """Password-confirmed delete of one record.

    Idle -> ConfirmDialogOpen -> PasswordEntered -> Deleting -> Idle.
    A wrong password goes straight back to Idle without touching the record.
    """

    def __init__(self, *, admin_password: str, delete: Callable[[str], None], label: str = "record"):
        self._admin_password = admin_password or ""
        self._delete = delete
        self._label = label
        self._state = DeleteState.IDLE
        self._record_id: Optional[str] = None
        self._password: Optional[str] = None

    @property
    def state(self) -> DeleteState:
        return self._state

    def _reset(self) -> None:
        self._state = DeleteState.IDLE
        self._record_id = None
        self._password = None

    def open(self, record_id: Optional[str]) -> None:
        if self._state != DeleteState.IDLE:
            raise ValidationError("A delete is already in progress")
        self._record_id = (record_id or "").strip() or None
        self._state = DeleteState.CONFIRM_DIALOG_OPEN

    def enter_password(self, password: Optional[str]) -> None:
        if self._state not in {DeleteState.CONFIRM_DIALOG_OPEN, DeleteState.PASSWORD_ENTERED}:
            raise ValidationError("No delete confirmation is open")
        self._password = password or ""
        self._state = DeleteState.PASSWORD_ENTERED

    def cancel(self) -> None:
        self._reset()

    def confirm(self) -> str:
        """Run the delete. Returns the deleted record id."""

        if self._state != DeleteState.PASSWORD_ENTERED:
            raise ValidationError("Enter the admin password first")

        # Empty configured password never matches.
        ok = bool(self._admin_password) and hmac.compare_digest(
            (self._password or "").encode("utf-8"), self._admin_password.encode("utf-8")
        )
        if not ok:
            self._reset()
            raise AuthorizationError("Please enter the correct admin password.")

        record_id = self._record_id
        if not record_id:
            self._reset()
            raise ValidationError("Could not find record ID. Please try again.")

        self._state = DeleteState.DELETING
        try:
            self._delete(record_id)
        except ApiError:
            logger.warning("Deleting %s %s failed", self._label, record_id)
            raise
        finally:
            self._reset()

        logger.info("Deleted %s %s", self._label, record_id)
        return record_id
