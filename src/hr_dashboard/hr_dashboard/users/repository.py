from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class UserRepository(Protocol):
    """Read-only view of the remote user directory."""

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError
