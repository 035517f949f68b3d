from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when a sign-in is rejected."""


class AuthorizationError(DomainError):
    """Raised when an action needs a credential the caller did not supply."""


class NotFoundError(DomainError):
    """Raised when a record or employee does not exist."""


class ApiError(DomainError):
    """Raised when the remote HR API fails (transport error or non-2xx)."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
