"""Single parsing boundary for HR API payloads.

The API answers collections as a bare JSON array, as an envelope
``{success, data, pagination}``, or (user directory) as ``{success, users}``.
Everything is normalized into an :class:`ApiResult` here so repositories never
branch on payload shapes themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence


@dataclass(frozen=True)
class Pagination:
    current_page: int
    total_pages: int
    total_records: int
    limit: int

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @classmethod
    def from_payload(cls, raw: Any) -> Optional["Pagination"]:
        if not isinstance(raw, dict):
            return None
        try:
            return cls(
                current_page=int(raw.get("currentPage") or 1),
                total_pages=int(raw.get("totalPages") or 1),
                total_records=int(raw.get("totalRecords") or 0),
                limit=int(raw.get("limit") or 0),
            )
        except (TypeError, ValueError):
            return None

    def to_dict(self) -> dict:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalRecords": self.total_records,
            "limit": self.limit,
        }


@dataclass(frozen=True)
class ApiResult:
    """Tagged result: ``ok`` with items, or a failure with an error message."""

    ok: bool
    items: List[Dict[str, Any]] = field(default_factory=list)
    pagination: Optional[Pagination] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, items: List[Dict[str, Any]], pagination: Optional[Pagination] = None) -> "ApiResult":
        return cls(ok=True, items=items, pagination=pagination)

    @classmethod
    def failure(cls, error: str) -> "ApiResult":
        return cls(ok=False, error=error)


def parse_collection(payload: Any, *, keys: Sequence[str] = ("data",)) -> ApiResult:
    if isinstance(payload, list):
        return ApiResult.success([item for item in payload if isinstance(item, dict)])

    if not isinstance(payload, dict):
        return ApiResult.failure(f"unexpected payload type {type(payload).__name__}")

    if payload.get("success") is False:
        return ApiResult.failure(str(payload.get("message") or payload.get("error") or "request was not successful"))

    for key in keys:
        items = payload.get(key)
        if isinstance(items, list):
            return ApiResult.success(
                [item for item in items if isinstance(item, dict)],
                Pagination.from_payload(payload.get("pagination")),
            )

    return ApiResult.failure(f"missing collection key (expected one of {', '.join(keys)})")


def parse_record(payload: Any, *, keys: Sequence[str] = ("data",)) -> Optional[Dict[str, Any]]:
    """Extract the single record returned by a create/update call, if any."""

    if not isinstance(payload, dict):
        return None
    for key in keys:
        inner = payload.get(key)
        if isinstance(inner, dict):
            return inner
    if "_id" in payload or "id" in payload:
        return payload
    return None
