from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from ..api.envelope import Pagination

T = TypeVar("T")


@dataclass(frozen=True)
class RecordPage(Generic[T]):
    items: List[T] = field(default_factory=list)
    pagination: Optional[Pagination] = None
