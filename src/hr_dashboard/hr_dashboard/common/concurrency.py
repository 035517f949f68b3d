from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping

from ..core.constants import DEFAULT_FETCH_WORKERS
from ..core.exceptions import ApiError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchOutcome:
    values: Dict[str, List[Any]] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    def __getitem__(self, name: str) -> List[Any]:
        return self.values.get(name, [])

    @property
    def ok(self) -> bool:
        return not self.errors


def fetch_concurrently(
    calls: Mapping[str, Callable[[], Iterable[Any]]],
    *,
    max_workers: int = DEFAULT_FETCH_WORKERS,
) -> FetchOutcome:
    """Run independent list fetches in parallel and wait for all of them.

    A failed fetch falls back to an empty list; its message is kept in ``errors``.
    """

    values: Dict[str, List[Any]] = {}
    errors: Dict[str, str] = {}
    if not calls:
        return FetchOutcome(values, errors)

    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(calls)))) as pool:
        futures = {name: pool.submit(fn) for name, fn in calls.items()}
        for name, future in futures.items():
            try:
                values[name] = list(future.result())
            except ApiError as e:
                logger.warning("Fetching %s failed: %s", name, e)
                values[name] = []
                errors[name] = str(e)

    return FetchOutcome(values, errors)
