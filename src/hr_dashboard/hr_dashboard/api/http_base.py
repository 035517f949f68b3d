from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence

import requests

from ..core.constants import MAX_FETCH_PAGES
from ..core.exceptions import ApiError
from .connection import ApiConnection
from .envelope import ApiResult, parse_collection

logger = logging.getLogger(__name__)


@contextmanager
def api_call(description: str) -> Iterator[None]:
    """Translate transport failures into :class:`ApiError`."""

    try:
        yield
    except requests.Timeout as e:
        raise ApiError(f"{description}: request timed out") from e
    except requests.RequestException as e:
        raise ApiError(f"{description}: {e}") from e


def raise_for_status(resp: requests.Response, description: str) -> None:
    if 200 <= resp.status_code < 300:
        return
    reason = resp.reason or ""
    raise ApiError(
        f"{description}: {resp.status_code} {reason}".strip(),
        status_code=resp.status_code,
    )


def read_json(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        logger.warning("Non-JSON body from %s (status=%s)", resp.url, resp.status_code)
        return None


def send(
    conn: ApiConnection,
    method: str,
    url: str,
    *,
    description: str,
    params: Optional[Dict[str, Any]] = None,
    json: Optional[Dict[str, Any]] = None,
) -> Any:
    with api_call(description):
        resp = conn.request(method, url, params=params, json=json)
    logger.debug("%s %s -> %s", method, url, resp.status_code)
    raise_for_status(resp, description)
    return read_json(resp)


def fetch_collection(
    conn: ApiConnection,
    url: str,
    *,
    description: str,
    params: Optional[Dict[str, Any]] = None,
    keys: Sequence[str] = ("data",),
) -> ApiResult:
    payload = send(conn, "GET", url, description=description, params=params)
    result = parse_collection(payload, keys=keys)
    if not result.ok:
        logger.warning("%s: malformed response (%s), using empty list", description, result.error)
    return result


def fetch_all_pages(
    conn: ApiConnection,
    url: str,
    *,
    description: str,
    params: Optional[Dict[str, Any]] = None,
    limit: int,
    keys: Sequence[str] = ("data",),
) -> List[Dict[str, Any]]:
    """Follow ``pagination`` until the last page. Bare arrays are a single page.

    The page counter is local. Paging stops when the echoed ``currentPage``
    differs from the page asked for, or after ``MAX_FETCH_PAGES``.
    """

    items: List[Dict[str, Any]] = []
    page = 1
    while page <= MAX_FETCH_PAGES:
        query = dict(params or {})
        query.update({"page": page, "limit": limit})
        result = fetch_collection(conn, url, description=description, params=query, keys=keys)
        items.extend(result.items)

        pagination = result.pagination
        if not pagination or not result.items:
            break
        if pagination.current_page != page or page >= pagination.total_pages:
            break
        page += 1
    else:
        logger.warning("%s: stopped after %s pages", description, MAX_FETCH_PAGES)
    return items
