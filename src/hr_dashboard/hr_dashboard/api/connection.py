from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from ..core.constants import DEFAULT_API_TIMEOUT_SECONDS


@dataclass(frozen=True)
class ApiConfig:
    base_url: str
    attendance_path: str = "/api/hr/attendance"
    leaves_path: str = "/api/leaves"
    users_path: str = "/api/hr/users"
    timeout: float = DEFAULT_API_TIMEOUT_SECONDS

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ApiConfig":
        return cls(
            base_url=str(raw["base_url"]).rstrip("/"),
            attendance_path=str(raw.get("attendance_path") or cls.attendance_path),
            leaves_path=str(raw.get("leaves_path") or cls.leaves_path),
            users_path=str(raw.get("users_path") or cls.users_path),
            timeout=float(raw.get("timeout") or DEFAULT_API_TIMEOUT_SECONDS),
        )


class ApiConnection:
    """Shared HTTP session factory for the remote HR API.

    Note: one connection per distinct config, reused across requests (requests.Session
    keeps the underlying pool alive).
    """

    _instances: Dict[ApiConfig, "ApiConnection"] = {}

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.setdefault("Accept", "application/json")

    @classmethod
    def get_instance(cls, config: ApiConfig) -> "ApiConnection":
        if config not in cls._instances:
            cls._instances[config] = ApiConnection(config)
        return cls._instances[config]

    @property
    def config(self) -> ApiConfig:
        return self._config

    def url(self, path: str, *parts: str) -> str:
        url = f"{self._config.base_url}/{path.lstrip('/')}".rstrip("/")
        for part in parts:
            url = f"{url}/{quote(str(part), safe='')}"
        return url

    def request(self, method: str, url: str, **kwargs) -> requests.Response:
        kwargs.setdefault("timeout", self._config.timeout)
        return self._session.request(method, url, **kwargs)
