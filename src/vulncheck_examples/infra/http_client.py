from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from ..core.errors import ApiError

logger = logging.getLogger(__name__)

Params = Optional[Mapping[str, str]]


class HttpClient:
    def __init__(
        self,
        base_headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 20.0,
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers=dict(base_headers or {}),
            follow_redirects=True,
            max_redirects=10
        )

    def _get(self, url: str, params: Params) -> httpx.Response:
        logger.debug("GET %s params=%s", url, dict(params or {}))
        resp = self._client.get(url, params=dict(params or {}))
        if resp.status_code != 200:
            raise ApiError(resp.status_code, str(resp.url), resp.text)
        return resp

    def get_json(self, url: str, params: Params = None) -> dict:
        resp = self._get(url, params)
        data = resp.json()
        if not isinstance(data, dict):
            raise TypeError("HttpClient invariant violated: expected JSON object")
        return data

    def get_text(self, url: str, params: Params = None) -> str:
        return self._get(url, params).text

    def close(self) -> None:
        self._client.close()
