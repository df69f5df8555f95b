"""Request executor: one authenticated httpx call, one typed error on failure.

WHY: Every resource client needs the same things from HTTP: auth and SDK
headers, relative paths against the base URL, and a single error type for
non-2xx responses and transport failures. Keeping that in one place means
the resource clients only describe endpoints.

HOW: Wraps an httpx.AsyncClient. Headers are merged into every request
rather than set on the httpx client, so a caller-supplied client works
unchanged. Convenience methods decode JSON, text, or raw bytes.

RULES:
- Non-2xx responses raise RequestError(status_code, body text)
- httpx.HTTPError (connect/read/timeout) raises RequestError(None, ...)
  chained from the original exception
- Never retries
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from assemblyai_client.errors import RequestError

logger = logging.getLogger(__name__)


class RawClient:
    """Thin executor over httpx.AsyncClient used by all resource clients."""

    def __init__(self, http_client: httpx.AsyncClient, headers: Mapping[str, str]) -> None:
        self._http = http_client
        self._headers = dict(headers)

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        content: Optional[bytes] = None,
        headers: Optional[Mapping[str, str]] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """Send a request and return the response, raising RequestError on failure.

        authenticated=False omits the Authorization header, for absolute URLs
        that point outside the API (e.g. pre-signed storage links).
        """
        merged = dict(self._headers)
        if not authenticated:
            merged.pop("Authorization", None)
        if headers:
            merged.update(headers)

        logger.debug("%s %s", method, path)
        try:
            resp = await self._http.request(
                method,
                path,
                json=json,
                params=params,
                content=content,
                headers=merged,
            )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise RequestError(None, "{}: {}".format(type(exc).__name__, exc)) from exc

        if not resp.is_success:
            logger.warning("%s %s returned %s", method, path, resp.status_code)
            raise RequestError(resp.status_code, resp.text)
        return resp

    async def request_json(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        resp = await self.request(method, path, **kwargs)
        return resp.json()

    async def request_text(self, method: str, path: str, **kwargs: Any) -> str:
        resp = await self.request(method, path, **kwargs)
        return resp.text

    async def request_bytes(self, method: str, path: str, **kwargs: Any) -> bytes:
        resp = await self.request(method, path, **kwargs)
        return resp.content
