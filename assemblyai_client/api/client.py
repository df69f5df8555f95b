"""Top-level async client for the AssemblyAI API.

WHY: Callers want one object that holds the API key and the HTTP
connection pool, and exposes every resource (files, transcripts, lemur,
realtime) as an attribute.

HOW: Builds a single httpx.AsyncClient (or uses the caller's) and a
RawClient carrying the auth and SDK headers, then hands that RawClient to
each resource client. Use as an async context manager, or call aclose()
when done, to release the connection pool.

RULES:
- api_key defaults to load_api_key(); an empty key raises ArgumentError
- base_url defaults to ASSEMBLYAI_BASE_URL from config
- A caller-supplied http_client is never closed by this client
"""

from __future__ import annotations

from typing import Dict

import httpx

from assemblyai_client.api.files import FilesClient
from assemblyai_client.api.lemur import LemurClient
from assemblyai_client.api.raw_client import RawClient
from assemblyai_client.api.realtime import RealtimeClient
from assemblyai_client.api.transcripts import TranscriptsClient
from assemblyai_client.config import (
    ASSEMBLYAI_BASE_URL,
    DEFAULT_CONNECT_TIMEOUT_S,
    DEFAULT_REQUEST_TIMEOUT_S,
    SDK_LANGUAGE,
    SDK_NAME,
    load_api_key,
    sdk_version,
    user_agent,
)
from assemblyai_client.errors import ArgumentError


class AssemblyAIClient:
    """Entry point: ``async with AssemblyAIClient() as client: ...``."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
        user_agent_suffix: str | None = None,
    ) -> None:
        if api_key is not None and not api_key.strip():
            raise ArgumentError("AssemblyAI API key is required.")
        self._api_key = api_key.strip() if api_key else load_api_key()
        self._base_url = (base_url or ASSEMBLYAI_BASE_URL).rstrip("/")

        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(timeout or DEFAULT_REQUEST_TIMEOUT_S, connect=DEFAULT_CONNECT_TIMEOUT_S),
            )
        self._http = http_client

        raw = RawClient(self._http, self._default_headers(user_agent_suffix))
        self.files = FilesClient(raw)
        self.transcripts = TranscriptsClient(raw, self.files)
        self.lemur = LemurClient(raw)
        self.realtime = RealtimeClient(raw)

    def _default_headers(self, user_agent_suffix: str | None) -> Dict[str, str]:
        return {
            "Authorization": self._api_key,
            "User-Agent": user_agent(user_agent_suffix),
            "X-SDK-Name": SDK_NAME,
            "X-SDK-Language": SDK_LANGUAGE,
            "X-SDK-Version": sdk_version(),
        }

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> AssemblyAIClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.aclose()
