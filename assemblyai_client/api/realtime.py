"""Realtime client: temporary tokens for browser/edge streaming sessions."""

from __future__ import annotations

from assemblyai_client.api.models import (
    CreateRealtimeTemporaryTokenParams,
    RealtimeTemporaryTokenResponse,
)
from assemblyai_client.api.raw_client import RawClient
from assemblyai_client.core.params import validate_params


class RealtimeClient:
    def __init__(self, client: RawClient) -> None:
        self._client = client

    async def create_temporary_token(self, expires_in: int) -> RealtimeTemporaryTokenResponse:
        """Create a short-lived token so the API key never reaches the client side.

        Args:
            expires_in: Token lifetime in seconds (at least 60).
        """
        params = validate_params(CreateRealtimeTemporaryTokenParams, expires_in=expires_in)
        body = await self._client.request_json("POST", "/v2/realtime/token", json=params.model_dump())
        return RealtimeTemporaryTokenResponse.model_validate(body)
