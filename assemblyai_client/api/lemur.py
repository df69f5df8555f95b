"""LeMUR client: run LLM prompts over completed transcripts.

RULES:
- Requests are POSTed as JSON with unset fields omitted
- get_response() returns a question-answer response when "response" is a
  list, otherwise a string response
"""

from __future__ import annotations

import logging
from typing import Type, TypeVar

from pydantic import BaseModel

from assemblyai_client.api.lemur_models import (
    LemurActionItemsParams,
    LemurBaseResponse,
    LemurQuestionAnswerParams,
    LemurQuestionAnswerResponse,
    LemurResponse,
    LemurStringResponse,
    LemurSummaryParams,
    LemurTaskParams,
    PurgeLemurRequestDataResponse,
)
from assemblyai_client.api.raw_client import RawClient

logger = logging.getLogger(__name__)

_BASE_PATH = "/lemur/v3"

ResponseT = TypeVar("ResponseT", bound=LemurBaseResponse)


class LemurClient:
    """Client for the /lemur/v3 endpoints."""

    def __init__(self, client: RawClient) -> None:
        self._client = client

    async def task(self, params: LemurTaskParams) -> LemurStringResponse:
        """Run a custom prompt over the given transcripts."""
        return await self._generate("task", params, LemurStringResponse)

    async def summary(self, params: LemurSummaryParams) -> LemurStringResponse:
        return await self._generate("summary", params, LemurStringResponse)

    async def question_answer(self, params: LemurQuestionAnswerParams) -> LemurQuestionAnswerResponse:
        return await self._generate("question-answer", params, LemurQuestionAnswerResponse)

    async def action_items(self, params: LemurActionItemsParams) -> LemurStringResponse:
        return await self._generate("action-items", params, LemurStringResponse)

    async def get_response(self, request_id: str) -> LemurResponse:
        """Retrieve a previously generated LeMUR response by request id."""
        body = await self._client.request_json("GET", "{}/{}".format(_BASE_PATH, request_id))
        if isinstance(body.get("response"), list):
            return LemurQuestionAnswerResponse.model_validate(body)
        return LemurStringResponse.model_validate(body)

    async def purge_request_data(self, request_id: str) -> PurgeLemurRequestDataResponse:
        """Delete the data stored for a LeMUR request."""
        body = await self._client.request_json("DELETE", "{}/{}".format(_BASE_PATH, request_id))
        return PurgeLemurRequestDataResponse.model_validate(body)

    async def _generate(self, endpoint: str, params: BaseModel, response_type: Type[ResponseT]) -> ResponseT:
        body = await self._client.request_json(
            "POST",
            "{}/generate/{}".format(_BASE_PATH, endpoint),
            json=params.model_dump(exclude_none=True, mode="json"),
        )
        response = response_type.model_validate(body)
        logger.info(
            "LeMUR %s request %s used %s input / %s output tokens",
            endpoint,
            response.request_id,
            response.usage.input_tokens,
            response.usage.output_tokens,
        )
        return response
