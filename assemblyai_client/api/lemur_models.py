"""Pydantic models for LeMUR (LLM-on-transcript) requests and responses.

RULES:
- Every LeMUR request targets either transcript_ids or input_text
- Every response carries request_id and usage; usage token counts are required
- Question-answer responses carry a list, all other responses a string
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from assemblyai_client.api.models import ApiModel


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class LemurBaseParams(BaseModel):
    model_config = ConfigDict(extra="allow")

    transcript_ids: Optional[List[str]] = Field(
        default=None, description="Completed transcripts to run the model over."
    )
    input_text: Optional[str] = Field(
        default=None, description="Custom formatted transcript data, instead of transcript_ids."
    )
    context: Optional[Union[str, Dict[str, Any]]] = None
    final_model: Optional[str] = None
    max_output_size: Optional[int] = None
    temperature: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class LemurTaskParams(LemurBaseParams):
    prompt: str


class LemurSummaryParams(LemurBaseParams):
    answer_format: Optional[str] = None


class LemurActionItemsParams(LemurBaseParams):
    answer_format: Optional[str] = None


class LemurQuestion(BaseModel):
    question: str
    context: Optional[Union[str, Dict[str, Any]]] = None
    answer_format: Optional[str] = None
    answer_options: Optional[List[str]] = None


class LemurQuestionAnswerParams(LemurBaseParams):
    questions: List[LemurQuestion]


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class LemurUsage(ApiModel):
    """Token accounting for a LeMUR request."""

    input_tokens: int = Field(description="The number of input tokens used by the model.")
    output_tokens: int = Field(description="The number of output tokens generated by the model.")


class LemurBaseResponse(ApiModel):
    request_id: str
    usage: LemurUsage


class LemurStringResponse(LemurBaseResponse):
    """Response of task, summary and action-items requests."""

    response: str


class LemurQuestionAnswer(ApiModel):
    question: str
    answer: str


class LemurQuestionAnswerResponse(LemurBaseResponse):
    response: List[LemurQuestionAnswer]


LemurResponse = Union[LemurStringResponse, LemurQuestionAnswerResponse]


class PurgeLemurRequestDataResponse(ApiModel):
    request_id: str
    request_id_to_purge: str
    deleted: bool
