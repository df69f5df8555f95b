"""Pydantic request/response models for the transcript and file endpoints.

WHY: The AssemblyAI API exchanges flat JSON objects. Typed models make the
shapes explicit, validate request parameters before anything is sent, and
give callers IDE completion on responses.

HOW: Response models subclass ApiModel, which allows unknown fields so a
newer API version never breaks parsing. Request parameter models are
sparse: every field is Optional and only explicitly set fields are sent
(model_dump(exclude_unset=True) or exclude_none=True).

RULES:
- Python 3.9+ compatible (no PEP 604 unions in model fields, use Optional)
- Enums inherit str so values serialize cleanly to JSON and compare to strings
- Transcript.status accepts unknown strings; only "completed" and "error"
  are terminal
- TranscriptParams is TranscriptOptionalParams plus the required audio_url
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    """Base for response models: tolerant of fields this client does not know yet."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class TranscriptStatus(str, Enum):
    """Lifecycle status of a transcript.

    RULES:
    - queued: accepted, waiting for capacity
    - processing: audio is being transcribed
    - completed / error: terminal, no further change expected
    """

    queued = "queued"
    processing = "processing"
    completed = "completed"
    error = "error"


TERMINAL_STATUSES = frozenset({TranscriptStatus.completed.value, TranscriptStatus.error.value})


class SubtitleFormat(str, Enum):
    """Subtitle export formats."""

    srt = "srt"
    vtt = "vtt"


class SpeechModel(str, Enum):
    best = "best"
    nano = "nano"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class TranscriptOptionalParams(BaseModel):
    """Optional settings for a new transcript.

    WHY: Callers describe what they want from a transcript (language,
    speaker labels, redaction, summaries, ...) independently of where the
    audio comes from. The audio URL is filled in later by the submission
    helper.

    RULES:
    - Every field is optional; unset fields are never sent
    - Unknown fields are passed through so new API options can be used
      before this client models them
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    language_code: Optional[str] = Field(default=None, description="Language of the audio, e.g. 'en_us'.")
    language_detection: Optional[bool] = None
    speech_model: Optional[SpeechModel] = None
    punctuate: Optional[bool] = None
    format_text: Optional[bool] = None
    disfluencies: Optional[bool] = None
    dual_channel: Optional[bool] = None
    webhook_url: Optional[str] = None
    webhook_auth_header_name: Optional[str] = None
    webhook_auth_header_value: Optional[str] = None
    audio_start_from: Optional[int] = Field(default=None, description="Start offset in milliseconds.")
    audio_end_at: Optional[int] = Field(default=None, description="End offset in milliseconds.")
    word_boost: Optional[List[str]] = None
    boost_param: Optional[str] = None
    filter_profanity: Optional[bool] = None
    redact_pii: Optional[bool] = None
    redact_pii_audio: Optional[bool] = None
    redact_pii_audio_quality: Optional[str] = None
    redact_pii_policies: Optional[List[str]] = None
    redact_pii_sub: Optional[str] = None
    speaker_labels: Optional[bool] = None
    speakers_expected: Optional[int] = None
    content_safety: Optional[bool] = None
    iab_categories: Optional[bool] = None
    custom_spelling: Optional[List[Dict[str, Any]]] = None
    auto_chapters: Optional[bool] = None
    auto_highlights: Optional[bool] = None
    entity_detection: Optional[bool] = None
    sentiment_analysis: Optional[bool] = None
    summarization: Optional[bool] = None
    summary_model: Optional[str] = None
    summary_type: Optional[str] = None
    speech_threshold: Optional[float] = None


class TranscriptParams(TranscriptOptionalParams):
    """Complete parameters for POST /v2/transcript."""

    audio_url: str = Field(description="URL of the audio or video file to transcribe.")


class ListTranscriptParams(BaseModel):
    """Query parameters for GET /v2/transcript."""

    limit: Optional[int] = Field(default=None, description="Maximum number of transcripts to return.")
    status: Optional[TranscriptStatus] = None
    created_on: Optional[str] = Field(default=None, description="Only transcripts created on this date (YYYY-MM-DD).")
    before_id: Optional[str] = None
    after_id: Optional[str] = None
    throttled_only: Optional[bool] = None

    def to_query(self) -> Dict[str, Any]:
        """Return the set fields as query parameters (enums as their values)."""
        return self.model_dump(exclude_none=True, mode="json")


class GetSubtitlesParams(BaseModel):
    chars_per_caption: Optional[int] = Field(
        default=None, description="The maximum number of characters per caption."
    )


class WordSearchParams(BaseModel):
    words: List[str] = Field(description="Words or phrases (up to five words each) to search for.")

    def to_query(self) -> Dict[str, str]:
        return {"words": ",".join(self.words)}


class CreateRealtimeTemporaryTokenParams(BaseModel):
    expires_in: int = Field(ge=60, description="Token lifetime in seconds.")


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class UploadedFile(ApiModel):
    """Result of POST /v2/upload: a durable URL usable as audio_url."""

    upload_url: str


class TranscriptWord(ApiModel):
    text: str
    start: int
    end: int
    confidence: float
    speaker: Optional[str] = None


class TranscriptUtterance(ApiModel):
    text: str
    start: int
    end: int
    confidence: float
    speaker: str
    words: List[TranscriptWord] = Field(default_factory=list)


class Transcript(ApiModel):
    """A transcript job handle as returned by the API.

    WHY: Submission returns a queued handle; polling re-fetches it until it
    is completed or errored. Result fields are only populated once the job
    has completed.

    RULES:
    - Never mutated locally; every fetch produces a new instance
    - status may be a value this client does not know; it is kept as a string
    - error is only set when status is "error"
    """

    id: str
    status: Union[TranscriptStatus, str] = Field(union_mode="left_to_right")
    audio_url: Optional[str] = None
    text: Optional[str] = None
    words: Optional[List[TranscriptWord]] = None
    utterances: Optional[List[TranscriptUtterance]] = None
    confidence: Optional[float] = None
    audio_duration: Optional[float] = None
    language_code: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return status_value(self.status) in TERMINAL_STATUSES


class PageDetails(ApiModel):
    limit: int
    result_count: int
    current_url: str
    prev_url: Optional[str] = None
    next_url: Optional[str] = None


class TranscriptListItem(ApiModel):
    id: str
    resource_url: str
    status: Union[TranscriptStatus, str] = Field(union_mode="left_to_right")
    created: str
    completed: Optional[str] = None
    audio_url: str
    error: Optional[str] = None


class TranscriptList(ApiModel):
    """A page of transcripts; prev_url/next_url are pagination cursors."""

    page_details: PageDetails
    transcripts: List[TranscriptListItem]


class TranscriptSentence(ApiModel):
    text: str
    start: int
    end: int
    confidence: float
    words: List[TranscriptWord] = Field(default_factory=list)
    speaker: Optional[str] = None


class SentencesResponse(ApiModel):
    id: str
    confidence: float
    audio_duration: float
    sentences: List[TranscriptSentence]


class TranscriptParagraph(ApiModel):
    text: str
    start: int
    end: int
    confidence: float
    words: List[TranscriptWord] = Field(default_factory=list)


class ParagraphsResponse(ApiModel):
    id: str
    confidence: float
    audio_duration: float
    paragraphs: List[TranscriptParagraph]


class RedactedAudioResponse(ApiModel):
    status: str
    redacted_audio_url: str


class WordSearchMatch(ApiModel):
    text: str
    count: int
    timestamps: List[List[int]]
    indexes: List[int]


class WordSearchResponse(ApiModel):
    id: str
    total_count: int
    matches: List[WordSearchMatch]


class RealtimeTemporaryTokenResponse(ApiModel):
    token: str


def status_value(status: Union[TranscriptStatus, str]) -> str:
    """Return the plain string value of a status, known or not."""
    if isinstance(status, TranscriptStatus):
        return status.value
    return str(status)
