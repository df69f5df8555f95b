"""AssemblyAI async client: typed access to transcripts, files, LeMUR and realtime tokens.

WHY: The AssemblyAI HTTP API is a set of plain JSON endpoints. Callers want
typed methods, a one-call "transcribe this file" helper, and a polling loop
that behaves predictably around timeouts, rather than hand-written httpx
calls scattered through their code.

HOW: Three layers: a raw request executor (api.raw_client), pydantic
models for requests and responses (api.models, api.lemur_models), and
resource clients (files, transcripts, lemur, realtime) composed by
AssemblyAIClient. Pure helpers (parameter building, list URL parsing,
polling) live in core and have no HTTP knowledge.

RULES:
- All HTTP calls go through RawClient (no direct httpx usage elsewhere)
- Every library error derives from AssemblyAIError
- No automatic retries anywhere; only the poll loop re-fetches on state
"""

__version__ = "0.3.0"

from assemblyai_client.api.client import AssemblyAIClient  # noqa: E402
from assemblyai_client.api.models import (  # noqa: E402
    SubtitleFormat,
    Transcript,
    TranscriptOptionalParams,
    TranscriptParams,
    TranscriptStatus,
    UploadedFile,
)
from assemblyai_client.core.sources import AudioStream, LocalFile, RemoteUrl  # noqa: E402
from assemblyai_client.errors import (  # noqa: E402
    ArgumentError,
    AssemblyAIError,
    ParseError,
    RequestError,
    TranscriptTimeoutError,
    UploadError,
    ValidationError,
)

__all__ = [
    "ArgumentError",
    "AssemblyAIClient",
    "AssemblyAIError",
    "AudioStream",
    "LocalFile",
    "ParseError",
    "RemoteUrl",
    "RequestError",
    "SubtitleFormat",
    "Transcript",
    "TranscriptOptionalParams",
    "TranscriptParams",
    "TranscriptStatus",
    "TranscriptTimeoutError",
    "UploadError",
    "UploadedFile",
    "ValidationError",
]
