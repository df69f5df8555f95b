"""Transcripts client: submit, poll, list and export transcripts.

WHY: The transcript workflow is upload (when needed) → create → poll →
read results. Callers mostly want that as one call (transcribe), but each
step is also exposed so they can submit now and wait elsewhere, or build
their own polling around webhooks.

HOW: submit() normalizes the audio source once, uploads through
FilesClient when the audio is local, merges the resulting audio_url into
the caller's optional parameters, and creates the transcript.
wait_until_ready() delegates to core.polling.wait_until_terminal with get()
as the fetch function. The remaining methods are one-to-one endpoint
wrappers.

RULES:
- params=None means a fresh, empty TranscriptOptionalParams for this call
- Optional params are validated before any upload or request is made
- An owned stream (dispose_stream=True) is closed even when validation
  fails before the upload
- An "error" transcript is a normal result of transcribe()/wait_until_ready()
- Upload failures raise UploadError, API failures RequestError, timeouts
  TranscriptTimeoutError; nothing is retried
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Optional, Sequence, Union

import pydantic

from assemblyai_client.api.files import FilesClient
from assemblyai_client.api.models import (
    GetSubtitlesParams,
    ListTranscriptParams,
    ParagraphsResponse,
    RedactedAudioResponse,
    SentencesResponse,
    SubtitleFormat,
    Transcript,
    TranscriptList,
    TranscriptOptionalParams,
    TranscriptParams,
    UploadedFile,
    WordSearchParams,
    WordSearchResponse,
    status_value,
)
from assemblyai_client.api.raw_client import RawClient
from assemblyai_client.core.params import create_transcript_params, parse_list_url, validate_params
from assemblyai_client.core.polling import Duration, wait_until_terminal
from assemblyai_client.core.sources import AudioStream, LocalFile, RemoteUrl, as_audio_source
from assemblyai_client.errors import ArgumentError, ValidationError

logger = logging.getLogger(__name__)

OptionalParams = Union[TranscriptOptionalParams, Mapping, None]


class TranscriptsClient:
    """Client for the /v2/transcript endpoints plus the submit/transcribe helpers."""

    def __init__(self, client: RawClient, files: FilesClient) -> None:
        self._client = client
        self._files = files

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    async def submit(self, source: object, params: OptionalParams = None) -> Transcript:
        """Create a transcript from any supported audio source.

        WHY: Local audio has to be uploaded first, remote audio does not.
        Callers should not have to pick a different method per case.

        HOW: Dispatches once on the AudioSource kind. LocalFile and
        AudioStream are uploaded to obtain an upload_url; RemoteUrl and
        UploadedFile are used directly. The URL becomes audio_url in the
        complete TranscriptParams.

        Args:
            source: LocalFile, AudioStream, RemoteUrl, UploadedFile, or a
                plain Path, bytes, binary stream, or http(s) URL string.
            params: Optional transcript settings (model or mapping).

        Returns:
            The newly created transcript, usually still queued.
        """
        audio = as_audio_source(source)
        try:
            optional = _coerce_optional_params(params)
        except BaseException:
            # The upload never starts, so an owned stream is released here
            if isinstance(audio, AudioStream) and audio.dispose_stream:
                audio.stream.close()
            raise

        if isinstance(audio, LocalFile):
            uploaded = await self._files.upload(audio.path)
            audio_url = uploaded.upload_url
        elif isinstance(audio, AudioStream):
            uploaded = await self._files.upload(audio.stream, dispose_stream=audio.dispose_stream)
            audio_url = uploaded.upload_url
        elif isinstance(audio, UploadedFile):
            audio_url = audio.upload_url
        elif isinstance(audio, RemoteUrl):
            audio_url = audio.url
        else:  # pragma: no cover - as_audio_source guarantees one of the above
            raise TypeError("Unhandled audio source {!r}".format(audio))

        return await self.submit_params(create_transcript_params(audio_url, optional))

    async def submit_params(self, params: TranscriptParams) -> Transcript:
        """Create a transcript from complete parameters (POST /v2/transcript)."""
        body = await self._client.request_json(
            "POST",
            "/v2/transcript",
            json=params.model_dump(exclude_none=True, mode="json"),
        )
        transcript = Transcript.model_validate(body)
        logger.info("Submitted transcript %s (%s)", transcript.id, params.audio_url)
        return transcript

    async def transcribe(
        self,
        source: object,
        params: OptionalParams = None,
        polling_interval: Duration | None = None,
        polling_timeout: Duration | None = None,
    ) -> Transcript:
        """Submit audio and wait until the transcript is completed or errored."""
        transcript = await self.submit(source, params)
        return await self.wait_until_ready(
            transcript.id,
            polling_interval=polling_interval,
            polling_timeout=polling_timeout,
        )

    async def transcribe_params(
        self,
        params: TranscriptParams,
        polling_interval: Duration | None = None,
        polling_timeout: Duration | None = None,
    ) -> Transcript:
        transcript = await self.submit_params(params)
        return await self.wait_until_ready(
            transcript.id,
            polling_interval=polling_interval,
            polling_timeout=polling_timeout,
        )

    async def wait_until_ready(
        self,
        transcript_id: str,
        polling_interval: Duration | None = None,
        polling_timeout: Duration | None = None,
        on_status: Callable[[Transcript], None] | None = None,
    ) -> Transcript:
        """Poll until the transcript status is "completed" or "error".

        Args:
            transcript_id: The transcript to wait for.
            polling_interval: Seconds (or timedelta) between fetches. Defaults to 3s.
            polling_timeout: Overall limit. Defaults to waiting indefinitely.
            on_status: Optional callback called with every fetched transcript.

        Raises:
            TranscriptTimeoutError: the timeout elapsed before a terminal status.
        """
        transcript = await wait_until_terminal(
            self.get,
            transcript_id,
            polling_interval=polling_interval,
            polling_timeout=polling_timeout,
            on_status=on_status,
        )
        logger.info("Transcript %s finished with status %s", transcript.id, status_value(transcript.status))
        return transcript

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------

    async def get(self, transcript_id: str) -> Transcript:
        body = await self._client.request_json("GET", "/v2/transcript/{}".format(transcript_id))
        return Transcript.model_validate(body)

    async def delete(self, transcript_id: str) -> Transcript:
        body = await self._client.request_json("DELETE", "/v2/transcript/{}".format(transcript_id))
        return Transcript.model_validate(body)

    async def list(self, params: Optional[ListTranscriptParams] = None) -> TranscriptList:
        """Retrieve a page of transcripts, newest first.

        The page's prev_url always points to older transcripts.
        """
        query = (params or ListTranscriptParams()).to_query()
        body = await self._client.request_json("GET", "/v2/transcript", params=query)
        return TranscriptList.model_validate(body)

    async def list_by_url(self, list_url: str) -> TranscriptList:
        """Retrieve the page a prev_url/next_url cursor points to."""
        return await self.list(parse_list_url(list_url))

    # ------------------------------------------------------------------
    # Exports
    # ------------------------------------------------------------------

    async def get_subtitles(
        self,
        transcript_id: str,
        subtitle_format: SubtitleFormat,
        chars_per_caption: Optional[int] = None,
    ) -> str:
        """Export the transcript as SRT or VTT subtitles."""
        return await self.get_subtitles_with_params(
            transcript_id,
            subtitle_format,
            validate_params(GetSubtitlesParams, chars_per_caption=chars_per_caption),
        )

    async def get_subtitles_with_params(
        self,
        transcript_id: str,
        subtitle_format: SubtitleFormat,
        params: GetSubtitlesParams,
    ) -> str:
        try:
            fmt = SubtitleFormat(subtitle_format)
        except ValueError as exc:
            raise ArgumentError("Unsupported subtitle format {!r}".format(subtitle_format)) from exc
        return await self._client.request_text(
            "GET",
            "/v2/transcript/{}/{}".format(transcript_id, fmt.value),
            params=params.model_dump(exclude_none=True),
        )

    async def get_sentences(self, transcript_id: str) -> SentencesResponse:
        body = await self._client.request_json("GET", "/v2/transcript/{}/sentences".format(transcript_id))
        return SentencesResponse.model_validate(body)

    async def get_paragraphs(self, transcript_id: str) -> ParagraphsResponse:
        body = await self._client.request_json("GET", "/v2/transcript/{}/paragraphs".format(transcript_id))
        return ParagraphsResponse.model_validate(body)

    async def get_redacted_audio(self, transcript_id: str) -> RedactedAudioResponse:
        body = await self._client.request_json(
            "GET", "/v2/transcript/{}/redacted-audio".format(transcript_id)
        )
        return RedactedAudioResponse.model_validate(body)

    async def get_redacted_audio_file(self, transcript_id: str) -> bytes:
        """Download the PII-redacted audio for a transcript."""
        info = await self.get_redacted_audio(transcript_id)
        return await self._client.request_bytes("GET", info.redacted_audio_url, authenticated=False)

    async def word_search(self, transcript_id: str, words: Sequence[str]) -> WordSearchResponse:
        """Search the transcript for words, numbers or short phrases."""
        return await self.word_search_with_params(
            transcript_id, validate_params(WordSearchParams, words=list(words))
        )

    async def word_search_with_params(
        self, transcript_id: str, params: WordSearchParams
    ) -> WordSearchResponse:
        body = await self._client.request_json(
            "GET",
            "/v2/transcript/{}/word-search".format(transcript_id),
            params=params.to_query(),
        )
        return WordSearchResponse.model_validate(body)


def _coerce_optional_params(params: OptionalParams) -> TranscriptOptionalParams:
    """Validate caller params early so nothing is uploaded for a bad request."""
    if params is None:
        return TranscriptOptionalParams()
    if isinstance(params, TranscriptOptionalParams):
        return params
    if isinstance(params, Mapping):
        try:
            return TranscriptOptionalParams.model_validate(dict(params))
        except pydantic.ValidationError as exc:
            raise ValidationError("Invalid transcript parameters: {}".format(exc)) from exc
    raise ValidationError(
        "Transcript parameters must be TranscriptOptionalParams or a mapping, got {}".format(
            type(params).__name__
        )
    )

