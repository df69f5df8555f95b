"""Audio source variants accepted by submit() and transcribe().

WHY: Audio can come from a local file, an open byte stream, a public URL,
or a file already uploaded to AssemblyAI. Rather than one method per
combination, callers pass a single AudioSource and the transcripts client
dispatches on its kind once.

HOW: Small frozen dataclasses tag each kind. as_audio_source() also accepts
the plain Python values people naturally reach for (Path, bytes, an http(s)
URL string, an UploadedFile) and wraps them.

RULES:
- LocalFile and AudioStream need an upload before submission
- RemoteUrl and UploadedFile are submitted directly as audio_url
- AudioStream.dispose_stream=True hands ownership of the stream to the client
- Bare strings are only accepted when they are http(s) URLs; use LocalFile
  for paths to avoid guessing
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

from assemblyai_client.api.models import UploadedFile
from assemblyai_client.errors import ArgumentError


@dataclass(frozen=True)
class LocalFile:
    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))


@dataclass(frozen=True)
class AudioStream:
    """An open binary stream, optionally closed by the client after upload."""

    stream: BinaryIO
    dispose_stream: bool = False


@dataclass(frozen=True)
class RemoteUrl:
    url: str


AudioSource = Union[LocalFile, AudioStream, RemoteUrl, UploadedFile]


def as_audio_source(source: object) -> AudioSource:
    """Normalize a caller-supplied value into one of the AudioSource variants."""
    if isinstance(source, (LocalFile, AudioStream, RemoteUrl, UploadedFile)):
        return source
    if isinstance(source, Path):
        return LocalFile(source)
    if isinstance(source, (bytes, bytearray)):
        # In-memory buffer is ours, so it is always disposed
        return AudioStream(io.BytesIO(bytes(source)), dispose_stream=True)
    if isinstance(source, str):
        if source.startswith(("http://", "https://")):
            return RemoteUrl(source)
        raise ArgumentError(
            "Audio source string must be an http(s) URL, got {!r}. "
            "Wrap local paths in LocalFile(...) or pass a pathlib.Path.".format(source)
        )
    if hasattr(source, "read"):
        return AudioStream(source)  # type: ignore[arg-type]
    raise ArgumentError("Unsupported audio source type: {}".format(type(source).__name__))
