"""Files client: upload local audio to AssemblyAI storage.

WHY: Local files and in-memory streams must be uploaded before they can be
transcribed. The upload returns a durable URL that is then used as the
transcript's audio_url.

HOW: Reads the whole payload and sends it as the raw body of
POST /v2/upload. Any failure on the way (local read error, transport error,
non-2xx response) is reported as UploadError with the original exception
chained.

RULES:
- Accepts a Path, bytes, or a binary file-like object
- dispose_stream=True closes a file-like object exactly once, whether the
  upload succeeds or fails
- Paths are always opened and closed here; the caller never sees the handle
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Union

from assemblyai_client.api.models import UploadedFile
from assemblyai_client.api.raw_client import RawClient
from assemblyai_client.errors import ArgumentError, RequestError, UploadError

logger = logging.getLogger(__name__)

UploadData = Union[Path, bytes, bytearray, BinaryIO]


class FilesClient:
    """Client for the /v2/upload endpoint."""

    def __init__(self, client: RawClient) -> None:
        self._client = client

    async def upload(self, data: UploadData, dispose_stream: bool = False) -> UploadedFile:
        """Upload audio and return the UploadedFile with its upload_url.

        Args:
            data: A file path, raw bytes, or an open binary stream.
            dispose_stream: Close the stream once the upload has finished,
                successfully or not. Ignored for paths and bytes.

        Raises:
            UploadError: the data could not be read or the API rejected it.
        """
        if isinstance(data, Path):
            try:
                with open(data, "rb") as f:
                    payload = f.read()
            except OSError as exc:
                logger.warning("Could not read %s: %s", data, exc)
                raise UploadError("Could not read {}: {}".format(data, exc)) from exc
            return await self._send(payload, str(data))

        if isinstance(data, (bytes, bytearray)):
            return await self._send(bytes(data), "bytes")

        if not hasattr(data, "read"):
            raise ArgumentError("Cannot upload object of type {}".format(type(data).__name__))

        try:
            try:
                payload = data.read()
            except (OSError, ValueError) as exc:
                logger.warning("Could not read audio stream: %s", exc)
                raise UploadError("Could not read audio stream: {}".format(exc)) from exc
            return await self._send(payload, "stream")
        finally:
            if dispose_stream:
                data.close()

    async def _send(self, payload: bytes, label: str) -> UploadedFile:
        logger.debug("Uploading %s (%d bytes)", label, len(payload))
        try:
            body = await self._client.request_json(
                "POST",
                "/v2/upload",
                content=payload,
                headers={"Content-Type": "application/octet-stream"},
            )
        except RequestError as exc:
            logger.warning("Upload of %s failed: %s", label, exc)
            raise UploadError("Upload failed: {}".format(exc), status_code=exc.status_code) from exc
        return UploadedFile.model_validate(body)
