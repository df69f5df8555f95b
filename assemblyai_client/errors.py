"""Exception hierarchy shared by every layer of the client.

WHY: Callers need typed exceptions to tell "my input was wrong" apart from
"the upload failed", "the API said no", and "we stopped waiting". A single
base class lets them catch everything from this library in one place.

HOW: AssemblyAIError is the root. Input problems also inherit ValueError,
and the polling timeout also inherits the builtin TimeoutError, so generic
handlers keep working.

RULES:
- RequestError carries status_code (None for transport failures) and message
- TranscriptTimeoutError is always a local determination, never from the API
- No error in this library is raised for a remote "error" transcript status;
  that is a normal terminal result
"""

from __future__ import annotations


class AssemblyAIError(Exception):
    """Base class for all errors raised by assemblyai_client."""


class ArgumentError(AssemblyAIError, ValueError):
    """Raised when a required argument is missing, empty, or of an unusable kind."""


class ValidationError(AssemblyAIError, ValueError):
    """Raised when request parameters are incomplete or malformed.

    Always raised before any request is sent. The underlying pydantic
    error is chained as __cause__.
    """


class ParseError(AssemblyAIError, ValueError):
    """Raised when a pagination URL contains a value that cannot be coerced."""


class RequestError(AssemblyAIError):
    """Raised when the API returns a non-2xx response or the transport fails.

    RULES:
    - status_code is None when no HTTP response was received
    - message is the response body text or a transport error summary
    """

    def __init__(self, status_code: int | None, message: str) -> None:
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__("AssemblyAI request failed: {}".format(message))
        else:
            super().__init__("AssemblyAI API error {}: {}".format(status_code, message))


class UploadError(AssemblyAIError):
    """Raised when an audio file or stream could not be uploaded."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class TranscriptTimeoutError(AssemblyAIError, TimeoutError):
    """Raised when polling does not reach a terminal status within the timeout."""
