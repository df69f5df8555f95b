"""Request parameter construction and pagination URL parsing.

WHY: Two small pure transforms sit between callers and the HTTP layer.
build_params merges a value the client derives itself (an uploaded audio
URL) into the caller's sparse optional parameters and validates the result.
parse_list_url turns a page cursor URL from a transcript list back into
ListTranscriptParams, because the request executor only takes paths and
query parameters, never full URLs.

HOW: build_params round-trips through a plain dict: dump only the fields the
caller set, add the derived key, validate into the complete model.
parse_list_url splits the query string by hand so that keys match
case-insensitively and the first occurrence of a key wins.

RULES:
- The derived value always wins over a caller value for the same key
- Validation failures become ValidationError before any request is sent
- parse_list_url ignores unknown keys and raises ParseError on bad values
- status_from_limit=True reproduces the legacy behavior of reading the
  status value from the limit key (off by default)
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Dict, Optional, Type, TypeVar, Union
from urllib.parse import unquote

import pydantic
from pydantic import BaseModel

from assemblyai_client.api.models import (
    ListTranscriptParams,
    TranscriptOptionalParams,
    TranscriptParams,
    TranscriptStatus,
)
from assemblyai_client.errors import ArgumentError, ParseError, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

UserParams = Union[BaseModel, Mapping, None]

_INTEGER = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Parameter builder
# ---------------------------------------------------------------------------


def build_params(
    target: Type[ModelT],
    derived_field: str,
    derived_value: Any,
    user_params: UserParams = None,
) -> ModelT:
    """Merge a derived field into sparse user parameters and validate.

    Args:
        target: The complete request model to produce.
        derived_field: JSON key set by the client (e.g. "audio_url").
        derived_value: Value for derived_field; overrides any user value.
        user_params: Optional parameters as a model or mapping. Only fields
            the caller explicitly set on a model are carried over.

    Returns:
        A validated instance of target.

    Raises:
        ValidationError: target is missing a required field or a value has
            the wrong type.
    """
    if user_params is None:
        data: Dict[str, Any] = {}
    elif isinstance(user_params, BaseModel):
        data = user_params.model_dump(exclude_unset=True, by_alias=True)
    elif isinstance(user_params, Mapping):
        data = dict(user_params)
    else:
        raise ArgumentError(
            "Parameters must be a pydantic model or a mapping, got {}".format(
                type(user_params).__name__
            )
        )

    data[derived_field] = derived_value

    try:
        return target.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError(
            "Invalid {} parameters: {}".format(target.__name__, exc)
        ) from exc


def validate_params(target: Type[ModelT], **fields: Any) -> ModelT:
    """Construct a request model, reporting bad values as ValidationError."""
    try:
        return target(**fields)
    except pydantic.ValidationError as exc:
        raise ValidationError("Invalid {} parameters: {}".format(target.__name__, exc)) from exc


def create_transcript_params(
    audio_url: str,
    params: Optional[Union[TranscriptOptionalParams, Mapping]] = None,
) -> TranscriptParams:
    """Build complete transcript parameters for the given audio URL."""
    return build_params(TranscriptParams, "audio_url", str(audio_url), params)


# ---------------------------------------------------------------------------
# List URL parser
# ---------------------------------------------------------------------------


def parse_list_url(list_url: Optional[str], status_from_limit: bool = False) -> ListTranscriptParams:
    """Decode a transcript list page URL back into ListTranscriptParams.

    Args:
        list_url: A prev_url/next_url value from a TranscriptList page.
        status_from_limit: Read the status value from the "limit" key, as
            older clients did. Only useful for reproducing that behavior.

    Raises:
        ArgumentError: list_url is None or empty.
        ParseError: a recognized key has a value that cannot be coerced.
    """
    if not list_url:
        raise ArgumentError("list_url parameter is None or empty.")

    query = _parse_query(list_url)
    params: Dict[str, Any] = {}

    if "limit" in query:
        params["limit"] = _parse_int("limit", query["limit"])

    if "status" in query:
        status_key = "limit" if status_from_limit else "status"
        if status_key not in query:
            raise ParseError("status value expected under missing {!r} key".format(status_key))
        params["status"] = _parse_status(query[status_key])

    for key in ("created_on", "before_id", "after_id"):
        if key in query:
            params[key] = query[key]

    if "throttled_only" in query:
        params["throttled_only"] = _parse_bool("throttled_only", query["throttled_only"])

    return ListTranscriptParams(**params)


def _parse_query(url: str) -> Dict[str, str]:
    # Without a "?" the whole string is treated as the query
    query = url[url.find("?") + 1:]
    values: Dict[str, str] = {}
    for pair in query.split("&"):
        if not pair:
            continue
        parts = pair.split("=")
        if len(parts) != 2:
            continue
        key = parts[0].lower()
        if key not in values:
            values[key] = unquote(parts[1])
    return values


def _parse_int(key: str, value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise ParseError("{} must be an integer, got {!r}".format(key, value))
    return int(value)


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ParseError("{} must be 'true' or 'false', got {!r}".format(key, value))


def _parse_status(value: str) -> TranscriptStatus:
    lowered = value.strip().lower()
    for status in TranscriptStatus:
        if lowered in (status.value, status.name.lower()):
            return status
    raise ParseError("Unknown transcript status {!r}".format(value))
