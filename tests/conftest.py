"""Shared test fixtures for the assemblyai_client test suite.

WHY: Most tests need an AssemblyAIClient talking to a scripted fake API
instead of the real service, plus a few canonical response payloads.
Centralizing them keeps every test module short and consistent.

HOW: FakeApi is an httpx.MockTransport handler. Routes are keyed by
(method, path) and hold a queue of canned responses; the last response
repeats once the queue is down to one. Every request is recorded so tests
can assert on call counts, bodies, query strings and headers.

RULES:
- The real API is never called
- Each test gets a fresh FakeApi and client (no shared mutable state)
- Response payloads mirror the documented AssemblyAI JSON shapes
"""

from __future__ import annotations

import io
import json
from typing import Any, Dict, List, Tuple

import httpx
import pytest

from assemblyai_client import AssemblyAIClient

BASE_URL = "https://api.assemblyai.test"
TEST_API_KEY = "test-api-key"
UPLOAD_URL = "https://cdn.assemblyai.test/upload/7f2d3c1e"
AUDIO_URL = "https://example.com/audio/interview.mp3"


# ---------------------------------------------------------------------------
# Fake API
# ---------------------------------------------------------------------------


class FakeApi:
    """Scripted httpx.MockTransport handler that records every request."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._routes: Dict[Tuple[str, str], List[Tuple[int, Any]]] = {}

    def add(self, method: str, path: str, *responses: Any, status_code: int = 200) -> None:
        """Register responses for a route. dict/list → JSON, str → text, bytes → raw."""
        queue = self._routes.setdefault((method.upper(), path), [])
        for body in responses:
            queue.append((status_code, body))

    def add_error(self, method: str, path: str, status_code: int, body: Any) -> None:
        self.add(method, path, body, status_code=status_code)

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method.upper() and r.url.path == path]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self._routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, text="no fake route for {} {}".format(request.method, request.url.path))
        status_code, body = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(body, (dict, list)):
            return httpx.Response(status_code, json=body)
        if isinstance(body, bytes):
            return httpx.Response(status_code, content=body)
        return httpx.Response(status_code, text=body)


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content)


def make_client(api: FakeApi) -> AssemblyAIClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(api), base_url=BASE_URL)
    return AssemblyAIClient(api_key=TEST_API_KEY, http_client=http_client)


class CountingStream(io.BytesIO):
    """BytesIO that counts close() calls."""

    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        self.close_count = 0

    def close(self) -> None:
        self.close_count += 1
        super().close()


def transcript_payload(transcript_id: str = "tr_5b0f", status: str = "queued", **extra: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"id": transcript_id, "status": status, "audio_url": UPLOAD_URL}
    payload.update(extra)
    return payload


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def client(api: FakeApi) -> AssemblyAIClient:
    return make_client(api)


@pytest.fixture
def completed_transcript() -> Dict[str, Any]:
    """A completed transcript with words, as returned by GET /v2/transcript/{id}."""
    return transcript_payload(
        status="completed",
        text="How are you doing today?",
        confidence=0.95,
        audio_duration=1.2,
        language_code="en_us",
        words=[
            {"text": "How", "start": 120, "end": 250, "confidence": 0.97, "speaker": "A"},
            {"text": "are", "start": 260, "end": 380, "confidence": 0.95, "speaker": "A"},
            {"text": "you", "start": 390, "end": 510, "confidence": 0.96, "speaker": "A"},
            {"text": "doing", "start": 520, "end": 720, "confidence": 0.93, "speaker": "A"},
            {"text": "today?", "start": 730, "end": 940, "confidence": 0.91, "speaker": "A"},
        ],
    )


@pytest.fixture
def transcript_page() -> Dict[str, Any]:
    return {
        "page_details": {
            "limit": 2,
            "result_count": 2,
            "current_url": BASE_URL + "/v2/transcript?limit=2",
            "prev_url": BASE_URL + "/v2/transcript?limit=2&before_id=tr_0001",
            "next_url": None,
        },
        "transcripts": [
            {
                "id": "tr_0002",
                "resource_url": BASE_URL + "/v2/transcript/tr_0002",
                "status": "completed",
                "created": "2024-03-01T10:00:00",
                "completed": "2024-03-01T10:01:00",
                "audio_url": AUDIO_URL,
            },
            {
                "id": "tr_0001",
                "resource_url": BASE_URL + "/v2/transcript/tr_0001",
                "status": "error",
                "created": "2024-03-01T09:00:00",
                "audio_url": AUDIO_URL,
                "error": "Download error",
            },
        ],
    }
