"""Configuration constants, client defaults, and .env loading.

WHY: Centralizes every configurable value (base URL, timeouts, polling
interval, SDK identification) so it is easy to find and override. The API
key must never be hardcoded, so it is read from the environment.

HOW: python-dotenv loads the .env file on import. Constants are module-level
values with environment overrides. load_api_key() gives a clear error when
the key is missing.

RULES:
- API key is loaded from ASSEMBLYAI_API_KEY, never hardcoded
- All defaults can be overridden via environment variables
- Polling interval defaults to 3 seconds; no polling timeout by default
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from assemblyai_client.errors import ArgumentError

# Load .env from the current working directory
load_dotenv()

# ---------------------------------------------------------------------------
# API configuration defaults
# ---------------------------------------------------------------------------

ASSEMBLYAI_BASE_URL = os.getenv("ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com")
DEFAULT_REQUEST_TIMEOUT_S = float(os.getenv("ASSEMBLYAI_TIMEOUT_S", "30"))
DEFAULT_CONNECT_TIMEOUT_S = 10.0

DEFAULT_POLLING_INTERVAL_S = 3.0
"""Seconds between status fetches in wait_until_ready."""

# ---------------------------------------------------------------------------
# SDK identification headers
# ---------------------------------------------------------------------------

SDK_NAME = "assemblyai-client"
SDK_LANGUAGE = "Python"


def sdk_version() -> str:
    """Return the installed package version (imported lazily to avoid a cycle)."""
    from assemblyai_client import __version__

    return __version__


def user_agent(extra: str | None = None) -> str:
    """Build the User-Agent header value, optionally suffixed by the caller's agent."""
    agent = "{}/{}".format(SDK_NAME, sdk_version())
    if extra:
        agent = "{} {}".format(agent, extra.strip())
    return agent


def load_api_key() -> str:
    """Load the AssemblyAI API key from the environment.

    WHY: The API key is required for every API call. Loading it from the
    environment (via .env) keeps it out of source code.

    RULES:
    - Raises ArgumentError if the key is missing or empty
    - Never returns a default/placeholder value
    """
    key = os.getenv("ASSEMBLYAI_API_KEY", "").strip()
    if not key:
        raise ArgumentError(
            "AssemblyAI API key is required. "
            "Pass api_key=... or set ASSEMBLYAI_API_KEY in the environment."
        )
    return key
