"""Poll a job until it reaches a terminal status.

WHY: Transcription is not instant and the API has no push channel through
this client. Callers either poll themselves or let wait_until_terminal do it
with a fixed interval and an optional overall timeout.

HOW: Fetch once, then loop: check the deadline, sleep the interval (bounded
by the remaining time when a timeout is set), fetch again. The deadline is
measured on the event loop's monotonic clock. A timeout that fires during
the sleep is reported as TranscriptTimeoutError chained from the
asyncio.TimeoutError.

RULES:
- Terminal statuses are exactly "completed" and "error"; anything else,
  including unknown values, keeps polling
- An "error" status is returned, not raised
- Fetch errors propagate immediately and are never retried
- Constant interval, no backoff
- Plain task cancellation (CancelledError) propagates untouched
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import TypeVar, Union

from assemblyai_client.api.models import TERMINAL_STATUSES, status_value
from assemblyai_client.config import DEFAULT_POLLING_INTERVAL_S
from assemblyai_client.errors import ArgumentError, TranscriptTimeoutError

logger = logging.getLogger(__name__)

HandleT = TypeVar("HandleT")

Duration = Union[float, int, timedelta]


def to_seconds(value: Duration | None) -> float | None:
    """Convert a duration given as seconds or a timedelta to float seconds."""
    if value is None:
        return None
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


def is_terminal(handle: object) -> bool:
    return status_value(getattr(handle, "status")) in TERMINAL_STATUSES


async def wait_until_terminal(
    fetch: Callable[[str], Awaitable[HandleT]],
    job_id: str,
    polling_interval: Duration | None = None,
    polling_timeout: Duration | None = None,
    on_status: Callable[[HandleT], None] | None = None,
) -> HandleT:
    """Fetch job_id repeatedly until its status is completed or error.

    Args:
        fetch: Coroutine function returning the current handle for an id.
        job_id: The job to poll.
        polling_interval: Delay between fetches. Defaults to 3 seconds.
        polling_timeout: Overall limit; None waits indefinitely.
        on_status: Optional callback called with every fetched handle.

    Returns:
        The first fetched handle with a terminal status.

    Raises:
        TranscriptTimeoutError: polling_timeout elapsed first.
        ArgumentError: polling_interval is not positive.
    """
    interval = to_seconds(polling_interval)
    if interval is None:
        interval = DEFAULT_POLLING_INTERVAL_S
    if interval <= 0:
        raise ArgumentError("polling_interval must be positive, got {}".format(interval))
    timeout = to_seconds(polling_timeout)

    loop = asyncio.get_running_loop()
    deadline = None if timeout is None else loop.time() + timeout

    handle = await fetch(job_id)
    if on_status:
        on_status(handle)

    while not is_terminal(handle):
        if deadline is not None and loop.time() >= deadline:
            logger.warning("Job %s not ready after %.1fs, giving up", job_id, timeout)
            raise TranscriptTimeoutError(_timeout_message(job_id, timeout))

        logger.debug(
            "Job %s is %s, polling again in %.1fs",
            job_id,
            status_value(getattr(handle, "status")),
            interval,
        )
        if deadline is None:
            await asyncio.sleep(interval)
        else:
            try:
                await asyncio.wait_for(asyncio.sleep(interval), timeout=deadline - loop.time())
            except asyncio.TimeoutError as exc:
                logger.warning("Job %s not ready after %.1fs, giving up", job_id, timeout)
                raise TranscriptTimeoutError(_timeout_message(job_id, timeout)) from exc

        handle = await fetch(job_id)
        if on_status:
            on_status(handle)

    logger.debug("Job %s reached terminal status %s", job_id, status_value(getattr(handle, "status")))
    return handle


def _timeout_message(job_id: str, timeout: float | None) -> str:
    return "Job {} did not complete within the given timeout ({:.1f}s).".format(job_id, timeout or 0.0)
