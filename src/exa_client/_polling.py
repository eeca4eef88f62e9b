"""Poll-until-terminal helper shared by long-running Exa resources."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Collection
from time import monotonic
from typing import TypeVar

import structlog

from exa_client.exceptions import ExaResourceFailedError, ExaTimeoutError

logger = structlog.get_logger()

T = TypeVar("T")


async def poll_until_terminal(
    fetch: Callable[[], Awaitable[T]],
    *,
    get_status: Callable[[T], str],
    success: Collection[str],
    failure: Collection[str] = (),
    interval_seconds: float = 1.0,
    timeout_seconds: float | None = 300.0,
    on_poll: Callable[[str], None] | None = None,
    describe: str = "resource",
    resource_id: str = "",
    failure_message: Callable[[T], str | None] | None = None,
) -> T:
    """Fetch a resource repeatedly until it reaches a terminal status.

    Each iteration checks, in order: success status, failure status, elapsed time.
    Only then does it sleep for `interval_seconds`.

    Args:
        fetch: Coroutine factory returning the current resource state.
        get_status: Extracts the status string from a fetched resource.
        success: Statuses that end polling and return the resource.
        failure: Statuses that end polling with `ExaResourceFailedError`.
        interval_seconds: Delay between polls.
        timeout_seconds: Overall budget; `None` waits indefinitely.
        on_poll: Optional callback invoked with every observed status.
        describe: Human-readable resource name used in error messages.
        resource_id: Identifier of the polled resource.
        failure_message: Extracts the server-reported failure reason.

    Returns:
        The resource in a success status.

    Raises:
        ExaResourceFailedError: If the resource reaches a failure status.
        ExaTimeoutError: If `timeout_seconds` elapses first.
    """
    started = monotonic()
    polls = 0
    while True:
        resource = await fetch()
        polls += 1
        status = get_status(resource)
        if on_poll is not None:
            on_poll(status)

        if status in success:
            logger.debug("Poll finished", resource=describe, id=resource_id, polls=polls)
            return resource

        if status in failure:
            reason = failure_message(resource) if failure_message is not None else None
            message = f"{describe} {resource_id} {status}".strip()
            if reason:
                message = f"{message}: {reason}"
            raise ExaResourceFailedError(
                message,
                resource_id=resource_id,
                status=status,
                failure_message=reason,
            )

        elapsed = monotonic() - started
        if timeout_seconds is not None and elapsed > timeout_seconds:
            raise ExaTimeoutError(
                f"{describe} {resource_id} did not finish within {timeout_seconds}s "
                f"(last status: {status})",
                status_code=None,
            )

        await asyncio.sleep(interval_seconds)
