"""Opt-in retrying for Exa calls.

The client never retries on its own. Wrap a call when retrying is wanted:

    response = await call_with_retries(exa.search, "latest AI developments")
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from exa_client.exceptions import ExaError, ExaRateLimitError

logger = structlog.get_logger()

T = TypeVar("T")


def _is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, ExaError) and exc.retryable


def _wait_with_retry_after(
    *, min_seconds: float, max_seconds: float
) -> Callable[[RetryCallState], float]:
    """Honor a rate-limit `retry_after_seconds` hint, else back off exponentially."""
    exponential = wait_exponential(multiplier=1, min=min_seconds, max=max_seconds)

    def _wait(retry_state: RetryCallState) -> float:
        outcome = retry_state.outcome
        exc = outcome.exception() if outcome is not None else None
        if isinstance(exc, ExaRateLimitError) and exc.retry_after_seconds is not None:
            return float(exc.retry_after_seconds)
        return float(exponential(retry_state))

    return _wait


def _log_before_sleep(retry_state: RetryCallState) -> None:
    outcome = retry_state.outcome
    exc = outcome.exception() if outcome is not None else None
    logger.warning(
        "Retrying Exa call",
        attempt=retry_state.attempt_number,
        error=str(exc),
        sleep_seconds=retry_state.next_action.sleep if retry_state.next_action else None,
    )


async def call_with_retries(
    fn: Callable[..., Awaitable[T]],
    *args: Any,
    max_attempts: int = 3,
    min_wait_seconds: float = 1.0,
    max_wait_seconds: float = 30.0,
    **kwargs: Any,
) -> T:
    """Await `fn(*args, **kwargs)`, retrying errors marked `retryable`.

    Non-retryable errors and the final failed attempt propagate unchanged.
    """
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=_wait_with_retry_after(min_seconds=min_wait_seconds, max_seconds=max_wait_seconds),
        retry=retry_if_exception(_is_retryable),
        before_sleep=_log_before_sleep,
        reraise=True,
    ):
        with attempt:
            result = await fn(*args, **kwargs)
    return result
