"""HTTP request plumbing and error mapping for the Exa API."""

from __future__ import annotations

import json
import math
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import TYPE_CHECKING, Any

import httpx
import structlog

from exa_client.config import ExaConfig
from exa_client.exceptions import ExaAPIError, ExaTimeoutError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator
    from types import TracebackType
    from typing import Self

logger = structlog.get_logger()


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    if params is None:
        return None
    cleaned = {key: value for key, value in params.items() if value is not None}
    return cleaned or None


class ExaHTTPBase:
    """
    Base class providing HTTP request infrastructure for Exa API.

    Use as an async context manager:

        async with ExaHTTPBase(config) as client:
            data = await client._request("GET", "/endpoint")

    Requests are never retried here; see `exa_client.retry` for an opt-in helper.
    """

    def __init__(self, config: ExaConfig) -> None:
        self._config = config
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_env(cls, *, api_key: str | None = None, base_url: str | None = None) -> Self:
        """Create an instance using environment configuration.

        Raises:
            ValueError: If required environment variables (e.g., `EXA_API_KEY`) are missing.
        """
        return cls(ExaConfig.from_env(api_key=api_key, base_url=base_url))

    @property
    def config(self) -> ExaConfig:
        return self._config

    async def open(self) -> None:
        """Initialize the underlying `httpx.AsyncClient` if needed."""
        if self._client is not None:
            return

        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout_seconds,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
                "User-Agent": self._config.user_agent,
                "x-api-key": self._config.api_key,
            },
        )

    async def close(self) -> None:
        """Close the underlying `httpx.AsyncClient` if it is open."""
        if self._client is None:
            return
        await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> Self:
        await self.open()
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        """Return the initialized `httpx.AsyncClient`.

        Raises:
            RuntimeError: If `open()` has not been called yet.
        """
        if self._client is None:
            cls_name = self.__class__.__name__
            raise RuntimeError(
                f"{cls_name} not initialized. "
                f"Use 'async with {cls_name}.from_env()' or call open()."
            )
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send an Exa API request and parse the JSON response.

        Args:
            method: HTTP method (e.g., `"GET"`).
            path: Request path relative to the configured base URL.
            params: Optional query parameters (`None` values are dropped).
            json_body: Optional JSON payload for POST-like requests.

        Returns:
            Parsed JSON response payload, unchanged.

        Raises:
            ExaValidationError: On `400`.
            ExaAuthError: On `401`/`403`.
            ExaNotFoundError: On `404`.
            ExaTimeoutError: On `408` or when the request times out locally.
            ExaRateLimitError: On `429` (carries `retry_after_seconds`).
            ExaServerError: On `5xx` (marked retryable).
            ExaAPIError: For other non-success statuses, network errors or invalid JSON.
        """
        logger.debug("Exa request", method=method, path=path)
        try:
            response = await self.client.request(
                method=method,
                url=path,
                params=_clean_params(params),
                json=json_body,
            )
        except httpx.TimeoutException as e:
            raise ExaTimeoutError(
                f"Request to {path} timed out after {self._config.timeout_seconds}s",
                path=path,
            ) from e
        except httpx.TransportError as e:
            raise ExaAPIError(
                f"Request to {path} failed: {e}", path=path, retryable=True
            ) from e

        if response.is_error:
            raise self._error_from_response(response, path)

        if not response.content:
            return {}

        try:
            data: dict[str, Any] = response.json()
        except json.JSONDecodeError as e:
            raise ExaAPIError(
                f"Response was not valid JSON: {response.text}",
                status_code=response.status_code,
                path=path,
            ) from e

        return data

    async def _stream_lines(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> AsyncIterator[str]:
        """Yield decoded response lines from a streaming (SSE) endpoint."""
        logger.debug("Exa stream", method=method, path=path)
        try:
            async with self.client.stream(
                method,
                path,
                params=_clean_params(params),
                headers={"Accept": "text/event-stream"},
            ) as response:
                if response.is_error:
                    await response.aread()
                    raise self._error_from_response(response, path)
                async for line in response.aiter_lines():
                    yield line
        except httpx.TimeoutException as e:
            raise ExaTimeoutError(f"Stream from {path} timed out", path=path) from e
        except httpx.TransportError as e:
            raise ExaAPIError(
                f"Stream from {path} failed: {e}", path=path, retryable=True
            ) from e

    def _error_from_response(self, response: httpx.Response, path: str) -> ExaAPIError:
        """Map a non-success response onto the typed error for its status."""
        try:
            payload = response.json()
        except json.JSONDecodeError:
            payload = None
        if not isinstance(payload, dict):
            payload = {"message": response.text or response.reason_phrase}

        retry_after_seconds: int | None = None
        if response.status_code == 429:
            retry_after_seconds = parse_retry_after(response.headers.get("retry-after"))

        error = ExaAPIError.from_payload(
            payload,
            status_code=response.status_code,
            path=path,
            retry_after_seconds=retry_after_seconds,
        )
        logger.warning(
            "Exa API error",
            path=path,
            status_code=response.status_code,
            kind=error.kind.value,
        )
        return error


def parse_retry_after(header: str | None) -> int | None:
    """Convert a `Retry-After` header (delta-seconds or HTTP-date) into whole seconds.

    Returns `None` when the header is absent or unparsable. Dates in the past give `0`.
    """
    if header is None or not header.strip():
        return None
    value = header.strip()

    try:
        return max(0, math.ceil(float(value)))
    except (OverflowError, ValueError):
        pass

    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=UTC)
    return max(0, math.ceil((retry_at - datetime.now(UTC)).total_seconds()))
