"""Exa API errors and exception types."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Discriminant shared by every Exa error."""

    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"
    API = "api"
    RESOURCE_FAILED = "resource_failed"


class ExaError(Exception):
    """Base exception for Exa API errors."""

    kind: ErrorKind = ErrorKind.API
    retryable: bool = False


class ExaAPIError(ExaError):
    """Generic API error.

    Carries the fields of the wire error payload
    (`{message, statusCode, timestamp?, path?}`).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        timestamp: str | None = None,
        path: str | None = None,
        retryable: bool | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.timestamp = timestamp or datetime.now(UTC).isoformat()
        self.path = path
        if retryable is not None:
            self.retryable = retryable

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"API error {self.status_code}: {self.message}"

    def _extra_fields(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Return the error in its wire payload shape."""
        payload: dict[str, Any] = {
            "message": self.message,
            "statusCode": self.status_code,
            "timestamp": self.timestamp,
        }
        if self.path is not None:
            payload["path"] = self.path
        payload.update({k: v for k, v in self._extra_fields().items() if v is not None})
        return payload

    @classmethod
    def from_payload(
        cls,
        payload: dict[str, Any],
        *,
        status_code: int | None = None,
        path: str | None = None,
        retry_after_seconds: int | None = None,
    ) -> ExaAPIError:
        """Build the typed error matching a wire error payload.

        An observed HTTP `status_code` takes precedence over the body's `statusCode`;
        `path` fills in when the payload does not carry one.
        """
        status = status_code
        if status is None:
            body_status = payload.get("statusCode")
            status = body_status if isinstance(body_status, int) else None
        message = payload.get("message") or payload.get("error") or "Unknown error"
        common: dict[str, Any] = {
            "status_code": status,
            "timestamp": payload.get("timestamp"),
            "path": payload.get("path", path),
        }

        if status == 400:
            return ExaValidationError(
                str(message),
                field=payload.get("field"),
                constraint=payload.get("constraint"),
                **common,
            )
        if status in (401, 403):
            return ExaAuthError(str(message), **common)
        if status == 404:
            return ExaNotFoundError(str(message), resource_id=payload.get("resourceId"), **common)
        if status == 408:
            return ExaTimeoutError(str(message), **common)
        if status == 429:
            if retry_after_seconds is None:
                body_retry_after = payload.get("retryAfter")
                if isinstance(body_retry_after, (int, float)):
                    retry_after_seconds = int(body_retry_after)
            return ExaRateLimitError(
                str(message), retry_after_seconds=retry_after_seconds, **common
            )
        if status is not None and status in SERVER_ERROR_STATUSES:
            return ExaServerError(str(message), **common)
        return ExaAPIError(str(message), **common)


SERVER_ERROR_STATUSES = frozenset({500, 502, 503, 504})


class ExaValidationError(ExaAPIError):
    """Request rejected by validation (HTTP 400)."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        constraint: str | None = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("status_code", 400)
        super().__init__(message, **kwargs)
        self.field = field
        self.constraint = constraint

    def _extra_fields(self) -> dict[str, Any]:
        return {"field": self.field, "constraint": self.constraint}


class ExaAuthError(ExaAPIError):
    """Authentication error (invalid API key)."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 401)
        super().__init__(message, **kwargs)


class ExaNotFoundError(ExaAPIError):
    """Requested resource does not exist (HTTP 404)."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str, *, resource_id: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 404)
        super().__init__(message, **kwargs)
        self.resource_id = resource_id

    def _extra_fields(self) -> dict[str, Any]:
        return {"resourceId": self.resource_id}


class ExaTimeoutError(ExaAPIError):
    """Request or poll exceeded its time budget (HTTP 408 or client-side)."""

    kind = ErrorKind.TIMEOUT
    retryable = True

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 408)
        super().__init__(message, **kwargs)


class ExaRateLimitError(ExaAPIError):
    """Rate limit exceeded."""

    kind = ErrorKind.RATE_LIMIT
    retryable = True

    def __init__(
        self, message: str, *, retry_after_seconds: int | None = None, **kwargs: Any
    ) -> None:
        kwargs.setdefault("status_code", 429)
        super().__init__(message, **kwargs)
        self.retry_after_seconds = retry_after_seconds

    def _extra_fields(self) -> dict[str, Any]:
        return {"retryAfter": self.retry_after_seconds}


class ExaServerError(ExaAPIError):
    """Server-side failure (HTTP 5xx)."""

    kind = ErrorKind.SERVER
    retryable = True


class ExaResourceFailedError(ExaError):
    """A polled resource reached a server-reported failure state."""

    kind = ErrorKind.RESOURCE_FAILED

    def __init__(
        self,
        message: str,
        *,
        resource_id: str,
        status: str,
        failure_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.resource_id = resource_id
        self.status = status
        self.failure_message = failure_message
