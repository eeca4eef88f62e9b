"""Unit tests for Exa error types."""

from __future__ import annotations

import pytest

from exa_client import (
    ErrorKind,
    ExaAPIError,
    ExaAuthError,
    ExaError,
    ExaNotFoundError,
    ExaRateLimitError,
    ExaResourceFailedError,
    ExaServerError,
    ExaTimeoutError,
    ExaValidationError,
)


def test_error_hierarchy() -> None:
    for error_type in (
        ExaAuthError,
        ExaNotFoundError,
        ExaRateLimitError,
        ExaServerError,
        ExaTimeoutError,
        ExaValidationError,
    ):
        assert issubclass(error_type, ExaAPIError)
        assert issubclass(error_type, ExaError)
    assert issubclass(ExaResourceFailedError, ExaError)
    assert not issubclass(ExaResourceFailedError, ExaAPIError)


def test_str_includes_status_code() -> None:
    assert str(ExaAPIError("boom", status_code=500)) == "API error 500: boom"
    assert str(ExaAPIError("network down")) == "network down"


def test_default_status_codes() -> None:
    assert ExaAuthError("x").status_code == 401
    assert ExaNotFoundError("x").status_code == 404
    assert ExaRateLimitError("x").status_code == 429
    assert ExaTimeoutError("x").status_code == 408
    assert ExaTimeoutError("x", status_code=None).status_code is None


@pytest.mark.parametrize(
    ("payload", "error_type", "kind"),
    [
        (
            {"message": "bad field", "statusCode": 400, "field": "numResults"},
            ExaValidationError,
            ErrorKind.VALIDATION,
        ),
        ({"message": "no key", "statusCode": 401}, ExaAuthError, ErrorKind.AUTHENTICATION),
        (
            {"message": "gone", "statusCode": 404, "resourceId": "ws_1"},
            ExaNotFoundError,
            ErrorKind.NOT_FOUND,
        ),
        (
            {"message": "slow", "statusCode": 429, "retryAfter": 7},
            ExaRateLimitError,
            ErrorKind.RATE_LIMIT,
        ),
        ({"message": "oops", "statusCode": 503}, ExaServerError, ErrorKind.SERVER),
        ({"message": "teapot", "statusCode": 418}, ExaAPIError, ErrorKind.API),
    ],
)
def test_from_payload_to_dict_round_trip(
    payload: dict[str, object], error_type: type[ExaAPIError], kind: ErrorKind
) -> None:
    payload = {**payload, "timestamp": "2025-01-01T00:00:00Z", "path": "/search"}

    error = ExaAPIError.from_payload(payload)

    assert type(error) is error_type
    assert error.kind is kind
    assert error.to_dict() == payload


def test_from_payload_fills_missing_status_and_message() -> None:
    error = ExaAPIError.from_payload({"error": "Forbidden"}, status_code=403, path="/answer")

    assert isinstance(error, ExaAuthError)
    assert error.message == "Forbidden"
    assert error.status_code == 403
    assert error.path == "/answer"
    assert error.timestamp


def test_from_payload_unknown_message() -> None:
    error = ExaAPIError.from_payload({}, status_code=500)

    assert error.message == "Unknown error"
    assert error.retryable is True


def test_explicit_retryable_overrides_class_default() -> None:
    assert ExaAPIError("x", retryable=True).retryable is True
    assert ExaServerError("x", retryable=False).retryable is False


def test_resource_failed_error_fields() -> None:
    error = ExaResourceFailedError(
        "Import imp_1 failed: bad csv",
        resource_id="imp_1",
        status="failed",
        failure_message="bad csv",
    )

    assert error.kind is ErrorKind.RESOURCE_FAILED
    assert error.retryable is False
    assert error.failure_message == "bad csv"
