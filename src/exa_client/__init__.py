"""Typed async client for the Exa search, Websets and research APIs."""

from exa_client._pagination import collect_all, iterate_pages
from exa_client._polling import poll_until_terminal
from exa_client._version import __version__
from exa_client.client import ExaClient
from exa_client.config import ExaConfig
from exa_client.exceptions import (
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
from exa_client.retry import call_with_retries
from exa_client.schema import resolve_output_schema

__all__ = [
    "ErrorKind",
    "ExaAPIError",
    "ExaAuthError",
    "ExaClient",
    "ExaConfig",
    "ExaError",
    "ExaNotFoundError",
    "ExaRateLimitError",
    "ExaResourceFailedError",
    "ExaServerError",
    "ExaTimeoutError",
    "ExaValidationError",
    "__version__",
    "call_with_retries",
    "collect_all",
    "iterate_pages",
    "poll_until_terminal",
    "resolve_output_schema",
]
