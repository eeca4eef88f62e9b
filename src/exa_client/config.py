"""Configuration for the Exa API client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from exa_client._version import __version__

DEFAULT_BASE_URL = "https://api.exa.ai"
DEFAULT_USER_AGENT = f"exa-client-python/{__version__}"


@dataclass(frozen=True)
class ExaConfig:
    """Configuration for Exa API client."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    user_agent: str = field(default=DEFAULT_USER_AGENT)

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("api_key must be a non-empty string")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

    @classmethod
    def from_env(
        cls,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
    ) -> ExaConfig:
        """Load configuration from environment variables.

        Explicit arguments take precedence over the environment.

        Required (unless `api_key` is passed):
            EXA_API_KEY: Your Exa API key

        Optional:
            EXA_BASE_URL: Override base URL (default: https://api.exa.ai)
            EXA_TIMEOUT: Request timeout in seconds (default: 30)
        """
        resolved_key = api_key or os.environ.get("EXA_API_KEY")
        if not resolved_key:
            raise ValueError(
                "EXA_API_KEY environment variable is required. Get your API key at https://exa.ai"
            )

        raw_timeout = os.environ.get("EXA_TIMEOUT", "30")
        try:
            timeout_seconds = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"EXA_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None

        return cls(
            api_key=resolved_key,
            base_url=base_url or os.environ.get("EXA_BASE_URL", DEFAULT_BASE_URL),
            timeout_seconds=timeout_seconds,
        )
