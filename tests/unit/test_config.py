"""Unit tests for ExaConfig."""

from __future__ import annotations

import pytest

from exa_client import ExaConfig
from exa_client.config import DEFAULT_BASE_URL


def test_from_env_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXA_API_KEY", "env-key")
    monkeypatch.setenv("EXA_BASE_URL", "https://proxy.example")
    monkeypatch.setenv("EXA_TIMEOUT", "12.5")

    config = ExaConfig.from_env()

    assert config.api_key == "env-key"
    assert config.base_url == "https://proxy.example"
    assert config.timeout_seconds == 12.5


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXA_API_KEY", "env-key")
    monkeypatch.delenv("EXA_BASE_URL", raising=False)
    monkeypatch.delenv("EXA_TIMEOUT", raising=False)

    config = ExaConfig.from_env()

    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout_seconds == 30.0
    assert config.user_agent.startswith("exa-client-python/")


def test_explicit_arguments_take_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXA_API_KEY", "env-key")
    monkeypatch.setenv("EXA_BASE_URL", "https://env.example")

    config = ExaConfig.from_env(api_key="arg-key", base_url="https://arg.example")

    assert config.api_key == "arg-key"
    assert config.base_url == "https://arg.example"


def test_from_env_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EXA_API_KEY", raising=False)

    with pytest.raises(ValueError, match="EXA_API_KEY"):
        ExaConfig.from_env()


def test_rejects_invalid_values() -> None:
    with pytest.raises(ValueError, match="api_key"):
        ExaConfig(api_key="")
    with pytest.raises(ValueError, match="timeout_seconds"):
        ExaConfig(api_key="k", timeout_seconds=0)


def test_from_env_rejects_non_numeric_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXA_API_KEY", "env-key")
    monkeypatch.setenv("EXA_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="EXA_TIMEOUT must be a number of seconds, got 'soon'"):
        ExaConfig.from_env()
