"""
Shared test fixtures.

PHILOSOPHY: Use REAL objects wherever possible. Only mock at system boundaries.
- Real Pydantic models (not dicts pretending to be models)
- respx ONLY for HTTP boundary
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from dotenv import load_dotenv

from exa_client import ExaClient, ExaConfig

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

# Load environment variables from .env for integration tests
load_dotenv()

TIMESTAMP = "2025-01-01T00:00:00Z"


@pytest.fixture
async def exa() -> AsyncGenerator[ExaClient, None]:
    """Open Exa client pointed at the default base URL (requests intercepted by respx)."""
    async with ExaClient(ExaConfig(api_key="test-key")) as client:
        yield client


@pytest.fixture
def no_sleep(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Replace `asyncio.sleep` with a recorder so polling and retry tests run instantly."""
    import asyncio

    sleeps: list[float] = []

    async def _sleep(seconds: float) -> None:
        sleeps.append(seconds)

    monkeypatch.setattr(asyncio, "sleep", _sleep)
    return sleeps


# ============================================================================
# Response payload builders (match the wire shape)
# ============================================================================
@pytest.fixture
def make_webset() -> Callable[..., dict[str, Any]]:
    def _make(webset_id: str = "ws_1", *, status: str = "idle", **extra: Any) -> dict[str, Any]:
        return {
            "id": webset_id,
            "object": "webset",
            "status": status,
            "externalId": None,
            "searches": [],
            "enrichments": [],
            "metadata": {},
            "createdAt": TIMESTAMP,
            "updatedAt": TIMESTAMP,
            **extra,
        }

    return _make


@pytest.fixture
def make_item() -> Callable[..., dict[str, Any]]:
    def _make(item_id: str, *, webset_id: str = "ws_1", **extra: Any) -> dict[str, Any]:
        return {
            "id": item_id,
            "object": "webset_item",
            "source": "search",
            "sourceId": "ws_search_1",
            "websetId": webset_id,
            "properties": {"type": "company", "url": f"https://{item_id}.example.com"},
            "evaluations": [
                {"criterion": "Based in Europe", "satisfied": "yes", "references": []}
            ],
            "createdAt": TIMESTAMP,
            "updatedAt": TIMESTAMP,
            **extra,
        }

    return _make


@pytest.fixture
def make_search() -> Callable[..., dict[str, Any]]:
    def _make(
        search_id: str = "ws_search_1", *, status: str = "running", **extra: Any
    ) -> dict[str, Any]:
        return {
            "id": search_id,
            "object": "webset_search",
            "status": status,
            "websetId": "ws_1",
            "query": "AI startups in Europe",
            "criteria": [],
            "count": 10,
            "progress": {"found": 3, "completion": 30},
            "metadata": {},
            "createdAt": TIMESTAMP,
            "updatedAt": TIMESTAMP,
            **extra,
        }

    return _make


@pytest.fixture
def make_research_task() -> Callable[..., dict[str, Any]]:
    def _make(
        task_id: str = "task_1", *, status: str = "in_progress", **extra: Any
    ) -> dict[str, Any]:
        return {
            "id": task_id,
            "status": status,
            "instructions": "Summarize recent fusion milestones",
            **extra,
        }

    return _make
