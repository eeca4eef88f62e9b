"""Unit tests for the research task client."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import respx
from httpx import Response
from pydantic import BaseModel

from exa_client import ExaClient, ExaResourceFailedError, ExaTimeoutError
from exa_client.models import ResearchModel, ResearchStatus

RESEARCH_BASE = "https://api.exa.ai/research/v0"


class _Report(BaseModel):
    headline: str
    sources: list[str]


@pytest.mark.asyncio
@respx.mock
async def test_create_task_body_defaults(exa: ExaClient) -> None:
    route = respx.post(f"{RESEARCH_BASE}/tasks").mock(
        return_value=Response(201, json={"id": "task_1"})
    )

    created = await exa.research.create_task("Summarize recent fusion milestones")

    assert created.id == "task_1"
    assert json.loads(route.calls[0].request.content) == {
        "instructions": "Summarize recent fusion milestones",
        "model": "exa-research",
        "output": {"inferSchema": True},
    }


@pytest.mark.asyncio
@respx.mock
async def test_create_task_with_schema_model(exa: ExaClient) -> None:
    route = respx.post(f"{RESEARCH_BASE}/tasks").mock(
        return_value=Response(201, json={"id": "task_2"})
    )

    await exa.research.create_task(
        "Find the headline",
        model=ResearchModel.PRO,
        output_schema=_Report,
        infer_schema=False,
    )

    body = json.loads(route.calls[0].request.content)
    assert body["model"] == "exa-research-pro"
    assert body["output"] == {"schema": _Report.model_json_schema(), "inferSchema": False}


@pytest.mark.asyncio
async def test_create_task_rejects_empty_instructions(exa: ExaClient) -> None:
    from pydantic import ValidationError

    with pytest.raises(ValidationError):
        await exa.research.create_task("")


@pytest.mark.asyncio
@respx.mock
async def test_get_task_parses_result(
    exa: ExaClient, make_research_task: Callable[..., dict[str, Any]]
) -> None:
    respx.get(f"{RESEARCH_BASE}/tasks/task_1").mock(
        return_value=Response(
            200,
            json=make_research_task(
                status="completed",
                data={"headline": "ITER milestone"},
                citations={"headline": [{"id": "c1", "url": "https://iter.org", "title": "ITER"}]},
            ),
        )
    )

    task = await exa.research.get_task("task_1")

    assert task.status is ResearchStatus.COMPLETED
    assert task.data == {"headline": "ITER milestone"}
    assert task.citations["headline"][0].url == "https://iter.org"


@pytest.mark.asyncio
@respx.mock
async def test_list_all_tasks_follows_cursor(
    exa: ExaClient, make_research_task: Callable[..., dict[str, Any]]
) -> None:
    route = respx.get(f"{RESEARCH_BASE}/tasks").mock(
        side_effect=[
            Response(
                200,
                json={"data": [make_research_task("t1")], "hasMore": True, "nextCursor": "c2"},
            ),
            Response(200, json={"data": [make_research_task("t2")], "hasMore": False}),
        ]
    )

    tasks = await exa.research.get_all_tasks(limit=1)

    assert [t.id for t in tasks] == ["t1", "t2"]
    assert route.call_count == 2
    assert "cursor" not in route.calls[0].request.url.params
    assert route.calls[0].request.url.params["limit"] == "1"
    assert route.calls[1].request.url.params["cursor"] == "c2"


@pytest.mark.asyncio
@respx.mock
async def test_stream_task_events_parses_data_frames(exa: ExaClient) -> None:
    stream_body = (
        'data: {"eventType": "task-created", "taskId": "task_1"}\n'
        "\n"
        ": keep-alive\n"
        "\n"
        "data: not-json\n"
        "\n"
        'data: {"eventType": "plan-definition",\n'
        'data:  "plan": "search"}\n'
        "\n"
        'data: {"eventType": "task-completed"}\n'
    )
    route = respx.get(f"{RESEARCH_BASE}/tasks/task_1").mock(
        return_value=Response(
            200, text=stream_body, headers={"Content-Type": "text/event-stream"}
        )
    )

    events = [event async for event in exa.research.stream_task_events("task_1")]

    assert events == [
        {"eventType": "task-created", "taskId": "task_1"},
        {"eventType": "plan-definition", "plan": "search"},
        {"eventType": "task-completed"},
    ]
    request = route.calls[0].request
    assert request.url.params["stream"] == "true"
    assert request.headers["Accept"] == "text/event-stream"


@pytest.mark.asyncio
@respx.mock
async def test_stream_task_events_maps_errors(exa: ExaClient) -> None:
    from exa_client import ExaNotFoundError

    respx.get(f"{RESEARCH_BASE}/tasks/missing").mock(
        return_value=Response(404, json={"message": "Task not found"})
    )

    with pytest.raises(ExaNotFoundError, match="Task not found"):
        async for _ in exa.research.stream_task_events("missing"):
            pass


@pytest.mark.asyncio
@respx.mock
async def test_stream_task_events_maps_connection_errors(exa: ExaClient) -> None:
    from exa_client import ExaAPIError

    respx.get(f"{RESEARCH_BASE}/tasks/task_1").mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(ExaAPIError, match="refused") as exc_info:
        async for _ in exa.research.stream_task_events("task_1"):
            pass

    assert exc_info.value.retryable is True
    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
@respx.mock
async def test_poll_task_returns_completed_task(
    exa: ExaClient,
    make_research_task: Callable[..., dict[str, Any]],
    no_sleep: list[float],
) -> None:
    route = respx.get(f"{RESEARCH_BASE}/tasks/task_1").mock(
        side_effect=[
            Response(200, json=make_research_task(status="pending")),
            Response(200, json=make_research_task(status="in_progress")),
            Response(200, json=make_research_task(status="completed", data={"ok": True})),
        ]
    )
    statuses: list[str] = []

    task = await exa.research.poll_task("task_1", on_poll=statuses.append)

    assert task.data == {"ok": True}
    assert route.call_count == 3
    assert statuses == ["pending", "in_progress", "completed"]
    assert no_sleep == [1.0, 1.0]


@pytest.mark.parametrize("status", ["failed", "canceled"])
@pytest.mark.asyncio
@respx.mock
async def test_poll_task_raises_on_failure(
    status: str,
    exa: ExaClient,
    make_research_task: Callable[..., dict[str, Any]],
    no_sleep: list[float],
) -> None:
    respx.get(f"{RESEARCH_BASE}/tasks/task_1").mock(
        return_value=Response(
            200, json=make_research_task(status=status, error="model overloaded")
        )
    )

    with pytest.raises(ExaResourceFailedError) as exc_info:
        await exa.research.poll_task("task_1")

    assert exc_info.value.status == status
    assert exc_info.value.failure_message == "model overloaded"


@pytest.mark.asyncio
@respx.mock
async def test_poll_task_times_out(
    exa: ExaClient,
    make_research_task: Callable[..., dict[str, Any]],
    monkeypatch: pytest.MonkeyPatch,
    no_sleep: list[float],
) -> None:
    clock = iter([0.0, 5.0, 11.0])
    monkeypatch.setattr("exa_client._polling.monotonic", lambda: next(clock))
    route = respx.get(f"{RESEARCH_BASE}/tasks/task_1").mock(
        return_value=Response(200, json=make_research_task())
    )

    with pytest.raises(ExaTimeoutError):
        await exa.research.poll_task("task_1", timeout_seconds=10.0)

    assert route.call_count == 2
