"""Client for the Exa research task API (`/research/v0`)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import structlog

from exa_client._normalization import build_pagination_params
from exa_client._pagination import collect_all, iterate_pages
from exa_client._polling import poll_until_terminal
from exa_client._resource import ResourceClient
from exa_client.models import (
    ListPage,
    ResearchCreateTaskRequest,
    ResearchCreateTaskResponse,
    ResearchModel,
    ResearchOutputSpec,
    ResearchStatus,
    ResearchTask,
)
from exa_client.schema import resolve_output_schema

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from pydantic import BaseModel

logger = structlog.get_logger()

RESEARCH_POLL_INTERVAL_SECONDS = 1.0
RESEARCH_POLL_TIMEOUT_SECONDS = 600.0


class ResearchClient(ResourceClient):
    """Create, inspect and wait on research tasks."""

    prefix = "/research/v0"

    async def create_task(
        self,
        instructions: str,
        *,
        model: ResearchModel | str = ResearchModel.STANDARD,
        output_schema: dict[str, Any] | type[BaseModel] | None = None,
        infer_schema: bool | None = None,
    ) -> ResearchCreateTaskResponse:
        """Create a research task via POST /research/v0/tasks.

        Args:
            instructions: Natural-language research instructions.
            model: Research model tier.
            output_schema: JSON schema dict or pydantic model class for the result.
            infer_schema: Let the server infer a schema; defaults to `True`.

        Returns:
            The created task id.

        Raises:
            TypeError: If `output_schema` is neither a dict nor a pydantic model class.
            ExaAPIError: On API errors.
        """
        request = ResearchCreateTaskRequest(
            instructions=instructions,
            model=model,
            output=ResearchOutputSpec(
                schema_=resolve_output_schema(output_schema),
                infer_schema=True if infer_schema is None else infer_schema,
            ),
        )
        data = await self._request(
            "POST",
            "/tasks",
            json_body=request.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return ResearchCreateTaskResponse.model_validate(data)

    async def get_task(self, task_id: str) -> ResearchTask:
        """Get a research task via GET /research/v0/tasks/{id}."""
        data = await self._request("GET", f"/tasks/{task_id}")
        return ResearchTask.model_validate(data)

    async def list_tasks(
        self, *, cursor: str | None = None, limit: int | None = None
    ) -> ListPage[ResearchTask]:
        """List research tasks via GET /research/v0/tasks."""
        data = await self._request(
            "GET", "/tasks", params=build_pagination_params(cursor, limit)
        )
        return ListPage[ResearchTask].model_validate(data)

    def list_all_tasks(self, *, limit: int | None = None) -> AsyncIterator[ResearchTask]:
        """Iterate over every research task, following pagination cursors."""

        async def _page(cursor: str | None) -> ListPage[ResearchTask]:
            return await self.list_tasks(cursor=cursor, limit=limit)

        return iterate_pages(_page)

    async def get_all_tasks(self, *, limit: int | None = None) -> list[ResearchTask]:
        """Collect every research task into a list."""

        async def _page(cursor: str | None) -> ListPage[ResearchTask]:
            return await self.list_tasks(cursor=cursor, limit=limit)

        return await collect_all(_page)

    async def stream_task_events(self, task_id: str) -> AsyncIterator[dict[str, Any]]:
        """Yield task events from the server-sent event stream of a research task.

        Each event is the JSON payload of an SSE `data:` frame. Frames that are not
        valid JSON are skipped.
        """
        data_lines: list[str] = []
        async for line in self._stream_lines(
            "GET", f"/tasks/{task_id}", params={"stream": "true"}
        ):
            if line.startswith("data:"):
                data_lines.append(line[5:].lstrip())
                continue
            if line.strip() or not data_lines:
                continue
            event = _parse_event("\n".join(data_lines))
            data_lines = []
            if event is not None:
                yield event

        if data_lines:
            event = _parse_event("\n".join(data_lines))
            if event is not None:
                yield event

    async def poll_task(
        self,
        task_id: str,
        *,
        interval_seconds: float = RESEARCH_POLL_INTERVAL_SECONDS,
        timeout_seconds: float | None = RESEARCH_POLL_TIMEOUT_SECONDS,
        on_poll: Callable[[str], None] | None = None,
    ) -> ResearchTask:
        """Wait for a research task to complete.

        Raises:
            ExaResourceFailedError: If the task fails or is canceled.
            ExaTimeoutError: If the task is still running after `timeout_seconds`.
        """
        return await poll_until_terminal(
            lambda: self.get_task(task_id),
            get_status=lambda task: task.status.value,
            success={ResearchStatus.COMPLETED.value},
            failure={ResearchStatus.FAILED.value, ResearchStatus.CANCELED.value},
            interval_seconds=interval_seconds,
            timeout_seconds=timeout_seconds,
            on_poll=on_poll,
            describe="Research task",
            resource_id=task_id,
            failure_message=lambda task: task.error,
        )


def _parse_event(payload: str) -> dict[str, Any] | None:
    try:
        event = json.loads(payload)
    except json.JSONDecodeError:
        logger.debug("Skipping unparsable research event", payload=payload[:200])
        return None
    return event if isinstance(event, dict) else None
