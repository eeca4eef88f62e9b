"""Shared implementation of monitors and streams (cron-scheduled Webset jobs)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from exa_client._normalization import build_pagination_params
from exa_client._pagination import collect_all, iterate_pages
from exa_client.models import ListPage
from exa_client.websets._base import WebsetsResourceClient

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from exa_client._http import ExaHTTPBase
    from exa_client.websets.models import CreateScheduleParameters, UpdateScheduleParameters

JobT = TypeVar("JobT", bound=BaseModel)
RunT = TypeVar("RunT", bound=BaseModel)


class ScheduleRunsClient(WebsetsResourceClient, Generic[RunT]):
    """Runs of one kind of scheduled job."""

    collection: ClassVar[str]
    run_model: type[RunT]

    async def list(
        self,
        parent_id: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> ListPage[RunT]:
        data = await self._request(
            "GET",
            f"/v0/{self.collection}/{parent_id}/runs",
            params=build_pagination_params(cursor, limit),
        )
        return ListPage[self.run_model].model_validate(data)

    def list_all(self, parent_id: str, *, limit: int | None = None) -> AsyncIterator[RunT]:
        async def _page(cursor: str | None) -> ListPage[RunT]:
            return await self.list(parent_id, cursor=cursor, limit=limit)

        return iterate_pages(_page)

    async def get_all(self, parent_id: str, *, limit: int | None = None) -> list[RunT]:
        async def _page(cursor: str | None) -> ListPage[RunT]:
            return await self.list(parent_id, cursor=cursor, limit=limit)

        return await collect_all(_page)

    async def get(self, parent_id: str, run_id: str) -> RunT:
        data = await self._request("GET", f"/v0/{self.collection}/{parent_id}/runs/{run_id}")
        return self.run_model.model_validate(data)


class ScheduleClient(WebsetsResourceClient, Generic[JobT, RunT]):
    """CRUD for one kind of scheduled job, plus its `runs` sub-client."""

    collection: ClassVar[str]
    model: type[JobT]
    runs_client: type[ScheduleRunsClient[RunT]]

    def __init__(self, http: ExaHTTPBase) -> None:
        super().__init__(http)
        self.runs = self.runs_client(http)

    def _dump(self, params: BaseModel) -> dict[str, Any]:
        return params.model_dump(by_alias=True, exclude_none=True, mode="json")

    async def create(self, params: CreateScheduleParameters) -> JobT:
        data = await self._request("POST", f"/v0/{self.collection}", json_body=self._dump(params))
        return self.model.model_validate(data)

    async def get(self, job_id: str) -> JobT:
        data = await self._request("GET", f"/v0/{self.collection}/{job_id}")
        return self.model.model_validate(data)

    async def list(
        self,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        webset_id: str | None = None,
    ) -> ListPage[JobT]:
        data = await self._request(
            "GET",
            f"/v0/{self.collection}",
            params=build_pagination_params(cursor, limit, websetId=webset_id),
        )
        return ListPage[self.model].model_validate(data)

    def list_all(
        self, *, limit: int | None = None, webset_id: str | None = None
    ) -> AsyncIterator[JobT]:
        async def _page(cursor: str | None) -> ListPage[JobT]:
            return await self.list(cursor=cursor, limit=limit, webset_id=webset_id)

        return iterate_pages(_page)

    async def get_all(
        self, *, limit: int | None = None, webset_id: str | None = None
    ) -> list[JobT]:
        async def _page(cursor: str | None) -> ListPage[JobT]:
            return await self.list(cursor=cursor, limit=limit, webset_id=webset_id)

        return await collect_all(_page)

    async def update(self, job_id: str, params: UpdateScheduleParameters) -> JobT:
        data = await self._request(
            "PATCH", f"/v0/{self.collection}/{job_id}", json_body=self._dump(params)
        )
        return self.model.model_validate(data)

    async def delete(self, job_id: str) -> JobT:
        data = await self._request("DELETE", f"/v0/{self.collection}/{job_id}")
        return self.model.model_validate(data)
