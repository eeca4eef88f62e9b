"""Event operations for Exa Websets API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from exa_client._normalization import build_pagination_params
from exa_client._pagination import collect_all, iterate_pages
from exa_client.models import ListPage
from exa_client.websets._base import WebsetsResourceClient
from exa_client.websets.models import EventType, WebsetEvent

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Sequence


class WebsetEventsClient(WebsetsResourceClient):
    """Read-only log of Webset events."""

    async def list(
        self,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        types: Sequence[EventType] | None = None,
    ) -> ListPage[WebsetEvent]:
        """List events via GET /v0/events, optionally filtered by event type."""
        data = await self._request(
            "GET",
            "/v0/events",
            params=build_pagination_params(
                cursor, limit, types=list(types) if types else None
            ),
        )
        return ListPage[WebsetEvent].model_validate(data)

    def list_all(
        self,
        *,
        limit: int | None = None,
        types: Sequence[EventType] | None = None,
    ) -> AsyncIterator[WebsetEvent]:
        async def _page(cursor: str | None) -> ListPage[WebsetEvent]:
            return await self.list(cursor=cursor, limit=limit, types=types)

        return iterate_pages(_page)

    async def get_all(
        self,
        *,
        limit: int | None = None,
        types: Sequence[EventType] | None = None,
    ) -> list[WebsetEvent]:
        async def _page(cursor: str | None) -> ListPage[WebsetEvent]:
            return await self.list(cursor=cursor, limit=limit, types=types)

        return await collect_all(_page)

    async def get(self, event_id: str) -> WebsetEvent:
        data = await self._request("GET", f"/v0/events/{event_id}")
        return WebsetEvent.model_validate(data)
