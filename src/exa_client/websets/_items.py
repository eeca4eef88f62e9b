"""Webset item operations for Exa Websets API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from exa_client._normalization import build_pagination_params
from exa_client._pagination import collect_all, iterate_pages
from exa_client.models import ListPage
from exa_client.websets._base import WebsetsResourceClient
from exa_client.websets.models import WebsetItem

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class WebsetItemsClient(WebsetsResourceClient):
    """
    Webset item operations.

    Provides:
    - list / list_all / get_all: Items in a Webset
    - get: A specific item
    - delete: Remove an item from a Webset
    """

    async def list(
        self,
        webset_id: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        source_id: str | None = None,
        search_id: str | None = None,
        satisfies_criteria: bool | None = None,
    ) -> ListPage[WebsetItem]:
        """List items in a Webset via GET /v0/websets/{webset}/items.

        Args:
            webset_id: Webset ID.
            cursor: Optional pagination cursor.
            limit: Optional page size.
            source_id: Only return items produced by this search or import.
            search_id: Only return items found by this Webset search.
            satisfies_criteria: Only return items that do (or do not) satisfy every criterion.

        Returns:
            One page of Webset items.

        Raises:
            ExaNotFoundError: If the Webset does not exist.
            ExaAPIError: For other API/network/response errors.
        """
        data = await self._request(
            "GET",
            f"/v0/websets/{webset_id}/items",
            params=build_pagination_params(
                cursor,
                limit,
                sourceId=source_id,
                searchId=search_id,
                satisfiesCriteria=satisfies_criteria,
            ),
        )
        return ListPage[WebsetItem].model_validate(data)

    def list_all(
        self,
        webset_id: str,
        *,
        limit: int | None = None,
        source_id: str | None = None,
        search_id: str | None = None,
        satisfies_criteria: bool | None = None,
    ) -> AsyncIterator[WebsetItem]:
        """Iterate over every item in a Webset, following pagination cursors."""

        async def _page(cursor: str | None) -> ListPage[WebsetItem]:
            return await self.list(
                webset_id,
                cursor=cursor,
                limit=limit,
                source_id=source_id,
                search_id=search_id,
                satisfies_criteria=satisfies_criteria,
            )

        return iterate_pages(_page)

    async def get_all(
        self,
        webset_id: str,
        *,
        limit: int | None = None,
        source_id: str | None = None,
        search_id: str | None = None,
        satisfies_criteria: bool | None = None,
    ) -> list[WebsetItem]:
        """Collect every item in a Webset into a list."""

        async def _page(cursor: str | None) -> ListPage[WebsetItem]:
            return await self.list(
                webset_id,
                cursor=cursor,
                limit=limit,
                source_id=source_id,
                search_id=search_id,
                satisfies_criteria=satisfies_criteria,
            )

        return await collect_all(_page)

    async def get(self, webset_id: str, item_id: str) -> WebsetItem:
        """Get a specific item via GET /v0/websets/{webset}/items/{id}."""
        data = await self._request("GET", f"/v0/websets/{webset_id}/items/{item_id}")
        return WebsetItem.model_validate(data)

    async def delete(self, webset_id: str, item_id: str) -> WebsetItem:
        """Delete an item via DELETE /v0/websets/{webset}/items/{id}."""
        data = await self._request("DELETE", f"/v0/websets/{webset_id}/items/{item_id}")
        return WebsetItem.model_validate(data)
