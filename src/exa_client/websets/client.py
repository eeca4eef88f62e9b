"""Async Exa Websets API client."""

from __future__ import annotations

from typing import TYPE_CHECKING

from exa_client._normalization import build_pagination_params
from exa_client._pagination import collect_all, iterate_pages
from exa_client._polling import poll_until_terminal
from exa_client.models import ListPage
from exa_client.websets._base import WebsetsResourceClient
from exa_client.websets._enrichments import WebsetEnrichmentsClient
from exa_client.websets._events import WebsetEventsClient
from exa_client.websets._imports import WebsetImportsClient
from exa_client.websets._items import WebsetItemsClient
from exa_client.websets._monitors import WebsetMonitorsClient
from exa_client.websets._searches import WebsetSearchesClient
from exa_client.websets._streams import WebsetStreamsClient
from exa_client.websets._webhooks import WebsetWebhooksClient
from exa_client.websets.models import (
    CreateWebsetParameters,
    GetWebsetResponse,
    PreviewWebsetParameters,
    PreviewWebsetResponse,
    UpdateWebsetRequest,
    Webset,
    WebsetStatus,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from exa_client._http import ExaHTTPBase


class WebsetsClient(WebsetsResourceClient):
    """
    Client for the Exa Websets API, reached as `ExaClient.websets`.

        async with ExaClient.from_env() as exa:
            webset = await exa.websets.create(
                CreateWebsetParameters(
                    search=CreateWebsetSearchParameters(query="AI startups in Europe", count=10)
                )
            )
            webset = await exa.websets.wait_until_idle(webset.id)
            items = await exa.websets.items.get_all(webset.id)
    """

    def __init__(self, http: ExaHTTPBase) -> None:
        super().__init__(http)
        self.items = WebsetItemsClient(http)
        self.searches = WebsetSearchesClient(http)
        self.enrichments = WebsetEnrichmentsClient(http)
        self.imports = WebsetImportsClient(http)
        self.monitors = WebsetMonitorsClient(http)
        self.streams = WebsetStreamsClient(http)
        self.webhooks = WebsetWebhooksClient(http)
        self.events = WebsetEventsClient(http)

    async def create(self, params: CreateWebsetParameters) -> Webset:
        """Create a new Webset via POST /v0/websets.

        Args:
            params: Parameters for creating the Webset.

        Returns:
            Created `Webset`.

        Raises:
            ExaValidationError: If the parameters are rejected.
            ExaAuthError: If the API key is invalid.
            ExaAPIError: For other API/network/response errors.
        """
        data = await self._request(
            "POST",
            "/v0/websets",
            json_body=params.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return Webset.model_validate(data)

    async def preview(self, params: PreviewWebsetParameters) -> PreviewWebsetResponse:
        """Preview how a search would be interpreted via POST /v0/websets/preview."""
        data = await self._request(
            "POST",
            "/v0/websets/preview",
            json_body=params.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return PreviewWebsetResponse.model_validate(data)

    async def get(self, webset_id: str, *, expand: list[str] | None = None) -> GetWebsetResponse:
        """Get a Webset by ID via GET /v0/websets/{id}.

        Args:
            webset_id: Webset ID or external ID.
            expand: Related resources to embed (e.g. `["items"]`).

        Raises:
            ExaNotFoundError: If the Webset does not exist.
        """
        data = await self._request(
            "GET",
            f"/v0/websets/{webset_id}",
            params=build_pagination_params(expand=expand),
        )
        return GetWebsetResponse.model_validate(data)

    async def list(
        self,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        status: WebsetStatus | None = None,
        external_id: str | None = None,
    ) -> ListPage[Webset]:
        """List Websets via GET /v0/websets.

        Args:
            cursor: Optional pagination cursor.
            limit: Optional page size.
            status: Only return Websets in this status.
            external_id: Only return the Webset with this external ID.
        """
        data = await self._request(
            "GET",
            "/v0/websets",
            params=build_pagination_params(
                cursor, limit, status=status, externalId=external_id
            ),
        )
        return ListPage[Webset].model_validate(data)

    def list_all(
        self,
        *,
        limit: int | None = None,
        status: WebsetStatus | None = None,
        external_id: str | None = None,
    ) -> AsyncIterator[Webset]:
        """Iterate over every Webset, following pagination cursors."""

        async def _page(cursor: str | None) -> ListPage[Webset]:
            return await self.list(
                cursor=cursor, limit=limit, status=status, external_id=external_id
            )

        return iterate_pages(_page)

    async def get_all(
        self,
        *,
        limit: int | None = None,
        status: WebsetStatus | None = None,
        external_id: str | None = None,
    ) -> list[Webset]:
        async def _page(cursor: str | None) -> ListPage[Webset]:
            return await self.list(
                cursor=cursor, limit=limit, status=status, external_id=external_id
            )

        return await collect_all(_page)

    async def update(self, webset_id: str, params: UpdateWebsetRequest) -> Webset:
        """Update a Webset via POST /v0/websets/{id}."""
        data = await self._request(
            "POST",
            f"/v0/websets/{webset_id}",
            json_body=params.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return Webset.model_validate(data)

    async def delete(self, webset_id: str) -> Webset:
        """Delete a Webset via DELETE /v0/websets/{id}."""
        data = await self._request("DELETE", f"/v0/websets/{webset_id}")
        return Webset.model_validate(data)

    async def cancel(self, webset_id: str) -> Webset:
        """Cancel all running operations of a Webset via POST /v0/websets/{id}/cancel."""
        data = await self._request("POST", f"/v0/websets/{webset_id}/cancel")
        return Webset.model_validate(data)

    async def wait_until_idle(
        self,
        webset_id: str,
        *,
        interval_seconds: float = 1.0,
        timeout_seconds: float | None = 300.0,
        on_poll: Callable[[str], None] | None = None,
    ) -> Webset:
        """Poll a Webset until it is idle.

        Args:
            webset_id: Webset ID.
            interval_seconds: Delay between polls.
            timeout_seconds: Overall budget; `None` waits indefinitely.
            on_poll: Optional callback invoked with each observed status.

        Raises:
            ExaTimeoutError: If the Webset is still busy after `timeout_seconds`.
        """
        return await poll_until_terminal(
            lambda: self.get(webset_id),
            get_status=lambda webset: webset.status.value,
            success={WebsetStatus.IDLE.value},
            interval_seconds=interval_seconds,
            timeout_seconds=timeout_seconds,
            on_poll=on_poll,
            describe="Webset",
            resource_id=webset_id,
        )
