"""Webset search operations for Exa Websets API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from exa_client._polling import poll_until_terminal
from exa_client.websets._base import WebsetsResourceClient
from exa_client.websets.models import (
    CreateWebsetSearchParameters,
    WebsetSearch,
    WebsetSearchStatus,
)

if TYPE_CHECKING:
    from collections.abc import Callable


class WebsetSearchesClient(WebsetsResourceClient):
    """Searches that populate a Webset."""

    async def create(
        self, webset_id: str, params: CreateWebsetSearchParameters
    ) -> WebsetSearch:
        """Start a search on a Webset via POST /v0/websets/{webset}/searches."""
        data = await self._request(
            "POST",
            f"/v0/websets/{webset_id}/searches",
            json_body=params.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return WebsetSearch.model_validate(data)

    async def get(self, webset_id: str, search_id: str) -> WebsetSearch:
        """Get a search via GET /v0/websets/{webset}/searches/{id}."""
        data = await self._request("GET", f"/v0/websets/{webset_id}/searches/{search_id}")
        return WebsetSearch.model_validate(data)

    async def cancel(self, webset_id: str, search_id: str) -> WebsetSearch:
        """Cancel a running search via POST /v0/websets/{webset}/searches/{id}/cancel."""
        data = await self._request(
            "POST", f"/v0/websets/{webset_id}/searches/{search_id}/cancel"
        )
        return WebsetSearch.model_validate(data)

    async def wait_until_finished(
        self,
        webset_id: str,
        search_id: str,
        *,
        interval_seconds: float = 1.0,
        timeout_seconds: float | None = 300.0,
        on_poll: Callable[[str], None] | None = None,
    ) -> WebsetSearch:
        """Poll a search until it completes.

        Raises:
            ExaResourceFailedError: If the search is canceled.
            ExaTimeoutError: If it is still running after `timeout_seconds`.
        """
        return await poll_until_terminal(
            lambda: self.get(webset_id, search_id),
            get_status=lambda search: search.status.value,
            success={WebsetSearchStatus.COMPLETED.value},
            failure={WebsetSearchStatus.CANCELED.value},
            interval_seconds=interval_seconds,
            timeout_seconds=timeout_seconds,
            on_poll=on_poll,
            describe="Webset search",
            resource_id=search_id,
            failure_message=lambda search: (
                search.canceled_reason.value if search.canceled_reason else None
            ),
        )
