"""Webhook operations for Exa Websets API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from exa_client._normalization import build_pagination_params
from exa_client._pagination import collect_all, iterate_pages
from exa_client.models import ListPage
from exa_client.websets._base import WebsetsResourceClient
from exa_client.websets.models import (
    CreateWebhookParameters,
    EventType,
    UpdateWebhookParameters,
    Webhook,
    WebhookAttempt,
    WebhookStatus,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class WebsetWebhooksClient(WebsetsResourceClient):
    """Webhook subscriptions for Webset events."""

    async def create(self, params: CreateWebhookParameters) -> Webhook:
        """Create a webhook via POST /v0/webhooks.

        The returned `Webhook.secret` is only included in this response.
        """
        data = await self._request(
            "POST",
            "/v0/webhooks",
            json_body=params.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return Webhook.model_validate(data)

    async def get(self, webhook_id: str) -> Webhook:
        data = await self._request("GET", f"/v0/webhooks/{webhook_id}")
        return Webhook.model_validate(data)

    async def list(
        self,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        status: WebhookStatus | None = None,
        event: EventType | None = None,
    ) -> ListPage[Webhook]:
        """List webhooks, optionally filtered by status or subscribed event."""
        data = await self._request(
            "GET",
            "/v0/webhooks",
            params=build_pagination_params(cursor, limit, status=status, event=event),
        )
        return ListPage[Webhook].model_validate(data)

    def list_all(
        self,
        *,
        limit: int | None = None,
        status: WebhookStatus | None = None,
        event: EventType | None = None,
    ) -> AsyncIterator[Webhook]:
        async def _page(cursor: str | None) -> ListPage[Webhook]:
            return await self.list(cursor=cursor, limit=limit, status=status, event=event)

        return iterate_pages(_page)

    async def get_all(
        self,
        *,
        limit: int | None = None,
        status: WebhookStatus | None = None,
        event: EventType | None = None,
    ) -> list[Webhook]:
        async def _page(cursor: str | None) -> ListPage[Webhook]:
            return await self.list(cursor=cursor, limit=limit, status=status, event=event)

        return await collect_all(_page)

    async def update(self, webhook_id: str, params: UpdateWebhookParameters) -> Webhook:
        """Update a webhook via PATCH /v0/webhooks/{id}."""
        data = await self._request(
            "PATCH",
            f"/v0/webhooks/{webhook_id}",
            json_body=params.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return Webhook.model_validate(data)

    async def activate(self, webhook_id: str) -> Webhook:
        return await self.update(webhook_id, UpdateWebhookParameters(status=WebhookStatus.ACTIVE))

    async def deactivate(self, webhook_id: str) -> Webhook:
        return await self.update(
            webhook_id, UpdateWebhookParameters(status=WebhookStatus.INACTIVE)
        )

    async def delete(self, webhook_id: str) -> Webhook:
        data = await self._request("DELETE", f"/v0/webhooks/{webhook_id}")
        return Webhook.model_validate(data)

    async def list_attempts(
        self,
        webhook_id: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        event_type: EventType | None = None,
        successful: bool | None = None,
    ) -> ListPage[WebhookAttempt]:
        """List delivery attempts via GET /v0/webhooks/{id}/attempts."""
        data = await self._request(
            "GET",
            f"/v0/webhooks/{webhook_id}/attempts",
            params=build_pagination_params(
                cursor, limit, eventType=event_type, successful=successful
            ),
        )
        return ListPage[WebhookAttempt].model_validate(data)
