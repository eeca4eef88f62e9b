"""Webset enrichment operations for Exa Websets API."""

from __future__ import annotations

from exa_client.websets._base import WebsetsResourceClient
from exa_client.websets.models import (
    CreateEnrichmentParameters,
    UpdateEnrichmentParameters,
    WebsetEnrichment,
)


class WebsetEnrichmentsClient(WebsetsResourceClient):
    """Enrichments that extract extra fields for every Webset item."""

    async def create(
        self, webset_id: str, params: CreateEnrichmentParameters
    ) -> WebsetEnrichment:
        """Create an enrichment via POST /v0/websets/{webset}/enrichments."""
        data = await self._request(
            "POST",
            f"/v0/websets/{webset_id}/enrichments",
            json_body=params.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return WebsetEnrichment.model_validate(data)

    async def get(self, webset_id: str, enrichment_id: str) -> WebsetEnrichment:
        data = await self._request(
            "GET", f"/v0/websets/{webset_id}/enrichments/{enrichment_id}"
        )
        return WebsetEnrichment.model_validate(data)

    async def update(
        self,
        webset_id: str,
        enrichment_id: str,
        params: UpdateEnrichmentParameters,
    ) -> None:
        """Update an enrichment via PATCH; the API returns no body."""
        await self._request(
            "PATCH",
            f"/v0/websets/{webset_id}/enrichments/{enrichment_id}",
            json_body=params.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )

    async def delete(self, webset_id: str, enrichment_id: str) -> WebsetEnrichment:
        data = await self._request(
            "DELETE", f"/v0/websets/{webset_id}/enrichments/{enrichment_id}"
        )
        return WebsetEnrichment.model_validate(data)

    async def cancel(self, webset_id: str, enrichment_id: str) -> WebsetEnrichment:
        data = await self._request(
            "POST", f"/v0/websets/{webset_id}/enrichments/{enrichment_id}/cancel"
        )
        return WebsetEnrichment.model_validate(data)
