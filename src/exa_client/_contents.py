"""Contents endpoint methods for Exa API."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from exa_client._normalization import content_options, flatten_contents_options
from exa_client.models import ContentsResponse, SearchResult

if TYPE_CHECKING:
    from exa_client.models import (
        ContextOptions,
        ExtrasOptions,
        HighlightsOptions,
        LivecrawlOption,
        SummaryOptions,
        TextContentsOptions,
    )


class ContentsMixin:
    """Mixin providing contents-related Exa API methods."""

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        raise NotImplementedError

    async def get_contents(
        self,
        urls: str | Sequence[str] | Sequence[SearchResult] | None = None,
        *,
        ids: Sequence[str] | None = None,
        text: bool | TextContentsOptions | None = None,
        highlights: bool | HighlightsOptions | None = None,
        summary: bool | SummaryOptions | None = None,
        context: bool | ContextOptions | None = None,
        livecrawl: LivecrawlOption | str | None = None,
        livecrawl_timeout: int | None = None,
        subpages: int | None = None,
        subpage_target: str | list[str] | None = None,
        extras: ExtrasOptions | None = None,
    ) -> ContentsResponse:
        """Fetch document contents for URLs, document ids, or earlier search results.

        Content options sit at the top level of the request body. With none of them
        set, text contents are requested by default.

        Args:
            urls: A URL, a list of URLs, or a list of `SearchResult` (sent as ids).
            ids: Document ids to fetch instead of URLs.
            text: Whether to include full text in results (or `TextContentsOptions`).
            highlights: Whether to include highlights in results (or `HighlightsOptions`).
            summary: Whether to include summaries in results (or `SummaryOptions`).
            context: Whether to include a combined context string (or `ContextOptions`).
            livecrawl: Exa livecrawl mode.
            livecrawl_timeout: Livecrawl timeout in milliseconds.
            subpages: Number of subpages to crawl per result.
            subpage_target: Keyword(s) used to pick subpages.
            extras: Extra metadata to extract.

        Returns:
            Parsed `ContentsResponse`.

        Raises:
            ValueError: If neither URLs nor ids are given, or if `urls` mixes
                `SearchResult` objects with URL strings.
            ExaAuthError: If the API key is invalid.
            ExaRateLimitError: If rate-limited.
            ExaAPIError: For other API/network/response errors.
        """
        body: dict[str, Any] = {}
        if isinstance(urls, str):
            body["urls"] = [urls]
        elif urls:
            results = [item for item in urls if isinstance(item, SearchResult)]
            if results and len(results) != len(urls):
                raise ValueError("get_contents cannot mix SearchResult objects and URL strings")
            if results:
                body["ids"] = [item.id for item in results]
            else:
                body["urls"] = list(urls)
        if ids:
            body["ids"] = [*body.get("ids", []), *ids]
        if not body:
            raise ValueError("get_contents requires at least one URL or id")

        body.update(
            content_options(
                text=text,
                highlights=highlights,
                summary=summary,
                context=context,
                livecrawl=livecrawl,
                livecrawl_timeout=livecrawl_timeout,
                subpages=subpages,
                subpage_target=subpage_target,
                extras=extras,
            )
        )
        data = await self._request("POST", "/contents", json_body=flatten_contents_options(body))
        return ContentsResponse.model_validate(data)
