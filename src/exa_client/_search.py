"""Search endpoint methods for Exa API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from exa_client._normalization import content_options, nest_contents_options
from exa_client.models import (
    FindSimilarRequest,
    FindSimilarResponse,
    SearchCategory,
    SearchRequest,
    SearchResponse,
    SearchType,
)

if TYPE_CHECKING:
    from datetime import datetime

    from exa_client.models import (
        ContentsRequest,
        ContextOptions,
        ExtrasOptions,
        HighlightsOptions,
        LivecrawlOption,
        SummaryOptions,
        TextContentsOptions,
    )


class SearchMixin:
    """Mixin providing search-related Exa API methods."""

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        raise NotImplementedError

    async def search(
        self,
        query: str,
        *,
        search_type: SearchType | str | None = None,
        additional_queries: list[str] | None = None,
        num_results: int | None = None,
        start_published_date: datetime | None = None,
        end_published_date: datetime | None = None,
        start_crawl_date: datetime | None = None,
        end_crawl_date: datetime | None = None,
        user_location: str | None = None,
        moderation: bool | None = None,
        include_text: list[str] | None = None,
        exclude_text: list[str] | None = None,
        include_domains: list[str] | None = None,
        exclude_domains: list[str] | None = None,
        category: SearchCategory | str | None = None,
        contents: ContentsRequest | dict[str, Any] | bool | None = None,
        text: bool | TextContentsOptions | None = None,
        highlights: bool | HighlightsOptions | None = None,
        summary: bool | SummaryOptions | None = None,
        context: bool | ContextOptions | None = None,
        livecrawl: LivecrawlOption | str | None = None,
        livecrawl_timeout: int | None = None,
        subpages: int | None = None,
        subpage_target: str | list[str] | None = None,
        extras: ExtrasOptions | None = None,
    ) -> SearchResponse:
        """Search Exa, returning document contents with the results.

        Content options (`text`, `highlights`, `summary`, `context`, `livecrawl`, ...)
        are sent nested under `contents`. With none of them set, text contents are
        requested by default; pass `contents=False` to receive bare results.

        Args:
            query: Search query string.
            search_type: Exa search type.
            additional_queries: Optional list of additional queries for diversification.
            num_results: Number of results to return.
            start_published_date: Optional lower bound for published date filtering.
            end_published_date: Optional upper bound for published date filtering.
            start_crawl_date: Optional lower bound for crawl date filtering.
            end_crawl_date: Optional upper bound for crawl date filtering.
            user_location: Optional two-letter country code for localization.
            moderation: Optional moderation flag.
            include_text: Optional list of required text terms.
            exclude_text: Optional list of excluded text terms.
            include_domains: Optional allowlist of domains.
            exclude_domains: Optional blocklist of domains.
            category: Optional Exa category filter.
            contents: Explicit contents object, or `False` to opt out of contents.
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
            Parsed `SearchResponse`.

        Raises:
            ExaAuthError: If the API key is invalid.
            ExaRateLimitError: If rate-limited.
            ExaAPIError: For other API/network/response errors.
        """
        request = SearchRequest(
            query=query,
            search_type=search_type,
            additional_queries=additional_queries,
            num_results=num_results,
            start_published_date=start_published_date,
            end_published_date=end_published_date,
            start_crawl_date=start_crawl_date,
            end_crawl_date=end_crawl_date,
            user_location=user_location,
            moderation=moderation,
            include_text=include_text,
            exclude_text=exclude_text,
            include_domains=include_domains,
            exclude_domains=exclude_domains,
            category=category,
        )
        options = request.model_dump(by_alias=True, exclude_none=True, mode="json")
        options.update(
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
        data = await self._request(
            "POST",
            "/search",
            json_body=nest_contents_options(options, contents=contents),
        )
        return SearchResponse.model_validate(data)

    async def search_and_contents(self, query: str, **kwargs: Any) -> SearchResponse:
        """Alias of `search`; contents are always requested unless opted out."""
        return await self.search(query, **kwargs)

    async def find_similar(
        self,
        url: str,
        *,
        num_results: int | None = None,
        include_domains: list[str] | None = None,
        exclude_domains: list[str] | None = None,
        start_published_date: datetime | None = None,
        end_published_date: datetime | None = None,
        start_crawl_date: datetime | None = None,
        end_crawl_date: datetime | None = None,
        include_text: list[str] | None = None,
        exclude_text: list[str] | None = None,
        exclude_source_domain: bool | None = None,
        category: SearchCategory | str | None = None,
        contents: ContentsRequest | dict[str, Any] | bool | None = None,
        text: bool | TextContentsOptions | None = None,
        highlights: bool | HighlightsOptions | None = None,
        summary: bool | SummaryOptions | None = None,
        context: bool | ContextOptions | None = None,
        livecrawl: LivecrawlOption | str | None = None,
        livecrawl_timeout: int | None = None,
        subpages: int | None = None,
        subpage_target: str | list[str] | None = None,
        extras: ExtrasOptions | None = None,
    ) -> FindSimilarResponse:
        """Find documents similar to a given URL.

        Content options behave as in `search`.

        Args:
            url: URL to find similar documents for.
            num_results: Number of results to return.
            include_domains: Optional allowlist of domains.
            exclude_domains: Optional blocklist of domains.
            start_published_date: Optional lower bound for published date filtering.
            end_published_date: Optional upper bound for published date filtering.
            start_crawl_date: Optional lower bound for crawl date filtering.
            end_crawl_date: Optional upper bound for crawl date filtering.
            include_text: Optional list of required text terms.
            exclude_text: Optional list of excluded text terms.
            exclude_source_domain: Exclude results from the source URL's domain.
            category: Optional Exa category filter.
            contents: Explicit contents object, or `False` to opt out of contents.
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
            Parsed `FindSimilarResponse`.

        Raises:
            ExaAuthError: If the API key is invalid.
            ExaRateLimitError: If rate-limited.
            ExaAPIError: For other API/network/response errors.
        """
        request = FindSimilarRequest(
            url=url,
            num_results=num_results,
            include_domains=include_domains,
            exclude_domains=exclude_domains,
            start_published_date=start_published_date,
            end_published_date=end_published_date,
            start_crawl_date=start_crawl_date,
            end_crawl_date=end_crawl_date,
            include_text=include_text,
            exclude_text=exclude_text,
            exclude_source_domain=exclude_source_domain,
            category=category,
        )
        options = request.model_dump(by_alias=True, exclude_none=True, mode="json")
        options.update(
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
        data = await self._request(
            "POST",
            "/findSimilar",
            json_body=nest_contents_options(options, contents=contents),
        )
        return FindSimilarResponse.model_validate(data)

    async def find_similar_and_contents(self, url: str, **kwargs: Any) -> FindSimilarResponse:
        """Alias of `find_similar`; contents are always requested unless opted out."""
        return await self.find_similar(url, **kwargs)
