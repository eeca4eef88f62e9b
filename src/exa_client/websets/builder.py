"""Fluent builders for Websets request parameters.

Each builder accumulates state through chained calls and produces an immutable
parameter model from `build()`. Built values are independent of later calls.

    params = (
        WebsetBuilder.with_search("AI startups in Europe", 25)
        .with_text_enrichment("Founding year")
        .with_metadata({"team": "research"})
        .build()
    )
"""

from __future__ import annotations

from typing import Any, Self

from exa_client.websets.models import (
    CreateCriterionParameters,
    CreateEnrichmentParameters,
    CreateWebhookParameters,
    CreateWebsetParameters,
    CreateWebsetSearchParameters,
    EnrichmentFormat,
    EnrichmentOption,
    Entity,
    EntityType,
    EventType,
    WebsetSearchBehavior,
)


class _SearchParametersBuilder:
    def __init__(self, query: str, count: int) -> None:
        self._query = query
        self._count = count
        self._entity: Entity | None = None
        self._criteria: list[str] = []

    def with_entity(self, entity: Entity) -> Self:
        self._entity = entity
        return self

    def for_companies(self) -> Self:
        return self.with_entity(Entity(type=EntityType.COMPANY))

    def for_people(self) -> Self:
        return self.with_entity(Entity(type=EntityType.PERSON))

    def for_articles(self) -> Self:
        return self.with_entity(Entity(type=EntityType.ARTICLE))

    def for_research_papers(self) -> Self:
        return self.with_entity(Entity(type=EntityType.RESEARCH_PAPER))

    def for_custom_entity(self, description: str) -> Self:
        return self.with_entity(Entity(type=EntityType.CUSTOM, description=description))

    def with_criterion(self, description: str) -> Self:
        self._criteria.append(description)
        return self

    def with_criteria(self, descriptions: list[str]) -> Self:
        self._criteria.extend(descriptions)
        return self

    def _search_fields(self) -> dict[str, Any]:
        return {
            "query": self._query,
            "count": self._count,
            "entity": self._entity,
            "criteria": (
                [CreateCriterionParameters(description=d) for d in self._criteria]
                if self._criteria
                else None
            ),
        }


class SearchBuilder(_SearchParametersBuilder):
    """Builds the initial search of a new Webset."""

    def build(self) -> CreateWebsetSearchParameters:
        return CreateWebsetSearchParameters(**self._search_fields())


class WebsetSearchBuilder(_SearchParametersBuilder):
    """Builds a search added to an existing Webset."""

    def __init__(self, query: str, count: int) -> None:
        super().__init__(query, count)
        self._behavior: WebsetSearchBehavior | None = None
        self._metadata: dict[str, Any] = {}

    def with_behavior(self, behavior: WebsetSearchBehavior) -> Self:
        self._behavior = behavior
        return self

    def should_override(self) -> Self:
        return self.with_behavior(WebsetSearchBehavior.OVERRIDE)

    def should_append(self) -> Self:
        return self.with_behavior(WebsetSearchBehavior.APPEND)

    def with_metadata(self, metadata: dict[str, Any]) -> Self:
        self._metadata.update(metadata)
        return self

    def build(self) -> CreateWebsetSearchParameters:
        return CreateWebsetSearchParameters(
            **self._search_fields(),
            behavior=self._behavior,
            metadata=dict(self._metadata) or None,
        )


class WebsetBuilder:
    """Builds `CreateWebsetParameters` around an initial search."""

    def __init__(self, search: SearchBuilder) -> None:
        self._search = search
        self._enrichments: list[CreateEnrichmentParameters] = []
        self._external_id: str | None = None
        self._metadata: dict[str, Any] = {}

    @classmethod
    def with_search(cls, query: str, count: int) -> WebsetBuilder:
        return cls(SearchBuilder(query, count))

    def with_enrichment(
        self,
        description: str,
        format: EnrichmentFormat,
        options: list[EnrichmentOption] | None = None,
    ) -> WebsetBuilder:
        self._enrichments.append(
            CreateEnrichmentParameters(description=description, format=format, options=options)
        )
        return self

    def with_text_enrichment(self, description: str) -> WebsetBuilder:
        return self.with_enrichment(description, EnrichmentFormat.TEXT)

    def with_number_enrichment(self, description: str) -> WebsetBuilder:
        return self.with_enrichment(description, EnrichmentFormat.NUMBER)

    def with_date_enrichment(self, description: str) -> WebsetBuilder:
        return self.with_enrichment(description, EnrichmentFormat.DATE)

    def with_options_enrichment(self, description: str, labels: list[str]) -> WebsetBuilder:
        return self.with_enrichment(
            description,
            EnrichmentFormat.OPTIONS,
            [EnrichmentOption(label=label) for label in labels],
        )

    def with_external_id(self, external_id: str) -> WebsetBuilder:
        self._external_id = external_id
        return self

    def with_metadata(self, metadata: dict[str, Any]) -> WebsetBuilder:
        self._metadata.update(metadata)
        return self

    def build(self) -> CreateWebsetParameters:
        return CreateWebsetParameters(
            search=self._search.build(),
            enrichments=list(self._enrichments) or None,
            external_id=self._external_id,
            metadata=dict(self._metadata) or None,
        )


class WebhookBuilder:
    """Builds `CreateWebhookParameters`; at least one event is required."""

    def __init__(self, url: str) -> None:
        self._url = url
        self._events: list[EventType] = []
        self._metadata: dict[str, Any] = {}

    def with_event(self, event: EventType) -> WebhookBuilder:
        if event not in self._events:
            self._events.append(event)
        return self

    def with_events(self, events: list[EventType]) -> WebhookBuilder:
        for event in events:
            self.with_event(event)
        return self

    def on_webset_created(self) -> WebhookBuilder:
        return self.with_event(EventType.WEBSET_CREATED)

    def on_webset_deleted(self) -> WebhookBuilder:
        return self.with_event(EventType.WEBSET_DELETED)

    def on_webset_idle(self) -> WebhookBuilder:
        return self.with_event(EventType.WEBSET_IDLE)

    def on_item_created(self) -> WebhookBuilder:
        return self.with_event(EventType.WEBSET_ITEM_CREATED)

    def on_item_enriched(self) -> WebhookBuilder:
        return self.with_event(EventType.WEBSET_ITEM_ENRICHED)

    def with_metadata(self, metadata: dict[str, Any]) -> WebhookBuilder:
        self._metadata.update(metadata)
        return self

    def build(self) -> CreateWebhookParameters:
        """Return the webhook parameters.

        Raises:
            ValueError: If no event has been added.
        """
        if not self._events:
            raise ValueError("At least one event must be specified for a webhook")
        return CreateWebhookParameters(
            url=self._url,
            events=list(self._events),
            metadata=dict(self._metadata) or None,
        )
