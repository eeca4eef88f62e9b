"""Unit tests for the Websets fluent builders."""

from __future__ import annotations

import pytest

from exa_client.websets import (
    SearchBuilder,
    WebhookBuilder,
    WebsetBuilder,
    WebsetSearchBuilder,
)
from exa_client.websets.models import (
    EnrichmentFormat,
    EntityType,
    EventType,
    WebsetSearchBehavior,
)


def test_search_builder_entities_and_criteria() -> None:
    params = (
        SearchBuilder("Fusion researchers", 5)
        .for_custom_entity("fusion physicist")
        .with_criteria(["Publishes on tokamaks", "Works in Europe"])
        .build()
    )

    assert params.query == "Fusion researchers"
    assert params.count == 5
    assert params.entity is not None
    assert params.entity.type is EntityType.CUSTOM
    assert params.entity.description == "fusion physicist"
    assert params.criteria is not None
    assert [c.description for c in params.criteria] == [
        "Publishes on tokamaks",
        "Works in Europe",
    ]


def test_search_builder_without_criteria_omits_them() -> None:
    params = SearchBuilder("Papers on RLHF", 3).for_research_papers().build()

    assert params.criteria is None
    assert params.model_dump(by_alias=True, exclude_none=True, mode="json") == {
        "query": "Papers on RLHF",
        "count": 3,
        "entity": {"type": "research_paper"},
    }


def test_webset_search_builder_behavior_and_metadata() -> None:
    params = (
        WebsetSearchBuilder("AI startups", 10)
        .for_people()
        .should_override()
        .with_metadata({"source": "crm"})
        .build()
    )

    assert params.behavior is WebsetSearchBehavior.OVERRIDE
    assert params.metadata == {"source": "crm"}
    assert params.entity is not None
    assert params.entity.type is EntityType.PERSON


def test_webset_builder_enrichments() -> None:
    params = (
        WebsetBuilder.with_search("AI startups in Europe", 25)
        .with_text_enrichment("CEO name")
        .with_number_enrichment("Employee count")
        .with_date_enrichment("Founding date")
        .with_options_enrichment("Stage", ["seed", "series a"])
        .with_metadata({"team": "research"})
        .build()
    )

    assert params.search is not None
    assert params.search.query == "AI startups in Europe"
    assert params.enrichments is not None
    assert [e.format for e in params.enrichments] == [
        EnrichmentFormat.TEXT,
        EnrichmentFormat.NUMBER,
        EnrichmentFormat.DATE,
        EnrichmentFormat.OPTIONS,
    ]
    assert params.enrichments[3].options is not None
    assert [o.label for o in params.enrichments[3].options] == ["seed", "series a"]
    assert params.metadata == {"team": "research"}


def test_built_values_are_independent_of_later_calls() -> None:
    builder = WebsetBuilder(SearchBuilder("AI startups", 10).for_companies())
    first = builder.with_text_enrichment("CEO name").with_metadata({"a": 1}).build()

    builder.with_number_enrichment("Employee count").with_metadata({"b": 2})
    second = builder.build()

    assert first.enrichments is not None
    assert len(first.enrichments) == 1
    assert first.metadata == {"a": 1}
    assert second.enrichments is not None
    assert len(second.enrichments) == 2
    assert second.metadata == {"a": 1, "b": 2}


def test_webhook_builder_dedups_events() -> None:
    params = (
        WebhookBuilder("https://hooks.example.com/exa")
        .with_events([EventType.WEBSET_ITEM_CREATED, EventType.WEBSET_ITEM_ENRICHED])
        .on_item_created()
        .on_webset_deleted()
        .with_metadata({"env": "test"})
        .build()
    )

    assert params.events == [
        EventType.WEBSET_ITEM_CREATED,
        EventType.WEBSET_ITEM_ENRICHED,
        EventType.WEBSET_DELETED,
    ]
    assert params.metadata == {"env": "test"}


def test_webhook_builder_requires_an_event() -> None:
    with pytest.raises(ValueError, match="At least one event"):
        WebhookBuilder("https://hooks.example.com/exa").build()
