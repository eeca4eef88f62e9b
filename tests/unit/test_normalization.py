"""Unit tests for content option normalization."""

from __future__ import annotations

from exa_client._normalization import (
    DEFAULT_CONTENTS,
    build_pagination_params,
    default_contents,
    dump_option,
    flatten_contents_options,
    nest_contents_options,
)
from exa_client.models import ContentsRequest, LivecrawlOption, TextContentsOptions
from exa_client.websets.models import EventType, WebhookStatus


def test_nest_moves_content_keys_under_contents() -> None:
    options = {"query": "q", "numResults": 3, "text": True, "subpages": 1}

    body = nest_contents_options(options)

    assert body == {"query": "q", "numResults": 3, "contents": {"text": True, "subpages": 1}}


def test_nest_does_not_mutate_input() -> None:
    options = {"query": "q", "text": {"maxCharacters": 10}}

    body = nest_contents_options(options)
    body["contents"]["text"]["maxCharacters"] = 99

    assert options == {"query": "q", "text": {"maxCharacters": 10}}


def test_nest_adds_default_when_nothing_requested() -> None:
    body = nest_contents_options({"query": "q"})

    assert body == {"query": "q", "contents": {"text": {"maxCharacters": 10000}}}


def test_nest_default_is_a_fresh_copy() -> None:
    body = nest_contents_options({"query": "q"})
    body["contents"]["text"]["maxCharacters"] = 1

    assert DEFAULT_CONTENTS == {"text": {"maxCharacters": 10000}}
    assert default_contents() == DEFAULT_CONTENTS


def test_nest_contents_false_drops_every_content_key() -> None:
    body = nest_contents_options({"query": "q", "highlights": True}, contents=False)

    assert body == {"query": "q"}


def test_nest_false_option_is_not_requested() -> None:
    body = nest_contents_options({"query": "q", "text": False})

    assert body["contents"] == {"text": {"maxCharacters": 10000}}


def test_nest_merges_contents_model_with_flat_override() -> None:
    body = nest_contents_options(
        {"query": "q", "livecrawl": LivecrawlOption.ALWAYS},
        contents=ContentsRequest(text=TextContentsOptions(max_characters=50), livecrawl="never"),
    )

    assert body["contents"] == {"text": {"maxCharacters": 50}, "livecrawl": "always"}


def test_nest_accepts_contents_mapping() -> None:
    body = nest_contents_options({"query": "q"}, contents={"highlights": True})

    assert body["contents"] == {"highlights": True}


def test_flatten_keeps_options_top_level_with_default() -> None:
    assert flatten_contents_options({"urls": ["https://a.example"]}) == {
        "urls": ["https://a.example"],
        "text": {"maxCharacters": 10000},
    }
    assert flatten_contents_options({"ids": ["x"], "summary": True}) == {
        "ids": ["x"],
        "summary": True,
    }


def test_dump_option_values() -> None:
    assert dump_option(False) is None
    assert dump_option(None) is None
    assert dump_option(True) is True
    assert dump_option(LivecrawlOption.FALLBACK) == "fallback"
    assert dump_option(TextContentsOptions(include_html_tags=True)) == {"includeHtmlTags": True}


def test_build_pagination_params_drops_none_and_renders_values() -> None:
    params = build_pagination_params(
        "cur_1",
        25,
        status=WebhookStatus.ACTIVE,
        successful=False,
        types=[EventType.WEBSET_CREATED, "webset.idle"],
        websetId=None,
    )

    assert params == {
        "cursor": "cur_1",
        "limit": 25,
        "status": "active",
        "successful": "false",
        "types": ["webset.created", "webset.idle"],
    }


def test_build_pagination_params_empty() -> None:
    assert build_pagination_params() == {}
