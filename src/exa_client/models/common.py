"""Content options and cost info shared by /search, /findSimilar, /contents and /answer.

The option models are dumped with `by_alias=True` by `exa_client._normalization`,
so every field here is a wire field the client can send. Unset fields are dropped.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_OPTIONS_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class LivecrawlOption(str, Enum):
    """When Exa should crawl a page live instead of serving its cached copy."""

    NEVER = "never"
    FALLBACK = "fallback"
    PREFERRED = "preferred"
    ALWAYS = "always"


class TextContentsOptions(BaseModel):
    """Sent as `text` when a plain `True` is not enough."""

    model_config = _OPTIONS_CONFIG

    max_characters: int | None = Field(default=None, alias="maxCharacters")
    include_html_tags: bool | None = Field(default=None, alias="includeHtmlTags")


class HighlightsOptions(BaseModel):
    model_config = _OPTIONS_CONFIG

    query: str | None = None
    num_sentences: int | None = Field(default=None, alias="numSentences")
    highlights_per_url: int | None = Field(default=None, alias="highlightsPerUrl")


class SummaryOptions(BaseModel):
    """Per-result summary; `schema` asks for a structured (JSON) summary."""

    model_config = _OPTIONS_CONFIG

    query: str | None = None
    schema_: dict[str, Any] | None = Field(default=None, alias="schema")


class ContextOptions(BaseModel):
    """Combined context string across all results, capped at `maxCharacters`."""

    model_config = _OPTIONS_CONFIG

    max_characters: int | None = Field(default=None, alias="maxCharacters")


class ExtrasOptions(BaseModel):
    """How many outbound links and image URLs to return per result."""

    model_config = _OPTIONS_CONFIG

    links: int | None = None
    image_links: int | None = Field(default=None, alias="imageLinks")


class ContentsRequest(BaseModel):
    """The `contents` object accepted by `search`/`find_similar`.

    Flat keyword options passed next to it override its fields.
    """

    model_config = _OPTIONS_CONFIG

    text: bool | TextContentsOptions | None = None
    highlights: bool | HighlightsOptions | None = None
    summary: bool | SummaryOptions | None = None
    context: bool | ContextOptions | None = None
    livecrawl: LivecrawlOption | None = None
    livecrawl_timeout: int | None = Field(default=None, alias="livecrawlTimeout")
    subpages: int | None = None
    subpage_target: str | list[str] | None = Field(default=None, alias="subpageTarget")
    extras: ExtrasOptions | None = None


class CostDollars(BaseModel):
    """`costDollars` on responses. Only the total is surfaced; the breakdown is ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total: float
