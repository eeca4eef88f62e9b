"""Content option normalization helpers for Exa API requests."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel

CONTENT_OPTION_KEYS: frozenset[str] = frozenset(
    {
        "text",
        "highlights",
        "summary",
        "context",
        "livecrawl",
        "livecrawlTimeout",
        "subpages",
        "subpageTarget",
        "extras",
    }
)

# Requested when a call names no content option at all.
DEFAULT_CONTENTS: dict[str, Any] = {"text": {"maxCharacters": 10000}}


def default_contents() -> dict[str, Any]:
    """Return a fresh copy of `DEFAULT_CONTENTS`."""
    return copy.deepcopy(DEFAULT_CONTENTS)


def dump_option(value: Any) -> Any:
    """Convert a typed option value into its wire representation.

    `False` means "not requested" and becomes `None`, so it is dropped.
    """
    if value is False or value is None:
        return None
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True, mode="json")
    if isinstance(value, Enum):
        return value.value
    return copy.deepcopy(value)


def _dump_contents_base(contents: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    if isinstance(contents, BaseModel):
        return contents.model_dump(by_alias=True, exclude_none=True, mode="json")
    return {key: dump_option(value) for key, value in contents.items() if value is not None}


def _split_options(options: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    passthrough: dict[str, Any] = {}
    content: dict[str, Any] = {}
    for key, value in options.items():
        if key in CONTENT_OPTION_KEYS:
            dumped = dump_option(value)
            if dumped is not None:
                content[key] = dumped
        else:
            passthrough[key] = copy.deepcopy(value)
    return passthrough, content


def nest_contents_options(
    options: Mapping[str, Any],
    *,
    contents: Mapping[str, Any] | BaseModel | bool | None = None,
) -> dict[str, Any]:
    """Move content options under a `contents` key of a request body.

    Used by `/search` and `/findSimilar`. Keys that are not content options pass
    through unchanged. When no content option is requested the nested object
    defaults to `DEFAULT_CONTENTS`. `contents=False` drops every content option
    and omits the `contents` key entirely.

    Args:
        options: Flat request body (wire key names); never mutated.
        contents: Optional explicit `contents` object, or `False` to opt out.

    Returns:
        A new request body.
    """
    body, flat_contents = _split_options(options)
    if contents is False:
        return body

    nested: dict[str, Any] = {}
    if contents is not None and contents is not True:
        nested = _dump_contents_base(contents)
    nested.update(flat_contents)

    if not any(key in CONTENT_OPTION_KEYS for key in nested):
        nested.update(default_contents())

    body["contents"] = nested
    return body


def flatten_contents_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize content options for `/contents`, where they live at the top level.

    Applies the same default as `nest_contents_options` when no content option
    is requested.
    """
    body, flat_contents = _split_options(options)
    if not flat_contents:
        flat_contents = default_contents()
    body.update(flat_contents)
    return body


def build_pagination_params(
    cursor: str | None = None,
    limit: int | None = None,
    **filters: Any,
) -> dict[str, Any]:
    """Build query parameters for a cursor-paginated list endpoint.

    `None` values are dropped, booleans are rendered as `"true"`/`"false"`.
    """
    params: dict[str, Any] = {"cursor": cursor, "limit": limit, **filters}
    cleaned: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        elif isinstance(value, Enum):
            cleaned[key] = value.value
        elif isinstance(value, (list, tuple)):
            cleaned[key] = [item.value if isinstance(item, Enum) else item for item in value]
        else:
            cleaned[key] = value
    return cleaned


def content_options(
    *,
    text: Any = None,
    highlights: Any = None,
    summary: Any = None,
    context: Any = None,
    livecrawl: Any = None,
    livecrawl_timeout: int | None = None,
    subpages: int | None = None,
    subpage_target: str | list[str] | None = None,
    extras: Any = None,
) -> dict[str, Any]:
    """Collect keyword content options into a flat dict keyed by wire name."""
    return {
        "text": text,
        "highlights": highlights,
        "summary": summary,
        "context": context,
        "livecrawl": livecrawl,
        "livecrawlTimeout": livecrawl_timeout,
        "subpages": subpages,
        "subpageTarget": subpage_target,
        "extras": extras,
    }
