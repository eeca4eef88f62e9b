"""Output schema resolution for structured answers, summaries and research tasks."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


def resolve_output_schema(schema: dict[str, Any] | type[BaseModel] | None) -> dict[str, Any] | None:
    """Return a JSON schema dict for `schema`.

    Accepts a JSON-schema `dict` (used as-is) or a pydantic model class.

    Raises:
        TypeError: For any other value.
    """
    if schema is None:
        return None
    if isinstance(schema, dict):
        return schema
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return schema.model_json_schema()
    raise TypeError(
        f"output schema must be a dict or a pydantic BaseModel subclass, got {type(schema).__name__}"
    )
