"""Cursor-paginated list envelope shared by list endpoints."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ListPage(BaseModel, Generic[T]):
    """One page of a cursor-paginated list (`{data, hasMore, nextCursor}`)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    data: list[T]
    has_more: bool = Field(default=False, alias="hasMore")
    next_cursor: str | None = Field(default=None, alias="nextCursor")
