"""Cursor pagination walker."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Page(Protocol[T_co]):
    """Anything shaped like `{data, hasMore, nextCursor}`."""

    @property
    def data(self) -> list[T_co]: ...

    @property
    def has_more(self) -> bool: ...

    @property
    def next_cursor(self) -> str | None: ...


async def iterate_pages(
    list_page: Callable[[str | None], Awaitable[Page[T]]],
) -> AsyncIterator[T]:
    """Yield every item across all pages, in server order.

    Stops when a page reports `has_more=False` or carries no `next_cursor`.
    Pages are fetched lazily; nothing is re-requested.
    """
    cursor: str | None = None
    while True:
        page = await list_page(cursor)
        for item in page.data:
            yield item
        if not page.has_more or not page.next_cursor:
            return
        cursor = page.next_cursor


async def collect_all(
    list_page: Callable[[str | None], Awaitable[Page[T]]],
) -> list[T]:
    """Drain `iterate_pages` into a list."""
    return [item async for item in iterate_pages(list_page)]
