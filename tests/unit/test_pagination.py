"""Unit tests for cursor pagination helpers."""

from __future__ import annotations

import pytest

from exa_client import collect_all, iterate_pages
from exa_client.models import ListPage


class _Pages:
    def __init__(self, pages: dict[str | None, ListPage[int]]) -> None:
        self._pages = pages
        self.cursors: list[str | None] = []

    async def __call__(self, cursor: str | None) -> ListPage[int]:
        self.cursors.append(cursor)
        return self._pages[cursor]


def _three_pages() -> _Pages:
    return _Pages(
        {
            None: ListPage[int](data=[1, 2], has_more=True, next_cursor="c2"),
            "c2": ListPage[int](data=[3], has_more=True, next_cursor="c3"),
            "c3": ListPage[int](data=[4, 5], has_more=False, next_cursor=None),
        }
    )


@pytest.mark.asyncio
async def test_collect_all_walks_every_page_once() -> None:
    pages = _three_pages()

    items = await collect_all(pages)

    assert items == [1, 2, 3, 4, 5]
    assert pages.cursors == [None, "c2", "c3"]


@pytest.mark.asyncio
async def test_iterate_pages_is_lazy() -> None:
    pages = _three_pages()

    seen: list[int] = []
    async for item in iterate_pages(pages):
        seen.append(item)
        if item == 2:
            break

    assert seen == [1, 2]
    assert pages.cursors == [None]


@pytest.mark.asyncio
async def test_stops_when_cursor_missing_even_if_has_more() -> None:
    pages = _Pages({None: ListPage[int](data=[1], has_more=True, next_cursor=None)})

    assert await collect_all(pages) == [1]
    assert pages.cursors == [None]


@pytest.mark.asyncio
async def test_empty_first_page() -> None:
    pages = _Pages({None: ListPage[int](data=[], has_more=False)})

    assert await collect_all(pages) == []


def test_list_page_parses_wire_shape() -> None:
    page = ListPage[int].model_validate({"data": [1], "hasMore": True, "nextCursor": "n"})

    assert page.has_more is True
    assert page.next_cursor == "n"
