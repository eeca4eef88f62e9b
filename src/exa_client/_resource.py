"""Base class for sub-API resource clients (websets, research)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from exa_client._http import ExaHTTPBase


class ResourceClient:
    """Issues requests through a parent client, prefixing every path.

    Sub-clients share the parent's `httpx.AsyncClient`, so they are usable only
    while the parent is open.
    """

    prefix: str = ""

    def __init__(self, http: ExaHTTPBase) -> None:
        self._http = http

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        return await self._http._request(
            method, f"{self.prefix}{path}", params=params, json_body=json_body
        )

    def _stream_lines(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> AsyncIterator[str]:
        return self._http._stream_lines(method, f"{self.prefix}{path}", params=params)
