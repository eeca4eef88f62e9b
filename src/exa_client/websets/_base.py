"""Shared base for Websets resource clients."""

from __future__ import annotations

from exa_client._resource import ResourceClient


class WebsetsResourceClient(ResourceClient):
    """Resource client rooted at `/websets` (paths start with `/v0/...`)."""

    prefix = "/websets"
