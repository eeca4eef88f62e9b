"""Async Exa API client."""

from __future__ import annotations

from exa_client._answer import AnswerMixin
from exa_client._contents import ContentsMixin
from exa_client._http import ExaHTTPBase
from exa_client._search import SearchMixin
from exa_client.config import ExaConfig
from exa_client.research import ResearchClient
from exa_client.websets import WebsetsClient


class ExaClient(ExaHTTPBase, SearchMixin, ContentsMixin, AnswerMixin):
    """
    Async client for Exa API.

    Use as an async context manager:

        async with ExaClient.from_env() as exa:
            results = await exa.search("latest AI developments")
            task = await exa.research.create_task("Summarize recent fusion milestones")

    Sub-APIs (`websets`, `research`) share this client's connection and must be
    used while it is open.
    """

    def __init__(self, config: ExaConfig) -> None:
        super().__init__(config)
        self.websets = WebsetsClient(self)
        self.research = ResearchClient(self)
