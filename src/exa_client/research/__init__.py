"""Exa research task API client."""

from exa_client.research.client import ResearchClient

__all__ = ["ResearchClient"]
