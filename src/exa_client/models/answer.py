"""Models for Exa /answer endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from exa_client.models.common import CostDollars


class Citation(BaseModel):
    """Citation from Answer endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    url: str
    title: str | None = None
    author: str | None = None
    published_date: datetime | None = Field(default=None, alias="publishedDate")
    text: str | None = None
    image: str | None = None
    favicon: str | None = None

    @field_validator("published_date", mode="before")
    @classmethod
    def coerce_empty_published_date(cls, value: object) -> object:
        """Convert empty-string `publishedDate` values to `None`."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class AnswerRequest(BaseModel):
    """Request body for /answer endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query: str
    stream: bool = False
    text: bool = False
    model: str | None = None
    system_prompt: str | None = Field(default=None, alias="systemPrompt")
    output_schema: dict[str, Any] | None = Field(default=None, alias="outputSchema")


class AnswerResponse(BaseModel):
    """Response from /answer endpoint.

    `answer` is a string, or a JSON object when an output schema was supplied.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    request_id: str | None = Field(default=None, alias="requestId")
    answer: str | dict[str, Any]
    citations: list[Citation] = Field(default_factory=list)
    cost_dollars: CostDollars | None = Field(default=None, alias="costDollars")
