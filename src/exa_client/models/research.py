"""Models for Exa /research/v0 endpoints."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResearchModel(str, Enum):
    """Exa research model tiers."""

    STANDARD = "exa-research"
    PRO = "exa-research-pro"


class ResearchStatus(str, Enum):
    """Research task status."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELED = "canceled"


class ResearchOutputSpec(BaseModel):
    """`output` block of a create-task request."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_: dict[str, Any] | None = Field(default=None, alias="schema")
    infer_schema: bool = Field(default=True, alias="inferSchema")


class ResearchCreateTaskRequest(BaseModel):
    """Request body for POST /research/v0/tasks."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    instructions: str = Field(min_length=1, max_length=4096)
    model: ResearchModel | str = ResearchModel.STANDARD
    output: ResearchOutputSpec = Field(default_factory=ResearchOutputSpec)


class ResearchCreateTaskResponse(BaseModel):
    """Response from POST /research/v0/tasks."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str


class ResearchCitation(BaseModel):
    """Citation supporting a field of the research output."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str | None = None
    url: str
    title: str | None = None


class ResearchTask(BaseModel):
    """Research task state as returned by GET /research/v0/tasks/{id}."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    status: ResearchStatus
    instructions: str
    schema_: dict[str, Any] | None = Field(default=None, alias="schema")
    data: dict[str, Any] | None = None
    citations: dict[str, list[ResearchCitation]] = Field(default_factory=dict)
    error: str | None = None
