"""Pydantic models for the Exa API."""

from exa_client.models.answer import AnswerRequest, AnswerResponse, Citation
from exa_client.models.common import (
    ContentsRequest,
    ContextOptions,
    CostDollars,
    ExtrasOptions,
    HighlightsOptions,
    LivecrawlOption,
    SummaryOptions,
    TextContentsOptions,
)
from exa_client.models.contents import (
    ContentsError,
    ContentsErrorTag,
    ContentsResponse,
    ContentsStatus,
)
from exa_client.models.pagination import ListPage
from exa_client.models.research import (
    ResearchCitation,
    ResearchCreateTaskRequest,
    ResearchCreateTaskResponse,
    ResearchModel,
    ResearchOutputSpec,
    ResearchStatus,
    ResearchTask,
)
from exa_client.models.search import (
    SearchCategory,
    SearchRequest,
    SearchResponse,
    SearchResult,
    SearchType,
)
from exa_client.models.similar import FindSimilarRequest, FindSimilarResponse

__all__ = [
    "AnswerRequest",
    "AnswerResponse",
    "Citation",
    "ContentsError",
    "ContentsErrorTag",
    "ContentsRequest",
    "ContentsResponse",
    "ContentsStatus",
    "ContextOptions",
    "CostDollars",
    "ExtrasOptions",
    "FindSimilarRequest",
    "FindSimilarResponse",
    "HighlightsOptions",
    "ListPage",
    "LivecrawlOption",
    "ResearchCitation",
    "ResearchCreateTaskRequest",
    "ResearchCreateTaskResponse",
    "ResearchModel",
    "ResearchOutputSpec",
    "ResearchStatus",
    "ResearchTask",
    "SearchCategory",
    "SearchRequest",
    "SearchResponse",
    "SearchResult",
    "SearchType",
    "SummaryOptions",
    "TextContentsOptions",
]
