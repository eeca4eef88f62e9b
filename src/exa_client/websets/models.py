"""Pydantic models for Exa Websets API."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WebsetStatus(str, Enum):
    """Status of a Webset."""

    IDLE = "idle"
    PENDING = "pending"
    RUNNING = "running"
    PAUSED = "paused"


class WebsetSearchStatus(str, Enum):
    """Status of a Webset search."""

    CREATED = "created"
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELED = "canceled"


class WebsetSearchBehavior(str, Enum):
    """How a new search combines with existing Webset items."""

    OVERRIDE = "override"
    APPEND = "append"


class CanceledReason(str, Enum):
    """Why a Webset search was canceled."""

    WEBSET_DELETED = "webset_deleted"
    WEBSET_CANCELED = "webset_canceled"


class EventType(str, Enum):
    """Events emitted by Websets (also the webhook subscription keys)."""

    WEBSET_CREATED = "webset.created"
    WEBSET_DELETED = "webset.deleted"
    WEBSET_PAUSED = "webset.paused"
    WEBSET_IDLE = "webset.idle"
    WEBSET_SEARCH_CREATED = "webset.search.created"
    WEBSET_SEARCH_CANCELED = "webset.search.canceled"
    WEBSET_SEARCH_COMPLETED = "webset.search.completed"
    WEBSET_SEARCH_UPDATED = "webset.search.updated"
    WEBSET_EXPORT_CREATED = "webset.export.created"
    WEBSET_EXPORT_COMPLETED = "webset.export.completed"
    WEBSET_ITEM_CREATED = "webset.item.created"
    WEBSET_ITEM_ENRICHED = "webset.item.enriched"
    IMPORT_CREATED = "import.created"
    IMPORT_COMPLETED = "import.completed"


class EnrichmentFormat(str, Enum):
    """Result format of an enrichment."""

    TEXT = "text"
    DATE = "date"
    NUMBER = "number"
    OPTIONS = "options"
    EMAIL = "email"
    PHONE = "phone"
    URL = "url"


class EnrichmentStatus(str, Enum):
    """Status of a Webset enrichment."""

    PENDING = "pending"
    CANCELED = "canceled"
    COMPLETED = "completed"


class WebhookStatus(str, Enum):
    """Status of a webhook."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class Satisfied(str, Enum):
    """Outcome of a criterion evaluation."""

    YES = "yes"
    NO = "no"
    UNCLEAR = "unclear"


class ImportStatus(str, Enum):
    """Status of an import."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class ImportFormat(str, Enum):
    """Source format of an import."""

    CSV = "csv"
    WEBSET = "webset"


class ScheduleStatus(str, Enum):
    """Status of a monitor or stream."""

    ENABLED = "enabled"
    DISABLED = "disabled"


class RunStatus(str, Enum):
    """Status of a monitor or stream run."""

    CREATED = "created"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELED = "canceled"
    FAILED = "failed"


class EntityType(str, Enum):
    """Type of entity in a Webset."""

    COMPANY = "company"
    PERSON = "person"
    ARTICLE = "article"
    RESEARCH_PAPER = "research_paper"
    CUSTOM = "custom"


class WebsetSource(BaseModel):
    """Reference to an import or webset source."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str = Field(..., description="Source type: 'import' or 'webset'")
    id: str = Field(..., description="ID of the source")


class Entity(BaseModel):
    """Entity specification for Webset search."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: EntityType = Field(..., description="Type of entity")
    description: str | None = Field(None, description="Required for custom entities")


class CreateCriterionParameters(BaseModel):
    """Parameters for creating a search criterion."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str = Field(..., min_length=1, max_length=1000)


class Criterion(BaseModel):
    """A criterion attached to a Webset search."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str
    success_rate: float | None = Field(None, alias="successRate")


class Progress(BaseModel):
    """Search progress."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    found: int = 0
    completion: float = 0


class Reference(BaseModel):
    """Source backing an evaluation or enrichment result."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    title: str | None = None
    snippet: str | None = None


class EnrichmentOption(BaseModel):
    """Allowed label for `options`-format enrichments."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    label: str


class CreateWebsetSearchParameters(BaseModel):
    """Parameters for creating a Webset search."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query: str = Field(
        ...,
        min_length=1,
        max_length=5000,
        description="Natural language search query",
    )
    count: int = Field(
        default=10,
        ge=1,
        description="Number of items to find",
    )
    entity: Entity | None = Field(
        default=None,
        description="Entity type (auto-detected if not provided)",
    )
    criteria: list[CreateCriterionParameters] | None = Field(
        default=None,
        description="Criteria for evaluation",
    )
    behavior: WebsetSearchBehavior | None = Field(
        default=None,
        description="How results combine with existing items",
    )
    recall: bool | None = Field(
        default=None,
        description="Estimate total relevant results",
    )
    exclude: list[WebsetSource] | None = Field(
        default=None,
        description="Sources to exclude from search",
    )
    scope: list[WebsetSource] | None = Field(
        default=None,
        description="Limit search to specific sources",
    )
    metadata: dict[str, Any] | None = None


class CreateEnrichmentParameters(BaseModel):
    """Parameters for creating a Webset enrichment."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str = Field(..., min_length=1, description="What to extract")
    format: EnrichmentFormat | None = None
    options: list[EnrichmentOption] | None = None
    metadata: dict[str, Any] | None = None


class UpdateEnrichmentParameters(BaseModel):
    """Parameters for updating a Webset enrichment."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str | None = None
    format: EnrichmentFormat | None = None
    options: list[EnrichmentOption] | None = None
    metadata: dict[str, Any] | None = None


class CreateWebsetParameters(BaseModel):
    """Parameters for creating a Webset."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    search: CreateWebsetSearchParameters | None = Field(
        default=None,
        description="Initial search for the Webset",
    )
    import_: list[WebsetSource] | None = Field(
        default=None,
        alias="import",
        description="Attach data from existing imports or websets",
    )
    enrichments: list[CreateEnrichmentParameters] | None = Field(
        default=None,
        description="Enrichments to extract additional data",
    )
    exclude: list[WebsetSource] | None = Field(
        default=None,
        description="Sources to exclude globally",
    )
    external_id: str | None = Field(
        default=None,
        alias="externalId",
        description="External identifier for integration",
    )
    title: str | None = None
    metadata: dict[str, Any] | None = None


class UpdateWebsetRequest(BaseModel):
    """Parameters for updating a Webset."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str | None = None
    metadata: dict[str, Any] | None = None


class PreviewWebsetParameters(BaseModel):
    """Parameters for previewing a Webset."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    search: CreateWebsetSearchParameters = Field(..., description="Search to preview")


class WebsetSearch(BaseModel):
    """A search performed on a Webset."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Search ID")
    object: str = "webset_search"
    status: WebsetSearchStatus
    webset_id: str | None = Field(None, alias="websetId")
    query: str
    entity: Entity | None = None
    criteria: list[Criterion] = Field(default_factory=list)
    count: int
    behavior: WebsetSearchBehavior | None = None
    progress: Progress = Field(default_factory=Progress)
    metadata: dict[str, Any] = Field(default_factory=dict)
    canceled_at: datetime | None = Field(None, alias="canceledAt")
    canceled_reason: CanceledReason | None = Field(None, alias="canceledReason")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class WebsetEnrichment(BaseModel):
    """An enrichment applied to Webset items."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    object: str = "webset_enrichment"
    status: EnrichmentStatus
    webset_id: str | None = Field(None, alias="websetId")
    title: str | None = None
    description: str
    format: EnrichmentFormat | None = None
    options: list[EnrichmentOption] | None = None
    instructions: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class EnrichmentResult(BaseModel):
    """Value extracted by an enrichment for one item."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    object: str = "enrichment_result"
    format: EnrichmentFormat | None = None
    result: list[str] | None = None
    reasoning: str | None = None
    references: list[Reference] = Field(default_factory=list)
    enrichment_id: str = Field(..., alias="enrichmentId")


class WebsetItemEvaluation(BaseModel):
    """Evaluation result for a Webset item."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    criterion: str
    reasoning: str | None = None
    satisfied: Satisfied
    references: list[Reference] = Field(default_factory=list)


class WebsetItem(BaseModel):
    """An item in a Webset."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Item ID")
    object: str = "webset_item"
    source: str = Field(..., description="What produced the item (e.g. 'search')")
    source_id: str = Field(..., alias="sourceId")
    webset_id: str = Field(..., alias="websetId")
    properties: dict[str, Any] = Field(
        default_factory=dict, description="Entity-specific properties"
    )
    evaluations: list[WebsetItemEvaluation] = Field(default_factory=list)
    enrichments: list[EnrichmentResult] | None = None
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class Webset(BaseModel):
    """A Webset collection of web data."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Webset ID")
    object: str = "webset"
    status: WebsetStatus
    external_id: str | None = Field(None, alias="externalId")
    title: str | None = None
    searches: list[WebsetSearch] = Field(default_factory=list)
    enrichments: list[WebsetEnrichment] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class GetWebsetResponse(Webset):
    """Webset returned by GET /v0/websets/{id}, optionally with its items."""

    items: list[WebsetItem] | None = None


class PreviewWebsetResponse(BaseModel):
    """Response from POST /v0/websets/preview."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    search: dict[str, Any] = Field(default_factory=dict)
    items: list[dict[str, Any]] = Field(default_factory=list)


class Import(BaseModel):
    """An import of external data into Websets."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    object: str = "import"
    status: ImportStatus
    title: str | None = None
    format: ImportFormat | None = None
    entity: Entity | None = None
    count: int | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    failed_at: datetime | None = Field(None, alias="failedAt")
    failed_message: str | None = Field(None, alias="failedMessage")
    failed_reason: str | None = Field(None, alias="failedReason")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class CreateImportResponse(Import):
    """Import returned on creation, with a pre-signed URL for the CSV upload."""

    upload_url: str | None = Field(None, alias="uploadUrl")
    upload_valid_until: datetime | None = Field(None, alias="uploadValidUntil")


class CsvImportOptions(BaseModel):
    """CSV-specific import settings."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    identifier: int | None = Field(None, description="Column index holding the URL")


class CreateImportParameters(BaseModel):
    """Parameters for creating an import."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str | None = None
    format: ImportFormat = ImportFormat.CSV
    entity: Entity
    size: int | None = Field(None, ge=0, description="Upload size in bytes")
    count: int | None = Field(None, ge=0, description="Number of records")
    csv: CsvImportOptions | None = None
    metadata: dict[str, Any] | None = None


class UpdateImport(BaseModel):
    """Parameters for updating an import."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str | None = None
    metadata: dict[str, Any] | None = None


class Cadence(BaseModel):
    """Cron schedule of a monitor or stream."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cron: str
    timezone: str | None = None


class ScheduleBehavior(BaseModel):
    """What a scheduled run does (`search` or `refresh`) and its settings."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str
    config: dict[str, Any] = Field(default_factory=dict)


class _Run(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    status: RunStatus
    type: str | None = None
    completed_at: datetime | None = Field(None, alias="completedAt")
    failed_at: datetime | None = Field(None, alias="failedAt")
    canceled_at: datetime | None = Field(None, alias="canceledAt")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class MonitorRun(_Run):
    """One execution of a monitor."""

    object: str = "monitor_run"
    monitor_id: str = Field(..., alias="monitorId")


class StreamRun(_Run):
    """One execution of a stream."""

    object: str = "stream_run"
    stream_id: str = Field(..., alias="streamId")


class _Scheduled(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    status: ScheduleStatus
    webset_id: str = Field(..., alias="websetId")
    cadence: Cadence
    behavior: ScheduleBehavior
    next_run_at: datetime | None = Field(None, alias="nextRunAt")
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class Monitor(_Scheduled):
    """Cron-scheduled job that keeps a Webset up to date."""

    object: str = "monitor"
    last_run: MonitorRun | None = Field(None, alias="lastRun")


class Stream(_Scheduled):
    """Cron-scheduled job that feeds new results into a Webset."""

    object: str = "stream"
    last_run: StreamRun | None = Field(None, alias="lastRun")


class CreateScheduleParameters(BaseModel):
    """Parameters for creating a monitor or stream."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    webset_id: str = Field(..., alias="websetId")
    cadence: Cadence
    behavior: ScheduleBehavior
    metadata: dict[str, Any] | None = None


class UpdateScheduleParameters(BaseModel):
    """Parameters for updating a monitor or stream."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: ScheduleStatus | None = None
    cadence: Cadence | None = None
    behavior: ScheduleBehavior | None = None
    metadata: dict[str, Any] | None = None


CreateMonitorParameters = CreateScheduleParameters
UpdateMonitor = UpdateScheduleParameters
CreateStreamParameters = CreateScheduleParameters
UpdateStream = UpdateScheduleParameters


class Webhook(BaseModel):
    """A webhook subscription."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    object: str = "webhook"
    status: WebhookStatus
    events: list[EventType | str] = Field(default_factory=list)
    url: str
    secret: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class CreateWebhookParameters(BaseModel):
    """Parameters for creating a webhook."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    events: list[EventType] = Field(..., min_length=1)
    url: str
    metadata: dict[str, Any] | None = None


class UpdateWebhookParameters(BaseModel):
    """Parameters for updating a webhook."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    events: list[EventType] | None = None
    url: str | None = None
    status: WebhookStatus | None = None
    metadata: dict[str, Any] | None = None


class WebhookAttempt(BaseModel):
    """One delivery attempt of an event to a webhook."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    object: str = "webhook_attempt"
    event_id: str = Field(..., alias="eventId")
    event_type: EventType | str = Field(..., alias="eventType")
    webhook_id: str = Field(..., alias="webhookId")
    url: str
    successful: bool
    response_status_code: int | None = Field(None, alias="responseStatusCode")
    response_body: str | None = Field(None, alias="responseBody")
    attempt: int = 1
    attempted_at: datetime | None = Field(None, alias="attemptedAt")


class WebsetEvent(BaseModel):
    """An event recorded for Webset resources.

    `data` holds the affected resource (a Webset, search, item, import...).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    object: str = "event"
    type: EventType | str
    data: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = Field(None, alias="createdAt")
