"""Exa Websets API client, models and builders."""

from exa_client.websets.builder import (
    SearchBuilder,
    WebhookBuilder,
    WebsetBuilder,
    WebsetSearchBuilder,
)
from exa_client.websets.client import WebsetsClient
from exa_client.websets.models import (
    Cadence,
    CreateEnrichmentParameters,
    CreateImportParameters,
    CreateImportResponse,
    CreateMonitorParameters,
    CreateStreamParameters,
    CreateWebhookParameters,
    CreateWebsetParameters,
    CreateWebsetSearchParameters,
    EnrichmentFormat,
    Entity,
    EntityType,
    EventType,
    GetWebsetResponse,
    Import,
    ImportStatus,
    Monitor,
    MonitorRun,
    PreviewWebsetParameters,
    PreviewWebsetResponse,
    ScheduleBehavior,
    Stream,
    StreamRun,
    UpdateEnrichmentParameters,
    UpdateImport,
    UpdateMonitor,
    UpdateStream,
    UpdateWebhookParameters,
    UpdateWebsetRequest,
    Webhook,
    WebhookAttempt,
    WebhookStatus,
    Webset,
    WebsetEnrichment,
    WebsetEvent,
    WebsetItem,
    WebsetSearch,
    WebsetSearchStatus,
    WebsetStatus,
)

__all__ = [
    "Cadence",
    "CreateEnrichmentParameters",
    "CreateImportParameters",
    "CreateImportResponse",
    "CreateMonitorParameters",
    "CreateStreamParameters",
    "CreateWebhookParameters",
    "CreateWebsetParameters",
    "CreateWebsetSearchParameters",
    "EnrichmentFormat",
    "Entity",
    "EntityType",
    "EventType",
    "GetWebsetResponse",
    "Import",
    "ImportStatus",
    "Monitor",
    "MonitorRun",
    "PreviewWebsetParameters",
    "PreviewWebsetResponse",
    "ScheduleBehavior",
    "SearchBuilder",
    "Stream",
    "StreamRun",
    "UpdateEnrichmentParameters",
    "UpdateImport",
    "UpdateMonitor",
    "UpdateStream",
    "UpdateWebhookParameters",
    "UpdateWebsetRequest",
    "Webhook",
    "WebhookAttempt",
    "WebhookBuilder",
    "WebhookStatus",
    "Webset",
    "WebsetBuilder",
    "WebsetEnrichment",
    "WebsetEvent",
    "WebsetItem",
    "WebsetSearch",
    "WebsetSearchBuilder",
    "WebsetSearchStatus",
    "WebsetStatus",
    "WebsetsClient",
]
