"""Stream operations for Exa Websets API (`/v0/streams`)."""

from __future__ import annotations

from exa_client.websets._schedules import ScheduleClient, ScheduleRunsClient
from exa_client.websets.models import Stream, StreamRun


class WebsetStreamRunsClient(ScheduleRunsClient[StreamRun]):
    """Runs of a stream: `list(stream_id)`, `get(stream_id, run_id)`."""

    collection = "streams"
    run_model = StreamRun


class WebsetStreamsClient(ScheduleClient[Stream, StreamRun]):
    """Streams continuously feed new search results into a Webset."""

    collection = "streams"
    model = Stream
    runs_client = WebsetStreamRunsClient
