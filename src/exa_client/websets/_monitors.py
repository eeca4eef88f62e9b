"""Monitor operations for Exa Websets API (`/v0/monitors`)."""

from __future__ import annotations

from exa_client.websets._schedules import ScheduleClient, ScheduleRunsClient
from exa_client.websets.models import Monitor, MonitorRun


class WebsetMonitorRunsClient(ScheduleRunsClient[MonitorRun]):
    """Runs of a monitor: `list(monitor_id)`, `get(monitor_id, run_id)`."""

    collection = "monitors"
    run_model = MonitorRun


class WebsetMonitorsClient(ScheduleClient[Monitor, MonitorRun]):
    """Monitors re-run a search or refresh on a Webset on a cron schedule."""

    collection = "monitors"
    model = Monitor
    runs_client = WebsetMonitorRunsClient
