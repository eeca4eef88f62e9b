"""Logging configuration helpers (structlog)."""

from __future__ import annotations

import logging
import os
import sys

import structlog

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _resolve_level() -> int:
    level_name = os.getenv("EXA_LOG_LEVEL", "WARNING").strip().upper()
    if level_name not in _LEVELS:
        print(
            f"Invalid EXA_LOG_LEVEL {level_name!r}; using WARNING",
            file=sys.__stderr__,
        )
        return logging.WARNING
    level: int = getattr(logging, level_name)
    return level


def configure_structlog() -> None:
    """
    Configure structlog for the Exa client and CLI.

    - Logs go to stderr, so stdout stays clean for CLI output and `--json`.
    - Level comes from `EXA_LOG_LEVEL` (default WARNING).
    - `EXA_LOG_FORMAT=json` switches from console lines to JSON lines.
    """
    renderer: structlog.typing.Processor
    if os.getenv("EXA_LOG_FORMAT", "console").strip().lower() == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level()),
        logger_factory=structlog.PrintLoggerFactory(file=sys.__stderr__),
        cache_logger_on_first_use=False,
    )
