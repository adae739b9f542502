"""
Structured logging for remote_data.

Modules that do I/O or hold state get their logger from get_logger(), which
binds the component name to every event:

    http        http.request.succeeded, http.request.failed
    connector   connector.state.changed, connector.trigger.ignored, ...

Importing the package configures nothing. An application that wants these
events rendered calls configure_logging() once at start-up; it reads the
level and output format from ClientSettings:

    REMOTE_DATA_LOG_LEVEL=DEBUG REMOTE_DATA_LOG_FORMAT=json python app.py
"""

from __future__ import annotations

import sys
from typing import Any

import structlog

from remote_data.config import ClientSettings, load_settings


def get_logger(component: str) -> Any:
    """A structlog logger with `component` bound to every event."""
    return structlog.get_logger(component=component)


def configure_logging(settings: ClientSettings | None = None) -> None:
    """
    Render events to stderr, one line each.

    log_format="console" gives key=value lines for humans; "json" gives one
    JSON object per line with exceptions rendered as text.
    """
    settings = settings or load_settings()
    if settings.log_format == "json":
        renderer: list[Any] = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderer = [structlog.dev.ConsoleRenderer(colors=False)]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            *renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_number),
        logger_factory=structlog.WriteLoggerFactory(file=sys.stderr),
    )
