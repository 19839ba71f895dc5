"""Structured logging for the client, using structlog.

The client logs through ``structlog.get_logger`` only. Nothing is rendered
until the host application calls ``configure_logging`` (or configures
structlog itself).
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from polytoria_api.config import Settings, get_settings

LIBRARY_NAME = "polytoria_api"


def _add_library_name(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("library", LIBRARY_NAME)
    return event_dict


def configure_logging(
    settings: Settings | None = None,
    *,
    stream: TextIO | None = None,
    json_output: bool | None = None,
) -> None:
    """Configure structlog to render the client's log lines.

    Args:
        settings: Settings providing the level and debug flag (defaults to the cached settings)
        stream: Where lines are written (defaults to stderr)
        json_output: Render JSON lines; defaults to JSON unless ``settings.debug`` is on,
            in which case a readable console format is used
    """
    settings = settings or get_settings()
    if json_output is None:
        json_output = not settings.debug

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        _add_library_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, settings.log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        # Hosts may reconfigure later, so loggers must not freeze this config
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """Get a logger instance with optional initial context.

    Args:
        name: Logger name (typically __name__ of the module)
        **initial_context: Initial context to bind to the logger

    Returns:
        A bound structlog logger
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
