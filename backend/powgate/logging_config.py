"""
Structured logging configuration using structlog.

JSON lines when ``log_format`` is "json", coloured console output otherwise.
Logs go to stdout; the process manager handles persistence.
"""

import logging
import sys

import structlog

from powgate.config import settings


def setup_logging() -> None:
    """
    Configure structlog and stdlib logging integration.

    Call this once at application startup.
    """
    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    level = getattr(logging, settings.log_level.upper())

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            # Picks up the correlation ID bound by LoggingMiddleware
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # stdlib logging for uvicorn and slowapi
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
