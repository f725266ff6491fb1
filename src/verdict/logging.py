"""Structured logging configuration for verdict."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

_SHARED_PROCESSORS: tuple = (
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def configure_logging(
    log_level: str = "WARNING",
    json_format: bool = False,
    stream: TextIO | None = None,
) -> None:
    """
    Route verdict's diagnostic events to ``stream``.

    Only the command line calls this. Applications embedding the library
    keep whatever structlog setup they already have.

    Args:
        log_level: Lowest level written; unknown names fall back to WARNING.
        json_format: Write one JSON object per event instead of key=value lines.
        stream: Destination, stderr unless given, so stdout stays reserved
            for query output.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    level = getattr(logging, log_level.upper(), logging.WARNING)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        # reconfiguring must affect loggers that already logged
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.typing.BindableLogger:
    """
    Get a logger for a verdict module.

    The returned proxy resolves the active configuration on every event,
    so module-level loggers pick up a later ``configure_logging`` call.

    Args:
        name: Logger name (typically module name).

    Returns:
        structlog logger proxy whose events carry ``logger_name``.
    """
    return structlog.get_logger(name, logger_name=name)
