"""Structured logging configuration (structlog)."""

from __future__ import annotations

import logging
from pathlib import Path

import structlog

from numeric_statistics.common.constants import DEFAULT_LOG_LEVEL, LOGGER_NAME

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that renders JSON into the stdlib logger *name*.

    *name* is placed under the package namespace, so nothing is emitted
    until an application calls :func:`configure_logging` (or attaches its
    own handler to the ``numeric_statistics`` logger).
    """
    stdlib_logger = logging.getLogger(f"{LOGGER_NAME}.{name}")
    return structlog.wrap_logger(
        stdlib_logger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    level: int = DEFAULT_LOG_LEVEL, log_path: Path | None = None
) -> logging.Handler:
    """Send package log events to stderr, or as JSON lines to *log_path*.

    Call once at process startup. Returns the installed handler so callers
    can detach it again.
    """
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(str(log_path), mode="a")
    else:
        handler = logging.StreamHandler()
    handler.setLevel(level)

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler
