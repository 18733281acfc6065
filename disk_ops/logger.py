"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

from .config import get_log_level

LOGGER_NAME = "disk_ops"

# Events become plain stdlib records on the "disk_ops" logger (message plus
# extra fields), so nothing is emitted until the host configures logging or
# calls setup_logging.
logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
    logging.getLogger(LOGGER_NAME),
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.render_to_log_kwargs,
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
)

_handler: logging.Handler | None = None


def setup_logging() -> structlog.stdlib.BoundLogger:
    """Render disk_ops events to stderr with structlog's console renderer at LOG_LEVEL.

    Calling it again replaces the handler installed by the previous call.
    """
    global _handler

    log_level = get_log_level()
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    stdlib_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        stdlib_logger.removeHandler(_handler)
    stdlib_logger.addHandler(handler)
    stdlib_logger.setLevel(getattr(logging, log_level, logging.INFO))
    _handler = handler

    return logger
