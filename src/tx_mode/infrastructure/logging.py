"""Structured logging for tx_mode.

Modules log through the standard library under the ``tx_mode`` logger.
Until :func:`setup_logging` runs, that logger has no handler of its own, so
a library user who never configures logging sees nothing below WARNING.
:func:`setup_logging` attaches a structlog-rendered handler to it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from tx_mode.infrastructure.config import ObservabilityConfig, get_config

PACKAGE_LOGGER = "tx_mode"


def setup_logging(observability: ObservabilityConfig | None = None) -> structlog.stdlib.BoundLogger:
    """Render ``tx_mode`` log records with structlog.

    Args:
        observability: Level and format; defaults to the global config

    Returns:
        A bound logger for the package
    """
    if observability is None:
        observability = get_config().observability

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if observability.log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(observability.log_level)
    package_logger.propagate = False

    return get_logger()


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.stdlib.BoundLogger:
    """Get a logger under the ``tx_mode`` hierarchy.

    Args:
        name: Child logger name, e.g. ``"builder"`` for ``tx_mode.builder``
        **initial_context: Initial context to bind to the logger
    """
    logger_name = f"{PACKAGE_LOGGER}.{name}" if name else PACKAGE_LOGGER
    logger = structlog.get_logger(logger_name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
