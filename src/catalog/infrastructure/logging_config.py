"""Logging configuration: structlog on top of stdlib logging.

Development gets a colored console renderer; production and staging
emit one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

from catalog.infrastructure.config import CatalogConfig


def configure_logging(config: CatalogConfig) -> None:
    """Configure all logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level)
    root_logger.handlers = []

    # stderr keeps log lines out of the CLI's stdout output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.log_level)
    root_logger.addHandler(handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.contextvars.merge_contextvars,
    ]
    if config.is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
