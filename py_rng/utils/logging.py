"""Logging configuration."""

import logging
import sys

import structlog

from ..config import Settings, settings as default_settings


def configure_logging(settings: Settings = default_settings) -> None:
    """Route structlog through stdlib logging at the configured level and format."""
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=settings.log_level.upper())
    logging.getLogger().setLevel(settings.log_level.upper())

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
