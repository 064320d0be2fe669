"""Logging setup for applications embedding the validator.

The library itself only calls ``logging.getLogger(__name__)``; applications
call ``configure_logging()`` once at startup.
"""

from __future__ import annotations

import logging
import sys

import structlog

from norwegian_tin.config import settings


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging and structlog.

    Args:
        level: Log level name. Defaults to ``settings.log_level``.
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name),
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("norwegian_tin").setLevel(level_name)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
