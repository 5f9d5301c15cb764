"""Standard library logging for the process.

Logfire carries the structured telemetry; this covers plain log records
from uvicorn, SQLAlchemy and our own ``get_logger`` users.
"""

import logging
import sys

from tome.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Chatty libraries that only matter when something is wrong
QUIET_LOGGERS = ("aiosqlite", "asyncio", "slowapi")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from settings.

    Args:
        settings: Application settings (``debug`` selects DEBUG level)
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging ready (environment=%s, level=%s)",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)
