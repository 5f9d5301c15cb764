#!/usr/bin/env python3
"""Run the comments API under uvicorn.

Logging and logfire are configured before the app module is imported, so
failures while building the app are reported too.
"""

import sys

import logfire
import uvicorn

from tome.config import Settings
from tome.util.logging import get_logger, setup_logging
from tome.util.observability import configure_logfire

logger = get_logger(__name__)


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logger.info("Serving comments API on %s:%s", settings.host, settings.port)
    try:
        # The comments table is created by the app lifespan
        uvicorn.run(
            "tome.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error("Comments API failed to start", error=str(e), _exc_info=e)
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
