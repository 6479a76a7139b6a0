#!/usr/bin/env python3
"""Serve the LifeQuest API, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from lifequest.config import Settings
from lifequest.util.logging import setup_logging
from lifequest.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then hand over to uvicorn."""
    settings = Settings()

    # Configured before the app module is imported so startup errors are traced
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting LifeQuest API",
        host=settings.host,
        port=settings.port,
        remote_enabled=settings.remote.enabled,
    )
    try:
        uvicorn.run(
            "lifequest.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
