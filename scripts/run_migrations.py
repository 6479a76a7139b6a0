#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from lifequest.config import Settings
from lifequest.util.logging import setup_logging
from lifequest.util.observability import configure_logfire


def main() -> int:
    """Upgrade the database to the latest revision."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", environment=settings.environment):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Database migrations completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
