#!/usr/bin/env python3
"""Apply alembic migrations to the comment database."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from modcomment.config import Settings
from modcomment.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema to head, logging failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    # migrations/env.py reads the connection string from Settings
    alembic_cfg = Config("alembic.ini")

    with logfire.span("run_migrations", environment=settings.environment):
        try:
            command.upgrade(alembic_cfg, "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The service must not start against a broken schema
            raise

    logfire.info("Database migrations completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
