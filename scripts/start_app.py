#!/usr/bin/env python3
"""Start the comment service with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from modcomment.config import Settings
from modcomment.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting comment service",
            host=settings.server.host,
            port=settings.server.port,
        )

        uvicorn.run(
            "modcomment.interface.api.app:create_app",
            factory=True,
            host=settings.server.host,
            port=settings.server.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the process exits with an error
        raise


if __name__ == "__main__":
    sys.exit(main())
