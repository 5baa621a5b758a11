#!/usr/bin/env python3
"""Start the blog API under uvicorn, reporting startup errors to Logfire."""

import sys

import logfire
import uvicorn

from blog.config import Settings
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    # Before the app module is imported, so its startup is traced
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting blog API",
            host=settings.host,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "blog.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Blog API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
