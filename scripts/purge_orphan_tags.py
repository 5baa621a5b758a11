#!/usr/bin/env python3
"""Remove tags no post references (for cron when the in-process loop is off)."""

import asyncio
import sys

import logfire

from blog.config import Settings
from blog.interface.maintenance import purge_orphan_tags_once
from blog.util.di.container import create_container
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire


async def run() -> int:
    container = create_container()
    try:
        removed = await purge_orphan_tags_once(container)
    finally:
        await container.close()

    logfire.info("Orphan tag purge finished", removed=removed)
    return removed


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        asyncio.run(run())
        return 0
    except Exception as e:
        logfire.error(
            "Orphan tag purge failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
