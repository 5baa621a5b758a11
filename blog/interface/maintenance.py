"""Background maintenance jobs."""

import asyncio

import logfire
from dishka import AsyncContainer

from blog.application.usecase.tag import PurgeOrphanTagsUseCase


async def purge_orphan_tags_once(container: AsyncContainer) -> int:
    """Run one orphan tag purge in its own request scope (own transaction).

    Args:
        container: Application-scoped DI container

    Returns:
        Number of tags removed
    """
    async with container() as request_container:
        use_case = await request_container.get(PurgeOrphanTagsUseCase)
        result = await use_case.execute()
    return result.removed


async def run_orphan_tag_purge(container: AsyncContainer, interval_seconds: int) -> None:
    """Purge orphan tags every interval until cancelled.

    A failed run is logged and retried on the next tick.

    Args:
        container: Application-scoped DI container
        interval_seconds: Seconds between runs
    """
    logfire.info("Orphan tag purge scheduled", interval_seconds=interval_seconds)
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            await purge_orphan_tags_once(container)
        except Exception as e:
            logfire.error(
                "Orphan tag purge failed",
                error=str(e),
                error_type=type(e).__name__,
            )
