"""Unit tests for the orphan tag purge jobs."""

import asyncio
from contextlib import suppress

import pytest

from blog.domain.repository import TagRepository
from blog.domain.service import TagService
from blog.interface.maintenance import purge_orphan_tags_once, run_orphan_tag_purge
from tests.di import build_test_container


async def _seed_orphans(container, names):
    async with container() as request_container:
        tag_repo = await request_container.get(TagRepository)
        await tag_repo.ensure_tags(names)


async def _tag_names(container):
    async with container() as request_container:
        tag_service = await request_container.get(TagService)
        return [t.name for t in await tag_service.get_all_tags()]


class TestOrphanTagPurge:
    """Tests for purge_orphan_tags_once and run_orphan_tag_purge."""

    @pytest.mark.asyncio
    async def test_purge_once_runs_in_its_own_scope(self):
        """One run removes every orphan and reports the count."""
        # Arrange
        container = build_test_container()
        await _seed_orphans(container, ["java", "cloud"])

        # Act
        removed = await purge_orphan_tags_once(container)

        # Assert
        assert removed == 2
        assert await _tag_names(container) == []
        await container.close()

    @pytest.mark.asyncio
    async def test_loop_purges_until_cancelled(self):
        """The background loop keeps purging and stops on cancel."""
        # Arrange
        container = build_test_container()
        await _seed_orphans(container, ["java"])

        # Act
        task = asyncio.create_task(run_orphan_tag_purge(container, interval_seconds=0))
        for _ in range(100):
            await asyncio.sleep(0.01)
            if not await _tag_names(container):
                break
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task

        # Assert
        assert task.cancelled()
        assert await _tag_names(container) == []
        await container.close()
