"""Tag domain service."""

import logfire

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def get_all_tags(self, limit: int = 100) -> list[Tag]:
        """Get tags ordered by name.

        Args:
            limit: Maximum number of tags to return

        Returns:
            List of tags
        """
        with logfire.span("tag_service.get_all_tags", limit=limit):
            tags = await self.tag_repository.find_all(limit=limit)
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def purge_orphan_tags(self) -> int:
        """Remove tags no post refers to any more.

        Returns:
            Number of tags removed
        """
        with logfire.span("tag_service.purge_orphan_tags"):
            removed = await self.tag_repository.purge_orphans()
            logfire.info("Orphan tag purge finished", removed=removed)
            return removed
