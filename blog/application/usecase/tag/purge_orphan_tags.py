"""Purge orphan tags use case."""

import logfire
from pydantic import BaseModel

from blog.domain.service import TagService


class PurgeOrphanTagsResponse(BaseModel):
    """Purge orphan tags response."""

    removed: int


class PurgeOrphanTagsUseCase:
    """Maintenance use case removing tags no post references."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self) -> PurgeOrphanTagsResponse:
        with logfire.span("purge_orphan_tags.execute"):
            removed = await self.tag_service.purge_orphan_tags()
            return PurgeOrphanTagsResponse(removed=removed)
