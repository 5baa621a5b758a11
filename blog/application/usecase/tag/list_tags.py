"""List tags use case."""

import logfire
from pydantic import BaseModel, Field

from blog.domain.service import TagService


class TagItem(BaseModel):
    """Tag item in response."""

    id: str
    name: str


class ListTagsRequest(BaseModel):
    """List tags request."""

    limit: int = Field(default=100, ge=1, le=1000)


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase:
    """Use case for listing known tags by name."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Tags ordered by name
        """
        with logfire.span("list_tags.execute", limit=request.limit):
            tags = await self.tag_service.get_all_tags(limit=request.limit)

            tag_items = [TagItem(id=str(tag.id), name=tag.name) for tag in tags]

            logfire.info("Tags listed", count=len(tag_items))

            return ListTagsResponse(tags=tag_items)
