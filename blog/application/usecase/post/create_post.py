"""Create post use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.post.common import PostResponse
from blog.domain.service import PostService


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    text: str
    tags: list[str] = []


class CreatePostUseCase:
    """Use case for creating a post with tags."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Args:
            request: Title, body and raw tag names

        Returns:
            Created post with normalized tags

        Raises:
            InvalidTagError: If a tag is empty after trimming
            ConflictError: If the post could not be stored
        """
        with logfire.span("create_post.execute", title=request.title):
            post = await self.post_service.create_post(
                title=request.title, text=request.text, tag_names=request.tags
            )
            return PostResponse.from_post(post)
