"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.post.common import PostResponse
from blog.domain.service import PostService
from blog.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostUseCase:
    """Use case for fetching a single post with its full body."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_service.get_post(PostId(UUID(request.post_id)))
        return PostResponse.from_post(post)
