"""Like post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import PostId


class LikePostRequest(BaseModel):
    """Like post request."""

    post_id: str  # UUID string


class LikePostResponse(BaseModel):
    """Like post response."""

    post_id: str
    likes_count: int


class LikePostUseCase:
    """Use case for adding a like to a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize like post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> LikePostResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        likes = await self.post_service.like_post(PostId(UUID(request.post_id)))
        return LikePostResponse(post_id=request.post_id, likes_count=likes)
