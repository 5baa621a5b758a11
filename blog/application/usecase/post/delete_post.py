"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string


class DeletePostUseCase:
    """Use case for deleting a post.

    Comments go with the post; orphaned tags are left for the purge.
    """

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            NotFoundError: If no post was deleted
        """
        await self.post_service.delete_post(PostId(UUID(request.post_id)))
