"""List comments use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.comment.common import CommentResponse
from blog.domain.service import CommentService, PostService
from blog.domain.value import PostId


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: str  # UUID string


class ListCommentsUseCase:
    """Use case for listing the comments of a post, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: ListCommentsRequest) -> list[CommentResponse]:
        """Execute list comments flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(UUID(request.post_id))
        await self.post_service.ensure_exists(post_id)

        comments = await self.comment_service.get_comments_for_post(post_id)
        return [CommentResponse.from_comment(c) for c in comments]
