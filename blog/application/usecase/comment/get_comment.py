"""Get comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.comment.common import CommentResponse
from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string


class GetCommentUseCase:
    """Use case for fetching one comment of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentResponse:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment doesn't belong to the post
        """
        comment = await self.comment_service.get_comment(
            PostId(UUID(request.post_id)), CommentId(UUID(request.comment_id))
        )
        return CommentResponse.from_comment(comment)
