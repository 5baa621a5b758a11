"""Delete comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.domain.service import CommentService, PostService
from blog.domain.value import CommentId, PostId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string


class DeleteCommentUseCase:
    """Use case for deleting a comment and decrementing the post's count."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't belong to the post
        """
        post_id = PostId(UUID(request.post_id))

        with logfire.span(
            "delete_comment.execute",
            post_id=request.post_id,
            comment_id=request.comment_id,
        ):
            await self.comment_service.delete_comment(
                post_id, CommentId(UUID(request.comment_id))
            )
            await self.post_service.decrement_comment_count(post_id)
