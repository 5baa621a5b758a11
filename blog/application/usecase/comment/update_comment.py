"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.comment.common import CommentResponse, check_ids_match
from blog.domain.service import CommentService, PostService
from blog.domain.value import CommentId, PostId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    post_id: str  # UUID string from the path
    comment_id: str  # UUID string from the path
    body_post_id: str | None = None
    body_id: str | None = None
    text: str


class UpdateCommentUseCase:
    """Use case for editing a comment's text."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Execute update comment flow.

        Raises:
            BadRequestError: If a body id differs from the path
            NotFoundError: If the post or the comment doesn't exist
        """
        check_ids_match("Post", request.post_id, request.body_post_id)
        check_ids_match("Comment", request.comment_id, request.body_id)

        post_id = PostId(UUID(request.post_id))
        await self.post_service.ensure_exists(post_id)

        comment = await self.comment_service.update_text(
            post_id, CommentId(UUID(request.comment_id)), request.text
        )
        return CommentResponse.from_comment(comment)
