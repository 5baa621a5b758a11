"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.application.usecase.comment.common import CommentResponse, check_ids_match
from blog.domain.service import CommentService, PostService
from blog.domain.value import PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string from the path
    body_post_id: str | None = None  # postId repeated in the body, if any
    text: str


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Steps:
        1. Check the body post id against the path
        2. Verify post exists via post service
        3. Create comment via comment service
        4. Increment the post's comment count in the same transaction

        Args:
            request: Post id and comment text

        Returns:
            Created comment

        Raises:
            BadRequestError: If the body post id differs from the path
            NotFoundError: If the post doesn't exist
        """
        check_ids_match("Post", request.post_id, request.body_post_id)
        post_id = PostId(UUID(request.post_id))

        with logfire.span("create_comment.execute", post_id=request.post_id):
            await self.post_service.ensure_exists(post_id)

            comment = await self.comment_service.create_comment(post_id, request.text)
            await self.post_service.increment_comment_count(post_id)

            return CommentResponse.from_comment(comment)
