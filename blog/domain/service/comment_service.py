"""Comment domain service."""

import logfire

from blog.domain.error import ConflictError, NotFoundError
from blog.domain.model.comment import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations.

    Post counters are not touched here; the comment use cases pair each
    create/delete with the matching PostService counter call.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post, newest first.

        Args:
            post_id: Post ID

        Returns:
            List of comments
        """
        with logfire.span("comment_service.get_comments_for_post", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def get_comment(self, post_id: PostId, comment_id: CommentId) -> Comment:
        """Get a comment of a post.

        Raises:
            NotFoundError: If the (post, comment) pair doesn't exist
        """
        comment = await self.comment_repository.find_by_id(post_id, comment_id)
        if comment is None:
            logfire.warn(
                "Comment not found", post_id=str(post_id), comment_id=str(comment_id)
            )
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def comment_exists(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Check whether the (post, comment) pair exists."""
        return await self.comment_repository.exists_by_id(post_id, comment_id)

    async def create_comment(self, post_id: PostId, text: str) -> Comment:
        """Create a comment on a post.

        Args:
            post_id: Post ID
            text: Comment text

        Returns:
            Created comment

        Raises:
            ConflictError: If the store did not return the new comment
        """
        with logfire.span("comment_service.create_comment", post_id=str(post_id)):
            comment = await self.comment_repository.create(post_id, text)
            if comment is None:
                raise ConflictError(f"Failed to create comment on post {post_id}")

            logfire.info(
                "Comment created", comment_id=str(comment.id), post_id=str(post_id)
            )
            return comment

    async def update_text(
        self, post_id: PostId, comment_id: CommentId, text: str
    ) -> Comment:
        """Update the text content of a comment.

        Args:
            post_id: Post ID
            comment_id: Comment ID
            text: New text content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the (post, comment) pair doesn't exist
        """
        with logfire.span(
            "comment_service.update_text",
            post_id=str(post_id),
            comment_id=str(comment_id),
            text_length=len(text),
        ):
            updated = await self.comment_repository.update_text(
                post_id, comment_id, text
            )
            if updated is None:
                logfire.warn(
                    "Comment not found for text update", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment text updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(self, post_id: PostId, comment_id: CommentId) -> None:
        """Delete a comment.

        Raises:
            NotFoundError: If nothing was deleted
        """
        with logfire.span(
            "comment_service.delete_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
        ):
            if not await self.comment_repository.delete(post_id, comment_id):
                logfire.warn("Comment not found for delete", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment deleted", comment_id=str(comment_id))
