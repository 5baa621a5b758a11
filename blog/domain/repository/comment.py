"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.comment import Comment
from blog.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are always addressed through their post: a comment id that
    belongs to a different post is treated as missing.
    """

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, newest first.

        Args:
            post_id: The post ID

        Returns:
            Comments ordered by created_at desc, id desc
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, post_id: PostId, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment of a post.

        Args:
            post_id: The post ID
            comment_id: The comment ID

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_id(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Check whether the (post, comment) pair exists."""
        pass

    @abstractmethod
    async def create(self, post_id: PostId, text: str) -> Optional[Comment]:
        """Insert a comment.

        Args:
            post_id: The post ID
            text: Comment text

        Returns:
            The created comment, or None if the store returned no row
        """
        pass

    @abstractmethod
    async def update_text(
        self, post_id: PostId, comment_id: CommentId, text: str
    ) -> Optional[Comment]:
        """Update the text of a comment.

        Args:
            post_id: The post ID
            comment_id: The comment ID
            text: New text

        Returns:
            Updated comment, or None if the pair doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete).

        Args:
            post_id: The post ID
            comment_id: The comment ID

        Returns:
            True if a comment was deleted
        """
        pass
