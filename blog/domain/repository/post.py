"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.post import Post
from blog.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Every listing uses the same total order: created_at descending, then
    id descending. Posts are returned without tags; callers merge them in
    through the TagRepository.
    """

    @abstractmethod
    async def find_ids(
        self,
        tags: frozenset[str],
        title: str,
        limit: int,
        offset: int,
    ) -> List[PostId]:
        """Find ids of posts matching a search.

        Args:
            tags: Canonical tag names; a post must carry all of them
            title: Lowercase substring the title must contain ("" matches all)
            limit: Maximum number of ids to return
            offset: Number of ids to skip

        Returns:
            Ordered list of post ids
        """
        pass

    @abstractmethod
    async def count(self, tags: frozenset[str], title: str) -> int:
        """Count posts matching the same predicate as find_ids.

        Args:
            tags: Canonical tag names; a post must carry all of them
            title: Lowercase substring the title must contain

        Returns:
            Total number of matching posts
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: List[PostId]) -> List[Post]:
        """Fetch posts by id, ordered like find_ids.

        Args:
            post_ids: Post identifiers

        Returns:
            Posts found (without tags)
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post (without tags) if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_id(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        pass

    @abstractmethod
    async def create(self, title: str, text: str) -> Optional[Post]:
        """Insert a new post with zeroed counters.

        Args:
            title: Post title
            text: Markdown body

        Returns:
            The created post, or None if the store returned no row
        """
        pass

    @abstractmethod
    async def update(self, post_id: PostId, title: str, text: str) -> Optional[Post]:
        """Update title and text and bump updated_at.

        Args:
            post_id: ID of the post to update
            title: New title
            text: New body

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post along with its tag associations and comments.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def increment_likes(self, post_id: PostId) -> Optional[int]:
        """Atomically increment likes by 1.

        Uses a single SQL-level increment so concurrent likes are never lost.

        Args:
            post_id: The post ID

        Returns:
            New like count, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def set_image(self, post_id: PostId, data: bytes) -> bool:
        """Replace the post's image.

        Args:
            post_id: The post ID
            data: Raw image bytes

        Returns:
            True if the post exists and was updated
        """
        pass

    @abstractmethod
    async def get_image(self, post_id: PostId) -> Optional[bytes]:
        """Read the post's image.

        Args:
            post_id: The post ID

        Returns:
            Image bytes, or None when no image is set (or no such post)
        """
        pass

    @abstractmethod
    async def increment_comments(self, post_id: PostId) -> bool:
        """Atomically increment comments_count by 1.

        Args:
            post_id: The post ID

        Returns:
            True if the post exists
        """
        pass

    @abstractmethod
    async def decrement_comments(self, post_id: PostId) -> bool:
        """Atomically decrement comments_count by 1 (minimum 0).

        Args:
            post_id: The post ID

        Returns:
            True if the counter was decremented
        """
        pass
