"""Tag repository interface."""

from abc import ABC, abstractmethod

from blog.domain.model.tag import Tag
from blog.domain.value import PostId, TagId


class TagRepository(ABC):
    """Repository for Tag entities and the post/tag association.

    Tag names are normalized (trimmed, lowercased) before they are stored
    or compared, so names differing only in case or whitespace resolve to
    the same tag.
    """

    @abstractmethod
    async def ensure_tags(self, names: list[str]) -> dict[str, TagId]:
        """Insert any missing tags and return ids for all requested names.

        Safe under concurrent callers inserting the same new name.

        Args:
            names: Raw tag names

        Returns:
            Mapping of canonical tag name to tag id

        Raises:
            InvalidTagError: If a name is empty after trimming
        """
        pass

    @abstractmethod
    async def find_by_post_ids(self, post_ids: list[PostId]) -> dict[PostId, list[Tag]]:
        """Fetch tags for many posts in a single round trip.

        Args:
            post_ids: Post identifiers

        Returns:
            Mapping of post id to its tags sorted by name. Posts without
            tags are absent.
        """
        pass

    @abstractmethod
    async def replace_post_tags(self, post_id: PostId, names: list[str]) -> None:
        """Reconcile a post's tags to exactly the given set.

        Missing tags are created, missing associations inserted and
        associations outside the set removed. An empty list removes every
        association of the post.

        Args:
            post_id: The post ID
            names: Desired raw tag names
        """
        pass

    @abstractmethod
    async def remove_post_tags(self, post_id: PostId) -> None:
        """Remove every association of a post. Tags themselves are kept.

        Args:
            post_id: The post ID
        """
        pass

    @abstractmethod
    async def purge_orphans(self) -> int:
        """Delete every tag that no post refers to.

        Returns:
            Number of tags removed
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100) -> list[Tag]:
        """List tags ordered by name.

        Args:
            limit: Maximum number of tags to return

        Returns:
            List of tags
        """
        pass
