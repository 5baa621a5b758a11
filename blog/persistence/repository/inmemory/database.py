"""Shared in-memory storage for the in-memory repositories."""

from datetime import datetime, timedelta

from blog.domain.model import Comment, Post, Tag
from blog.domain.value import CommentId, PostId, TagId


class InMemoryDatabase:
    """Dict-backed tables shared by the in-memory repositories.

    The post, tag and comment repositories of one container scope share a
    single instance so that associations and cascades are visible across
    repositories, the same way they are in PostgreSQL.
    """

    def __init__(self) -> None:
        self.posts: dict[PostId, Post] = {}
        self.images: dict[PostId, bytes] = {}
        self.tags: dict[TagId, Tag] = {}
        self.post_tags: set[tuple[PostId, TagId]] = set()
        self.comments: dict[CommentId, Comment] = {}
        self._last_timestamp: datetime | None = None

    def now(self) -> datetime:
        """Strictly increasing timestamp, so creation order is preserved."""
        now = datetime.now()
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    def tag_names_of(self, post_id: PostId) -> set[str]:
        """Names of the tags associated with a post."""
        return {
            self.tags[tag_id].name
            for assoc_post_id, tag_id in self.post_tags
            if assoc_post_id == post_id
        }
