"""In-memory comment repository for testing."""

from typing import Optional
from uuid import uuid4

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CommentId, PostId

from .database import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        """Initialize repository.

        Args:
            db: Shared storage (a fresh one when omitted)
        """
        self._db = db or InMemoryDatabase()

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, newest first."""
        comments = [c for c in self._db.comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return comments

    async def find_by_id(
        self, post_id: PostId, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment of a post."""
        comment = self._db.comments.get(comment_id)
        if comment is None or comment.post_id != post_id:
            return None
        return comment

    async def exists_by_id(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Check whether the (post, comment) pair exists."""
        return await self.find_by_id(post_id, comment_id) is not None

    async def create(self, post_id: PostId, text: str) -> Optional[Comment]:
        """Insert a comment. Fails like a foreign key when the post is missing."""
        if post_id not in self._db.posts:
            return None

        now = self._db.now()
        comment = Comment(
            id=CommentId(uuid4()),
            post_id=post_id,
            text=text,
            created_at=now,
            updated_at=now,
        )
        self._db.comments[comment.id] = comment
        return comment

    async def update_text(
        self, post_id: PostId, comment_id: CommentId, text: str
    ) -> Optional[Comment]:
        """Update the text content of a comment."""
        comment = await self.find_by_id(post_id, comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(update={"text": text, "updated_at": self._db.now()})
        self._db.comments[comment_id] = updated
        return updated

    async def delete(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Delete a comment."""
        if await self.find_by_id(post_id, comment_id) is None:
            return False
        del self._db.comments[comment_id]
        return True
