"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId
from blog.persistence.mappers import row_to_comment
from blog.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _pair(post_id: PostId, comment_id: CommentId):
        return (
            comments_table.c.id == comment_id,
            comments_table.c.post_id == post_id,
        )

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_id(
        self, post_id: PostId, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment of a post."""
        stmt = select(comments_table).where(*self._pair(post_id, comment_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def exists_by_id(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Check whether the (post, comment) pair exists."""
        stmt = select(comments_table.c.id).where(*self._pair(post_id, comment_id))
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create(self, post_id: PostId, text: str) -> Optional[Comment]:
        """Insert a comment."""
        stmt = (
            insert(comments_table)
            .values(post_id=post_id, text=text)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def update_text(
        self, post_id: PostId, comment_id: CommentId, text: str
    ) -> Optional[Comment]:
        """Update the text content of a comment."""
        stmt = (
            update(comments_table)
            .where(*self._pair(post_id, comment_id))
            .values(text=text, updated_at=func.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete)."""
        stmt = delete(comments_table).where(*self._pair(post_id, comment_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return (result.rowcount or 0) > 0
