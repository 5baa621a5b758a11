"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Select, String, delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId
from blog.persistence.mappers import row_to_post
from blog.persistence.tables import (
    post_columns,
    post_tags_table,
    posts_table,
    tags_table,
)

# Total order shared by find_ids and find_by_ids
_ORDER = (desc(posts_table.c.created_at), desc(posts_table.c.id))


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _apply_search(stmt: Select, tags: frozenset[str], title: str) -> Select:
        """Restrict a statement to posts matching a search.

        Args:
            stmt: Statement selecting from the post table
            tags: Canonical tag names, all of which a post must carry
            title: Lowercase title substring

        Returns:
            Filtered statement
        """
        if title:
            lowered = func.lower(posts_table.c.title, type_=String)
            stmt = stmt.where(lowered.contains(title, autoescape=True))

        if tags:
            # Posts carrying every requested tag (AND, not OR)
            tagged = (
                select(post_tags_table.c.post_id)
                .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
                .where(tags_table.c.name.in_(sorted(tags)))
                .group_by(post_tags_table.c.post_id)
                .having(func.count(tags_table.c.id.distinct()) == len(tags))
            )
            stmt = stmt.where(posts_table.c.id.in_(tagged))

        return stmt

    async def find_ids(
        self,
        tags: frozenset[str],
        title: str,
        limit: int,
        offset: int,
    ) -> List[PostId]:
        """Find ids of posts matching a search."""
        with logfire.span(
            "post_repository.find_ids",
            tags=sorted(tags),
            title=title,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_search(select(posts_table.c.id), tags, title)
            stmt = stmt.order_by(*_ORDER).limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            return [PostId(post_id) for post_id in result.scalars().all()]

    async def count(self, tags: frozenset[str], title: str) -> int:
        """Count posts matching a search."""
        with logfire.span("post_repository.count", tags=sorted(tags), title=title):
            stmt = select(func.count()).select_from(posts_table)
            stmt = self._apply_search(stmt, tags, title)

            result = await self.session.execute(stmt)
            count = result.scalar() or 0
            logfire.info("Post count", count=count)
            return count

    async def find_by_ids(self, post_ids: List[PostId]) -> List[Post]:
        """Fetch posts by id, newest first."""
        if not post_ids:
            return []

        stmt = (
            select(*post_columns)
            .where(posts_table.c.id.in_(post_ids))
            .order_by(*_ORDER)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(*post_columns).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def exists_by_id(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        stmt = select(posts_table.c.id).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create(self, title: str, text: str) -> Optional[Post]:
        """Insert a new post."""
        with logfire.span("post_repository.create", title=title):
            stmt = (
                insert(posts_table)
                .values(title=title, text=text)
                .returning(*post_columns)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.error("Post insert returned no row", title=title)
                return None

            await self.session.flush()
            logfire.info("Post inserted", post_id=str(row.id))
            return row_to_post(row._asdict())

    async def update(self, post_id: PostId, title: str, text: str) -> Optional[Post]:
        """Update title and text of a post."""
        with logfire.span(
            "post_repository.update",
            post_id=str(post_id),
            text_length=len(text),
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(title=title, text=text, updated_at=func.now())
                .returning(*post_columns)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.warn("Post not found for update", post_id=str(post_id))
                return None

            await self.session.flush()
            return row_to_post(row._asdict())

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete). Comments go with it via FK cascade."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return (result.rowcount or 0) > 0

    async def increment_likes(self, post_id: PostId) -> Optional[int]:
        """Atomically increment likes by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(
                likes_count=posts_table.c.likes_count + 1,
                updated_at=func.now(),
            )
            .returning(posts_table.c.likes_count)
        )
        result = await self.session.execute(stmt)
        likes = result.scalar_one_or_none()
        await self.session.flush()
        return likes

    async def set_image(self, post_id: PostId, data: bytes) -> bool:
        """Replace the post's image."""
        with logfire.span(
            "post_repository.set_image", post_id=str(post_id), size=len(data)
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(image=data, updated_at=func.now())
                .returning(posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            updated = result.scalar_one_or_none() is not None
            await self.session.flush()
            return updated

    async def get_image(self, post_id: PostId) -> Optional[bytes]:
        """Read the post's image."""
        stmt = select(posts_table.c.image).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def increment_comments(self, post_id: PostId) -> bool:
        """Atomically increment comments_count by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(
                comments_count=posts_table.c.comments_count + 1,
                updated_at=func.now(),
            )
            .returning(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        updated = result.scalar_one_or_none() is not None
        await self.session.flush()
        return updated

    async def decrement_comments(self, post_id: PostId) -> bool:
        """Atomically decrement comments_count by 1 (minimum 0)."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .where(posts_table.c.comments_count > 0)  # Don't go below 0
            .values(
                comments_count=posts_table.c.comments_count - 1,
                updated_at=func.now(),
            )
            .returning(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        updated = result.scalar_one_or_none() is not None
        await self.session.flush()
        return updated
