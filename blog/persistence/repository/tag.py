"""PostgreSQL implementation of Tag repository."""

from collections import defaultdict

import logfire
from sqlalchemy import delete, exists, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import PostId, TagId, normalize_tag_names
from blog.persistence.mappers import row_to_tag
from blog.persistence.tables import post_tags_table, posts_table, tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def ensure_tags(self, names: list[str]) -> dict[str, TagId]:
        """Insert any missing tags and return ids for all requested names."""
        canonical = normalize_tag_names(names)
        if not canonical:
            return {}

        with logfire.span("tag_repository.ensure_tags", tags=canonical):
            # Sorted so concurrent writers take index locks in the same order
            insert_stmt = (
                insert(tags_table)
                .values([{"name": name} for name in sorted(canonical)])
                .on_conflict_do_nothing()
            )
            await self.session.execute(insert_stmt)

            stmt = select(tags_table.c.id, tags_table.c.name).where(
                func.lower(tags_table.c.name).in_(canonical)
            )
            result = await self.session.execute(stmt)
            tag_ids = {row.name.lower(): TagId(row.id) for row in result.fetchall()}

            logfire.debug("Tags ensured", count=len(tag_ids))
            return tag_ids

    async def find_by_post_ids(self, post_ids: list[PostId]) -> dict[PostId, list[Tag]]:
        """Fetch tags for many posts in a single query."""
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, tags_table.c.id, tags_table.c.name)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)

        # Build lookup: post_id -> [tags]
        post_tag_map: dict[PostId, list[Tag]] = defaultdict(list)
        for row in result.fetchall():
            post_tag_map[PostId(row.post_id)].append(
                row_to_tag({"id": row.id, "name": row.name})
            )

        return dict(post_tag_map)

    async def replace_post_tags(self, post_id: PostId, names: list[str]) -> None:
        """Reconcile a post's tags to exactly the given set."""
        canonical = normalize_tag_names(names)

        with logfire.span(
            "tag_repository.replace_post_tags", post_id=str(post_id), tags=canonical
        ):
            # Row lock on the post serializes reconciliations of the same post
            lock_stmt = (
                select(posts_table.c.id)
                .where(posts_table.c.id == post_id)
                .with_for_update()
            )
            await self.session.execute(lock_stmt)

            if not canonical:
                await self.remove_post_tags(post_id)
                return

            tag_ids = list((await self.ensure_tags(canonical)).values())

            delete_stmt = delete(post_tags_table).where(
                post_tags_table.c.post_id == post_id,
                post_tags_table.c.tag_id.not_in(tag_ids),
            )
            await self.session.execute(delete_stmt)

            insert_stmt = (
                insert(post_tags_table)
                .values([{"post_id": post_id, "tag_id": tag_id} for tag_id in tag_ids])
                .on_conflict_do_nothing()
            )
            await self.session.execute(insert_stmt)

            await self.session.flush()
            logfire.info("Post tags replaced", post_id=str(post_id), count=len(tag_ids))

    async def remove_post_tags(self, post_id: PostId) -> None:
        """Remove every association of a post."""
        stmt = delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def purge_orphans(self) -> int:
        """Delete every tag that no post refers to."""
        with logfire.span("tag_repository.purge_orphans"):
            referenced = exists().where(post_tags_table.c.tag_id == tags_table.c.id)
            stmt = delete(tags_table).where(~referenced)
            result = await self.session.execute(stmt)
            await self.session.flush()

            removed = result.rowcount or 0
            logfire.info("Orphan tags purged", removed=removed)
            return removed

    async def find_all(self, limit: int = 100) -> list[Tag]:
        """List tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name).limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]
