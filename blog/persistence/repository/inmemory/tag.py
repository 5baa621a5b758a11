"""In-memory implementation of Tag repository for testing."""

from collections import defaultdict
from uuid import uuid4

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import PostId, TagId, normalize_tag_names

from .database import InMemoryDatabase


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        """Initialize repository.

        Args:
            db: Shared storage (a fresh one when omitted)
        """
        self._db = db or InMemoryDatabase()

    async def ensure_tags(self, names: list[str]) -> dict[str, TagId]:
        """Insert any missing tags and return ids for all requested names."""
        by_name = {tag.name: tag.id for tag in self._db.tags.values()}
        tag_ids: dict[str, TagId] = {}
        for name in normalize_tag_names(names):
            if name not in by_name:
                tag = Tag(id=TagId(uuid4()), name=name)
                self._db.tags[tag.id] = tag
                by_name[name] = tag.id
            tag_ids[name] = by_name[name]
        return tag_ids

    async def find_by_post_ids(self, post_ids: list[PostId]) -> dict[PostId, list[Tag]]:
        """Fetch tags for many posts."""
        wanted = set(post_ids)
        post_tag_map: dict[PostId, list[Tag]] = defaultdict(list)
        for post_id, tag_id in self._db.post_tags:
            if post_id in wanted:
                post_tag_map[post_id].append(self._db.tags[tag_id])

        for tags in post_tag_map.values():
            tags.sort(key=lambda t: t.name)
        return dict(post_tag_map)

    async def replace_post_tags(self, post_id: PostId, names: list[str]) -> None:
        """Reconcile a post's tags to exactly the given set."""
        tag_ids = set((await self.ensure_tags(names)).values())
        self._db.post_tags = {
            (p, t) for p, t in self._db.post_tags if p != post_id or t in tag_ids
        }
        self._db.post_tags.update((post_id, tag_id) for tag_id in tag_ids)

    async def remove_post_tags(self, post_id: PostId) -> None:
        """Remove every association of a post."""
        self._db.post_tags = {(p, t) for p, t in self._db.post_tags if p != post_id}

    async def purge_orphans(self) -> int:
        """Delete every tag that no post refers to."""
        referenced = {tag_id for _, tag_id in self._db.post_tags}
        orphans = [tag_id for tag_id in self._db.tags if tag_id not in referenced]
        for tag_id in orphans:
            del self._db.tags[tag_id]
        return len(orphans)

    async def find_all(self, limit: int = 100) -> list[Tag]:
        """List tags ordered by name."""
        tags = sorted(self._db.tags.values(), key=lambda t: t.name)
        return tags[:limit]
