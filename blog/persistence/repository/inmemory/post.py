"""In-memory post repository for testing."""

from typing import Optional
from uuid import uuid4

from blog.domain.model.post import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId

from .database import InMemoryDatabase


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        """Initialize repository.

        Args:
            db: Shared storage (a fresh one when omitted)
        """
        self._db = db or InMemoryDatabase()

    def _matching(self, tags: frozenset[str], title: str) -> list[Post]:
        posts = [p for p in self._db.posts.values() if title in p.title.lower()]
        if tags:
            posts = [p for p in posts if tags <= self._db.tag_names_of(p.id)]
        # created_at desc, id desc
        posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return posts

    async def find_ids(
        self,
        tags: frozenset[str],
        title: str,
        limit: int,
        offset: int,
    ) -> list[PostId]:
        """Find ids of posts matching a search."""
        posts = self._matching(tags, title)
        return [p.id for p in posts[offset : offset + limit]]

    async def count(self, tags: frozenset[str], title: str) -> int:
        """Count posts matching a search."""
        return len(self._matching(tags, title))

    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Fetch posts by id, newest first."""
        posts = [self._db.posts[i] for i in set(post_ids) if i in self._db.posts]
        posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._db.posts.get(post_id)

    async def exists_by_id(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        return post_id in self._db.posts

    async def create(self, title: str, text: str) -> Optional[Post]:
        """Insert a new post."""
        now = self._db.now()
        post = Post(
            id=PostId(uuid4()),
            title=title,
            text=text,
            created_at=now,
            updated_at=now,
        )
        self._db.posts[post.id] = post
        return post

    async def update(self, post_id: PostId, title: str, text: str) -> Optional[Post]:
        """Update title and text of a post."""
        return self._modify(
            post_id, title=title, text=text, updated_at=self._db.now()
        )

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post, cascading to its comments and tag associations."""
        if self._db.posts.pop(post_id, None) is None:
            return False

        self._db.images.pop(post_id, None)
        self._db.post_tags = {(p, t) for p, t in self._db.post_tags if p != post_id}
        self._db.comments = {
            cid: c for cid, c in self._db.comments.items() if c.post_id != post_id
        }
        return True

    async def increment_likes(self, post_id: PostId) -> Optional[int]:
        """Increment likes by 1."""
        post = self._db.posts.get(post_id)
        if post is None:
            return None
        updated = self._modify(post_id, likes_count=post.likes_count + 1)
        return updated.likes_count if updated else None

    async def set_image(self, post_id: PostId, data: bytes) -> bool:
        """Replace the post's image."""
        if self._modify(post_id, updated_at=self._db.now()) is None:
            return False
        self._db.images[post_id] = data
        return True

    async def get_image(self, post_id: PostId) -> Optional[bytes]:
        """Read the post's image."""
        return self._db.images.get(post_id)

    async def increment_comments(self, post_id: PostId) -> bool:
        """Increment comments_count by 1."""
        post = self._db.posts.get(post_id)
        if post is None:
            return False
        self._modify(
            post_id,
            comments_count=post.comments_count + 1,
            updated_at=self._db.now(),
        )
        return True

    async def decrement_comments(self, post_id: PostId) -> bool:
        """Decrement comments_count by 1 (minimum 0)."""
        post = self._db.posts.get(post_id)
        if post is None or post.comments_count == 0:
            return False
        self._modify(
            post_id,
            comments_count=post.comments_count - 1,
            updated_at=self._db.now(),
        )
        return True

    def _modify(self, post_id: PostId, **changes) -> Optional[Post]:
        # Posts are immutable, replace the stored copy
        post = self._db.posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(update=changes)
        self._db.posts[post_id] = updated
        return updated
