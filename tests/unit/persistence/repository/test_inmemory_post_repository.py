"""Unit tests for the in-memory post repository."""

from uuid import uuid4

import pytest

from blog.domain.repository import CommentRepository, PostRepository, TagRepository
from blog.domain.value import PostId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSearch:
    """Tests for find_ids and count."""

    @pytest.mark.asyncio
    async def test_tags_are_and_filtered(self, unit_env):
        """A post must carry every requested tag to match."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        tag_repo = await unit_env.get(TagRepository)
        both = await post_repo.create(title="Both", text="")
        java_only = await post_repo.create(title="Java only", text="")
        await tag_repo.replace_post_tags(both.id, ["java", "cloud"])
        await tag_repo.replace_post_tags(java_only.id, ["java"])

        # Act
        ids = await post_repo.find_ids(
            tags=frozenset({"java", "cloud"}), title="", limit=10, offset=0
        )
        total = await post_repo.count(tags=frozenset({"java", "cloud"}), title="")

        # Assert
        assert ids == [both.id]
        assert total == 1

    @pytest.mark.asyncio
    async def test_title_filter_is_case_insensitive_substring(self, unit_env):
        """Title matching ignores case."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        match = await post_repo.create(title="Spring BOOT tips", text="")
        await post_repo.create(title="Kotlin coroutines", text="")

        # Act
        ids = await post_repo.find_ids(
            tags=frozenset(), title="boot", limit=10, offset=0
        )

        # Assert
        assert ids == [match.id]

    @pytest.mark.asyncio
    async def test_newest_first_with_offset(self, unit_env):
        """Results are ordered newest first and paged by offset."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        created = [await post_repo.create(title=f"Post {i}", text="") for i in range(5)]

        # Act
        page = await post_repo.find_ids(tags=frozenset(), title="", limit=2, offset=1)

        # Assert
        assert page == [created[3].id, created[2].id]


class TestCounters:
    """Tests for like and comment counters."""

    @pytest.mark.asyncio
    async def test_increment_likes_returns_new_value(self, unit_env):
        """Each like returns the incremented count."""
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.create(title="Post", text="")

        assert await post_repo.increment_likes(post.id) == 1
        assert await post_repo.increment_likes(post.id) == 2

    @pytest.mark.asyncio
    async def test_increment_likes_missing_post(self, unit_env):
        """Liking a missing post returns None."""
        post_repo = await unit_env.get(PostRepository)

        assert await post_repo.increment_likes(PostId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_decrement_comments_stops_at_zero(self, unit_env):
        """The comment counter never goes negative."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.create(title="Post", text="")
        await post_repo.increment_comments(post.id)

        # Act
        first = await post_repo.decrement_comments(post.id)
        second = await post_repo.decrement_comments(post.id)

        # Assert
        assert first is True
        assert second is False
        assert (await post_repo.find_by_id(post.id)).comments_count == 0


class TestDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_delete_cascades_comments_image_and_tags(self, unit_env):
        """Deleting a post removes everything that hangs off it."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        tag_repo = await unit_env.get(TagRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.create(title="Post", text="")
        await tag_repo.replace_post_tags(post.id, ["java"])
        await post_repo.set_image(post.id, b"\x89PNG")
        comment = await comment_repo.create(post.id, "Nice")

        # Act
        deleted = await post_repo.delete(post.id)

        # Assert
        assert deleted is True
        assert await post_repo.find_by_id(post.id) is None
        assert await post_repo.get_image(post.id) is None
        assert await comment_repo.find_by_id(post.id, comment.id) is None
        assert await tag_repo.find_by_post_ids([post.id]) == {}
        # The tag itself stays until purged
        assert [t.name for t in await tag_repo.find_all()] == ["java"]

    @pytest.mark.asyncio
    async def test_delete_missing_post(self, unit_env):
        """Deleting a missing post reports False."""
        post_repo = await unit_env.get(PostRepository)

        assert await post_repo.delete(PostId(uuid4())) is False
