"""Unit tests for PostService."""

import asyncio
from uuid import uuid4

import pytest

from blog.domain.error import ImageNotSetError, InvalidTagError, NotFoundError
from blog.domain.repository import TagRepository
from blog.domain.service import PostService
from blog.domain.value import PostId, SearchQuery
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_then_get_returns_normalized_tags(self, unit_env):
        """Tags come back trimmed, lowercased and deduplicated."""
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act
        created = await post_service.create_post(
            title="Hello", text="World", tag_names=[" Java", "JAVA", "Cloud "]
        )
        fetched = await post_service.get_post(created.id)

        # Assert
        assert fetched.title == "Hello"
        assert fetched.text == "World"
        assert sorted(fetched.tag_names) == ["cloud", "java"]
        assert fetched.likes_count == 0
        assert fetched.comments_count == 0

    @pytest.mark.asyncio
    async def test_create_rejects_blank_tag_before_writing(self, unit_env):
        """A blank tag fails the whole create and stores nothing."""
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act & Assert
        with pytest.raises(InvalidTagError):
            await post_service.create_post(title="T", text="B", tag_names=["java", " "])

        assert await post_service.count_posts(SearchQuery()) == 0


class TestUpdatePost:
    """Tests for update_post."""

    @pytest.mark.asyncio
    async def test_update_replaces_tags(self, unit_env):
        """Tags are reconciled to the new set."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post("T", "B", ["java", "cloud"])

        # Act
        updated = await post_service.update_post(
            post.id, title="T2", text="B2", tag_names=["cloud", "kotlin"]
        )

        # Assert
        assert updated.title == "T2"
        assert updated.text == "B2"
        assert sorted(updated.tag_names) == ["cloud", "kotlin"]

    @pytest.mark.asyncio
    async def test_update_with_empty_tags_clears_them(self, unit_env):
        """An empty tag list removes every tag."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post("T", "B", ["java"])

        # Act
        updated = await post_service.update_post(post.id, "T", "B", [])

        # Assert
        assert updated.tags == []

    @pytest.mark.asyncio
    async def test_update_missing_post_raises(self, unit_env):
        """Updating an unknown post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.update_post(PostId(uuid4()), "T", "B", [])


class TestDeletePost:
    """Tests for delete_post."""

    @pytest.mark.asyncio
    async def test_delete_then_get_raises(self, unit_env):
        """A deleted post is gone, its tags remain until purged."""
        # Arrange
        post_service = await unit_env.get(PostService)
        tag_repo = await unit_env.get(TagRepository)
        post = await post_service.create_post("T", "B", ["java"])

        # Act
        await post_service.delete_post(post.id)

        # Assert
        with pytest.raises(NotFoundError):
            await post_service.get_post(post.id)
        assert [t.name for t in await tag_repo.find_all()] == ["java"]

    @pytest.mark.asyncio
    async def test_delete_missing_post_raises(self, unit_env):
        """Deleting an unknown post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.delete_post(PostId(uuid4()))


class TestLikePost:
    """Tests for like_post."""

    @pytest.mark.asyncio
    async def test_interleaved_likes_return_consecutive_counts(self, unit_env):
        """Each of N gathered likes gets its own count, ending at N."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post("T", "B", [])

        # Act
        results = await asyncio.gather(
            *(post_service.like_post(post.id) for _ in range(20))
        )

        # Assert
        assert sorted(results) == list(range(1, 21))
        assert (await post_service.get_post(post.id)).likes_count == 20

    @pytest.mark.asyncio
    async def test_like_missing_post_raises(self, unit_env):
        """Liking an unknown post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.like_post(PostId(uuid4()))


class TestImage:
    """Tests for set_image and get_image."""

    @pytest.mark.asyncio
    async def test_set_then_get_image(self, unit_env):
        """The stored bytes come back unchanged."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post("T", "B", [])

        await post_service.set_image(post.id, b"\x89PNG\r\n")

        assert await post_service.get_image(post.id) == b"\x89PNG\r\n"

    @pytest.mark.asyncio
    async def test_image_not_set_is_distinct_from_missing_post(self, unit_env):
        """An existing post without an image raises ImageNotSetError."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post("T", "B", [])

        # Act & Assert
        with pytest.raises(ImageNotSetError):
            await post_service.get_image(post.id)
        with pytest.raises(NotFoundError):
            await post_service.get_image(PostId(uuid4()))

    @pytest.mark.asyncio
    async def test_set_image_on_missing_post_raises(self, unit_env):
        """Setting an image on an unknown post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.set_image(PostId(uuid4()), b"data")


class TestCommentCount:
    """Tests for increment_comment_count and decrement_comment_count."""

    @pytest.mark.asyncio
    async def test_increment_then_decrement(self, unit_env):
        """Counter goes up by one and back down by one."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post("T", "B", [])

        # Act
        await post_service.increment_comment_count(post.id)
        after_increment = (await post_service.get_post(post.id)).comments_count
        await post_service.decrement_comment_count(post.id)
        after_decrement = (await post_service.get_post(post.id)).comments_count

        # Assert
        assert after_increment == 1
        assert after_decrement == 0

    @pytest.mark.asyncio
    async def test_decrement_at_zero_is_a_no_op(self, unit_env):
        """Decrementing a zero counter leaves it at zero."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post("T", "B", [])

        await post_service.decrement_comment_count(post.id)

        assert (await post_service.get_post(post.id)).comments_count == 0

    @pytest.mark.asyncio
    async def test_increment_missing_post_raises(self, unit_env):
        """Incrementing for an unknown post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.increment_comment_count(PostId(uuid4()))
