"""Unit tests for SearchPostsUseCase."""

import pytest

from blog.application.usecase.post import SearchPostsRequest, SearchPostsUseCase
from blog.domain.error import BadRequestError
from blog.domain.service import PostService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create_posts(post_service: PostService, count: int, tags=()):
    return [
        await post_service.create_post(f"Post {i}", f"Body {i}", list(tags))
        for i in range(count)
    ]


class TestPagination:
    """Tests for page math and navigation flags."""

    @pytest.mark.asyncio
    async def test_empty_store_has_one_empty_page(self, unit_env):
        """No posts still yields last_page == 1."""
        # Arrange
        use_case = await unit_env.get(SearchPostsUseCase)

        # Act
        result = await use_case.execute(SearchPostsRequest())

        # Assert
        assert result.posts == []
        assert result.last_page == 1
        assert result.has_prev is False
        assert result.has_next is False

    @pytest.mark.asyncio
    async def test_page_flags_across_pages(self, unit_env):
        """25 posts at 10 per page give three pages."""
        # Arrange
        post_service = await unit_env.get(PostService)
        use_case = await unit_env.get(SearchPostsUseCase)
        created = await _create_posts(post_service, 25)

        # Act
        first = await use_case.execute(SearchPostsRequest(page_number=1, page_size=10))
        middle = await use_case.execute(SearchPostsRequest(page_number=2, page_size=10))
        last = await use_case.execute(SearchPostsRequest(page_number=3, page_size=10))

        # Assert
        assert first.last_page == middle.last_page == last.last_page == 3
        assert (first.has_prev, first.has_next) == (False, True)
        assert (middle.has_prev, middle.has_next) == (True, True)
        assert (last.has_prev, last.has_next) == (True, False)
        assert len(last.posts) == 5
        # Newest first
        assert first.posts[0].id == str(created[-1].id)
        assert last.posts[-1].id == str(created[0].id)

    @pytest.mark.asyncio
    async def test_exact_multiple_of_page_size(self, unit_env):
        """20 posts at 10 per page give exactly two pages."""
        post_service = await unit_env.get(PostService)
        use_case = await unit_env.get(SearchPostsUseCase)
        await _create_posts(post_service, 20)

        result = await use_case.execute(SearchPostsRequest(page_number=2, page_size=10))

        assert result.last_page == 2
        assert result.has_next is False

    @pytest.mark.asyncio
    async def test_page_size_larger_than_total(self, unit_env):
        """A page size above the match count returns every post on one page."""
        # Arrange
        post_service = await unit_env.get(PostService)
        use_case = await unit_env.get(SearchPostsUseCase)
        await _create_posts(post_service, 150)

        # Act
        result = await use_case.execute(SearchPostsRequest(page_number=1, page_size=200))

        # Assert
        assert result.last_page == 1
        assert result.has_next is False
        assert len(result.posts) == 150

    @pytest.mark.asyncio
    async def test_page_beyond_last_is_rejected(self, unit_env):
        """Requesting a page past the last one raises BadRequestError."""
        # Arrange
        post_service = await unit_env.get(PostService)
        use_case = await unit_env.get(SearchPostsUseCase)
        await _create_posts(post_service, 3)

        # Act & Assert
        with pytest.raises(BadRequestError, match="exceeds the total number of pages"):
            await use_case.execute(SearchPostsRequest(page_number=2, page_size=10))


class TestFiltering:
    """Tests for tag and title filtering."""

    @pytest.mark.asyncio
    async def test_title_with_tag_scenario(self, unit_env):
        """'boot #java' and 'boot #cloud' each find only their post."""
        # Arrange
        post_service = await unit_env.get(PostService)
        use_case = await unit_env.get(SearchPostsUseCase)
        java = await post_service.create_post("Spring Boot basics", "B", ["Java"])
        cloud = await post_service.create_post("Spring Boot on k8s", "B", ["cloud"])
        await post_service.create_post("Unrelated", "B", ["java"])

        # Act
        java_result = await use_case.execute(SearchPostsRequest(search="boot #java"))
        cloud_result = await use_case.execute(SearchPostsRequest(search="boot #cloud"))

        # Assert
        assert [p.id for p in java_result.posts] == [str(java.id)]
        assert [p.id for p in cloud_result.posts] == [str(cloud.id)]

    @pytest.mark.asyncio
    async def test_multiple_tags_require_all(self, unit_env):
        """Every requested tag must be on the post."""
        # Arrange
        post_service = await unit_env.get(PostService)
        use_case = await unit_env.get(SearchPostsUseCase)
        both = await post_service.create_post("Both", "B", ["java", "cloud"])
        await post_service.create_post("Java", "B", ["java"])
        await post_service.create_post("Cloud", "B", ["cloud"])

        # Act
        result = await use_case.execute(SearchPostsRequest(search="#JAVA #cloud"))

        # Assert
        assert [p.id for p in result.posts] == [str(both.id)]
        assert result.last_page == 1

    @pytest.mark.asyncio
    async def test_results_carry_tags_and_preview(self, unit_env):
        """Listed posts include their tags and a cut-down body."""
        # Arrange
        post_service = await unit_env.get(PostService)
        use_case = await unit_env.get(SearchPostsUseCase)
        await post_service.create_post("Long", "x" * 300, ["java", "cloud"])
        await post_service.create_post("Short", "short body", [])

        # Act
        result = await use_case.execute(SearchPostsRequest())

        # Assert
        short, long = result.posts
        assert short.text == "short body"
        assert short.tags == []
        assert long.text == "x" * 128 + "…"
        assert sorted(long.tags) == ["cloud", "java"]
