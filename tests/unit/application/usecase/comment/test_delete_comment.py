"""Unit tests for DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
)
from blog.domain.error import NotFoundError
from blog.domain.service import PostService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_comment_decrements_post_count(self, unit_env):
        """Deleting a comment lowers the post's comment count by one."""
        # Arrange
        post_service = await unit_env.get(PostService)
        create_comment = await unit_env.get(CreateCommentUseCase)
        use_case = await unit_env.get(DeleteCommentUseCase)
        get_comment = await unit_env.get(GetCommentUseCase)
        post = await post_service.create_post("T", "B", [])
        kept = await create_comment.execute(
            CreateCommentRequest(post_id=str(post.id), text="keep")
        )
        dropped = await create_comment.execute(
            CreateCommentRequest(post_id=str(post.id), text="drop")
        )

        # Act
        await use_case.execute(
            DeleteCommentRequest(post_id=str(post.id), comment_id=dropped.id)
        )

        # Assert
        assert (await post_service.get_post(post.id)).comments_count == 1
        remaining = await get_comment.execute(
            GetCommentRequest(post_id=str(post.id), comment_id=kept.id)
        )
        assert remaining.text == "keep"
        with pytest.raises(NotFoundError):
            await get_comment.execute(
                GetCommentRequest(post_id=str(post.id), comment_id=dropped.id)
            )

    @pytest.mark.asyncio
    async def test_delete_missing_comment_keeps_count(self, unit_env):
        """Deleting an unknown comment raises and leaves the count alone."""
        # Arrange
        post_service = await unit_env.get(PostService)
        create_comment = await unit_env.get(CreateCommentUseCase)
        use_case = await unit_env.get(DeleteCommentUseCase)
        post = await post_service.create_post("T", "B", [])
        await create_comment.execute(CreateCommentRequest(post_id=str(post.id), text="x"))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(post_id=str(post.id), comment_id=str(uuid4()))
            )
        assert (await post_service.get_post(post.id)).comments_count == 1
