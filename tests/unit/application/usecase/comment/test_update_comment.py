"""Unit tests for UpdateCommentUseCase."""

from uuid import uuid4

import pytest

from blog.application.usecase.comment import UpdateCommentRequest, UpdateCommentUseCase
from blog.domain.error import BadRequestError, NotFoundError
from blog.domain.service import CommentService, PostService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_comment_text(self, unit_env):
        """The comment text is replaced."""
        # Arrange
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(UpdateCommentUseCase)
        post = await post_service.create_post("T", "B", [])
        comment = await comment_service.create_comment(post.id, "old")

        # Act
        result = await use_case.execute(
            UpdateCommentRequest(
                post_id=str(post.id),
                comment_id=str(comment.id),
                body_post_id=str(post.id),
                body_id=str(comment.id),
                text="new",
            )
        )

        # Assert
        assert result.text == "new"
        assert (await comment_service.get_comment(post.id, comment.id)).text == "new"

    @pytest.mark.asyncio
    async def test_mismatched_comment_id(self, unit_env):
        """A different comment id in the body raises BadRequestError."""
        # Arrange
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(UpdateCommentUseCase)
        post = await post_service.create_post("T", "B", [])
        comment = await comment_service.create_comment(post.id, "old")

        # Act & Assert
        with pytest.raises(BadRequestError, match="Comment id in the path"):
            await use_case.execute(
                UpdateCommentRequest(
                    post_id=str(post.id),
                    comment_id=str(comment.id),
                    body_id=str(uuid4()),
                    text="new",
                )
            )

    @pytest.mark.asyncio
    async def test_comment_of_another_post(self, unit_env):
        """A comment cannot be edited through another post's path."""
        # Arrange
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(UpdateCommentUseCase)
        post = await post_service.create_post("T", "B", [])
        other = await post_service.create_post("Other", "B", [])
        comment = await comment_service.create_comment(post.id, "old")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentRequest(
                    post_id=str(other.id), comment_id=str(comment.id), text="new"
                )
            )
