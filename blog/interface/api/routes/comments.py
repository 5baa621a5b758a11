"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from blog.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)

router = APIRouter(prefix="/api/posts", tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request body for creating or editing a comment."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID | None = None
    post_id: UUID | None = None
    text: str

    @field_validator("text")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject blank comments without trimming them."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v


def _optional_str(value: UUID | None) -> str | None:
    return str(value) if value else None


@router.get(
    "/{post_id}/comments",
    response_model=list[CommentResponse],
    response_model_by_alias=True,
)
async def list_comments(
    post_id: UUID,
    use_case: FromDishka[ListCommentsUseCase],
) -> list[CommentResponse]:
    """List a post's comments, newest first."""
    return await use_case.execute(ListCommentsRequest(post_id=str(post_id)))


@router.get(
    "/{post_id}/comments/{comment_id}",
    response_model=CommentResponse,
    response_model_by_alias=True,
)
async def get_comment(
    post_id: UUID,
    comment_id: UUID,
    use_case: FromDishka[GetCommentUseCase],
) -> CommentResponse:
    """Get one comment of a post."""
    return await use_case.execute(
        GetCommentRequest(post_id=str(post_id), comment_id=str(comment_id))
    )


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CommentAPIRequest,
    use_case: FromDishka[CreateCommentUseCase],
) -> CommentResponse:
    """Comment on a post and bump its comment count."""
    return await use_case.execute(
        CreateCommentRequest(
            post_id=str(post_id),
            body_post_id=_optional_str(request.post_id),
            text=request.text,
        )
    )


@router.put(
    "/{post_id}/comments/{comment_id}",
    response_model=CommentResponse,
    response_model_by_alias=True,
)
async def update_comment(
    post_id: UUID,
    comment_id: UUID,
    request: CommentAPIRequest,
    use_case: FromDishka[UpdateCommentUseCase],
) -> CommentResponse:
    """Edit a comment's text."""
    return await use_case.execute(
        UpdateCommentRequest(
            post_id=str(post_id),
            comment_id=str(comment_id),
            body_post_id=_optional_str(request.post_id),
            body_id=_optional_str(request.id),
            text=request.text,
        )
    )


@router.delete(
    "/{post_id}/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_comment(
    post_id: UUID,
    comment_id: UUID,
    use_case: FromDishka[DeleteCommentUseCase],
) -> None:
    """Delete a comment and lower the post's comment count."""
    await use_case.execute(
        DeleteCommentRequest(post_id=str(post_id), comment_id=str(comment_id))
    )
