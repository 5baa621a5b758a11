"""Post routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, UploadFile, status
from pydantic import BaseModel, field_validator

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostImageRequest,
    GetPostImageUseCase,
    GetPostRequest,
    GetPostUseCase,
    LikePostRequest,
    LikePostUseCase,
    PostResponse,
    SearchPostsRequest,
    SearchPostsResponse,
    SearchPostsUseCase,
    SetPostImageRequest,
    SetPostImageUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


class PostAPIRequest(BaseModel):
    """API request body for creating or replacing a post."""

    id: UUID | None = None
    title: str
    text: str
    tags: list[str] = []

    @field_validator("title", "text")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject blank values; the value itself is stored untouched."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v


@router.get("", response_model=SearchPostsResponse, response_model_by_alias=True)
async def search_posts(
    use_case: FromDishka[SearchPostsUseCase],
    search: str = "",
    page_number: int = Query(default=1, ge=1, alias="pageNumber"),
    page_size: int = Query(default=10, ge=1, alias="pageSize"),
) -> SearchPostsResponse:
    """Search posts by title substring and "#tag" filters.

    Example:
        GET /api/posts?search=boot%20%23java&pageNumber=1&pageSize=10
    """
    with logfire.span("api.search_posts", search=search, page_number=page_number):
        return await use_case.execute(
            SearchPostsRequest(
                search=search, page_number=page_number, page_size=page_size
            )
        )


@router.get("/{post_id}", response_model=PostResponse, response_model_by_alias=True)
async def get_post(
    post_id: UUID,
    use_case: FromDishka[GetPostUseCase],
) -> PostResponse:
    """Get a post with its full body."""
    return await use_case.execute(GetPostRequest(post_id=str(post_id)))


@router.post(
    "",
    response_model=PostResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: PostAPIRequest,
    use_case: FromDishka[CreatePostUseCase],
) -> PostResponse:
    """Create a post. Tags are trimmed, lowercased and deduplicated."""
    return await use_case.execute(
        CreatePostRequest(title=request.title, text=request.text, tags=request.tags)
    )


@router.put("/{post_id}", response_model=PostResponse, response_model_by_alias=True)
async def update_post(
    post_id: UUID,
    request: PostAPIRequest,
    use_case: FromDishka[UpdatePostUseCase],
) -> PostResponse:
    """Replace a post's title, text and tags.

    An empty tags list removes every tag from the post.
    """
    return await use_case.execute(
        UpdatePostRequest(
            post_id=str(post_id),
            body_id=str(request.id) if request.id else None,
            title=request.title,
            text=request.text,
            tags=request.tags,
        )
    )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: UUID,
    use_case: FromDishka[DeletePostUseCase],
) -> None:
    """Delete a post and its comments."""
    await use_case.execute(DeletePostRequest(post_id=str(post_id)))


@router.post("/{post_id}/likes")
async def like_post(
    post_id: UUID,
    use_case: FromDishka[LikePostUseCase],
) -> int:
    """Add one like and return the new like count."""
    result = await use_case.execute(LikePostRequest(post_id=str(post_id)))
    return result.likes_count


@router.put("/{post_id}/image", status_code=status.HTTP_204_NO_CONTENT)
async def set_post_image(
    post_id: UUID,
    image: UploadFile,
    use_case: FromDishka[SetPostImageUseCase],
) -> None:
    """Replace a post's image from the multipart "image" part."""
    data = await image.read()
    await use_case.execute(SetPostImageRequest(post_id=str(post_id), data=data))


@router.get(
    "/{post_id}/image",
    response_class=Response,
    responses={200: {"content": {"application/octet-stream": {}}}},
)
async def get_post_image(
    post_id: UUID,
    use_case: FromDishka[GetPostImageUseCase],
) -> Response:
    """Return a post's image as raw bytes."""
    data = await use_case.execute(GetPostImageRequest(post_id=str(post_id)))
    return Response(content=data, media_type="application/octet-stream")
