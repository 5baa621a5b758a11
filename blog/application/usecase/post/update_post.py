"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.post.common import PostResponse
from blog.domain.error import BadRequestError
from blog.domain.service import PostService
from blog.domain.value import PostId


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str  # UUID string from the path
    body_id: str | None = None  # id repeated in the body, if any
    title: str
    text: str
    tags: list[str] = []


class UpdatePostUseCase:
    """Use case for replacing a post's title, text and tags."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostResponse:
        """Execute update post flow.

        Args:
            request: Path id, optional body id and new content

        Returns:
            Updated post

        Raises:
            BadRequestError: If the body id differs from the path id
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(UUID(request.post_id))

        if request.body_id is not None and UUID(request.body_id) != post_id:
            raise BadRequestError(
                "Post id in the path and request body must match: "
                f"{request.post_id} != {request.body_id}"
            )

        post = await self.post_service.update_post(
            post_id,
            title=request.title,
            text=request.text,
            tag_names=request.tags,
        )
        return PostResponse.from_post(post)
