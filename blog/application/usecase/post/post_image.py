"""Post image use cases."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.error import BadRequestError
from blog.domain.service import PostService
from blog.domain.value import PostId


class SetPostImageRequest(BaseModel):
    """Set post image request."""

    post_id: str  # UUID string
    data: bytes


class GetPostImageRequest(BaseModel):
    """Get post image request."""

    post_id: str  # UUID string


class SetPostImageUseCase:
    """Use case for replacing a post's image."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize set post image use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: SetPostImageRequest) -> None:
        """Execute set image flow.

        Raises:
            BadRequestError: If the image is empty
            NotFoundError: If the post doesn't exist
        """
        if not request.data:
            raise BadRequestError(f"Image cannot be empty (post {request.post_id}).")

        await self.post_service.set_image(PostId(UUID(request.post_id)), request.data)


class GetPostImageUseCase:
    """Use case for reading a post's image."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post image use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostImageRequest) -> bytes:
        """Execute get image flow.

        Returns:
            Raw image bytes

        Raises:
            NotFoundError: If the post doesn't exist
            ImageNotSetError: If the post has no image
        """
        return await self.post_service.get_image(PostId(UUID(request.post_id)))
