"""Post response model shared by the post use cases."""

from datetime import datetime

from blog.application.usecase.base import CamelModel
from blog.domain.model.post import Post

ELLIPSIS = "…"


class PostResponse(CamelModel):
    """Post as returned to clients."""

    id: str
    title: str
    text: str
    tags: list[str]
    likes_count: int
    comments_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post, preview_length: int | None = None) -> "PostResponse":
        """Build a response, optionally cutting the body to a preview.

        Args:
            post: Post with tags attached
            preview_length: Maximum body length before the ellipsis
                (None keeps the full body)
        """
        text = post.text
        if preview_length is not None and len(text) > preview_length:
            text = text[:preview_length] + ELLIPSIS

        return cls(
            id=str(post.id),
            title=post.title,
            text=text,
            tags=post.tag_names,
            likes_count=post.likes_count,
            comments_count=post.comments_count,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
