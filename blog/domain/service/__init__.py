"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .post_service import PostService
from .tag_service import TagService

__all__ = [
    "CommentService",
    "PostService",
    "Service",
    "TagService",
]
