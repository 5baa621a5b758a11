"""Domain model entities for the blog."""

from blog.domain.model.comment import Comment
from blog.domain.model.post import Post
from blog.domain.model.tag import Tag

__all__ = [
    "Post",
    "Comment",
    "Tag",
]
