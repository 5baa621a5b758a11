"""Comment entity."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, PostId


class Comment(DomainModel):
    """Comment entity.

    Comments are flat and belong to exactly one post. Deletion is physical.
    """

    id: CommentId
    post_id: PostId
    text: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
