"""Post aggregate root."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.model.tag import Tag
from blog.domain.value import PostId


class Post(DomainModel):
    """Post aggregate root.

    The image blob is not part of the model. It is only read through the
    repository's image accessors, never by list or hydrate queries.
    Tags are derived from the post_tag association.
    """

    id: PostId
    title: str = Field(min_length=1)
    text: str = ""
    likes_count: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    tags: list[Tag] = Field(default_factory=list)

    @property
    def tag_names(self) -> list[str]:
        """Names of the post's tags."""
        return [tag.name for tag in self.tags]
