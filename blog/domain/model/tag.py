"""Tag entity for categorizing posts."""

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import TagId


class Tag(DomainModel):
    """Tag entity for categorizing posts.

    Tags are shared between posts and stored in canonical form
    (trimmed, lowercase). A tag no post refers to is an orphan and is
    removed by the periodic purge.
    """

    id: TagId
    name: str = Field(min_length=1)
