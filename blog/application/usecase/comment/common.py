"""Comment response model shared by the comment use cases."""

from datetime import datetime
from uuid import UUID

from blog.application.usecase.base import CamelModel
from blog.domain.error import BadRequestError
from blog.domain.model.comment import Comment


class CommentResponse(CamelModel):
    """Comment as returned to clients."""

    id: str
    post_id: str
    text: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            text=comment.text,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


def check_ids_match(kind: str, path_id: str, body_id: str | None) -> None:
    """Raise BadRequestError if an id repeated in the body differs from the path."""
    if body_id is not None and UUID(body_id) != UUID(path_id):
        raise BadRequestError(
            f"{kind} id in the path and request body must match: "
            f"{path_id} != {body_id}"
        )
