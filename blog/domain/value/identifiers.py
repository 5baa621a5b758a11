"""Strongly typed identifiers for blog domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
TagId = NewType("TagId", UUID)
