"""SQLAlchemy table definitions for the blog.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    LargeBinary,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POST TABLE
# ============================================================================
posts_table = Table(
    "post",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", Text, nullable=False),
    Column("text", Text, nullable=False, server_default=""),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("comments_count", Integer, nullable=False, server_default="0"),
    Column("image", LargeBinary, nullable=True),  # Never selected by listings
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes_count >= 0", name="likes_count_non_negative"),
    CheckConstraint("comments_count >= 0", name="comments_count_non_negative"),
)

# Matches the (created_at DESC, id DESC) listing order
Index("idx_post_created_at_id", posts_table.c.created_at.desc(), posts_table.c.id.desc())
Index("idx_post_title_lower", func.lower(posts_table.c.title))

# Every column except the image blob
post_columns = [c for c in posts_table.c if c.name != "image"]

# ============================================================================
# TAG TABLE
# ============================================================================
tags_table = Table(
    "tag",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", Text, nullable=False),
)

# Case-insensitive uniqueness; names are stored lowercase as well
Index("uq_tag_name_lower", func.lower(tags_table.c.name), unique=True)

# ============================================================================
# POST_TAG TABLE (junction table for many-to-many relationship)
# ============================================================================
post_tags_table = Table(
    "post_tag",
    metadata,
    Column("post_id", UUID, ForeignKey("post.id", ondelete="CASCADE"), nullable=False),
    Column("tag_id", UUID, ForeignKey("tag.id", ondelete="CASCADE"), nullable=False),
    UniqueConstraint("post_id", "tag_id", name="uq_post_tag"),
)

Index("idx_post_tag_tag_id", post_tags_table.c.tag_id)

# ============================================================================
# COMMENT TABLE
# ============================================================================
comments_table = Table(
    "comment",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("post.id", ondelete="CASCADE"), nullable=False),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comment_post_id_created_at",
    comments_table.c.post_id,
    comments_table.c.created_at.desc(),
)
