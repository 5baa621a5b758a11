"""initial_schema

Create the blog schema:
- Posts (title, markdown text, like/comment counters, optional image)
- Tags (canonical lowercase names, unique case-insensitively)
- Post tags (many-to-many)
- Comments (flat, one post each)

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # POST table
    # ========================================================================
    op.create_table(
        "post",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("text", sa.Text(), server_default="", nullable=False),
        sa.Column("likes_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("comments_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("image", sa.LargeBinary(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.CheckConstraint("likes_count >= 0", name="likes_count_non_negative"),
        sa.CheckConstraint("comments_count >= 0", name="comments_count_non_negative"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_post_created_at_id",
        "post",
        [sa.text("created_at DESC"), sa.text("id DESC")],
    )
    op.create_index("idx_post_title_lower", "post", [sa.text("lower(title)")])

    # ========================================================================
    # TAG table
    # ========================================================================
    op.create_table(
        "tag",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_tag_name_lower", "tag", [sa.text("lower(name)")], unique=True
    )

    # ========================================================================
    # POST_TAG table
    # ========================================================================
    op.create_table(
        "post_tag",
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tag.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("post_id", "tag_id", name="uq_post_tag"),
    )
    op.create_index("idx_post_tag_tag_id", "post_tag", ["tag_id"])

    # ========================================================================
    # COMMENT table
    # ========================================================================
    op.create_table(
        "comment",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comment_post_id_created_at",
        "comment",
        ["post_id", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("comment")
    op.drop_table("post_tag")
    op.drop_table("tag")
    op.drop_table("post")

    # op.execute('DROP EXTENSION IF EXISTS "uuid-ossp"')
