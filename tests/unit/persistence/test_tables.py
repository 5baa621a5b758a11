"""Unit tests for table definitions."""

import pytest
from sqlalchemy import Text

from blog.persistence.tables import comments_table, posts_table, tags_table


@pytest.mark.parametrize(
    "column",
    [
        posts_table.c.title,
        posts_table.c.text,
        tags_table.c.name,
        comments_table.c.text,
    ],
)
def test_text_columns_are_unbounded(column):
    """User-supplied strings are stored without a length limit."""
    assert isinstance(column.type, Text)
    assert column.type.length is None
