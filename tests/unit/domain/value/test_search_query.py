"""Unit tests for tag normalization and search query parsing."""

import pytest

from blog.domain.error import InvalidTagError
from blog.domain.value import SearchQuery, normalize_tag_name, normalize_tag_names


class TestNormalizeTagName:
    """Tests for normalize_tag_name."""

    def test_trims_and_lowercases(self):
        """Tag names should be trimmed and lowercased."""
        assert normalize_tag_name("  Java ") == "java"

    def test_is_idempotent(self):
        """Normalizing a canonical name should not change it."""
        once = normalize_tag_name(" Spring-Boot ")
        assert normalize_tag_name(once) == once

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_rejects_blank(self, raw):
        """Blank tag names should be rejected."""
        with pytest.raises(InvalidTagError):
            normalize_tag_name(raw)

    def test_deduplicates_keeping_first_seen_order(self):
        """Equivalent names collapse to one, in first-seen order."""
        assert normalize_tag_names(["Java", "cloud", " JAVA", "Cloud "]) == [
            "java",
            "cloud",
        ]


class TestSearchQueryParse:
    """Tests for SearchQuery.parse."""

    def test_splits_tags_and_title(self):
        """Hash tokens become tags, the rest the title."""
        query = SearchQuery.parse("boot #java")

        assert query.tags == frozenset({"java"})
        assert query.title == "boot"

    def test_multiple_tags_and_words(self):
        """Words are joined by single spaces and lowercased."""
        query = SearchQuery.parse("  Spring   #Java Boot #CLOUD ")

        assert query.tags == frozenset({"java", "cloud"})
        assert query.title == "spring boot"

    def test_duplicate_tags_collapse(self):
        """Tags equal after normalization count once."""
        query = SearchQuery.parse("#Java #JAVA")

        assert query.tags == frozenset({"java"})
        assert query.title == ""

    def test_lone_hash_is_a_title_word(self):
        """A bare '#' is not a tag filter."""
        query = SearchQuery.parse("# c")

        assert query.tags == frozenset()
        assert query.title == "# c"

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty_search(self, raw):
        """Empty input matches everything."""
        query = SearchQuery.parse(raw)

        assert query.tags == frozenset()
        assert query.title == ""
