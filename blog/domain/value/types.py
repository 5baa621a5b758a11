"""Domain value types for the blog.

Tags are compared by their canonical form: trimmed and lowercased.
"""

from blog.domain.error import InvalidTagError

# Marks a search token as a tag filter ("#java")
TAG_PREFIX = "#"


def normalize_tag_name(raw: str) -> str:
    """Return the canonical form of a tag name.

    Args:
        raw: Tag text as typed by the user

    Returns:
        Trimmed, lowercased tag name

    Raises:
        InvalidTagError: If nothing is left after trimming
    """
    name = raw.strip().lower()
    if not name:
        raise InvalidTagError(raw)
    return name


def normalize_tag_names(raw_names: list[str]) -> list[str]:
    """Normalize and deduplicate tag names, keeping first-seen order."""
    return list(dict.fromkeys(normalize_tag_name(raw) for raw in raw_names))
