"""Search query value object."""

from blog.domain.value.common import ValueObject
from blog.domain.value.types import TAG_PREFIX, normalize_tag_name


class SearchQuery(ValueObject):
    """Parsed form of a free-text post search.

    Tokens like ``#java`` become tag filters (every tag must be present on
    a post), all other tokens are joined into a case-insensitive title
    substring.

    Examples:
        "boot #java"    -> tags={"java"}, title="boot"
        "#Java  #JAVA"  -> tags={"java"}, title=""
        "# c sharp"     -> tags=set(),    title="# c sharp"
    """

    tags: frozenset[str] = frozenset()
    title: str = ""

    @classmethod
    def parse(cls, raw: str | None) -> "SearchQuery":
        """Split a raw search string into tag filters and a title filter.

        Args:
            raw: Search string, None is treated as empty

        Returns:
            Parsed search query
        """
        tags: set[str] = set()
        words: list[str] = []

        for token in (raw or "").split():
            if token.startswith(TAG_PREFIX) and len(token) > len(TAG_PREFIX):
                tags.add(normalize_tag_name(token[len(TAG_PREFIX) :]))
            else:
                words.append(token.lower())

        return cls(tags=frozenset(tags), title=" ".join(words))
