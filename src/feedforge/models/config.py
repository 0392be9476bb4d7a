"""Channel configuration of a feed.

FeedConfig holds the channel metadata every formatter maps onto its
mandatory elements. Format requirements (e.g. Atom needs an author) are
not enforced here: formatters validate the current snapshot at render time,
so a config may be incomplete while a document is being assembled.

Example:
    >>> from feedforge.models.config import FeedConfig
    >>> config = FeedConfig(
    ...     title="My articles/posts",
    ...     description="Latest articles",
    ...     link="http://example.org",
    ... )
    >>> config.encoding
    'utf-8'
    >>> config.author is None
    True
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from feedforge.models.base import FeedForgeModel


class FeedConfig(FeedForgeModel):
    """Channel metadata for one named feed.

    Example:
        >>> from feedforge.models.config import FeedConfig
        >>> config = FeedConfig(title="News", author="Jane")
        >>> config.author = ""
        >>> config.is_set("author")
        False
    """

    # Channel text renders exactly as configured
    model_config = ConfigDict(str_strip_whitespace=False)

    title: str = Field(default="", description="Channel title")
    description: str = Field(default="", description="Channel description or subtitle")
    link: str = Field(default="", description="Website URL, also used as the Atom feed id")
    encoding: str = Field(default="utf-8", min_length=1, description="Output encoding")
    language: str | None = Field(default=None, description="Channel language code")
    author: str | None = Field(default=None, description="Feed author, required by Atom")
    translatable: bool = Field(
        default=False,
        description="Pass channel title and description through the translator",
    )

    def is_set(self, key: str) -> bool:
        """Return True when ``key`` holds a non-empty value."""
        value = getattr(self, key, None)
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        return True
