"""Item capability protocols.

A renderable item exposes its title, description, link and publication date
through ``FeedItem``. A ``RoutedFeedItem`` replaces the literal link with a
route name and parameters handed to the formatter's link builder, plus an
optional URL anchor.

Example:
    >>> from datetime import datetime, timezone
    >>> from feedforge.protocols.item import FeedItem, RoutedFeedItem
    >>> class Article:
    ...     def feed_item_title(self): return "Title"
    ...     def feed_item_description(self): return "Body"
    ...     def feed_item_link(self): return "http://example.org/a"
    ...     def feed_item_pub_date(self): return datetime(2024, 1, 1, tzinfo=timezone.utc)
    >>> isinstance(Article(), FeedItem)
    True
    >>> isinstance(Article(), RoutedFeedItem)
    False
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

# Accessor names of the mandatory item elements.
TITLE = "feed_item_title"
DESCRIPTION = "feed_item_description"
LINK = "feed_item_link"
PUB_DATE = "feed_item_pub_date"


@runtime_checkable
class FeedItem(Protocol):
    """An item with a literal link."""

    def feed_item_title(self) -> str:
        """Item title."""
        ...

    def feed_item_description(self) -> str:
        """Item description or content."""
        ...

    def feed_item_link(self) -> str:
        """Absolute item URL."""
        ...

    def feed_item_pub_date(self) -> datetime:
        """Publication date."""
        ...


@runtime_checkable
class RoutedFeedItem(Protocol):
    """An item whose link is generated by a link builder."""

    def feed_item_title(self) -> str:
        """Item title."""
        ...

    def feed_item_description(self) -> str:
        """Item description or content."""
        ...

    def feed_item_route_name(self) -> str:
        """Route name passed to the link builder."""
        ...

    def feed_item_route_parameters(self) -> Mapping[str, Any]:
        """Route parameters passed to the link builder."""
        ...

    def feed_item_url_anchor(self) -> str | None:
        """Fragment appended to the generated URL, without the ``#``."""
        ...

    def feed_item_pub_date(self) -> datetime:
        """Publication date."""
        ...


@runtime_checkable
class AccessorLookup(Protocol):
    """Items that serve custom accessors by name.

    Adapters wrapping arbitrary data implement this instead of defining one
    method per custom field.
    """

    def lookup_accessor(self, name: str) -> Callable[[], Any] | None:
        """Return a zero-argument callable for ``name``, or None."""
        ...
