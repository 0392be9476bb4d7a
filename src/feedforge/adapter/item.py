"""Item adapters for arbitrary domain objects.

Domain objects rarely speak the feed item protocol directly. The adapters
here read the required values from mapping keys or object attributes and
expose them as ``FeedItem`` / ``RoutedFeedItem``. Extra values referenced by
custom fields are declared through ``extra``.

Example:
    >>> from feedforge.adapter.item import ItemAdapter
    >>> item = ItemAdapter(
    ...     {"headline": "Hello", "body": "World", "url": "http://example.org/1",
    ...      "published": "2024-01-15T09:30:00+00:00", "tags": ["a", "b"]},
    ...     title="headline",
    ...     description="body",
    ...     link="url",
    ...     pub_date="published",
    ...     extra={"categories": "tags"},
    ... )
    >>> item.feed_item_title()
    'Hello'
    >>> item.feed_item_pub_date().year
    2024
    >>> item.lookup_accessor("categories")()
    ['a', 'b']
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import date, datetime
from typing import Any

from feedforge.core.exceptions import InvalidItemError


class _SourceAdapter:
    """Reads named values from a mapping or an object."""

    def __init__(
        self,
        source: Any,
        *,
        title: str = "title",
        description: str = "description",
        pub_date: str = "pub_date",
        extra: Mapping[str, str] | None = None,
    ) -> None:
        self.source = source
        self._title = title
        self._description = description
        self._pub_date = pub_date
        self._extra = dict(extra or {})

    def read(self, key: str, default: Any = None) -> Any:
        """Read ``key`` from the source; callables are invoked."""
        if isinstance(self.source, Mapping):
            value = self.source.get(key, default)
        else:
            value = getattr(self.source, key, default)
        if callable(value):
            value = value()
        return value

    def feed_item_title(self) -> str:
        return self.read(self._title, "")

    def feed_item_description(self) -> str:
        return self.read(self._description, "")

    def feed_item_pub_date(self) -> datetime:
        value = self.read(self._pub_date)
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value)
            except ValueError as e:
                raise InvalidItemError(f"Invalid publication date {value!r}: {e}") from e
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime(value.year, value.month, value.day)
        return value

    def lookup_accessor(self, name: str) -> Callable[[], Any] | None:
        key = self._extra.get(name)
        if key is None:
            return None
        return lambda: self.read(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source!r})"


class ItemAdapter(_SourceAdapter):
    """Exposes a mapping or object as a ``FeedItem``.

    Args:
        source: Mapping or object holding the item data.
        title: Key or attribute of the title.
        description: Key or attribute of the description.
        link: Key or attribute of the absolute link.
        pub_date: Key or attribute of the publication date; ISO-8601
            strings are parsed.
        extra: Custom accessor names mapped to keys or attributes.
    """

    def __init__(
        self,
        source: Any,
        *,
        title: str = "title",
        description: str = "description",
        link: str = "link",
        pub_date: str = "pub_date",
        extra: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(
            source,
            title=title,
            description=description,
            pub_date=pub_date,
            extra=extra,
        )
        self._link = link

    def feed_item_link(self) -> str:
        return self.read(self._link, "")


class RoutedItemAdapter(_SourceAdapter):
    """Exposes a mapping or object as a ``RoutedFeedItem``.

    Args:
        source: Mapping or object holding the item data.
        route: Route name handed to the link builder.
        parameters: Route parameter names mapped to keys or attributes.
        anchor: Key or attribute of the URL anchor, if any.
        title: Key or attribute of the title.
        description: Key or attribute of the description.
        pub_date: Key or attribute of the publication date.
        extra: Custom accessor names mapped to keys or attributes.

    Example:
        >>> from feedforge.adapter.item import RoutedItemAdapter
        >>> item = RoutedItemAdapter({"slug": "hello"}, route="article_show", parameters={"slug": "slug"})
        >>> item.feed_item_route_parameters()
        {'slug': 'hello'}
    """

    def __init__(
        self,
        source: Any,
        *,
        route: str,
        parameters: Mapping[str, str] | None = None,
        anchor: str | None = None,
        title: str = "title",
        description: str = "description",
        pub_date: str = "pub_date",
        extra: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(
            source,
            title=title,
            description=description,
            pub_date=pub_date,
            extra=extra,
        )
        self._route = route
        self._parameters = dict(parameters or {})
        self._anchor = anchor

    def feed_item_route_name(self) -> str:
        return self._route

    def feed_item_route_parameters(self) -> dict[str, Any]:
        return {name: self.read(key) for name, key in self._parameters.items()}

    def feed_item_url_anchor(self) -> str | None:
        if self._anchor is None:
            return None
        return self.read(self._anchor)
