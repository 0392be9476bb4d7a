"""Feed document: channel config, items and custom fields of one feed.

A FeedDocument is created per named feed by the FeedManager, mutated by the
caller, then rendered with one of the registered formatters. Rendering is a
pure function of the document's current state and can be repeated.

The document is not internally synchronized; external synchronization is
required if it is shared across threads while being mutated.

Example:
    >>> from feedforge.core.document import FeedDocument
    >>> from feedforge.models.config import FeedConfig
    >>> from feedforge.models.field import Field
    >>> document = FeedDocument("article", FeedConfig(title="Articles"))
    >>> document.add_channel_field(Field("generator", "feedforge")).get("title")
    'Articles'
    >>> document.set("author", "Jane").get("author")
    'Jane'
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from feedforge.core.exceptions import InvalidConfigurationError, InvalidFieldError, UnknownFormatError
from feedforge.models.config import FeedConfig
from feedforge.models.field import Field, FieldNode, GroupField

if TYPE_CHECKING:
    from feedforge.formatter.base import Formatter


class FeedDocument:
    """One renderable feed.

    Args:
        name: Feed name the document was created for.
        config: Channel configuration; the document owns this instance.
        formatters: Formatters available to ``render``, keyed by format.
    """

    def __init__(
        self,
        name: str,
        config: FeedConfig,
        formatters: Mapping[str, Formatter] | None = None,
    ) -> None:
        self.name = name
        self._config = config
        self._formatters = dict(formatters or {})
        self._items: list[Any] = []
        self._channel_fields: list[FieldNode] = []
        self._item_fields: list[FieldNode] = []
        self._namespaces: dict[str, str] = {}

    @property
    def config(self) -> FeedConfig:
        return self._config

    @property
    def items(self) -> tuple[Any, ...]:
        """Items in insertion order."""
        return tuple(self._items)

    @property
    def channel_fields(self) -> tuple[FieldNode, ...]:
        return tuple(self._channel_fields)

    @property
    def item_fields(self) -> tuple[FieldNode, ...]:
        return tuple(self._item_fields)

    @property
    def namespaces(self) -> dict[str, str]:
        """Extra namespaces declared on the root element, keyed by prefix."""
        return dict(self._namespaces)

    def get(self, key: str) -> Any:
        """Return a channel config value."""
        if key not in FeedConfig.model_fields:
            raise InvalidConfigurationError(key, message=f'Unknown configuration key "{key}".')
        return getattr(self._config, key)

    def set(self, key: str, value: Any) -> FeedDocument:
        """Override a channel config value.

        Raises:
            InvalidConfigurationError: If ``key`` is not a config parameter.
            pydantic.ValidationError: If ``value`` has the wrong type.
        """
        if key not in FeedConfig.model_fields:
            raise InvalidConfigurationError(key, message=f'Unknown configuration key "{key}".')
        setattr(self._config, key, value)
        return self

    def add(self, item: Any) -> FeedDocument:
        """Append an item; the document keeps a reference, not a copy."""
        self._items.append(item)
        return self

    def add_items(self, items: Iterable[Any]) -> FeedDocument:
        """Append several items in iteration order."""
        self._items.extend(items)
        return self

    def has_items(self) -> bool:
        return bool(self._items)

    def add_channel_field(self, node: FieldNode) -> FeedDocument:
        """Append a custom channel field, rendered once per document."""
        self._channel_fields.append(self._check_node(node))
        return self

    def add_item_field(self, node: FieldNode) -> FeedDocument:
        """Append a custom item field, rendered once per item."""
        self._item_fields.append(self._check_node(node))
        return self

    def add_namespace(self, prefix: str, uri: str) -> FeedDocument:
        """Declare a namespace so fields can be named ``prefix:local``."""
        if not prefix or ":" in prefix or prefix == "xml":
            raise InvalidFieldError(f'Invalid namespace prefix "{prefix}".')
        if not uri:
            raise InvalidFieldError(f'Namespace "{prefix}" requires a URI.')
        self._namespaces[prefix] = uri
        return self

    def formats(self) -> list[str]:
        """Format identifiers this document can be rendered as."""
        return list(self._formatters)

    def render(self, format: str) -> str:
        """Render the document with the formatter registered for ``format``.

        Raises:
            UnknownFormatError: If no formatter is registered for ``format``.
        """
        formatter = self._formatters.get(format)
        if formatter is None:
            raise UnknownFormatError(format)
        return formatter.render(self)

    @staticmethod
    def _check_node(node: FieldNode) -> FieldNode:
        if not isinstance(node, (Field, GroupField)):
            raise InvalidFieldError(f"Not a field: {node!r}")
        return node

    def __repr__(self) -> str:
        return f"FeedDocument(name={self.name!r}, items={len(self._items)})"
