"""Value and attribute resolution against the current item.

An ``ItemResolver`` is created per item (or with no item for channel
fields) and turns slots into concrete values:

- ``Static`` slots yield their literal value.
- ``Dynamic`` slots call an accessor on the item, looked up in this order:
  the accessor registry for the item's type, the item's own
  ``lookup_accessor`` when it provides one, then a zero-argument method of
  that name. An accessor that cannot be found raises
  ``MissingAccessorError``; it is never skipped.

Example:
    >>> from feedforge.core.resolver import ItemResolver
    >>> from feedforge.models.field import Dynamic, Static
    >>> from feedforge.testing import FakeItem
    >>> resolver = ItemResolver(FakeItem())
    >>> resolver.resolve(Static("literal"))
    'literal'
    >>> resolver.resolve(Dynamic("feed_item_title"))
    'Fake title'
    >>> resolver.attributes([(Dynamic("item_key_attribute"), Dynamic("item_value_attribute"))])
    {'my-item-key-attribute': 'my-item-value-attribute'}
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING, Any

from feedforge.core.accessors import AccessorRegistry, accessor_registry
from feedforge.core.exceptions import ConfigurationError, InvalidFieldError, MissingAccessorError
from feedforge.models.field import AttributeKey, Dynamic, FieldOptions, Slot, Static
from feedforge.protocols.item import LINK, AccessorLookup, RoutedFeedItem
from feedforge.translator.catalog import IdentityTranslator
from feedforge.utils.dates import ATOM, format_date

if TYPE_CHECKING:
    from feedforge.protocols.link import LinkBuilder
    from feedforge.protocols.translator import Translator

logger = logging.getLogger(__name__)


class ItemResolver:
    """Resolves slots, attributes and text for one item.

    Args:
        item: Current item, or None when resolving channel fields.
        translator: Translator for translatable fields (identity by default).
        accessors: Accessor registry (the global registry by default).
        link_builder: Link builder used for routed items.
    """

    def __init__(
        self,
        item: Any = None,
        *,
        translator: Translator | None = None,
        accessors: AccessorRegistry | None = None,
        link_builder: LinkBuilder | None = None,
    ) -> None:
        self.item = item
        self.translator = translator or IdentityTranslator()
        self.accessors = accessor_registry if accessors is None else accessors
        self.link_builder = link_builder

    def call(self, accessor: str) -> Any:
        """Evaluate accessor ``accessor`` on the current item."""
        item = self.item
        if item is None:
            raise MissingAccessorError(accessor)

        if accessor == LINK and isinstance(item, RoutedFeedItem):
            return self.routed_link()

        extractor = self.accessors.get(item, accessor)
        if extractor is not None:
            return extractor(item)

        if isinstance(item, AccessorLookup):
            method = item.lookup_accessor(accessor)
            if method is not None:
                return method()

        method = getattr(item, accessor, None)
        if method is None or not callable(method):
            raise MissingAccessorError(accessor, type(item).__name__)
        return method()

    def routed_link(self) -> str:
        """Build the link of a routed item, appending its anchor."""
        if self.link_builder is None:
            raise ConfigurationError(
                f"Item type {type(self.item).__name__} is routed but no link builder is configured."
            )
        url = self.link_builder.generate(
            self.item.feed_item_route_name(),
            dict(self.item.feed_item_route_parameters() or {}),
        )
        anchor = self.item.feed_item_url_anchor()
        if anchor:
            url = f"{url}#{anchor}"
        return url

    def resolve(self, slot: Slot) -> Any:
        """Resolve a value slot."""
        if isinstance(slot, Static):
            return slot.value
        if isinstance(slot, Dynamic):
            return self.call(slot.accessor)
        raise InvalidFieldError(f"Not a slot: {slot!r}")

    def attributes(self, pairs: Iterable[tuple[AttributeKey, Slot]]) -> dict[str, str]:
        """Resolve attribute pairs in declaration order.

        Keys tagged ``Dynamic`` are resolved against the item as well, so
        both the attribute name and its value can vary per item.
        """
        result: dict[str, str] = {}
        for key, slot in pairs:
            name = self.call(key.accessor) if isinstance(key, Dynamic) else key
            if not name:
                raise InvalidFieldError(f"Attribute key {key!r} resolved to an empty name")
            value = self.resolve(slot)
            result[str(name)] = self.stringify(value, None)
        return result

    def text(self, value: Any, options: FieldOptions) -> str | None:
        """Convert a resolved value into element text.

        None stays None so the element renders empty.
        """
        if value is None:
            return None
        text = self.stringify(value, options.date_format)
        if options.translatable and self.item is not None:
            text = self.translator.translate(text)
        return text

    @staticmethod
    def stringify(value: Any, date_format: str | None) -> str:
        if value is None:
            return ""
        if isinstance(value, date):
            return format_date(value, date_format or ATOM)
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
