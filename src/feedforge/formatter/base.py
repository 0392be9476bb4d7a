"""Shared serialization skeleton of all feed formats.

Formats differ in element names, mandatory elements and required channel
parameters, but are rendered by the same walk over the document: root
element, mandatory channel elements, custom channel fields, then one item
element per item holding the mandatory item elements followed by the custom
item fields. A ``FormatDescriptor`` captures everything format-specific; a
concrete formatter only binds a descriptor.

The whole tree is built before serialization, so any error aborts the
render without producing output.

Example:
    >>> from datetime import datetime, timezone
    >>> from feedforge.core.document import FeedDocument
    >>> from feedforge.formatter.rss import RssFormatter
    >>> from feedforge.models.config import FeedConfig
    >>> formatter = RssFormatter(clock=lambda: datetime(2024, 1, 1, tzinfo=timezone.utc))
    >>> document = FeedDocument(
    ...     "article",
    ...     FeedConfig(title="Articles", description="Latest", link="http://example.org"),
    ...     {"rss": formatter},
    ... )
    >>> "<title>Articles</title>" in document.render("rss")
    True
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, ClassVar

from lxml import etree
from pydantic import BaseModel, ValidationError

from feedforge.core.accessors import AccessorRegistry
from feedforge.core.exceptions import (
    InvalidConfigurationError,
    InvalidFieldError,
    InvalidItemError,
    RenderError,
)
from feedforge.core.resolver import ItemResolver
from feedforge.models.field import Field, FieldNode, GroupField, MediaField
from feedforge.models.media import media_descriptors
from feedforge.protocols.item import FeedItem, RoutedFeedItem

if TYPE_CHECKING:
    from feedforge.core.document import FeedDocument
    from feedforge.models.config import FeedConfig
    from feedforge.protocols.link import LinkBuilder
    from feedforge.protocols.translator import Translator

logger = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

NamespaceMap = dict[str | None, str]


@dataclass(frozen=True)
class EnclosureSpec:
    """How media descriptors are rendered.

    Args:
        tag: Element name of one enclosure.
        url_attribute: Attribute receiving the media URL.
        attributes: Static attributes emitted first, e.g. ``rel="enclosure"``.
    """

    tag: str
    url_attribute: str
    attributes: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class FormatDescriptor:
    """Everything that distinguishes one feed format from another.

    Args:
        name: Format identifier used by ``FeedDocument.render``.
        label: Human-readable format name used in error messages.
        root_tag: Root element name.
        item_tag: Element wrapping one item.
        channel_fields: Builds the mandatory channel elements from the
            config and the render time.
        item_fields: Mandatory item elements, resolved against each item.
        enclosure: Rendering of media fields.
        required: Config keys that must be non-empty.
        namespace: Default namespace of every element, if any.
        container_tag: Element between the root and the channel content.
        root_attributes: Static attributes of the root element.
        content_type: MIME type of the produced document.
    """

    name: str
    label: str
    root_tag: str
    item_tag: str
    channel_fields: Callable[[FeedConfig, datetime], list[FieldNode]]
    item_fields: tuple[FieldNode, ...]
    enclosure: EnclosureSpec
    required: tuple[str, ...] = ("title", "description", "link")
    namespace: str | None = None
    container_tag: str | None = None
    root_attributes: tuple[tuple[str, str], ...] = ()
    content_type: str = "application/xml"


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _is_multi_value(value: Any) -> bool:
    """Return True for iterables that render one element per entry."""
    if isinstance(value, (str, bytes, Mapping, BaseModel)):
        return False
    return isinstance(value, Iterable)


class Formatter:
    """Renders feed documents for the format described by ``descriptor``.

    A formatter keeps no per-render state, so one instance can serve many
    documents.

    Args:
        translator: Translator for translatable fields and channel text.
        link_builder: Link builder for routed items.
        accessors: Accessor registry (the global registry by default).
        clock: Returns the render time used for channel dates.
        pretty_print: Indent the output.
    """

    descriptor: ClassVar[FormatDescriptor]

    def __init__(
        self,
        translator: Translator | None = None,
        link_builder: LinkBuilder | None = None,
        *,
        accessors: AccessorRegistry | None = None,
        clock: Callable[[], datetime] | None = None,
        pretty_print: bool = True,
    ) -> None:
        self.translator = translator
        self.link_builder = link_builder
        self.accessors = accessors
        self.clock = clock or _utcnow
        self.pretty_print = pretty_print

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def content_type(self) -> str:
        return self.descriptor.content_type

    def validate(self, config: FeedConfig) -> None:
        """Check the format's required channel parameters.

        Raises:
            InvalidConfigurationError: If a required parameter is missing or empty.
        """
        for key in self.descriptor.required:
            if not config.is_set(key):
                raise InvalidConfigurationError(key, self.name, label=self.descriptor.label)

    def render(self, document: FeedDocument) -> str:
        """Validate the document's config and serialize the document."""
        config = document.config
        self.validate(config)
        logger.debug(
            f"Rendering feed {document.name} as {self.name} ({len(document.items)} items)"
        )
        root = self.build(document)
        return self.serialize(root, config.encoding)

    def build(self, document: FeedDocument) -> etree._Element:
        """Build the XML tree of ``document``."""
        descriptor = self.descriptor
        config = self._channel_config(document.config)
        nsmap = self._nsmap(document.namespaces)

        root = etree.Element(self._qualify(descriptor.root_tag, nsmap), nsmap=nsmap or None)
        for key, value in descriptor.root_attributes:
            root.set(key, value)
        parent = root
        if descriptor.container_tag:
            parent = etree.SubElement(root, self._qualify(descriptor.container_tag, nsmap))

        channel = self._resolver(None)
        for node in [*descriptor.channel_fields(config, self.clock()), *document.channel_fields]:
            self._append(parent, node, channel, nsmap)

        item_fields = (*descriptor.item_fields, *document.item_fields)
        for item in document.items:
            self._check_item(item)
            element = etree.SubElement(parent, self._qualify(descriptor.item_tag, nsmap))
            resolver = self._resolver(item)
            for node in item_fields:
                self._append(element, node, resolver, nsmap)
        return root

    def serialize(self, root: etree._Element, encoding: str) -> str:
        """Serialize a tree with an XML declaration in ``encoding``."""
        try:
            data = etree.tostring(
                root,
                pretty_print=self.pretty_print,
                xml_declaration=True,
                encoding=encoding,
            )
        except LookupError as e:
            raise InvalidConfigurationError(
                "encoding", self.name, message=f'Unknown encoding "{encoding}".'
            ) from e
        except ValueError as e:
            raise InvalidConfigurationError(
                "encoding", self.name, message=f'Cannot serialize to encoding "{encoding}": {e}'
            ) from e
        return data.decode(encoding)

    def _resolver(self, item: Any) -> ItemResolver:
        return ItemResolver(
            item,
            translator=self.translator,
            accessors=self.accessors,
            link_builder=self.link_builder,
        )

    def _channel_config(self, config: FeedConfig) -> FeedConfig:
        if not config.translatable or self.translator is None:
            return config
        return config.model_copy(
            update={
                "title": self.translator.translate(config.title),
                "description": self.translator.translate(config.description),
            }
        )

    def _nsmap(self, namespaces: Mapping[str, str]) -> NamespaceMap:
        nsmap: NamespaceMap = {}
        if self.descriptor.namespace:
            nsmap[None] = self.descriptor.namespace
        nsmap.update(namespaces)
        return nsmap

    @staticmethod
    def _check_item(item: Any) -> None:
        if not isinstance(item, (FeedItem, RoutedFeedItem)):
            raise InvalidItemError(
                f"Item of type {type(item).__name__} must implement FeedItem or RoutedFeedItem."
            )

    @staticmethod
    def _qualify(name: str, nsmap: NamespaceMap, default: bool = True) -> str:
        """Expand ``prefix:local`` names; plain element names take the default namespace."""
        if ":" in name:
            prefix, local = name.split(":", 1)
            uri = XML_NAMESPACE if prefix == "xml" else nsmap.get(prefix)
            if uri is None:
                raise InvalidFieldError(f'Unknown namespace prefix "{prefix}" in "{name}".')
            return f"{{{uri}}}{local}"
        if default and None in nsmap:
            return f"{{{nsmap[None]}}}{name}"
        return name

    def _append(
        self,
        parent: etree._Element,
        node: FieldNode,
        resolver: ItemResolver,
        nsmap: NamespaceMap,
    ) -> None:
        if isinstance(node, GroupField):
            element = self._subelement(parent, node.name, nsmap)
            self._set_attributes(element, resolver.attributes(node.attributes), nsmap)
            for child in node.children:
                self._append(element, child, resolver, nsmap)
        elif isinstance(node, MediaField):
            self._append_media(parent, node, resolver, nsmap)
        elif isinstance(node, Field):
            self._append_field(parent, node, resolver, nsmap)
        else:
            raise InvalidFieldError(f"Unsupported field node: {node!r}")

    def _append_field(
        self,
        parent: etree._Element,
        node: Field,
        resolver: ItemResolver,
        nsmap: NamespaceMap,
    ) -> None:
        value = resolver.resolve(node.value)
        values = list(value) if _is_multi_value(value) else [value]
        attributes = resolver.attributes(node.attributes)
        options = node.options

        for entry in values:
            element = self._subelement(parent, node.name, nsmap)
            text = resolver.text(entry, options)
            if options.attribute:
                self._set_attributes(element, {options.attribute_name: text or ""}, nsmap)
            else:
                self._set_text(element, node.name, text, options.cdata)
            self._set_attributes(element, attributes, nsmap)

    def _append_media(
        self,
        parent: etree._Element,
        node: MediaField,
        resolver: ItemResolver,
        nsmap: NamespaceMap,
    ) -> None:
        spec = self.descriptor.enclosure
        try:
            media = media_descriptors(resolver.resolve(node.value))
        except (ValidationError, TypeError) as e:
            raise RenderError(f"Invalid media descriptor: {e}") from e
        extra = resolver.attributes(node.attributes)

        for descriptor in media:
            element = self._subelement(parent, spec.tag, nsmap)
            attributes = dict(spec.attributes)
            attributes[spec.url_attribute] = descriptor.value
            attributes["type"] = descriptor.type
            if descriptor.length is not None:
                attributes["length"] = str(descriptor.length)
            attributes.update(extra)
            self._set_attributes(element, attributes, nsmap)

    def _subelement(self, parent: etree._Element, name: str, nsmap: NamespaceMap) -> etree._Element:
        try:
            return etree.SubElement(parent, self._qualify(name, nsmap))
        except ValueError as e:
            raise RenderError(f'Cannot render element "{name}": {e}') from e

    def _set_attributes(
        self,
        element: etree._Element,
        attributes: Mapping[str, str],
        nsmap: NamespaceMap,
    ) -> None:
        for key, value in attributes.items():
            try:
                element.set(self._qualify(key, nsmap, default=False), value)
            except ValueError as e:
                raise RenderError(f'Cannot render attribute "{key}": {e}') from e

    @staticmethod
    def _set_text(element: etree._Element, name: str, text: str | None, cdata: bool) -> None:
        if text is None:
            return
        try:
            if cdata and "]]>" in text:
                logger.warning(f'Value of "{name}" contains "]]>", rendering as escaped text')
                element.text = text
            elif cdata:
                element.text = etree.CDATA(text)
            else:
                element.text = text
        except ValueError as e:
            raise RenderError(f'Cannot render text of "{name}": {e}') from e
