"""Custom field tree of a feed document.

Every value or attribute slot is explicitly tagged: ``Static`` carries a
literal, ``Dynamic`` names an accessor resolved against the current item at
render time. Plain values passed where a slot is expected are wrapped in
``Static``; a string is never guessed to be an accessor name.

Example:
    >>> from feedforge.models.field import Dynamic, Field, GroupField, MediaField
    >>> categories = GroupField(
    ...     "categories",
    ...     Field("category", Dynamic("categories"), attributes={"type": "tag"}),
    ...     attributes={"scheme": "test"},
    ... )
    >>> [child.name for child in categories.children]
    ['category']
    >>> Field("rating", 5).value
    Static(value=5)
    >>> MediaField(Dynamic("images")).value
    Dynamic(accessor='images')
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from feedforge.core.exceptions import InvalidFieldError

MAX_GROUP_DEPTH = 16


@dataclass(frozen=True)
class Static:
    """A literal value used verbatim."""

    value: Any


@dataclass(frozen=True)
class Dynamic:
    """The name of a zero-argument accessor evaluated on the current item."""

    accessor: str

    def __post_init__(self) -> None:
        if not self.accessor:
            raise InvalidFieldError("Dynamic slot requires an accessor name")


Slot = Union[Static, Dynamic]
AttributeKey = Union[str, Dynamic]


def as_slot(value: Any) -> Slot:
    """Wrap ``value`` in ``Static`` unless it is already a slot."""
    if isinstance(value, (Static, Dynamic)):
        return value
    return Static(value)


def _attribute_pairs(
    attributes: Mapping[AttributeKey, Any] | Iterable[tuple[AttributeKey, Any]] | None,
) -> tuple[tuple[AttributeKey, Slot], ...]:
    if not attributes:
        return ()
    items = attributes.items() if isinstance(attributes, Mapping) else attributes
    pairs = []
    for key, value in items:
        if isinstance(key, Static):
            key = key.value
        if not isinstance(key, (str, Dynamic)) or not key:
            raise InvalidFieldError(f"Invalid attribute key: {key!r}")
        pairs.append((key, as_slot(value)))
    return tuple(pairs)


@dataclass(frozen=True)
class FieldOptions:
    """Rendering options of a field.

    Args:
        cdata: Wrap the text in a CDATA section instead of escaping it.
        translatable: Pass the text through the translator (item scope only).
        attribute: Render the value as an attribute of an empty element.
        attribute_name: Attribute receiving the value when ``attribute`` is set.
        date_format: ``"rss"``, ``"atom"`` or a ``strftime`` pattern applied to
            date and datetime values.
    """

    cdata: bool = False
    translatable: bool = False
    attribute: bool = False
    attribute_name: str | None = None
    date_format: str | None = None

    def __post_init__(self) -> None:
        if self.attribute and not self.attribute_name:
            raise InvalidFieldError('Option "attribute" requires an "attribute_name"')


def _options(options: FieldOptions | Mapping[str, Any] | None) -> FieldOptions:
    if options is None:
        return FieldOptions()
    if isinstance(options, FieldOptions):
        return options
    try:
        return FieldOptions(**options)
    except TypeError as e:
        raise InvalidFieldError(f"Invalid field options: {e}") from e


@dataclass(frozen=True, init=False)
class Field:
    """A single named element.

    A value resolving to a list or tuple renders one element per entry.
    """

    name: str
    value: Slot
    options: FieldOptions = field(default_factory=FieldOptions)
    attributes: tuple[tuple[AttributeKey, Slot], ...] = ()

    def __init__(
        self,
        name: str,
        value: Any,
        options: FieldOptions | Mapping[str, Any] | None = None,
        attributes: Mapping[AttributeKey, Any] | Iterable[tuple[AttributeKey, Any]] | None = None,
    ) -> None:
        if not name:
            raise InvalidFieldError("Field requires a name")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "value", as_slot(value))
        object.__setattr__(self, "options", _options(options))
        object.__setattr__(self, "attributes", _attribute_pairs(attributes))

    @property
    def depth(self) -> int:
        return 1


@dataclass(frozen=True, init=False)
class MediaField(Field):
    """Attached media rendered as format-specific enclosure elements.

    The value resolves to None, one media descriptor (a ``MediaDescriptor``
    or a mapping with ``type``, ``length`` and ``value``) or a sequence of
    them. The element name comes from the formatter.
    """

    def __init__(self, value: Any, attributes: Mapping[AttributeKey, Any] | None = None) -> None:
        super().__init__("enclosure", value, attributes=attributes)


@dataclass(frozen=True, init=False)
class GroupField:
    """An element wrapping nested fields, rendered in declaration order."""

    name: str
    children: tuple[FieldNode, ...]
    attributes: tuple[tuple[AttributeKey, Slot], ...] = ()

    def __init__(
        self,
        name: str,
        children: FieldNode | Sequence[FieldNode],
        attributes: Mapping[AttributeKey, Any] | Iterable[tuple[AttributeKey, Any]] | None = None,
    ) -> None:
        if not name:
            raise InvalidFieldError("GroupField requires a name")
        if isinstance(children, (Field, GroupField)):
            children = (children,)
        children = tuple(children)
        if not children:
            raise InvalidFieldError(f'GroupField "{name}" requires at least one child')
        for child in children:
            if not isinstance(child, (Field, GroupField)):
                raise InvalidFieldError(f'GroupField "{name}" has an invalid child: {child!r}')
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "children", children)
        object.__setattr__(self, "attributes", _attribute_pairs(attributes))
        if self.depth > MAX_GROUP_DEPTH:
            raise InvalidFieldError(
                f'GroupField "{name}" exceeds the maximum nesting depth of {MAX_GROUP_DEPTH}'
            )

    @property
    def depth(self) -> int:
        return 1 + max(child.depth for child in self.children)


FieldNode = Union[Field, GroupField]
