"""Custom accessor registry.

Fields reference per-item data with ``Dynamic("name")``. The registry maps
an item type and an accessor name to an extraction function, so domain
classes can feed custom fields without growing one method per field.
Lookups follow the item type's MRO, so registering on a base class covers
its subclasses.

Example:
    >>> from dataclasses import dataclass
    >>> from feedforge.core.accessors import AccessorRegistry
    >>>
    >>> @dataclass
    ... class Article:
    ...     tags: list
    >>>
    >>> registry = AccessorRegistry()
    >>> registry.register(Article, "categories", lambda article: article.tags)
    >>> fn = registry.get(Article(tags=["a", "b"]), "categories")
    >>> fn(Article(tags=["a", "b"]))
    ['a', 'b']
    >>> registry.get(object(), "categories") is None
    True
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

Extractor = Callable[[Any], Any]
F = TypeVar("F", bound=Extractor)


class AccessorRegistry:
    """Registry of accessor functions keyed by item type and name.

    Example:
        >>> from feedforge.core.accessors import AccessorRegistry
        >>> registry = AccessorRegistry()
        >>> @registry.accessor(dict, "size")
        ... def size(item):
        ...     return len(item)
        >>> registry.has(dict, "size")
        True
    """

    def __init__(self) -> None:
        """Initialize an empty accessor registry."""
        self._accessors: dict[type, dict[str, Extractor]] = {}

    def register(self, item_type: type, name: str, extractor: Extractor) -> None:
        """Register ``extractor`` as accessor ``name`` for ``item_type``.

        Args:
            item_type: Item class the accessor applies to (and its subclasses).
            name: Accessor name referenced by ``Dynamic`` slots.
            extractor: Function receiving the item and returning the value.
        """
        self._accessors.setdefault(item_type, {})[name] = extractor
        logger.debug(f"Registered accessor {item_type.__name__}.{name}")

    def accessor(self, item_type: type, name: str | None = None) -> Callable[[F], F]:
        """Decorator form of ``register``; the name defaults to the function name."""

        def decorator(func: F) -> F:
            self.register(item_type, name or func.__name__, func)
            return func

        return decorator

    def unregister(self, item_type: type, name: str) -> bool:
        """Remove an accessor.

        Returns:
            True if an accessor was removed.
        """
        accessors = self._accessors.get(item_type)
        if accessors is None or name not in accessors:
            return False
        del accessors[name]
        if not accessors:
            del self._accessors[item_type]
        return True

    def get(self, item: Any, name: str) -> Extractor | None:
        """Return the extractor for ``name`` on ``item``'s type, or None."""
        for cls in type(item).__mro__:
            accessors = self._accessors.get(cls)
            if accessors and name in accessors:
                return accessors[name]
        return None

    def has(self, item_type: type, name: str) -> bool:
        """Check if an accessor is registered directly on ``item_type``."""
        return name in self._accessors.get(item_type, {})

    def names(self, item_type: type) -> list[str]:
        """List accessor names available for ``item_type``, including inherited ones."""
        result: list[str] = []
        for cls in item_type.__mro__:
            for name in self._accessors.get(cls, {}):
                if name not in result:
                    result.append(name)
        return result

    def clear(self) -> None:
        """Remove all accessors."""
        self._accessors.clear()

    def __len__(self) -> int:
        return sum(len(accessors) for accessors in self._accessors.values())


# Global accessor registry instance
accessor_registry = AccessorRegistry()
