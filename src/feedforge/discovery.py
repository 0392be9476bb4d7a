"""Formatter plugins published through entry points.

Third-party packages add feed formats by exposing a ``Formatter`` subclass in
the ``feedforge.formatters`` entry-point group::

    [project.entry-points."feedforge.formatters"]
    json = "my_package.formatters:JsonFeedFormatter"

Entry points that fail to import, or that do not name a ``Formatter``
subclass, are logged and left out.

Example:
    >>> from feedforge.discovery import get_formatter
    >>> get_formatter("no-such-format") is None
    True
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import Any

from feedforge.formatter.base import Formatter

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "feedforge.formatters"

FormatterClass = type[Formatter]

_formatter_cache: dict[str, FormatterClass] | None = None


def is_formatter_class(obj: Any) -> bool:
    """Return True when ``obj`` is a concrete ``Formatter`` subclass."""
    return (
        isinstance(obj, type)
        and issubclass(obj, Formatter)
        and obj is not Formatter
        and hasattr(obj, "descriptor")
    )


def _load(ep: Any) -> FormatterClass | None:
    try:
        obj = ep.load()
    except Exception as e:
        logger.warning(f"Failed to load formatter {ep.name}: {e}")
        return None
    if not is_formatter_class(obj):
        logger.warning(f"Ignoring formatter {ep.name}: {obj!r} is not a Formatter subclass")
        return None
    logger.debug(f"Discovered formatter {ep.name}: {obj.__module__}.{obj.__name__}")
    return obj


def discover_formatters(reload: bool = False) -> dict[str, FormatterClass]:
    """Return formatter classes by format name, loading entry points once.

    Args:
        reload: Scan the entry points again instead of using the cache.
    """
    global _formatter_cache

    if _formatter_cache is None or reload:
        found: dict[str, FormatterClass] = {}
        for ep in entry_points(group=ENTRY_POINT_GROUP):
            cls = _load(ep)
            if cls is not None:
                found[ep.name] = cls
        _formatter_cache = found
    return _formatter_cache


def get_formatter(name: str) -> FormatterClass | None:
    return discover_formatters().get(name)


def list_formatters() -> list[dict[str, Any]]:
    """Describe every known formatter: name, class path, content type, summary."""
    return [
        {
            "name": name,
            "class": f"{cls.__module__}.{cls.__name__}",
            "content_type": cls.descriptor.content_type,
            "docstring": cls.__doc__,
        }
        for name, cls in discover_formatters().items()
    ]


def register_formatter(name: str, formatter_class: FormatterClass) -> None:
    """Make ``formatter_class`` available under ``name`` without an entry point.

    Raises:
        TypeError: If ``formatter_class`` is not a ``Formatter`` subclass.
    """
    if not is_formatter_class(formatter_class):
        raise TypeError(f"{formatter_class!r} is not a Formatter subclass")
    discover_formatters()[name] = formatter_class
    logger.info(f"Registered formatter {name}: {formatter_class.__name__}")


def clear_cache() -> None:
    """Forget discovered and registered formatters."""
    global _formatter_cache
    _formatter_cache = None
