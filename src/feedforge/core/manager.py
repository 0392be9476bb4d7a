"""Feed manager: the entry point for obtaining renderable feeds.

The manager maps feed names to channel configurations and holds the
formatters shared by every document it creates.

Example:
    >>> from feedforge.core.manager import FeedManager
    >>> manager = FeedManager(
    ...     {"article": {"title": "Articles", "description": "Latest", "link": "http://example.org"}}
    ... )
    >>> sorted(manager.formats())
    ['atom', 'rss']
    >>> document = manager.get("article")
    >>> document.get("title")
    'Articles'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from feedforge.core.config import Settings, load_feed_configs
from feedforge.core.document import FeedDocument
from feedforge.core.exceptions import ConfigurationError, UnknownFeedError
from feedforge.discovery import discover_formatters, is_formatter_class
from feedforge.formatter.atom import AtomFormatter
from feedforge.formatter.base import Formatter
from feedforge.formatter.rss import RssFormatter
from feedforge.models.config import FeedConfig

if TYPE_CHECKING:
    from feedforge.core.accessors import AccessorRegistry
    from feedforge.protocols.link import LinkBuilder
    from feedforge.protocols.translator import Translator

logger = logging.getLogger(__name__)

BUILTIN_FORMATTERS: dict[str, type[Formatter]] = {
    "rss": RssFormatter,
    "atom": AtomFormatter,
}


class FeedManager:
    """Registry of named feeds and available formatters.

    Args:
        feeds: Feed configurations keyed by name, as ``FeedConfig`` or mappings.
        formatters: Formatters keyed by format, or an iterable of formatters.
            When omitted, the built-in RSS and Atom formatters and every
            formatter discovered through entry points are created with the
            collaborators below.
        translator: Translator handed to default formatters.
        link_builder: Link builder handed to default formatters.
        accessors: Accessor registry handed to default formatters.
        pretty_print: Indentation setting of default formatters.
    """

    def __init__(
        self,
        feeds: Mapping[str, FeedConfig | Mapping[str, Any]],
        formatters: Mapping[str, Formatter] | Iterable[Formatter] | None = None,
        *,
        translator: Translator | None = None,
        link_builder: LinkBuilder | None = None,
        accessors: AccessorRegistry | None = None,
        pretty_print: bool = True,
    ) -> None:
        self._feeds: dict[str, FeedConfig] = {
            name: config if isinstance(config, FeedConfig) else FeedConfig.model_validate(config)
            for name, config in feeds.items()
        }
        self._formatters: dict[str, Formatter] = {}

        if formatters is None:
            options = {
                "accessors": accessors,
                "pretty_print": pretty_print,
            }
            for name, cls in BUILTIN_FORMATTERS.items():
                self._formatters[name] = cls(translator, link_builder, **options)
            for name, cls in discover_formatters().items():
                if name in self._formatters:
                    continue
                if not is_formatter_class(cls):
                    logger.warning(f"Skipping formatter {name}: {cls!r} is not a Formatter")
                    continue
                try:
                    self._formatters[name] = cls(translator, link_builder, **options)
                except TypeError as e:
                    logger.warning(f"Skipping formatter {name}: {e}")
        elif isinstance(formatters, Mapping):
            self._formatters.update(formatters)
        else:
            for formatter in formatters:
                self.register_formatter(formatter)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> FeedManager:
        """Create a manager from the feeds file named in ``settings``.

        Raises:
            ConfigurationError: If no feeds file is configured.
        """
        if settings.feeds_file is None:
            raise ConfigurationError("No feeds file configured (set FEEDFORGE_FEEDS_FILE).")
        kwargs.setdefault("pretty_print", settings.pretty_print)
        return cls(load_feed_configs(settings.feeds_file), **kwargs)

    def register_formatter(self, formatter: Formatter, name: str | None = None) -> None:
        """Register or replace a formatter under ``name`` (its format name by default)."""
        name = name or formatter.name
        self._formatters[name] = formatter
        logger.debug(f"Registered formatter {name}: {type(formatter).__name__}")

    def formats(self) -> list[str]:
        return list(self._formatters)

    def formatter(self, format: str) -> Formatter | None:
        return self._formatters.get(format)

    def has(self, name: str) -> bool:
        return name in self._feeds

    def names(self) -> list[str]:
        return list(self._feeds)

    def config(self, name: str) -> FeedConfig:
        """Return a copy of the configuration of feed ``name``."""
        if name not in self._feeds:
            raise UnknownFeedError(name)
        return self._feeds[name].model_copy()

    def get(self, name: str) -> FeedDocument:
        """Create a fresh document for feed ``name``.

        Raises:
            UnknownFeedError: If ``name`` is not configured.
        """
        return FeedDocument(name, self.config(name), self._formatters)
