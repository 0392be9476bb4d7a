"""
feedforge - RSS 2.0 and Atom 1.0 feed rendering.

feedforge renders collections of domain items into feeds. Channel metadata,
an ordered list of items and a tree of custom fields are assembled into a
FeedDocument and serialized by a format-specific Formatter.

Key Features:
- One serialization skeleton for RSS and Atom, driven by format descriptors
- Custom channel and item fields, nested groups and media enclosures
- Values and attributes that are literal (Static) or per item (Dynamic)
- Translatable text and routed item links through small protocols

Quick Start:
    >>> from feedforge import Dynamic, FeedManager, Field
    >>> from feedforge.testing import FakeItem
    >>> manager = FeedManager({
    ...     "article": {
    ...         "title": "My articles/posts",
    ...         "description": "Latest articles",
    ...         "link": "http://example.org",
    ...         "author": "Jane Doe",
    ...     }
    ... })
    >>> feed = manager.get("article")
    >>> feed.add(FakeItem()).add_item_field(Field("custom", Dynamic("feed_item_custom")))
    FeedDocument(name='article', items=1)
    >>> "<custom>My custom field</custom>" in feed.render("atom")
    True

Architecture:
    Formatters: RssFormatter, AtomFormatter (plus entry-point plugins)
    Items: FeedItem / RoutedFeedItem protocols, ItemAdapter, RoutedItemAdapter
    Collaborators: Translator, LinkBuilder
"""

# Errors
from feedforge.core.exceptions import (
    ConfigurationError,
    FeedForgeError,
    InvalidConfigurationError,
    InvalidFieldError,
    InvalidItemError,
    MissingAccessorError,
    NotFoundError,
    RenderError,
    UnknownFeedError,
    UnknownFormatError,
)

# Models
from feedforge.models.config import FeedConfig
from feedforge.models.field import (
    Dynamic,
    Field,
    FieldOptions,
    GroupField,
    MediaField,
    Static,
)
from feedforge.models.media import MediaDescriptor

# Protocols
from feedforge.protocols.item import AccessorLookup, FeedItem, RoutedFeedItem
from feedforge.protocols.link import LinkBuilder
from feedforge.protocols.translator import Translator

# Resolution
from feedforge.core.accessors import AccessorRegistry, accessor_registry
from feedforge.core.resolver import ItemResolver

# Formatters
from feedforge.formatter.atom import AtomFormatter
from feedforge.formatter.base import EnclosureSpec, FormatDescriptor, Formatter
from feedforge.formatter.rss import RssFormatter

# Documents and orchestration
from feedforge.core.config import Settings, get_settings, load_feed_configs
from feedforge.core.document import FeedDocument
from feedforge.core.dump import FeedDumper
from feedforge.core.manager import FeedManager

# Item adapters
from feedforge.adapter.item import ItemAdapter, RoutedItemAdapter

# Collaborator implementations
from feedforge.routing.template import TemplateLinkBuilder
from feedforge.translator.catalog import CatalogTranslator, IdentityTranslator

# Formatter discovery
from feedforge.discovery import (
    clear_cache as clear_formatter_cache,
    discover_formatters,
    get_formatter,
    list_formatters,
    register_formatter,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "FeedForgeError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingAccessorError",
    "NotFoundError",
    "UnknownFeedError",
    "UnknownFormatError",
    "InvalidItemError",
    "InvalidFieldError",
    "RenderError",
    # Models
    "FeedConfig",
    "Static",
    "Dynamic",
    "Field",
    "FieldOptions",
    "GroupField",
    "MediaField",
    "MediaDescriptor",
    # Protocols
    "FeedItem",
    "RoutedFeedItem",
    "AccessorLookup",
    "LinkBuilder",
    "Translator",
    # Resolution
    "AccessorRegistry",
    "accessor_registry",
    "ItemResolver",
    # Formatters
    "Formatter",
    "FormatDescriptor",
    "EnclosureSpec",
    "RssFormatter",
    "AtomFormatter",
    # Documents
    "FeedDocument",
    "FeedManager",
    "FeedDumper",
    # Configuration
    "Settings",
    "get_settings",
    "load_feed_configs",
    # Adapters
    "ItemAdapter",
    "RoutedItemAdapter",
    # Collaborators
    "IdentityTranslator",
    "CatalogTranslator",
    "TemplateLinkBuilder",
    # Formatter discovery
    "discover_formatters",
    "get_formatter",
    "list_formatters",
    "register_formatter",
    "clear_formatter_cache",
    # Version
    "__version__",
]
