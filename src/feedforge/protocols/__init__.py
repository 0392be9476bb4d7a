"""Protocol definitions - all extension points."""

from feedforge.protocols.item import AccessorLookup, FeedItem, RoutedFeedItem
from feedforge.protocols.link import LinkBuilder
from feedforge.protocols.translator import Translator

__all__ = [
    # Items
    "FeedItem",
    "RoutedFeedItem",
    "AccessorLookup",
    # Collaborators
    "LinkBuilder",
    "Translator",
]
