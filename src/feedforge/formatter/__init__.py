"""Feed formatters."""

from feedforge.formatter.atom import ATOM_FORMAT, AtomFormatter
from feedforge.formatter.base import EnclosureSpec, FormatDescriptor, Formatter
from feedforge.formatter.rss import RSS_FORMAT, RssFormatter

__all__ = [
    "Formatter",
    "FormatDescriptor",
    "EnclosureSpec",
    "RssFormatter",
    "RSS_FORMAT",
    "AtomFormatter",
    "ATOM_FORMAT",
]
