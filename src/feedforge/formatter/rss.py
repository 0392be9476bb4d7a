"""RSS 2.0 formatter.

Example:
    >>> from feedforge.formatter.rss import RssFormatter
    >>> formatter = RssFormatter()
    >>> formatter.name
    'rss'
    >>> formatter.content_type
    'application/rss+xml'
"""

from __future__ import annotations

from datetime import datetime

from feedforge.formatter.base import EnclosureSpec, FormatDescriptor, Formatter
from feedforge.models.config import FeedConfig
from feedforge.models.field import Dynamic, Field, FieldNode
from feedforge.protocols.item import DESCRIPTION, LINK, PUB_DATE, TITLE
from feedforge.utils.dates import RSS


def _channel_fields(config: FeedConfig, updated: datetime) -> list[FieldNode]:
    fields: list[FieldNode] = [
        Field("title", config.title),
        Field("description", config.description),
        Field("link", config.link),
    ]
    if config.language:
        fields.append(Field("language", config.language))
    fields.append(Field("lastBuildDate", updated, {"date_format": RSS}))
    return fields


RSS_FORMAT = FormatDescriptor(
    name="rss",
    label="RSS",
    root_tag="rss",
    root_attributes=(("version", "2.0"),),
    container_tag="channel",
    item_tag="item",
    required=("title", "description", "link"),
    channel_fields=_channel_fields,
    item_fields=(
        Field("title", Dynamic(TITLE)),
        Field("description", Dynamic(DESCRIPTION), {"cdata": True}),
        Field("link", Dynamic(LINK)),
        Field("guid", Dynamic(LINK)),
        Field("pubDate", Dynamic(PUB_DATE), {"date_format": RSS}),
    ),
    enclosure=EnclosureSpec(tag="enclosure", url_attribute="url"),
    content_type="application/rss+xml",
)


class RssFormatter(Formatter):
    """Renders ``<rss version="2.0">`` documents."""

    descriptor = RSS_FORMAT
