"""Atom 1.0 formatter.

Atom additionally requires the ``author`` channel parameter; entry titles
and summaries are wrapped in CDATA sections.

Example:
    >>> from feedforge.formatter.atom import ATOM_NAMESPACE, AtomFormatter
    >>> formatter = AtomFormatter()
    >>> formatter.descriptor.required
    ('title', 'description', 'link', 'author')
    >>> ATOM_NAMESPACE
    'http://www.w3.org/2005/Atom'
"""

from __future__ import annotations

from datetime import datetime

from feedforge.formatter.base import EnclosureSpec, FormatDescriptor, Formatter
from feedforge.models.config import FeedConfig
from feedforge.models.field import Dynamic, Field, FieldNode, GroupField
from feedforge.protocols.item import DESCRIPTION, LINK, PUB_DATE, TITLE
from feedforge.utils.dates import ATOM

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"


def _channel_fields(config: FeedConfig, updated: datetime) -> list[FieldNode]:
    return [
        Field("title", config.title),
        Field("subtitle", config.description),
        Field("id", config.link),
        Field(
            "link",
            config.link,
            {"attribute": True, "attribute_name": "href"},
            {"rel": "self"},
        ),
        Field("updated", updated, {"date_format": ATOM}),
        GroupField("author", Field("name", config.author)),
    ]


ATOM_FORMAT = FormatDescriptor(
    name="atom",
    label="Atom",
    root_tag="feed",
    namespace=ATOM_NAMESPACE,
    item_tag="entry",
    required=("title", "description", "link", "author"),
    channel_fields=_channel_fields,
    item_fields=(
        Field("id", Dynamic(LINK)),
        Field("title", Dynamic(TITLE), {"cdata": True}),
        Field("summary", Dynamic(DESCRIPTION), {"cdata": True}),
        Field("link", Dynamic(LINK), {"attribute": True, "attribute_name": "href"}),
        Field("updated", Dynamic(PUB_DATE), {"date_format": ATOM}),
    ),
    enclosure=EnclosureSpec(
        tag="link",
        url_attribute="href",
        attributes=(("rel", "enclosure"),),
    ),
    content_type="application/atom+xml",
)


class AtomFormatter(Formatter):
    """Renders ``<feed xmlns="http://www.w3.org/2005/Atom">`` documents."""

    descriptor = ATOM_FORMAT
