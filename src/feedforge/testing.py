"""Testing utilities for feed rendering.

This module provides fake items and collaborators for testing feeds
without a hosting application.

Example:
    >>> from feedforge.testing import FakeItem, FakeLinkBuilder
    >>> item = FakeItem()
    >>> item.feed_item_title()
    'Fake title'
    >>> FakeLinkBuilder().generate("fake_route", {})
    'http://example.org/article/fake/url'
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

FAKE_PUB_DATE = datetime(2024, 1, 15, 9, 30, tzinfo=UTC)


@dataclass
class FakeItem:
    """Item with a literal link and a set of custom accessors.

    Args:
        title: Value of ``feed_item_title``.
        description: Value of ``feed_item_description``.
        link: Value of ``feed_item_link``.
        pub_date: Value of ``feed_item_pub_date``.
        media: Value of ``feed_media_item`` (None by default).
    """

    title: str = "Fake title"
    description: str = "Fake description or content"
    link: str = "http://example.org/a"
    pub_date: datetime = FAKE_PUB_DATE
    media: Any = None

    def feed_item_title(self) -> str:
        return self.title

    def feed_item_description(self) -> str:
        return self.description

    def feed_item_link(self) -> str:
        return self.link

    def feed_item_pub_date(self) -> datetime:
        return self.pub_date

    def feed_item_custom(self) -> str:
        return "My custom field"

    def feed_media_item(self) -> Any:
        return self.media

    def feed_media_multiple_items(self) -> list[dict[str, Any]]:
        return [
            {"type": "image/jpeg", "length": 500, "value": "http://example.org/image.jpg"},
            {"type": "image/png", "length": 600, "value": "http://example.org/image2.png"},
        ]

    def feed_categories_custom(self) -> list[str]:
        return ["category 1", "category 2", "category 3"]

    def feed_item_author_name(self) -> str:
        return "John Doe"

    def feed_item_author_email(self) -> str:
        return "john.doe@example.org"

    def item_key_attribute(self) -> str:
        return "my-item-key-attribute"

    def item_value_attribute(self) -> str:
        return "my-item-value-attribute"

    def group_key_attribute(self) -> str:
        return "my-group-key-attribute"

    def group_value_attribute(self) -> str:
        return "my-group-value-attribute"


@dataclass
class FakeRoutedItem:
    """Item whose link is produced by a link builder.

    Args:
        route: Route name.
        parameters: Route parameters.
        anchor: URL anchor.
    """

    route: str = "fake_route"
    parameters: dict[str, Any] = field(default_factory=dict)
    anchor: str | None = "fake-anchor"
    title: str = "Fake title"
    description: str = "Fake description or content"
    pub_date: datetime = FAKE_PUB_DATE

    def feed_item_title(self) -> str:
        return self.title

    def feed_item_description(self) -> str:
        return self.description

    def feed_item_route_name(self) -> str:
        return self.route

    def feed_item_route_parameters(self) -> dict[str, Any]:
        return self.parameters

    def feed_item_url_anchor(self) -> str | None:
        return self.anchor

    def feed_item_pub_date(self) -> datetime:
        return self.pub_date

    def feed_item_custom(self) -> str:
        return "My custom field"


@dataclass
class FakeLinkBuilder:
    """Link builder returning a fixed URL and recording its calls."""

    url: str = "http://example.org/article/fake/url"
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def generate(self, name: str, parameters: Mapping[str, Any]) -> str:
        self.calls.append((name, dict(parameters)))
        return self.url


@dataclass
class FakeTranslator:
    """Translator returning ``value`` for every key, or the key when unset."""

    value: str | None = None
    keys: list[str] = field(default_factory=list)

    def translate(self, key: str) -> str:
        self.keys.append(key)
        return key if self.value is None else self.value
