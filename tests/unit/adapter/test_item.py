"""Tests for feedforge.adapter.item - item adapters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime

import pytest

from feedforge.adapter.item import ItemAdapter, RoutedItemAdapter
from feedforge.core.exceptions import InvalidItemError
from feedforge.core.manager import FeedManager
from feedforge.formatter.rss import RssFormatter
from feedforge.models.field import Dynamic, Field, GroupField
from feedforge.protocols.item import AccessorLookup, FeedItem, RoutedFeedItem
from feedforge.routing.template import TemplateLinkBuilder


@dataclass
class Post:
    headline: str
    body: str
    slug: str
    published: datetime

    def url(self) -> str:
        return f"http://example.org/posts/{self.slug}"


POST = Post("Hello", "World", "hello", datetime(2024, 1, 15, 9, 30, tzinfo=UTC))


class TestItemAdapter:
    """Tests for ItemAdapter."""

    def test_mapping_source(self) -> None:
        """Default keys are read from a mapping."""
        item = ItemAdapter(
            {
                "title": "Hello",
                "description": "World",
                "link": "http://example.org/1",
                "pub_date": "2024-01-15T09:30:00+00:00",
            }
        )

        assert isinstance(item, FeedItem)
        assert not isinstance(item, RoutedFeedItem)
        assert item.feed_item_title() == "Hello"
        assert item.feed_item_link() == "http://example.org/1"
        assert item.feed_item_pub_date() == datetime(2024, 1, 15, 9, 30, tzinfo=UTC)

    def test_object_source(self) -> None:
        """Attributes are read and callables invoked."""
        item = ItemAdapter(
            POST, title="headline", description="body", link="url", pub_date="published"
        )

        assert item.feed_item_title() == "Hello"
        assert item.feed_item_description() == "World"
        assert item.feed_item_link() == "http://example.org/posts/hello"
        assert item.feed_item_pub_date() is POST.published

    def test_missing_values(self) -> None:
        """Missing text values read as empty strings."""
        item = ItemAdapter({})

        assert item.feed_item_title() == ""
        assert item.feed_item_pub_date() is None

    def test_plain_date(self) -> None:
        """Dates are widened to datetimes."""
        item = ItemAdapter({"pub_date": date(2024, 1, 15)})

        assert item.feed_item_pub_date() == datetime(2024, 1, 15)

    def test_invalid_date_string(self) -> None:
        with pytest.raises(InvalidItemError, match="Invalid publication date"):
            ItemAdapter({"pub_date": "yesterday"}).feed_item_pub_date()

    def test_extra_accessors(self) -> None:
        """Extra accessors are served through lookup_accessor."""
        item = ItemAdapter({"tags": ["a", "b"]}, extra={"categories": "tags"})

        assert isinstance(item, AccessorLookup)
        assert item.lookup_accessor("categories")() == ["a", "b"]
        assert item.lookup_accessor("unknown") is None

    def test_renders_extra_fields(self) -> None:
        """Extras feed custom fields during a render."""
        manager = FeedManager(
            {"posts": {"title": "Posts", "description": "All", "link": "http://example.org"}},
            [RssFormatter()],
        )
        feed = manager.get("posts")
        feed.add(
            ItemAdapter(
                {
                    "title": "Hello",
                    "description": "World",
                    "link": "http://example.org/1",
                    "pub_date": "2024-01-15T09:30:00+00:00",
                    "tags": ["a", "b"],
                },
                extra={"categories": "tags"},
            )
        )
        feed.add_item_field(GroupField("categories", Field("category", Dynamic("categories"))))

        output = feed.render("rss")

        assert "<category>a</category>" in output
        assert "<category>b</category>" in output


class TestRoutedItemAdapter:
    """Tests for RoutedItemAdapter."""

    def test_route(self) -> None:
        """Route parameters are read from the source."""
        item = RoutedItemAdapter(
            POST,
            route="post_show",
            parameters={"slug": "slug"},
            anchor="slug",
            title="headline",
            description="body",
            pub_date="published",
        )

        assert isinstance(item, RoutedFeedItem)
        assert item.feed_item_route_name() == "post_show"
        assert item.feed_item_route_parameters() == {"slug": "hello"}
        assert item.feed_item_url_anchor() == "hello"

    def test_no_anchor(self) -> None:
        item = RoutedItemAdapter({"id": 3}, route="show", parameters={"id": "id"})

        assert item.feed_item_url_anchor() is None

    def test_renders_routed_link(self) -> None:
        """The link builder turns the route into the item link."""
        builder = TemplateLinkBuilder({"post_show": "/posts/{slug}"}, base_url="http://example.org")
        manager = FeedManager(
            {"posts": {"title": "Posts", "description": "All", "link": "http://example.org"}},
            [RssFormatter(link_builder=builder)],
        )
        feed = manager.get("posts")
        feed.add(
            RoutedItemAdapter(
                POST,
                route="post_show",
                parameters={"slug": "slug"},
                title="headline",
                description="body",
                pub_date="published",
            )
        )

        output = feed.render("rss")

        assert "<link>http://example.org/posts/hello</link>" in output
