"""Tests for feedforge.formatter.rss - RSS 2.0 rendering."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from lxml import etree

from feedforge.core.exceptions import InvalidConfigurationError, MissingAccessorError
from feedforge.core.manager import FeedManager
from feedforge.formatter.rss import RssFormatter
from feedforge.models.field import Dynamic, Field, GroupField, MediaField
from feedforge.testing import FakeItem, FakeLinkBuilder, FakeRoutedItem

NOW = datetime(2024, 2, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def manager() -> FeedManager:
    feeds = {
        "article": {
            "title": "My articles/posts",
            "description": "Latest articles",
            "link": "http://example.org",
            "encoding": "utf-8",
        }
    }
    formatter = RssFormatter(link_builder=FakeLinkBuilder(), clock=lambda: NOW)
    return FeedManager(feeds, {"rss": formatter})


def _parse(output: str) -> etree._Element:
    return etree.fromstring(output.encode("utf-8"))


class TestRssDocument:
    """Tests for the mandatory RSS structure."""

    def test_root_and_channel(self, manager: FeedManager) -> None:
        """Root is rss version 2.0 with a single channel."""
        output = manager.get("article").render("rss")

        root = _parse(output)
        assert root.tag == "rss"
        assert root.get("version") == "2.0"
        assert len(root.findall("channel")) == 1
        assert output.startswith("<?xml")

    def test_channel_elements(self, manager: FeedManager) -> None:
        """Channel title, description, link and lastBuildDate are rendered in order."""
        output = manager.get("article").render("rss")

        channel = _parse(output).find("channel")
        assert [child.tag for child in channel] == [
            "title",
            "description",
            "link",
            "lastBuildDate",
        ]
        assert channel.findtext("title") == "My articles/posts"
        assert channel.findtext("lastBuildDate") == "Thu, 01 Feb 2024 12:00:00 +0000"

    def test_language_when_set(self, manager: FeedManager) -> None:
        """Channel language is emitted only when configured."""
        feed = manager.get("article").set("language", "fr")

        channel = _parse(feed.render("rss")).find("channel")

        assert channel.findtext("language") == "fr"

    def test_item_elements(self, manager: FeedManager) -> None:
        """Each item carries title, CDATA description, link, guid and pubDate."""
        feed = manager.get("article")
        feed.add(FakeItem())

        output = feed.render("rss")

        assert "<title>Fake title</title>" in output
        assert "<description><![CDATA[Fake description or content]]></description>" in output
        assert "<link>http://example.org/a</link>" in output
        assert "<guid>http://example.org/a</guid>" in output
        assert "<pubDate>Mon, 15 Jan 2024 09:30:00 +0000</pubDate>" in output

    def test_items_in_order(self, manager: FeedManager) -> None:
        """One item element per item, after the channel elements."""
        feed = manager.get("article")
        feed.add_items(FakeItem(title=f"item {n}") for n in range(3))

        channel = _parse(feed.render("rss")).find("channel")

        items = channel.findall("item")
        assert [item.findtext("title") for item in items] == ["item 0", "item 1", "item 2"]
        assert channel[-1] is not None and channel[-1].tag == "item"

    def test_empty_document(self, manager: FeedManager) -> None:
        """A document without items renders the channel only."""
        channel = _parse(manager.get("article").render("rss")).find("channel")

        assert channel.findall("item") == []

    def test_routed_item_link(self, manager: FeedManager) -> None:
        """Routed items get the generated URL with anchor as link and guid."""
        feed = manager.get("article")
        feed.add(FakeRoutedItem())

        item = _parse(feed.render("rss")).find("channel/item")

        assert item.findtext("link") == "http://example.org/article/fake/url#fake-anchor"
        assert item.findtext("guid") == "http://example.org/article/fake/url#fake-anchor"

    def test_rerender_is_identical(self, manager: FeedManager) -> None:
        """Rendering twice without mutation yields the same document."""
        feed = manager.get("article")
        feed.add(FakeItem())

        assert feed.render("rss") == feed.render("rss")

    def test_channel_whitespace_rendered(self, manager: FeedManager) -> None:
        """Configured channel text is not trimmed."""
        feed = manager.get("article").set("title", " Padded title ")

        channel = _parse(feed.render("rss")).find("channel")

        assert channel.findtext("title") == " Padded title "

    def test_missing_link_raises(self, manager: FeedManager) -> None:
        """RSS requires a link."""
        feed = manager.get("article").set("link", "")

        with pytest.raises(InvalidConfigurationError, match='RSS formatter requires a "link"'):
            feed.render("rss")


class TestRssCustomFields:
    """Tests for custom fields on RSS."""

    def test_media_enclosure(self, manager: FeedManager) -> None:
        """Media renders as enclosure with url, type and length."""
        feed = manager.get("article")
        feed.add(
            FakeItem(media={"type": "image/jpeg", "length": 500, "value": "http://example.org/i.jpg"})
        )
        feed.add_item_field(MediaField(Dynamic("feed_media_item")))

        output = feed.render("rss")

        assert '<enclosure url="http://example.org/i.jpg" type="image/jpeg" length="500"/>' in output

    def test_media_without_length(self, manager: FeedManager) -> None:
        """A descriptor without length omits the attribute."""
        feed = manager.get("article")
        feed.add(FakeItem(media={"type": "image/png", "url": "http://example.org/i.png"}))
        feed.add_item_field(MediaField(Dynamic("feed_media_item")))

        output = feed.render("rss")

        assert '<enclosure url="http://example.org/i.png" type="image/png"/>' in output

    def test_group_per_item(self, manager: FeedManager) -> None:
        """A group renders once per item, with one child per list value."""
        feed = manager.get("article")
        feed.add_items([FakeItem(), FakeItem()])
        feed.add_item_field(
            GroupField("categories", Field("category", Dynamic("feed_categories_custom")))
        )

        items = _parse(feed.render("rss")).findall("channel/item")

        assert len(items) == 2
        for item in items:
            groups = item.findall("categories")
            assert len(groups) == 1
            assert [c.text for c in groups[0]] == ["category 1", "category 2", "category 3"]

    def test_custom_channel_field_after_mandatory(self, manager: FeedManager) -> None:
        """Custom channel fields follow the mandatory elements and precede items."""
        feed = manager.get("article")
        feed.add(FakeItem())
        feed.add_channel_field(Field("copyright", "2024 Example"))

        channel = _parse(feed.render("rss")).find("channel")

        tags = [child.tag for child in channel]
        assert tags.index("copyright") == tags.index("lastBuildDate") + 1
        assert tags.index("copyright") < tags.index("item")

    def test_channel_dynamic_raises(self, manager: FeedManager) -> None:
        """Channel fields have no item to resolve accessors against."""
        feed = manager.get("article")
        feed.add_channel_field(Field("custom", Dynamic("feed_item_custom")))

        with pytest.raises(MissingAccessorError, match="without an item"):
            feed.render("rss")
