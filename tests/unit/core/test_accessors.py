"""Tests for feedforge.core.accessors - the accessor registry."""

from __future__ import annotations

from dataclasses import dataclass

from feedforge.core.accessors import AccessorRegistry


@dataclass
class Article:
    title: str
    tags: list[str]


@dataclass
class Review(Article):
    score: int = 0


class TestAccessorRegistry:
    """Tests for AccessorRegistry."""

    def test_register_and_get(self) -> None:
        """Registered extractors are returned for instances of the type."""
        registry = AccessorRegistry()
        registry.register(Article, "categories", lambda article: article.tags)

        extractor = registry.get(Article("a", ["x"]), "categories")

        assert extractor is not None
        assert extractor(Article("a", ["x", "y"])) == ["x", "y"]

    def test_missing_returns_none(self) -> None:
        """Unknown names and unrelated types yield None."""
        registry = AccessorRegistry()
        registry.register(Article, "categories", lambda article: article.tags)

        assert registry.get(Article("a", []), "other") is None
        assert registry.get("not an article", "categories") is None

    def test_subclass_inherits(self) -> None:
        """Lookups follow the MRO."""
        registry = AccessorRegistry()
        registry.register(Article, "categories", lambda article: article.tags)

        assert registry.get(Review("a", ["x"]), "categories") is not None
        assert registry.names(Review) == ["categories"]

    def test_subclass_overrides(self) -> None:
        """A registration on the subclass takes precedence."""
        registry = AccessorRegistry()
        registry.register(Article, "label", lambda article: "article")
        registry.register(Review, "label", lambda review: "review")

        item = Review("a", [])
        assert registry.get(item, "label")(item) == "review"
        assert registry.get(Article("a", []), "label")(item) == "article"

    def test_decorator(self) -> None:
        """The decorator registers under the function name by default."""
        registry = AccessorRegistry()

        @registry.accessor(Article)
        def tag_count(article: Article) -> int:
            return len(article.tags)

        @registry.accessor(Article, "first_tag")
        def _first(article: Article) -> str:
            return article.tags[0]

        assert registry.has(Article, "tag_count")
        assert registry.has(Article, "first_tag")
        assert tag_count(Article("a", ["x"])) == 1

    def test_unregister(self) -> None:
        """Unregistering removes the accessor and reports whether it existed."""
        registry = AccessorRegistry()
        registry.register(Article, "categories", lambda article: article.tags)

        assert registry.unregister(Article, "categories") is True
        assert registry.unregister(Article, "categories") is False
        assert len(registry) == 0

    def test_len_and_clear(self) -> None:
        """Length counts accessors across types."""
        registry = AccessorRegistry()
        registry.register(Article, "a", lambda item: 1)
        registry.register(Article, "b", lambda item: 2)
        registry.register(Review, "c", lambda item: 3)

        assert len(registry) == 3
        registry.clear()
        assert len(registry) == 0
