"""Tests for feedforge.routing.template."""

from __future__ import annotations

import pytest

from feedforge.core.exceptions import ConfigurationError
from feedforge.protocols.link import LinkBuilder
from feedforge.routing.template import TemplateLinkBuilder


class TestTemplateLinkBuilder:
    """Tests for TemplateLinkBuilder."""

    def test_relative_template(self) -> None:
        """Relative templates are joined with the base URL."""
        builder = TemplateLinkBuilder({"show": "/article/{id}"}, base_url="http://example.org/")

        assert isinstance(builder, LinkBuilder)
        assert builder.generate("show", {"id": 42}) == "http://example.org/article/42"

    def test_absolute_template(self) -> None:
        """Absolute templates ignore the base URL."""
        builder = TemplateLinkBuilder(
            {"show": "https://cdn.example.org/{id}"}, base_url="http://example.org"
        )

        assert builder.generate("show", {"id": 1}) == "https://cdn.example.org/1"

    def test_without_base_url(self) -> None:
        builder = TemplateLinkBuilder({"show": "/article/{id}"})

        assert builder.generate("show", {"id": 1}) == "/article/1"

    def test_add_route(self) -> None:
        builder = TemplateLinkBuilder({})
        builder.add_route("home", "http://example.org/")

        assert builder.generate("home", {}) == "http://example.org/"

    def test_unknown_route(self) -> None:
        with pytest.raises(ConfigurationError, match='"missing"'):
            TemplateLinkBuilder({}).generate("missing", {})

    def test_missing_parameter(self) -> None:
        """Every placeholder needs a parameter."""
        builder = TemplateLinkBuilder({"show": "/article/{id}"})

        with pytest.raises(ConfigurationError, match="id"):
            builder.generate("show", {})
