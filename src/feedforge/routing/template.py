"""Template-based link builder.

Example:
    >>> from feedforge.routing.template import TemplateLinkBuilder
    >>> builder = TemplateLinkBuilder(
    ...     {"article_show": "/article/{slug}"},
    ...     base_url="http://example.org",
    ... )
    >>> builder.generate("article_show", {"slug": "hello-world"})
    'http://example.org/article/hello-world'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from feedforge.core.exceptions import ConfigurationError


class TemplateLinkBuilder:
    """Expands ``str.format`` URL templates registered per route name.

    Args:
        routes: Mapping of route names to URL templates.
        base_url: Prefix for templates that are not absolute URLs.
    """

    def __init__(self, routes: Mapping[str, str], base_url: str = "") -> None:
        self._routes = dict(routes)
        self.base_url = base_url.rstrip("/")

    def add_route(self, name: str, template: str) -> None:
        """Register or replace a route template."""
        self._routes[name] = template

    def generate(self, name: str, parameters: Mapping[str, Any]) -> str:
        template = self._routes.get(name)
        if template is None:
            raise ConfigurationError(f'Route "{name}" is not defined.')
        try:
            path = template.format(**parameters)
        except KeyError as e:
            raise ConfigurationError(f'Route "{name}" requires parameter {e}.') from e
        if "://" in path or not self.base_url:
            return path
        return f"{self.base_url}/{path.lstrip('/')}"
