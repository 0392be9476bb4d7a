"""Link builder protocol.

Example:
    >>> from feedforge.protocols.link import LinkBuilder
    >>> hasattr(LinkBuilder, "generate")
    True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LinkBuilder(Protocol):
    """Generates absolute URLs for routed items."""

    def generate(self, name: str, parameters: Mapping[str, Any]) -> str:
        """Return the absolute URL of route ``name``."""
        ...
