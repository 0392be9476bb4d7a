"""Write rendered feeds to files.

Example:
    >>> from feedforge.core.dump import FeedDumper
    >>> from feedforge.core.manager import FeedManager
    >>> from feedforge.testing import FakeItem
    >>> manager = FeedManager(
    ...     {"article": {"title": "Articles", "description": "Latest", "link": "http://example.org"}}
    ... )
    >>> dumper = FeedDumper(manager)
    >>> # dumper.dump("article", [FakeItem()], "public/article.rss")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from itertools import islice
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from feedforge.core.document import FeedDocument
    from feedforge.core.manager import FeedManager

logger = logging.getLogger(__name__)


class FeedDumper:
    """Renders named feeds and writes them to disk.

    Args:
        manager: Feed manager providing the documents.
    """

    def __init__(self, manager: FeedManager) -> None:
        self.manager = manager

    def dump(
        self,
        name: str,
        items: Iterable[Any],
        path: str | Path,
        *,
        format: str = "rss",
        limit: int | None = None,
        customize: Callable[[FeedDocument], None] | None = None,
    ) -> Path:
        """Render feed ``name`` with ``items`` and write it to ``path``.

        Args:
            name: Configured feed name.
            items: Items to include, in order.
            path: Target file; parent directories are created.
            format: Format identifier.
            limit: Maximum number of items to include.
            customize: Called with the document before rendering, e.g. to add
                custom fields.

        Returns:
            The written path.
        """
        if limit is not None and limit < 0:
            raise ValueError("limit must be >= 0")

        document = self.manager.get(name)
        document.add_items(items if limit is None else islice(items, limit))
        if customize is not None:
            customize(document)

        output = document.render(format)

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(output, encoding=document.config.encoding)
        logger.info(
            f"Dumped feed {name} as {format} to {path} ({len(document.items)} items)"
        )
        return path
