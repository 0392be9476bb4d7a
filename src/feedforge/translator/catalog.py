"""In-memory translators.

Example:
    >>> from feedforge.translator.catalog import CatalogTranslator, IdentityTranslator
    >>> IdentityTranslator().translate("Latest articles")
    'Latest articles'
    >>> translator = CatalogTranslator({"Latest articles": "Derniers articles"})
    >>> translator.translate("Latest articles")
    'Derniers articles'
    >>> translator.translate("Unknown")
    'Unknown'
"""

from __future__ import annotations

from collections.abc import Mapping


class IdentityTranslator:
    """Returns every key unchanged."""

    def translate(self, key: str) -> str:
        return key


class CatalogTranslator:
    """Looks keys up in a message catalog, falling back to the key itself.

    Args:
        messages: Mapping of source strings to translations.
        locale: Informational locale code of the catalog.
    """

    def __init__(self, messages: Mapping[str, str], locale: str | None = None) -> None:
        self._messages = dict(messages)
        self.locale = locale

    def translate(self, key: str) -> str:
        return self._messages.get(key, key)

    def add(self, key: str, translation: str) -> None:
        """Add or replace one message."""
        self._messages[key] = translation

    def __len__(self) -> int:
        return len(self._messages)
