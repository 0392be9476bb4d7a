"""Translator protocol.

Example:
    >>> from feedforge.protocols.translator import Translator
    >>> from feedforge.translator.catalog import IdentityTranslator
    >>> isinstance(IdentityTranslator(), Translator)
    True
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Translator(Protocol):
    """Translates display strings, using the source string as the key."""

    def translate(self, key: str) -> str:
        """Return the translation of ``key``."""
        ...
