"""Translator implementations."""

from feedforge.translator.catalog import CatalogTranslator, IdentityTranslator

__all__ = ["CatalogTranslator", "IdentityTranslator"]
