"""Adapters exposing domain objects as feed items."""

from feedforge.adapter.item import ItemAdapter, RoutedItemAdapter

__all__ = ["ItemAdapter", "RoutedItemAdapter"]
