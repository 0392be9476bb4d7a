"""Utility modules."""

from feedforge.utils.dates import ensure_aware, format_date

__all__ = ["ensure_aware", "format_date"]
