"""Date representations used by feed formats.

Example:
    >>> from datetime import datetime, timezone
    >>> from feedforge.utils.dates import format_date
    >>> moment = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)
    >>> format_date(moment, "rss")
    'Mon, 15 Jan 2024 09:30:00 +0000'
    >>> format_date(moment, "atom")
    '2024-01-15T09:30:00+00:00'
    >>> format_date(moment, "%Y-%m-%d")
    '2024-01-15'
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from email.utils import format_datetime

RSS = "rss"
ATOM = "atom"


def ensure_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def format_date(value: date | datetime, date_format: str) -> str:
    """Format ``value`` as RFC 822 (``"rss"``), RFC 3339 (``"atom"``) or a strftime pattern."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    value = ensure_aware(value)
    if date_format == RSS:
        return format_datetime(value)
    if date_format == ATOM:
        return value.isoformat(timespec="seconds")
    return value.strftime(date_format)
