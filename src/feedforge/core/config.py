"""feedforge configuration.

Application settings loaded from environment variables with FEEDFORGE_ prefix,
plus loading of per-feed channel configuration from a JSON feeds file::

    {
        "feeds": {
            "article": {
                "title": "My articles/posts",
                "description": "Latest articles",
                "link": "http://example.org",
                "encoding": "utf-8",
                "author": "Jane Doe"
            }
        }
    }

Example:
    >>> from feedforge.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.default_format
    'rss'
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from feedforge.core.exceptions import ConfigurationError
from feedforge.models.config import FeedConfig


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with FEEDFORGE_ prefix.

    Example:
        >>> from feedforge.core.config import Settings
        >>> s = Settings(feeds_file="feeds.json")
        >>> s.feeds_file
        PosixPath('feeds.json')
        >>> s.pretty_print
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="FEEDFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Feeds
    feeds_file: Path | None = Field(default=None, description="JSON file with feed configurations")
    default_format: str = Field(default="rss", description="Format used when none is given")

    # Output
    pretty_print: bool = Field(default=True, description="Indent rendered XML")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["console", "plain"] = Field(
        default="console", description="Log format: console (rich) or plain"
    )


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from feedforge.core.config import get_settings
        >>> s = get_settings(default_format="atom")
        >>> s.default_format
        'atom'
    """
    return Settings(**overrides)


def parse_feed_configs(data: Any) -> dict[str, FeedConfig]:
    """Build feed configurations from a decoded feeds document.

    Accepts ``{"feeds": {name: {...}}}`` or the bare ``{name: {...}}`` mapping.

    Raises:
        ConfigurationError: If the document is malformed.
    """
    if isinstance(data, dict) and "feeds" in data:
        data = data["feeds"]
    if not isinstance(data, dict):
        raise ConfigurationError("Feeds configuration must be a mapping of feed names")

    feeds = {}
    for name, values in data.items():
        try:
            feeds[name] = FeedConfig.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(f'Invalid configuration for feed "{name}": {e}') from e
    return feeds


def load_feed_configs(path: str | Path) -> dict[str, FeedConfig]:
    """Load feed configurations from a JSON feeds file.

    Raises:
        ConfigurationError: If the file is missing, not JSON, or malformed.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Feeds file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in feeds file {path}: {e}") from e
    return parse_feed_configs(data)
