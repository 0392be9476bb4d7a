"""Core document model, resolution and errors."""

from feedforge.core.exceptions import (
    ConfigurationError,
    FeedForgeError,
    InvalidConfigurationError,
    InvalidFieldError,
    InvalidItemError,
    MissingAccessorError,
    NotFoundError,
    RenderError,
    UnknownFeedError,
    UnknownFormatError,
)

__all__ = [
    "FeedForgeError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingAccessorError",
    "NotFoundError",
    "UnknownFeedError",
    "UnknownFormatError",
    "InvalidItemError",
    "InvalidFieldError",
    "RenderError",
]
