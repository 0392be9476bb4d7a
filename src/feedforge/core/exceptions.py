"""Custom exceptions.

feedforge uses a hierarchy of exceptions to provide clear error handling.
Every error aborts the render in progress; no partial document is returned.

Example:
    >>> from feedforge.core.exceptions import FeedForgeError, UnknownFeedError
    >>> isinstance(UnknownFeedError("article"), FeedForgeError)
    True
    >>> try:
    ...     raise UnknownFeedError("article")
    ... except FeedForgeError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: UnknownFeedError
"""

from __future__ import annotations


class FeedForgeError(Exception):
    """Base exception for feedforge.

    Example:
        >>> from feedforge.core.exceptions import FeedForgeError
        >>> e = FeedForgeError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class ConfigurationError(FeedForgeError):
    """Configuration is invalid.

    Example:
        >>> from feedforge.core.exceptions import ConfigurationError
        >>> raise ConfigurationError("missing key")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ConfigurationError: missing key
    """


class InvalidConfigurationError(ConfigurationError):
    """A required channel parameter is missing or empty for a format.

    Example:
        >>> from feedforge.core.exceptions import InvalidConfigurationError
        >>> err = InvalidConfigurationError("author", "atom", label="Atom")
        >>> str(err)
        'Atom formatter requires an "author" parameter in configuration.'
        >>> err.key
        'author'
    """

    def __init__(
        self,
        key: str,
        format: str | None = None,
        *,
        label: str | None = None,
        message: str | None = None,
    ) -> None:
        if message is None:
            owner = f"{label or format} formatter" if format else "Feed"
            article = "an" if key[:1].lower() in "aeiou" else "a"
            message = f'{owner} requires {article} "{key}" parameter in configuration.'
        super().__init__(message)
        self.key = key
        self.format = format


class MissingAccessorError(FeedForgeError):
    """A field references an accessor the current item does not provide.

    Example:
        >>> from feedforge.core.exceptions import MissingAccessorError
        >>> err = MissingAccessorError("feed_item_custom", "Article")
        >>> err.accessor
        'feed_item_custom'
    """

    def __init__(self, accessor: str, item_type: str | None = None) -> None:
        if item_type is None:
            message = f'Accessor "{accessor}" cannot be resolved without an item.'
        else:
            message = f'Accessor "{accessor}" should be defined for item type {item_type}.'
        super().__init__(message)
        self.accessor = accessor
        self.item_type = item_type


class NotFoundError(FeedForgeError):
    """Requested resource not found.

    Example:
        >>> from feedforge.core.exceptions import NotFoundError
        >>> raise NotFoundError("feed abc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        NotFoundError: feed abc
    """


class UnknownFeedError(NotFoundError):
    """No feed is configured under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Feed "{name}" is not configured.')
        self.name = name


class UnknownFormatError(NotFoundError):
    """No formatter is registered for the requested format."""

    def __init__(self, format: str) -> None:
        super().__init__(f'Format "{format}" is not available.')
        self.format = format


class InvalidItemError(FeedForgeError):
    """An item implements neither FeedItem nor RoutedFeedItem."""


class InvalidFieldError(FeedForgeError):
    """A field definition cannot be built or rendered."""


class RenderError(FeedForgeError):
    """The XML serializer rejected a value or element name."""
