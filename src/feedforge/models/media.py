"""Media descriptors rendered as enclosures.

Example:
    >>> from feedforge.models.media import MediaDescriptor, media_descriptors
    >>> media = MediaDescriptor(type="image/jpeg", length=500, value="http://example.org/a.jpg")
    >>> media.length
    500
    >>> [m.value for m in media_descriptors([{"type": "image/png", "value": "b.png"}])]
    ['b.png']
    >>> media_descriptors(None)
    []
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ConfigDict, Field

from feedforge.models.base import FeedForgeModel


class MediaDescriptor(FeedForgeModel):
    """One attached media file."""

    model_config = ConfigDict(frozen=True, validate_assignment=False)

    type: str = Field(..., min_length=1, description="MIME type")
    length: int | None = Field(default=None, ge=0, description="Size in bytes")
    value: str = Field(..., min_length=1, description="Media URL", alias="url")


def media_descriptors(value: Any) -> list[MediaDescriptor]:
    """Normalize what a media accessor returned into descriptors.

    Accepts None, a single descriptor or mapping, or a sequence of them.
    """
    if value is None:
        return []
    if isinstance(value, (MediaDescriptor, Mapping)):
        value = [value]
    result = []
    for entry in value:
        if isinstance(entry, MediaDescriptor):
            result.append(entry)
        else:
            result.append(MediaDescriptor.model_validate(entry))
    return result
