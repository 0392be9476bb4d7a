"""Models of feedforge: channel config, field tree and media."""

from feedforge.models.base import FeedForgeModel
from feedforge.models.config import FeedConfig
from feedforge.models.field import (
    MAX_GROUP_DEPTH,
    Dynamic,
    Field,
    FieldNode,
    FieldOptions,
    GroupField,
    MediaField,
    Slot,
    Static,
    as_slot,
)
from feedforge.models.media import MediaDescriptor, media_descriptors

__all__ = [
    # Base
    "FeedForgeModel",
    # Config
    "FeedConfig",
    # Slots
    "Static",
    "Dynamic",
    "Slot",
    "as_slot",
    # Fields
    "Field",
    "FieldOptions",
    "GroupField",
    "MediaField",
    "FieldNode",
    "MAX_GROUP_DEPTH",
    # Media
    "MediaDescriptor",
    "media_descriptors",
]
