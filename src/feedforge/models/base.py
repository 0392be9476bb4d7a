"""Base model shared by the pydantic models of feedforge.

Example:
    >>> from feedforge.models.base import FeedForgeModel
    >>> class Sample(FeedForgeModel):
    ...     name: str
    >>> Sample(name="  padded  ").name
    'padded'
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FeedForgeModel(BaseModel):
    """Base model with standard configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )
