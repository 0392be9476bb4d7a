"""Link builder implementations."""

from feedforge.routing.template import TemplateLinkBuilder

__all__ = ["TemplateLinkBuilder"]
