"""Relationship linkers."""

from .content_type import link_types_to_items
from .language import link_language_variant
from .linked_items import link_embedded_references
from .rich_text import link_rich_text_references

__all__ = [
    "link_types_to_items",
    "link_language_variant",
    "link_embedded_references",
    "link_rich_text_references",
]
