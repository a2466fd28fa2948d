"""Node construction and cross-linking."""

from kcgraph.core.flattener import flatten_content_item
from kcgraph.core.node_factory import (
    create_content_item_node,
    create_content_type_node,
    create_node,
)
from kcgraph.core.relationships import (
    link_embedded_references,
    link_language_variant,
    link_rich_text_references,
    link_types_to_items,
)

__all__ = [
    "flatten_content_item",
    "create_node",
    "create_content_type_node",
    "create_content_item_node",
    "link_types_to_items",
    "link_language_variant",
    "link_embedded_references",
    "link_rich_text_references",
]
