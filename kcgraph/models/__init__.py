"""
Data models for kcgraph.

- ContentTypeRecord, ContentItemRecord: validated input records
- GraphNode, NodeInternal, NodeKind: output node shape
- Relationship field names shared by the factory and the linkers
- AssemblyResult: linked node sets of one assembly pass
"""

from kcgraph.models.assembly import AssemblyResult
from kcgraph.models.node import (
    CONTENT_ITEMS_FIELD,
    CONTENT_TYPE_FIELD,
    CYCLE_DETECTED_FIELD,
    DEFAULT_LINKED_SUFFIX,
    DEFAULT_RICH_TEXT_LINKS_KEY,
    DEFAULT_TYPE_PREFIX,
    LINK_FIELDS_FIELD,
    OTHER_LANGUAGES_FIELD,
    USED_BY_FIELD,
    GraphNode,
    NodeInternal,
    NodeKind,
)
from kcgraph.models.records import (
    ContentItemRecord,
    ContentTypeRecord,
    ElementType,
    ItemSystemAttributes,
    TypeSystemAttributes,
    validate_content_item,
    validate_content_type,
)

__all__ = [
    # Assembly
    "AssemblyResult",
    # Input records
    "ContentTypeRecord",
    "ContentItemRecord",
    "TypeSystemAttributes",
    "ItemSystemAttributes",
    "ElementType",
    "validate_content_type",
    "validate_content_item",
    # Nodes
    "GraphNode",
    "NodeInternal",
    "NodeKind",
    "CONTENT_ITEMS_FIELD",
    "CONTENT_TYPE_FIELD",
    "OTHER_LANGUAGES_FIELD",
    "USED_BY_FIELD",
    "CYCLE_DETECTED_FIELD",
    "LINK_FIELDS_FIELD",
    "DEFAULT_LINKED_SUFFIX",
    "DEFAULT_RICH_TEXT_LINKS_KEY",
    "DEFAULT_TYPE_PREFIX",
]
