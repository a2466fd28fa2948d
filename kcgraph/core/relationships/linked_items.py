"""
Embedded reference linker - rewrites modular content lists into node links.

For an element "related" holding [itemB, itemA] the linker writes
"relatedLinked": [id(B), id(A)] next to it and records the source item on
each target's usedByContentItems.
"""

from collections.abc import Sequence
from typing import Any

from kcgraph.core.relationships.base import (
    has_system,
    require_elements,
    require_node,
    require_nodes,
)
from kcgraph.models.node import (
    DEFAULT_LINKED_SUFFIX,
    LINK_FIELDS_FIELD,
    USED_BY_FIELD,
    GraphNode,
)


def _reference_key(value: dict[str, Any]) -> tuple[str, str]:
    return value["system"]["codename"], value["system"]["type"]


def add_used_by_link(target_node: GraphNode, source_id: str) -> None:
    """Record source_id on the target's reverse links once."""
    used_by = target_node.setdefault(USED_BY_FIELD, [])
    if source_id not in used_by:
        used_by.append(source_id)


def resolve_references(
    references: Sequence[Any], nodes: Sequence[GraphNode]
) -> list[GraphNode]:
    """
    Find the nodes matching a list of embedded items.

    Matching is by codename and type. Result order follows the reference
    list; a node matched by several references sits at its first occurrence.
    References without a node are dropped.
    """
    first_position: dict[tuple[str, str], int] = {}
    for position, reference in enumerate(references):
        if has_system(reference, "codename", "type"):
            first_position.setdefault(_reference_key(reference), position)

    matches = [
        (first_position[_reference_key(node)], index, node)
        for index, node in enumerate(nodes)
        if has_system(node, "codename", "type") and _reference_key(node) in first_position
    ]
    matches.sort(key=lambda match: (match[0], match[1]))
    return [node for _, _, node in matches]


def link_embedded_references(
    item_node: GraphNode,
    same_language_nodes: Sequence[GraphNode],
    suffix: str = DEFAULT_LINKED_SUFFIX,
) -> dict[str, list[str]]:
    """
    Replace embedded item lists by ordered node links.

    Every list-valued element gets a sibling "<element><suffix>" field, even
    when the list holds no item references. The names of the fields written
    are kept on the node under LINK_FIELDS_FIELD, so a later call skips
    them while a real element that happens to end in the suffix is still
    linked.

    Args:
        item_node: Content item node (its elements are mutated)
        same_language_nodes: Item nodes of the item's language (usedByContentItems mutated)
        suffix: Link field suffix

    Returns:
        Mapping of link field name to linked node IDs

    Raises:
        InvalidArgumentError: If an argument is malformed
    """
    require_node(item_node, "item_node", "codename")
    require_nodes(same_language_nodes, "same_language_nodes", "codename")
    elements = require_elements(item_node, "item_node")

    link_fields = set(item_node.get(LINK_FIELDS_FIELD) or ())

    written: dict[str, list[str]] = {}
    for name, value in list(elements.items()):
        if not isinstance(value, list) or name in link_fields:
            continue

        link_name = f"{name}{suffix}"
        linked_nodes = resolve_references(value, same_language_nodes)
        for linked_node in linked_nodes:
            add_used_by_link(linked_node, item_node["id"])

        elements[link_name] = [node["id"] for node in linked_nodes]
        written[link_name] = elements[link_name]

    item_node[LINK_FIELDS_FIELD] = sorted(link_fields | set(written))

    return written
