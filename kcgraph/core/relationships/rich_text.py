"""Rich text reference linker - links items mentioned inside rich text."""

from collections.abc import Sequence
from typing import Any

from kcgraph.core.relationships.base import require_elements, require_node, require_nodes
from kcgraph.models.node import DEFAULT_RICH_TEXT_LINKS_KEY, GraphNode
from kcgraph.models.records import ElementType


def resolve_codenames(codenames: Any, nodes: Sequence[GraphNode]) -> list[str]:
    """
    Resolve codenames to node IDs in codename order.

    Any node type matches. Unknown codenames are dropped and repeated
    codenames resolve once.
    """
    if not isinstance(codenames, list):
        return []

    by_codename: dict[str, str] = {}
    for node in nodes:
        by_codename.setdefault(node["system"]["codename"], node["id"])

    resolved: list[str] = []
    for codename in codenames:
        node_id = by_codename.get(codename)
        if node_id is not None and node_id not in resolved:
            resolved.append(node_id)
    return resolved


def link_rich_text_references(
    item_node: GraphNode,
    same_language_nodes: Sequence[GraphNode],
    key: str = DEFAULT_RICH_TEXT_LINKS_KEY,
) -> dict[str, list[str]]:
    """
    Add node links for items referenced from rich text elements.

    Each rich text element is replaced by a copy carrying the resolved IDs
    under `key`, so the exported record it came from is left alone.
    Targets' usedByContentItems are not updated for rich text references.

    Args:
        item_node: Content item node (its elements are mutated)
        same_language_nodes: Item nodes of the item's language
        key: Name of the link list inside the rich text element

    Returns:
        Mapping of element name to linked node IDs

    Raises:
        InvalidArgumentError: If an argument is malformed
    """
    require_node(item_node, "item_node", "codename")
    require_nodes(same_language_nodes, "same_language_nodes", "codename")
    elements = require_elements(item_node, "item_node")

    written: dict[str, list[str]] = {}
    for name, value in list(elements.items()):
        if not isinstance(value, dict) or value.get("type") != ElementType.RICH_TEXT.value:
            continue

        linked_ids = resolve_codenames(value.get("linkedItemCodenames"), same_language_nodes)
        elements[name] = {**value, key: linked_ids}
        written[name] = linked_ids

    return written
