"""Type↔item linker - lists every item of a content type on the type node."""

from collections.abc import Sequence

from kcgraph.core.relationships.base import require_nodes
from kcgraph.models.node import CONTENT_ITEMS_FIELD, GraphNode
from kcgraph.utils.logger import get_logger

logger = get_logger(__name__)


def link_types_to_items(
    item_nodes: Sequence[GraphNode], type_nodes: Sequence[GraphNode]
) -> int:
    """
    Add links from content type nodes to the item nodes of that type.

    Item IDs are appended in item order; IDs already present are skipped,
    so repeated calls do not duplicate entries. Types without items are
    left untouched.

    Args:
        item_nodes: Content item nodes
        type_nodes: Content type nodes (mutated)

    Returns:
        Number of links added

    Raises:
        InvalidArgumentError: If either list is malformed
    """
    require_nodes(item_nodes, "item_nodes", "type")
    require_nodes(type_nodes, "type_nodes", "codename")

    added = 0
    for type_node in type_nodes:
        codename = type_node["system"]["codename"]
        item_ids = [node["id"] for node in item_nodes if node["system"]["type"] == codename]
        if not item_ids:
            continue

        links = type_node.setdefault(CONTENT_ITEMS_FIELD, [])
        for item_id in item_ids:
            if item_id not in links:
                links.append(item_id)
                added += 1

    logger.debug(f"Linked {added} items to {len(type_nodes)} content types")
    return added
