"""Language variant linker - connects an item to its translations."""

from collections.abc import Sequence

from kcgraph.core.relationships.base import require_node, require_nodes
from kcgraph.models.node import OTHER_LANGUAGES_FIELD, GraphNode


def link_language_variant(
    item_node: GraphNode, other_language_nodes: Sequence[GraphNode]
) -> str | None:
    """
    Link an item node to its variant in another language.

    The variant is the first node sharing codename and type but with a
    different language. Only item_node is changed; call again with the
    roles swapped to link the other direction.

    Args:
        item_node: Content item node (mutated)
        other_language_nodes: All item nodes of one other language

    Returns:
        ID of the variant node, or None if there is none

    Raises:
        InvalidArgumentError: If an argument is malformed
    """
    require_node(item_node, "item_node", "codename")
    require_nodes(other_language_nodes, "other_language_nodes", "codename")

    system = item_node["system"]
    variant = next(
        (
            node
            for node in other_language_nodes
            if node["system"]["codename"] == system["codename"]
            and node["system"].get("type") == system.get("type")
            and node["system"].get("language") != system.get("language")
        ),
        None,
    )
    if variant is None or not variant.get("id"):
        return None

    links = item_node.setdefault(OTHER_LANGUAGES_FIELD, [])
    if variant["id"] not in links:
        links.append(variant["id"])
    return variant["id"]
