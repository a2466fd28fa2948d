"""Shared argument checks for the relationship linkers."""

from typing import Any

from kcgraph.utils.exceptions import InvalidArgumentError


def has_system(value: Any, *attributes: str) -> bool:
    """Check that value exposes non-empty system.<attribute> for every attribute."""
    if not isinstance(value, dict):
        return False
    system = value.get("system")
    if not isinstance(system, dict):
        return False
    return all(system.get(attribute) for attribute in attributes)


def require_node(node: Any, argument: str, *attributes: str) -> None:
    """
    Validate a single node argument.

    Raises:
        InvalidArgumentError: If the node lacks any system attribute
    """
    if not has_system(node, *attributes):
        raise InvalidArgumentError(
            f"{argument} is not a valid object.",
            context={"argument": argument, "required": [f"system.{a}" for a in attributes]},
        )


def require_nodes(nodes: Any, argument: str, *attributes: str) -> None:
    """
    Validate a node list argument.

    Raises:
        InvalidArgumentError: If nodes is not a list or any entry lacks the shape
    """
    if not isinstance(nodes, (list, tuple)) or not all(
        has_system(node, *attributes) for node in nodes
    ):
        raise InvalidArgumentError(
            f"{argument} is not an array of valid objects.",
            context={"argument": argument, "required": [f"system.{a}" for a in attributes]},
        )


def require_elements(node: dict[str, Any], argument: str) -> dict[str, Any]:
    """Return the node's elements map, failing if it is missing."""
    elements = node.get("elements")
    if not isinstance(elements, dict):
        raise InvalidArgumentError(
            f"{argument} has no elements map.",
            context={"argument": argument},
        )
    return elements
