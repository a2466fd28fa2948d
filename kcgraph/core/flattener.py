"""
Content flattener - rebuilds a content item's elements for node construction.

Embedded (modular content) items are flattened to any depth. Cycles between
items are expected in real content models: when an item shows up again on
its own ancestor path, descent stops there and a placeholder is returned.
"""

from collections.abc import Sequence
from typing import Any

from kcgraph.models.node import CYCLE_DETECTED_FIELD
from kcgraph.models.records import ElementType
from kcgraph.utils.exceptions import InvalidArgumentError
from kcgraph.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PATH_SEPARATOR = " -> "


def _codename_of(item: Any) -> str | None:
    system = item.get("system") if isinstance(item, dict) else None
    if isinstance(system, dict) and system.get("codename"):
        return system["codename"]
    return None


def _is_rich_text(value: Any) -> bool:
    return isinstance(value, dict) and value.get("type") == ElementType.RICH_TEXT.value


def _is_embedded_list(descriptors: dict[str, Any], key: str) -> bool:
    descriptor = descriptors.get(key)
    return (
        isinstance(descriptor, dict)
        and descriptor.get("type") == ElementType.MODULAR_CONTENT.value
    )


def flatten_content_item(
    item: dict[str, Any],
    visited_codenames: Sequence[str] | None = None,
    separator: str = DEFAULT_PATH_SEPARATOR,
) -> dict[str, Any]:
    """
    Flatten a content item into {"system": ..., "elements": ...}.

    Every top-level key except "system" and "elements" becomes an element:
    - rich text objects are copied through (their links are resolved later)
    - non-empty modular content lists are flattened item by item, in order
    - everything else is copied through unchanged

    Nesting depth is unbounded: embedded items are processed from an
    explicit work stack, each entry carrying its own ancestor path.

    Args:
        item: Content item record
        visited_codenames: Codenames on the current ancestor path
        separator: Separator used when logging a cycle path

    Returns:
        Flattened item, or a cycle placeholder
        {"system": ..., "elements": None, "cycleDetected": True}

    Raises:
        InvalidArgumentError: If an item has no system.codename
    """
    root: list[Any] = [None]
    # (item, ancestor path, target list, index in target list)
    stack: list[tuple[Any, list[str], list[Any], int]] = [
        (item, list(visited_codenames or []), root, 0)
    ]

    while stack:
        current, ancestors, target, index = stack.pop()

        codename = _codename_of(current)
        if codename is None:
            raise InvalidArgumentError(
                "item is not a valid content item object.",
                context={"argument": "item", "path": ancestors},
            )

        # A fresh list per entry; siblings never see each other's descendants.
        path = [*ancestors, codename]

        if codename in ancestors:
            logger.warning(f"Cycle detected in linked items' path: {separator.join(path)}")
            target[index] = {
                "system": current["system"],
                "elements": None,
                CYCLE_DETECTED_FIELD: True,
            }
            continue

        descriptors = current.get("elements")
        if not isinstance(descriptors, dict):
            descriptors = {}

        elements: dict[str, Any] = {}
        children: list[tuple[Any, list[str], list[Any], int]] = []
        for key, value in current.items():
            if key in ("system", "elements"):
                continue

            if _is_rich_text(value):
                elements[key] = value
            elif _is_embedded_list(descriptors, key) and isinstance(value, list) and value:
                flattened: list[Any] = [None] * len(value)
                elements[key] = flattened
                children.extend(
                    (linked_item, path, flattened, position)
                    for position, linked_item in enumerate(value)
                )
            else:
                elements[key] = value

        target[index] = {"system": current["system"], "elements": elements}
        # Reversed so that items are visited depth first in document order.
        stack.extend(reversed(children))

    return root[0]
