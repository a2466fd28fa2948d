"""
Node factory - turns content types and content items into graph nodes.

Every node carries the original payload, its relationship placeholders and
the bookkeeping fields the host runtime expects (id, parent, children,
usedByContentItems and the internal type/content/digest block).
"""

from collections.abc import Callable, Sequence
from typing import Any

from kcgraph.config import Config, default_config
from kcgraph.core.flattener import flatten_content_item
from kcgraph.core.relationships.base import require_nodes
from kcgraph.models.node import (
    CONTENT_ITEMS_FIELD,
    CONTENT_TYPE_FIELD,
    DEFAULT_TYPE_PREFIX,
    OTHER_LANGUAGES_FIELD,
    USED_BY_FIELD,
    GraphNode,
    NodeInternal,
    NodeKind,
)
from kcgraph.models.records import validate_content_item, validate_content_type
from kcgraph.utils.digest import DEFAULT_ALGORITHM, digest
from kcgraph.utils.exceptions import InvalidArgumentError
from kcgraph.utils.id_generator import make_node_id, pascal_case

CreateNodeId = Callable[[str], str]


def create_node(
    node_id: str,
    payload: dict[str, Any],
    kind: str,
    discriminant: str = "",
    extra_fields: dict[str, Any] | None = None,
    type_prefix: str = DEFAULT_TYPE_PREFIX,
    algorithm: str = DEFAULT_ALGORITHM,
) -> GraphNode:
    """
    Create a graph node from a payload.

    Payload fields come first, extra fields override them, and the fixed
    bookkeeping fields override both. The payload itself is not modified.

    Args:
        node_id: Node identifier
        payload: Content type record or flattened content item
        kind: Artifact kind ("type" or "item")
        discriminant: Codename of the content type the node belongs to
        extra_fields: Relationship placeholders
        type_prefix: Prefix of internal.type
        algorithm: Digest algorithm

    Returns:
        Graph node dict

    Raises:
        InvalidArgumentError: If node_id is empty
    """
    if not node_id:
        raise InvalidArgumentError("node_id is empty.", context={"argument": "node_id"})

    content, content_digest = digest(payload, algorithm)
    internal = NodeInternal(
        type=f"{type_prefix}{pascal_case(kind)}{pascal_case(discriminant)}",
        content=content,
        contentDigest=content_digest,
    )

    return {
        **payload,
        **(extra_fields or {}),
        "id": node_id,
        "parent": None,
        "children": [],
        USED_BY_FIELD: [],
        "internal": internal.model_dump(),
    }


def _resolve_id_function(create_node_id: CreateNodeId | None) -> CreateNodeId:
    if create_node_id is None:
        return lambda key: key
    if not callable(create_node_id):
        raise InvalidArgumentError(
            "create_node_id is not a function.",
            context={"argument": "create_node_id"},
        )
    return create_node_id


def create_content_type_node(
    content_type: dict[str, Any],
    create_node_id: CreateNodeId | None = None,
    config: Config | None = None,
) -> GraphNode:
    """
    Create a content type node.

    Args:
        content_type: Content type record
        create_node_id: Host ID function applied to the readable node key
        config: Node configuration (defaults to default_config)

    Returns:
        Content type node with an empty contentItems link list
    """
    id_function = _resolve_id_function(create_node_id)
    record = validate_content_type(content_type, "content_type")
    settings = (config or default_config).nodes

    codename = record["system"]["codename"]
    node_id = id_function(make_node_id(NodeKind.TYPE.value, codename, prefix=settings.id_prefix))

    return create_node(
        node_id,
        record,
        NodeKind.TYPE.value,
        codename,
        {CONTENT_ITEMS_FIELD: []},
        type_prefix=settings.type_prefix,
        algorithm=settings.digest_algorithm,
    )


def create_content_item_node(
    content_item: dict[str, Any],
    content_type_nodes: Sequence[GraphNode],
    create_node_id: CreateNodeId | None = None,
    config: Config | None = None,
) -> GraphNode:
    """
    Create a content item node.

    The item is flattened first, so embedded items appear as nested
    {"system", "elements"} structures and cycles are cut.

    Args:
        content_item: Content item record
        content_type_nodes: All content type nodes, used to link the parent type
        create_node_id: Host ID function applied to the readable node key
        config: Node configuration (defaults to default_config)

    Returns:
        Content item node with otherLanguages and contentType placeholders
    """
    id_function = _resolve_id_function(create_node_id)
    record = validate_content_item(content_item, "content_item")
    require_nodes(content_type_nodes, "content_type_nodes", "codename")
    settings = (config or default_config).nodes

    system = record["system"]
    node_id = id_function(
        make_node_id(
            NodeKind.ITEM.value,
            system["codename"],
            system["language"],
            prefix=settings.id_prefix,
        )
    )

    parent_type_node = next(
        (node for node in content_type_nodes if node["system"]["codename"] == system["type"]),
        None,
    )

    item_with_elements = flatten_content_item(record, separator=settings.cycle_path_separator)

    return create_node(
        node_id,
        item_with_elements,
        NodeKind.ITEM.value,
        system["type"],
        {
            OTHER_LANGUAGES_FIELD: [],
            CONTENT_TYPE_FIELD: parent_type_node["id"] if parent_type_node else None,
        },
        type_prefix=settings.type_prefix,
        algorithm=settings.digest_algorithm,
    )
