"""
Graph Assembler - builds and cross-links the full node set of one snapshot.

Steps of a pass:
1. Build content type nodes
2. Build content item nodes (flattened, parent type resolved)
3. Link types to their items
4. Link language variants, for every ordered pair of languages
5. Link embedded and rich text references within each language

Nodes must all exist before any link can point at them, so linking never
starts before both node sets are complete.
"""

import threading
import time
from collections.abc import Sequence
from typing import Any

from kcgraph.config import Config, default_config
from kcgraph.core.node_factory import (
    CreateNodeId,
    create_content_item_node,
    create_content_type_node,
)
from kcgraph.core.relationships import (
    link_embedded_references,
    link_language_variant,
    link_rich_text_references,
    link_types_to_items,
)
from kcgraph.models.assembly import AssemblyResult
from kcgraph.models.node import GraphNode
from kcgraph.utils.exceptions import InvalidArgumentError
from kcgraph.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


class GraphAssembler:
    """
    Orchestrates node construction and linking over a content snapshot.

    Linkers mutate nodes in place and reverse used-by links can be appended
    from many source items, so passes on one assembler are serialized by a
    single-writer lock.
    """

    def __init__(self, config: Config | None = None, create_node_id: CreateNodeId | None = None):
        """
        Initialize graph assembler.

        Args:
            config: Configuration object (defaults to default_config); its
                logging section is applied to the kcgraph log sinks
            create_node_id: Host ID function applied to readable node keys
        """
        if create_node_id is not None and not callable(create_node_id):
            raise InvalidArgumentError(
                "create_node_id is not a function.",
                context={"argument": "create_node_id"},
            )
        self.config = config or default_config
        configure_logging(self.config.logging)
        self.create_node_id = create_node_id
        self._lock = threading.Lock()

    def build_type_nodes(self, content_types: Sequence[dict[str, Any]]) -> list[GraphNode]:
        """Create one node per content type."""
        return [
            create_content_type_node(content_type, self.create_node_id, self.config)
            for content_type in content_types
        ]

    def build_item_nodes(
        self, content_items: Sequence[dict[str, Any]], type_nodes: Sequence[GraphNode]
    ) -> list[GraphNode]:
        """Create one node per content item, linked to its parent type node."""
        return [
            create_content_item_node(content_item, type_nodes, self.create_node_id, self.config)
            for content_item in content_items
        ]

    def assemble(
        self,
        content_types: Sequence[dict[str, Any]],
        content_items: Sequence[dict[str, Any]],
    ) -> AssemblyResult:
        """
        Run a full assembly pass.

        Args:
            content_types: Content type records
            content_items: Content item records, all languages

        Returns:
            AssemblyResult with linked type and item nodes

        Raises:
            InvalidArgumentError: If any record or argument is malformed
        """
        if not isinstance(content_types, (list, tuple)):
            raise InvalidArgumentError(
                "content_types is not an array.", context={"argument": "content_types"}
            )
        if not isinstance(content_items, (list, tuple)):
            raise InvalidArgumentError(
                "content_items is not an array.", context={"argument": "content_items"}
            )

        with self._lock:
            start = time.perf_counter()
            node_settings = self.config.nodes

            type_nodes = self.build_type_nodes(content_types)
            item_nodes = self.build_item_nodes(content_items, type_nodes)
            logger.debug(f"Built {len(type_nodes)} type nodes and {len(item_nodes)} item nodes")

            type_links = link_types_to_items(item_nodes, type_nodes)

            by_language: dict[str, list[GraphNode]] = {}
            for node in item_nodes:
                by_language.setdefault(node["system"]["language"], []).append(node)

            language_links = 0
            for language, nodes in by_language.items():
                for other_language, other_nodes in by_language.items():
                    if other_language == language:
                        continue
                    for node in nodes:
                        if link_language_variant(node, other_nodes) is not None:
                            language_links += 1

            embedded_links = 0
            rich_text_links = 0
            for node in item_nodes:
                same_language = by_language[node["system"]["language"]]
                embedded = link_embedded_references(
                    node, same_language, suffix=node_settings.linked_suffix
                )
                rich_text = link_rich_text_references(
                    node, same_language, key=node_settings.rich_text_links_key
                )
                embedded_links += sum(len(ids) for ids in embedded.values())
                rich_text_links += sum(len(ids) for ids in rich_text.values())

            elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            f"Assembled {len(type_nodes)} types and {len(item_nodes)} items "
            f"in {len(by_language)} languages ({elapsed_ms:.0f}ms)"
        )

        return AssemblyResult(
            type_nodes=type_nodes,
            item_nodes=item_nodes,
            languages=list(by_language),
            type_link_count=type_links,
            language_link_count=language_links,
            embedded_link_count=embedded_links,
            rich_text_link_count=rich_text_links,
            processing_time_ms=elapsed_ms,
        )
