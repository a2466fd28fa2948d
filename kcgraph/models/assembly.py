"""
Graph assembly result model.

Returned by GraphAssembler.assemble() with the linked node sets and
counters describing what each linking step produced.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class AssemblyResult(BaseModel):
    """Result of one assembly pass."""

    type_nodes: list[dict[str, Any]] = Field(default_factory=list, description="Content type nodes")
    item_nodes: list[dict[str, Any]] = Field(default_factory=list, description="Content item nodes")
    languages: list[str] = Field(
        default_factory=list,
        description="Item languages in order of first appearance",
    )

    # Link counters
    type_link_count: int = Field(default=0, ge=0, description="Type → item links added")
    language_link_count: int = Field(default=0, ge=0, description="Language variant links")
    embedded_link_count: int = Field(default=0, ge=0, description="Embedded reference links")
    rich_text_link_count: int = Field(default=0, ge=0, description="Rich text reference links")

    # Diagnostics
    processing_time_ms: float = Field(default=0.0, ge=0, description="Processing time in ms")
    created_at: datetime = Field(default_factory=datetime.now)

    def nodes(self) -> list[dict[str, Any]]:
        """All nodes, types first."""
        return [*self.type_nodes, *self.item_nodes]

    def get_node(self, node_id: str) -> dict[str, Any] | None:
        """
        Look up a node by ID.

        Args:
            node_id: Node identifier

        Returns:
            Node or None if not found
        """
        return next((node for node in self.nodes() if node["id"] == node_id), None)

    def items_by_language(self, language: str) -> list[dict[str, Any]]:
        """Item nodes of one language, in assembly order."""
        return [node for node in self.item_nodes if node["system"]["language"] == language]
