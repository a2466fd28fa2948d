"""Service layer for kcgraph."""

from kcgraph.services.graph_assembler import GraphAssembler

__all__ = ["GraphAssembler"]
