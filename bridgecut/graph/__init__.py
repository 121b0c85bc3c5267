"""Graph primitives and helpers.

This package provides the index-addressed `UndirectedGraph`, the `NodeMap`
label interning table, and conversion helpers to NetworkX (`convert`).
"""

from bridgecut.graph.store import (
    Edge,
    NodeID,
    NodeMap,
    UndirectedGraph,
    build_graph,
    canonical_edge,
)

__all__ = [
    "Edge",
    "NodeID",
    "NodeMap",
    "UndirectedGraph",
    "build_graph",
    "canonical_edge",
]
