"""bridgecut: split a graph in two along its highest-betweenness edges.

Computes exact edge-betweenness centrality (Brandes) for undirected,
unweighted graphs and removes the top-scoring bridge edges to separate the
graph into two connected components.

Primary API:
    build_graph() - Build an UndirectedGraph and NodeMap from adjacency records
    edge_betweenness() - Score every edge by the shortest paths it carries
    partition() - Remove the top-K edges and report the two components
    solve() - Records in, PartitionResult out

Example:
    from bridgecut import build_graph, partition

    graph, node_map = build_graph([("a", ["b", "c"]), ("b", ["c"]), ("c", ["d"]),
                                   ("d", ["e", "f"]), ("e", ["f"])])
    result = partition(graph, cut_size=1)
    result.product  # 9
"""

from __future__ import annotations

from bridgecut import cli, logging
from bridgecut._version import __version__
from bridgecut.algorithms.betweenness import EdgeScores, edge_betweenness
from bridgecut.algorithms.bfs import ShortestPathTree, shortest_path_tree
from bridgecut.algorithms.components import connected_components
from bridgecut.algorithms.dependency import accumulate_dependencies
from bridgecut.algorithms.modularity import modularity
from bridgecut.config import PartitionConfig
from bridgecut.graph.convert import from_networkx, to_networkx
from bridgecut.graph.store import NodeMap, UndirectedGraph, build_graph
from bridgecut.io import load_graph, load_records, parse_records
from bridgecut.partition import PartitionResult, partition, rank_edges, solve

__all__ = [
    # Version
    "__version__",
    # Graph
    "NodeMap",
    "UndirectedGraph",
    "build_graph",
    # Input
    "load_graph",
    "load_records",
    "parse_records",
    # Algorithms
    "ShortestPathTree",
    "shortest_path_tree",
    "accumulate_dependencies",
    "EdgeScores",
    "edge_betweenness",
    "connected_components",
    "modularity",
    # Partitioning
    "PartitionConfig",
    "PartitionResult",
    "partition",
    "rank_edges",
    "solve",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
