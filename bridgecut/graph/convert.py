"""Conversion between `UndirectedGraph` and NetworkX graphs.

Converting out restores labels when a `NodeMap` is supplied; converting in
assigns indices in sorted label order, matching `build_graph`.
"""

from __future__ import annotations

from typing import Optional, Tuple

import networkx as nx

from bridgecut.graph.store import NodeMap, UndirectedGraph


def to_networkx(
    graph: UndirectedGraph, node_map: Optional[NodeMap] = None
) -> nx.Graph:
    """Convert an UndirectedGraph to a NetworkX Graph.

    Args:
        graph: The graph to convert.
        node_map: Optional NodeMap to restore original labels. If None, nodes
            are labeled with their integer indices.

    Returns:
        A NetworkX Graph with the same nodes and edges.
    """
    nx_graph = nx.Graph()
    if node_map is None:
        nx_graph.add_nodes_from(graph)
        nx_graph.add_edges_from(graph.edges())
    else:
        nx_graph.add_nodes_from(node_map.to_name[i] for i in graph)
        nx_graph.add_edges_from(node_map.edge_names(e) for e in graph.edges())
    return nx_graph


def from_networkx(nx_graph: nx.Graph) -> Tuple[UndirectedGraph, NodeMap]:
    """Convert an undirected NetworkX graph to an UndirectedGraph.

    Args:
        nx_graph: An undirected NetworkX Graph or MultiGraph. Parallel edges
            collapse into one.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If ``nx_graph`` is directed or not a NetworkX graph.
    """
    if not isinstance(nx_graph, nx.Graph) or nx_graph.is_directed():
        raise TypeError(
            f"Expected an undirected NetworkX graph, got {type(nx_graph).__name__}"
        )

    node_map = NodeMap.from_names(sorted(nx_graph.nodes(), key=str))
    graph = UndirectedGraph(len(node_map))
    for u, v in nx_graph.edges():
        graph.add_edge(node_map.to_index[u], node_map.to_index[v])
    return graph, node_map
