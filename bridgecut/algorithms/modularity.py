"""Newman modularity of a node partition."""

from __future__ import annotations

from typing import Iterable, Set

from bridgecut.graph.store import NodeID, UndirectedGraph


def modularity(
    graph: UndirectedGraph,
    communities: Iterable[Set[NodeID]],
    resolution: float = 1.0,
) -> float:
    """Compute the modularity ``Q`` of ``communities`` on ``graph``.

    ``Q = sum_c [ L_c / m - resolution * (d_c / 2m) ** 2 ]`` where ``L_c`` is
    the number of edges inside community ``c``, ``d_c`` the sum of its
    degrees and ``m`` the number of edges in the graph.

    Args:
        graph: Undirected graph the communities are measured against.
        communities: Disjoint node sets covering every node.
        resolution: Weight of the null-model term.

    Returns:
        Modularity value; 0.0 for a graph without edges.

    Raises:
        ValueError: If the communities overlap or do not cover every node.
    """
    communities = [set(c) for c in communities]
    covered = set()
    total = 0
    for community in communities:
        covered |= community
        total += len(community)
    if total != len(covered) or covered != set(graph):
        raise ValueError("Communities must partition the graph's node set.")

    m = graph.num_edges()
    if m == 0:
        return 0.0

    q = 0.0
    for community in communities:
        internal = 0
        degree_sum = 0
        for node in community:
            neigh = graph.neighbors(node)
            degree_sum += len(neigh)
            internal += len(neigh & community)
        # each internal edge was seen from both ends
        internal //= 2
        q += internal / m - resolution * (degree_sum / (2.0 * m)) ** 2
    return q
