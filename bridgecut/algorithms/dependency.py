"""Brandes dependency back-propagation over one shortest-path tree."""

from __future__ import annotations

from typing import Dict

from bridgecut.algorithms.bfs import ShortestPathTree
from bridgecut.graph.store import Edge, NodeID, canonical_edge


def accumulate_dependencies(tree: ShortestPathTree) -> Dict[Edge, float]:
    """Return the per-edge credit contributed by ``tree.source``.

    Nodes are processed in reverse BFS order, so every node is finished only
    after all of its successors in the shortest-path DAG. For a node ``w`` and
    each predecessor ``v``::

        c = sigma[v] / sigma[w] * (1 + delta[w])

    is credited to edge ``(v, w)`` and added to ``delta[v]``.

    Args:
        tree: Output of `shortest_path_tree`.

    Returns:
        Mapping canonical edge -> credit. Edges on no shortest path from the
        source are absent.
    """
    sigma = tree.sigma
    pred = tree.pred
    delta: Dict[NodeID, float] = dict.fromkeys(tree.order, 0.0)
    credit: Dict[Edge, float] = {}

    for w in reversed(tree.order):
        coeff = (1.0 + delta[w]) / sigma[w]
        for v in pred[w]:
            c = sigma[v] * coeff
            edge = canonical_edge(v, w)
            credit[edge] = credit.get(edge, 0.0) + c
            delta[v] += c

    return credit
