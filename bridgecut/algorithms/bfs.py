"""Single-source shortest-path scan for unweighted graphs.

Breadth-first search that records, for every node reachable from the source,
its hop distance, the number of distinct shortest paths reaching it, its
shortest-path predecessors, and the order in which nodes left the queue.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Set

from bridgecut.graph.store import NodeID, UndirectedGraph


@dataclass
class ShortestPathTree:
    """Shortest-path DAG rooted at ``source``.

    Attributes:
        source: Root node of the scan.
        dist: Hop distance from ``source`` per reachable node.
        sigma: Number of distinct shortest paths from ``source`` per node.
        pred: Predecessors of each node on some shortest path.
        order: Reachable nodes in BFS order. Every node appears after all of
            its predecessors.
    """

    source: NodeID
    dist: Dict[NodeID, int] = field(default_factory=dict)
    sigma: Dict[NodeID, int] = field(default_factory=dict)
    pred: Dict[NodeID, Set[NodeID]] = field(default_factory=dict)
    order: List[NodeID] = field(default_factory=list)

    def reachable(self) -> Set[NodeID]:
        return set(self.order)


def shortest_path_tree(graph: UndirectedGraph, source: NodeID) -> ShortestPathTree:
    """Breadth-first scan from ``source``.

    Args:
        graph: The graph to scan.
        source: Source node index.

    Returns:
        ShortestPathTree with exact path counts.

    Raises:
        KeyError: If ``source`` is not in the graph.
    """
    if source not in graph:
        raise KeyError(f"Source node '{source}' is not in the graph.")

    dist = {source: 0}
    sigma = {source: 1}
    pred: Dict[NodeID, Set[NodeID]] = {source: set()}
    order: List[NodeID] = []
    queue = deque([source])

    while queue:
        node = queue.popleft()
        order.append(node)
        next_dist = dist[node] + 1
        for neighbor in graph.neighbors(node):
            if neighbor not in dist:
                # first discovery fixes the distance
                dist[neighbor] = next_dist
                sigma[neighbor] = 0
                pred[neighbor] = set()
                queue.append(neighbor)
            if dist[neighbor] == next_dist:
                sigma[neighbor] += sigma[node]
                pred[neighbor].add(node)

    return ShortestPathTree(
        source=source, dist=dist, sigma=sigma, pred=pred, order=order
    )
