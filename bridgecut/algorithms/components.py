"""Connected components of an undirected graph."""

from __future__ import annotations

from typing import List, Set

from bridgecut.graph.store import NodeID, UndirectedGraph


def connected_components(graph: UndirectedGraph) -> List[Set[NodeID]]:
    """Return the connected components of ``graph``.

    Iterative flood fill; isolated nodes form their own component. Components
    are listed in order of their smallest node index.
    """
    seen = [False] * graph.num_nodes()
    components: List[Set[NodeID]] = []

    for start in graph:
        if seen[start]:
            continue
        seen[start] = True
        component = {start}
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbor in graph.neighbors(node):
                if not seen[neighbor]:
                    seen[neighbor] = True
                    component.add(neighbor)
                    stack.append(neighbor)
        components.append(component)

    return components


def is_connected(graph: UndirectedGraph) -> bool:
    return graph.num_nodes() > 0 and len(connected_components(graph)) == 1
