"""Graph algorithms: shortest-path scan, betweenness, components, modularity."""

from bridgecut.algorithms.betweenness import EdgeScores, edge_betweenness
from bridgecut.algorithms.bfs import ShortestPathTree, shortest_path_tree
from bridgecut.algorithms.components import connected_components, is_connected
from bridgecut.algorithms.dependency import accumulate_dependencies
from bridgecut.algorithms.modularity import modularity

__all__ = [
    "EdgeScores",
    "ShortestPathTree",
    "accumulate_dependencies",
    "connected_components",
    "edge_betweenness",
    "is_connected",
    "modularity",
    "shortest_path_tree",
]
