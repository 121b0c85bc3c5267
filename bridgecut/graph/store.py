"""Index-addressed undirected graph and label interning.

Nodes are dense integers ``0..n-1``; labels live in a separate `NodeMap`.
Adjacency is a list of neighbor sets, so the graph holds no node objects and
no cyclic references. Undirected edges are keyed by the canonical pair
``(min(a, b), max(a, b))``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Iterator, List, Set, Tuple

NodeID = int
Edge = Tuple[NodeID, NodeID]


def canonical_edge(a: NodeID, b: NodeID) -> Edge:
    """Return the canonical key of the undirected edge between ``a`` and ``b``."""
    return (a, b) if a <= b else (b, a)


@dataclass
class NodeMap:
    """Bidirectional mapping between node labels and integer indices.

    Attributes:
        to_index: Maps labels to integer indices.
        to_name: Maps integer indices back to labels.

    Example:
        >>> node_map = NodeMap.from_names(["bvb", "cmg", "frs"])
        >>> node_map.to_index["cmg"]
        1
        >>> node_map.to_name[2]
        'frs'
    """

    to_index: Dict[Hashable, NodeID] = field(default_factory=dict)
    to_name: Dict[NodeID, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: Iterable[Hashable]) -> "NodeMap":
        """Create a NodeMap from labels in index order.

        Args:
            names: Labels in index order. Must be unique.

        Returns:
            NodeMap with bidirectional mapping.

        Raises:
            ValueError: If a label appears twice.
        """
        names = list(names)
        to_index = {name: i for i, name in enumerate(names)}
        if len(to_index) != len(names):
            raise ValueError("Node labels must be unique.")
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def edge_names(self, edge: Edge) -> Tuple[Hashable, Hashable]:
        """Translate an index pair into a label pair."""
        return self.to_name[edge[0]], self.to_name[edge[1]]

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


class UndirectedGraph:
    """Simple undirected graph over dense integer node indices.

    This class enforces:
      - Node indices are ``0..num_nodes-1``; referencing anything else raises
        KeyError.
      - Every edge is stored in both endpoints' neighbor sets.
      - Re-adding an existing edge is a no-op.
      - Self-loops are not stored.
    """

    def __init__(self, num_nodes: int = 0) -> None:
        if num_nodes < 0:
            raise ValueError(f"Node count must be non-negative, got {num_nodes}.")
        self._adj: List[Set[NodeID]] = [set() for _ in range(num_nodes)]
        self._num_edges = 0

    def _check_node(self, node: NodeID) -> None:
        if not 0 <= node < len(self._adj):
            raise KeyError(f"Node '{node}' does not exist.")

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and 0 <= node < len(self._adj)

    def __iter__(self) -> Iterator[NodeID]:
        return iter(range(len(self._adj)))

    def num_nodes(self) -> int:
        return len(self._adj)

    def num_edges(self) -> int:
        return self._num_edges

    def add_node(self) -> NodeID:
        """Append an isolated node and return its index."""
        self._adj.append(set())
        return len(self._adj) - 1

    def add_edge(self, a: NodeID, b: NodeID) -> bool:
        """Add the undirected edge ``a - b``.

        Args:
            a: One endpoint. Must exist in the graph.
            b: The other endpoint. Must exist in the graph.

        Returns:
            bool: True if the edge was new, False if it already existed or is
            a self-loop.

        Raises:
            KeyError: If either endpoint does not exist.
        """
        self._check_node(a)
        self._check_node(b)
        if a == b or b in self._adj[a]:
            return False
        self._adj[a].add(b)
        self._adj[b].add(a)
        self._num_edges += 1
        return True

    def remove_edge(self, a: NodeID, b: NodeID) -> None:
        """Remove the undirected edge ``a - b``.

        Raises:
            KeyError: If either endpoint or the edge does not exist.
        """
        self._check_node(a)
        self._check_node(b)
        if b not in self._adj[a]:
            raise KeyError(f"No edge between '{a}' and '{b}' to remove.")
        self._adj[a].discard(b)
        self._adj[b].discard(a)
        self._num_edges -= 1

    def has_edge(self, a: NodeID, b: NodeID) -> bool:
        return a in self and b in self._adj[a]

    def neighbors(self, node: NodeID) -> Set[NodeID]:
        """Return the neighbor set of ``node``.

        The returned set is the live adjacency; callers must not mutate it.
        """
        self._check_node(node)
        return self._adj[node]

    def degree(self, node: NodeID) -> int:
        return len(self.neighbors(node))

    def edges(self) -> List[Edge]:
        """Return every edge once, as canonical pairs in sorted order."""
        return [
            (a, b)
            for a in range(len(self._adj))
            for b in sorted(self._adj[a])
            if a < b
        ]

    def copy(self) -> "UndirectedGraph":
        """Return an independent copy; mutating it leaves this graph intact."""
        clone = UndirectedGraph()
        clone._adj = [set(neigh) for neigh in self._adj]
        clone._num_edges = self._num_edges
        return clone

    def check_symmetry(self) -> None:
        """Verify that ``a in N(b)`` exactly when ``b in N(a)``.

        Raises:
            ValueError: On the first asymmetric pair or stored self-loop.
        """
        for a, neigh in enumerate(self._adj):
            for b in neigh:
                if b == a:
                    raise ValueError(f"Self-loop stored on node '{a}'.")
                if a not in self._adj[b]:
                    raise ValueError(
                        f"Adjacency is not symmetric: '{b}' is a neighbor of "
                        f"'{a}' but not the reverse."
                    )

    def __repr__(self) -> str:
        return f"UndirectedGraph(nodes={self.num_nodes()}, edges={self.num_edges()})"


def build_graph(
    records: Iterable[Tuple[Hashable, Iterable[Hashable]]],
) -> Tuple[UndirectedGraph, NodeMap]:
    """Build an undirected graph from adjacency records.

    Each record is ``(label, neighbor_labels)``. A label that only appears as
    a neighbor is created implicitly. Indices are assigned in sorted label
    order, so identical input always yields identical indices.

    Args:
        records: Iterable of ``(label, neighbor_labels)`` pairs.

    Returns:
        Tuple of (graph, node_map).
    """
    records = [(label, list(neigh)) for label, neigh in records]

    names = set()
    for label, neigh in records:
        names.add(label)
        names.update(neigh)
    node_map = NodeMap.from_names(sorted(names, key=str))

    graph = UndirectedGraph(len(node_map))
    to_index = node_map.to_index
    for label, neigh in records:
        src = to_index[label]
        for other in neigh:
            graph.add_edge(src, to_index[other])

    graph.check_symmetry()
    return graph, node_map
