"""Two-way graph partitioning by removing the highest-betweenness edges.

Edges that carry the most shortest paths are the bridges between loosely
connected halves. Removing the top ``cut_size`` of them must leave exactly
two connected components; anything else means the graph's minimum edge cut
is not ``cut_size`` and the run fails.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Optional, Set, Tuple

from bridgecut.algorithms.betweenness import EdgeScores, edge_betweenness
from bridgecut.algorithms.components import connected_components, is_connected
from bridgecut.algorithms.modularity import modularity
from bridgecut.config import DEFAULT_CONFIG, PartitionConfig
from bridgecut.graph.store import (
    Edge,
    NodeID,
    NodeMap,
    UndirectedGraph,
    build_graph,
)
from bridgecut.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PartitionResult:
    """Outcome of a bridge-cut partition.

    Attributes:
        removed_edges: Removed edges as canonical index pairs, highest score
            first.
        components: The two components, larger first (ties: smaller minimum
            node index first).
        scores: Score of each removed edge, aligned with ``removed_edges``.
        modularity: Modularity of the two components on the original graph.
    """

    removed_edges: Tuple[Edge, ...]
    components: Tuple[frozenset, ...]
    scores: Tuple[float, ...] = field(default_factory=tuple)
    modularity: float = 0.0

    @property
    def sizes(self) -> Tuple[int, ...]:
        return tuple(len(c) for c in self.components)

    @property
    def product(self) -> int:
        result = 1
        for size in self.sizes:
            result *= size
        return result

    def removed_edge_names(self, node_map: NodeMap) -> List[Tuple[Hashable, Hashable]]:
        """Removed edges as label pairs, each pair sorted."""
        return [
            tuple(sorted(node_map.edge_names(e), key=str)) for e in self.removed_edges
        ]

    def component_names(self, node_map: NodeMap) -> List[List[Hashable]]:
        """Components as sorted label lists."""
        return [
            sorted((node_map.to_name[i] for i in c), key=str) for c in self.components
        ]

    def to_dict(self, node_map: Optional[NodeMap] = None) -> Dict[str, Any]:
        """JSON-friendly summary. Labels are used when ``node_map`` is given."""
        if node_map is None:
            removed: List[Any] = [list(e) for e in self.removed_edges]
        else:
            removed = [list(e) for e in self.removed_edge_names(node_map)]
        return {
            "removed_edges": removed,
            "edge_scores": list(self.scores),
            "component_sizes": list(self.sizes),
            "product": self.product,
            "modularity": self.modularity,
        }


# Significant digits kept when comparing scores; float noise from summation
# order sits far below this.
SCORE_PRECISION = 10


def _score_key(score: float) -> float:
    """Round ``score`` to `SCORE_PRECISION` significant digits."""
    if score == 0.0 or not math.isfinite(score):
        return score
    digits = SCORE_PRECISION - 1 - math.floor(math.log10(abs(score)))
    return round(score, digits)


def rank_edges(scores: EdgeScores) -> List[Tuple[Edge, float]]:
    """Sort edges by descending score, ties by canonical key ascending.

    Scores equal to `SCORE_PRECISION` significant digits count as tied, so
    summation noise never decides between two equally central edges.
    """
    return sorted(scores.items(), key=lambda item: (-_score_key(item[1]), item[0]))


def _check_graph(graph: UndirectedGraph, cut_size: int) -> None:
    if graph.num_nodes() < 2:
        raise ValueError(
            f"Graph has {graph.num_nodes()} node(s); a two-way partition needs "
            "at least 2."
        )
    if cut_size < 1:
        raise ValueError(f"cut_size must be >= 1, got {cut_size}")
    if cut_size > graph.num_edges():
        raise ValueError(
            f"cut_size {cut_size} exceeds the number of edges "
            f"({graph.num_edges()})."
        )


def _order_components(components: Iterable[Set[NodeID]]) -> Tuple[frozenset, ...]:
    return tuple(
        frozenset(c) for c in sorted(components, key=lambda c: (-len(c), min(c)))
    )


def partition(
    graph: UndirectedGraph,
    cut_size: int = DEFAULT_CONFIG.cut_size,
    scores: Optional[EdgeScores] = None,
    parallelism: int = DEFAULT_CONFIG.parallelism,
) -> PartitionResult:
    """Split ``graph`` in two by removing its ``cut_size`` highest-scoring edges.

    The input graph is not modified; removal happens on a copy.

    Args:
        graph: Undirected graph to split.
        cut_size: Number of edges to remove.
        scores: Precomputed edge scores. Computed with `edge_betweenness`
            when None.
        parallelism: Worker processes for the betweenness computation.

    Returns:
        PartitionResult with exactly two components.

    Raises:
        ValueError: If the graph has fewer than two nodes, ``cut_size`` is out
            of range, ``scores`` names an edge missing from the graph, or
            the residual graph does not have exactly two components.
    """
    _check_graph(graph, cut_size)
    if not is_connected(graph):
        logger.warning("Input graph is already disconnected before edge removal")

    if scores is None:
        scores = edge_betweenness(graph, parallelism=parallelism)
    else:
        unknown = sorted(set(scores) - set(graph.edges()))
        if unknown:
            raise ValueError(
                f"Score table has {len(unknown)} edge(s) not in the graph, "
                f"first {unknown[0]}."
            )

    ranked = rank_edges(scores)[:cut_size]
    residual = graph.copy()
    for (a, b), score in ranked:
        logger.debug(f"Removing edge ({a}, {b}) with score {score:.3f}")
        residual.remove_edge(a, b)

    components = connected_components(residual)
    if len(components) != 2:
        raise ValueError(
            f"Removing the top {cut_size} edge(s) left {len(components)} "
            "component(s), expected 2."
        )

    ordered = _order_components(components)
    result = PartitionResult(
        removed_edges=tuple(edge for edge, _ in ranked),
        components=ordered,
        scores=tuple(score for _, score in ranked),
        modularity=modularity(graph, ordered),
    )
    logger.info(
        f"Partitioned {graph.num_nodes()} nodes into {result.sizes[0]} + "
        f"{result.sizes[1]} (product {result.product})"
    )
    return result


def solve(
    records: Iterable[Tuple[Hashable, Iterable[Hashable]]],
    config: PartitionConfig = DEFAULT_CONFIG,
) -> Tuple[PartitionResult, NodeMap]:
    """Build a graph from adjacency records and partition it.

    Args:
        records: ``(label, neighbor_labels)`` pairs.
        config: Run parameters.

    Returns:
        Tuple of (result, node_map).
    """
    config.validate()
    graph, node_map = build_graph(records)
    logger.info(f"Built graph: {graph.num_nodes()} nodes, {graph.num_edges()} edges")

    _check_graph(graph, config.cut_size)
    scores = edge_betweenness(
        graph, parallelism=config.parallelism, normalized=config.normalized
    )
    result = partition(graph, cut_size=config.cut_size, scores=scores)
    return result, node_map
