"""Exact edge-betweenness centrality (Brandes) for undirected graphs.

Every node is used as a source once. Each source's contribution comes from a
private shortest-path scan and dependency table; contributions are folded
into one table by the caller, never written concurrently.

Scores are the raw sum over all sources. Each unordered node pair is counted
once from each endpoint, so a bridge between parts of sizes ``p`` and ``q``
scores ``2 * p * q``. No halving is applied; the ranking is the same either
way.

Parallel mode splits the sources into contiguous chunks and computes one
partial table per chunk in a process pool. The graph is pickled once and
installed in each worker by the pool initializer. Partial tables are merged
in a fixed chunk order, so a given graph and worker count always produce the
same table. Grouping by chunk can change the last bits of a sum compared to a
serial run; `bridgecut.partition.rank_edges` compares scores at a fixed
precision so such noise does not reorder tied edges.
"""

from __future__ import annotations

import logging
import os
import pickle
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Dict, Iterable, List, Optional, Sequence

from bridgecut.algorithms.bfs import shortest_path_tree
from bridgecut.algorithms.dependency import accumulate_dependencies
from bridgecut.graph.store import Edge, NodeID, UndirectedGraph
from bridgecut.logging import (
    LOG_LEVEL_ENV,
    ROOT_LOGGER_NAME,
    apply_level_from_env,
    get_logger,
)

logger = get_logger(__name__)

EdgeScores = Dict[Edge, float]

# Graph installed in each worker process by `_worker_init`
_WORKER_GRAPH: Optional[UndirectedGraph] = None


def source_contribution(graph: UndirectedGraph, source: NodeID) -> EdgeScores:
    """Return the edge credit contributed by a single source node."""
    return accumulate_dependencies(shortest_path_tree(graph, source))


def merge_scores(target: EdgeScores, partial: EdgeScores) -> EdgeScores:
    """Add ``partial`` into ``target`` in place and return ``target``."""
    for edge, value in partial.items():
        target[edge] = target.get(edge, 0.0) + value
    return target


def sources_contribution(
    graph: UndirectedGraph, sources: Iterable[NodeID]
) -> EdgeScores:
    """Sum the contributions of ``sources`` into one partial table."""
    partial: EdgeScores = {}
    for source in sources:
        merge_scores(partial, source_contribution(graph, source))
    return partial


def _worker_init(graph_pickle: bytes) -> None:
    """Install the shared graph in a worker process."""
    global _WORKER_GRAPH
    _WORKER_GRAPH = pickle.loads(graph_pickle)
    apply_level_from_env()


def _chunk_worker(sources: List[NodeID]) -> EdgeScores:
    if _WORKER_GRAPH is None:
        raise RuntimeError("Worker graph is not initialized.")
    return sources_contribution(_WORKER_GRAPH, sources)


def _split_sources(sources: Sequence[NodeID], chunks: int) -> List[List[NodeID]]:
    """Split ``sources`` into at most ``chunks`` contiguous, non-empty slices."""
    chunks = max(1, min(chunks, len(sources)))
    size, extra = divmod(len(sources), chunks)
    result = []
    start = 0
    for i in range(chunks):
        end = start + size + (1 if i < extra else 0)
        result.append(list(sources[start:end]))
        start = end
    return result


def _run_parallel(
    graph: UndirectedGraph, sources: Sequence[NodeID], parallelism: int
) -> List[EdgeScores]:
    workers = min(parallelism, len(sources))
    chunks = _split_sources(sources, workers * 4)
    logger.debug(
        f"Running betweenness with {workers} workers over {len(chunks)} chunks"
    )

    graph_pickle = pickle.dumps(graph)

    # Propagate logging level to workers via environment
    parent_level = logging.getLogger(ROOT_LOGGER_NAME).getEffectiveLevel()
    os.environ[LOG_LEVEL_ENV] = logging.getLevelName(parent_level)

    with ProcessPoolExecutor(
        max_workers=workers,
        initializer=_worker_init,
        initargs=(graph_pickle,),
    ) as pool:
        return list(pool.map(_chunk_worker, chunks))


def edge_betweenness(
    graph: UndirectedGraph,
    parallelism: int = 1,
    normalized: bool = False,
    sources: Optional[Sequence[NodeID]] = None,
) -> EdgeScores:
    """Compute edge-betweenness centrality for every edge of ``graph``.

    Args:
        graph: Undirected, unweighted graph.
        parallelism: Number of worker processes. 1 runs in the calling process.
        normalized: If True, divide scores by ``n * (n - 1)``, the number of
            ordered node pairs.
        sources: Source nodes to sum over, in summation order. Defaults to
            every node in index order.

    Returns:
        Mapping canonical edge -> score. Every edge of the graph is present;
        edges on no shortest path score 0.0.

    Raises:
        ValueError: If ``parallelism`` is less than 1.
    """
    if parallelism < 1:
        raise ValueError(f"parallelism must be >= 1, got {parallelism}")

    sources = list(graph) if sources is None else list(sources)
    start_time = time.perf_counter()

    if parallelism > 1 and len(sources) > 1:
        partials = _run_parallel(graph, sources, parallelism)
    else:
        partials = [sources_contribution(graph, sources)]

    scores: EdgeScores = dict.fromkeys(graph.edges(), 0.0)
    for partial in partials:
        merge_scores(scores, partial)

    n = graph.num_nodes()
    if normalized and n > 1:
        scale = 1.0 / (n * (n - 1))
        for edge in scores:
            scores[edge] *= scale

    logger.debug(
        f"Edge betweenness over {len(sources)} sources and {len(scores)} edges "
        f"took {time.perf_counter() - start_time:.3f} s"
    )
    return scores
