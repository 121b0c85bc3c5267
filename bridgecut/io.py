"""Reading adjacency records from text.

Each record line looks like::

    jqt: rhn xhk nvd

The label before ``:`` is connected to every whitespace-separated label after
it. Blank lines and lines starting with ``#`` are skipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from bridgecut.graph.store import NodeMap, UndirectedGraph, build_graph
from bridgecut.logging import get_logger

logger = get_logger(__name__)

Record = Tuple[str, List[str]]


def parse_record(line: str, line_no: int = 1) -> Record:
    """Parse one ``label: neighbor ...`` line.

    Args:
        line: The text of the line.
        line_no: 1-based line number used in error messages.

    Returns:
        Tuple of (label, neighbor_labels).

    Raises:
        ValueError: If the ``:`` separator is missing or the label is empty.
    """
    label, sep, rest = line.partition(":")
    if not sep:
        raise ValueError(f"Line {line_no}: missing ':' separator in {line.strip()!r}")
    label = label.strip()
    if not label:
        raise ValueError(f"Line {line_no}: empty node label in {line.strip()!r}")
    return label, rest.split()


def iter_records(lines: Iterable[str]) -> Iterator[Record]:
    """Yield parsed records, skipping blank and comment lines."""
    for line_no, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        yield parse_record(stripped, line_no)


def parse_records(text: str) -> List[Record]:
    """Parse every record in ``text``."""
    return list(iter_records(text.splitlines()))


def load_records(path: Union[str, Path]) -> List[Record]:
    """Read and parse an adjacency file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: On the first malformed line.
    """
    path = Path(path)
    records = parse_records(path.read_text(encoding="utf-8"))
    logger.debug(f"Parsed {len(records)} records from {path}")
    return records


def load_graph(path: Union[str, Path]) -> Tuple[UndirectedGraph, NodeMap]:
    """Read an adjacency file and build its graph."""
    graph, node_map = build_graph(load_records(path))
    logger.info(
        f"Loaded graph from {path}: {graph.num_nodes()} nodes, "
        f"{graph.num_edges()} edges"
    )
    return graph, node_map
