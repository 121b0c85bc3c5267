"""Command-line interface for bridgecut."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from bridgecut.algorithms.betweenness import edge_betweenness
from bridgecut.algorithms.components import connected_components
from bridgecut.config import PartitionConfig
from bridgecut.graph.store import build_graph
from bridgecut.io import load_records
from bridgecut.logging import get_logger, set_global_log_level
from bridgecut.partition import rank_edges, solve

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _load_config(args: argparse.Namespace) -> PartitionConfig:
    base = PartitionConfig()
    if args.config is not None:
        base = PartitionConfig.from_file(args.config)
        logger.debug(f"Loaded configuration from {args.config}: {base.to_dict()}")
    return base.with_overrides(
        cut_size=args.cut_size,
        parallelism=args.parallelism,
        normalized=True if args.normalized else None,
    )


def _run(args: argparse.Namespace) -> None:
    config = _load_config(args)
    records = load_records(args.input)

    start = perf_counter()
    result, node_map = solve(records, config)
    logger.info(f"Partition completed in {_format_duration(perf_counter() - start)}")

    if args.json or args.results is not None:
        payload = result.to_dict(node_map)
        payload["config"] = config.to_dict()
        text = json.dumps(payload, indent=2)
        if args.results is not None:
            args.results.parent.mkdir(parents=True, exist_ok=True)
            args.results.write_text(text + "\n", encoding="utf-8")
            logger.info(f"Results written to {args.results}")
        if args.json:
            print(text)
            return

    print(result.product)


def _inspect(args: argparse.Namespace) -> None:
    config = PartitionConfig().with_overrides(parallelism=args.parallelism)
    graph, node_map = build_graph(load_records(args.input))
    components = connected_components(graph)

    print(f"Input: {args.input}")
    print(f"Nodes: {graph.num_nodes()}")
    print(f"Edges: {graph.num_edges()}")
    print(f"Connected components: {len(components)}")

    if args.top <= 0 or graph.num_edges() == 0:
        return

    scores = edge_betweenness(graph, parallelism=config.parallelism)
    rows = []
    for rank, (edge, score) in enumerate(rank_edges(scores)[: args.top], start=1):
        a, b = node_map.edge_names(edge)
        rows.append([rank, a, b, f"{score:,.3f}"])
    print("Top edges by betweenness:")
    print(_format_table(["Rank", "Node A", "Node B", "Score"], rows))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``bridgecut`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="bridgecut",
        description="Split a graph in two by removing its highest-betweenness edges.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    # Run command
    run_parser = subparsers.add_parser(
        "run", help="Partition a graph and print the product of the part sizes"
    )
    run_parser.add_argument("input", type=Path, help="Path to adjacency file")
    run_parser.add_argument(
        "--cut-size",
        "-k",
        type=int,
        default=None,
        help="Number of highest-scoring edges to remove (default: 3)",
    )
    run_parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="YAML configuration file; command-line flags take precedence",
    )
    run_parser.add_argument(
        "--normalized",
        action="store_true",
        help="Normalize betweenness by the number of ordered node pairs",
    )
    run_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON summary instead of the bare product",
    )
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Also write the JSON summary to this file",
    )

    # Inspect command
    inspect_parser = subparsers.add_parser(
        "inspect", help="Summarize a graph and list its top-scoring edges"
    )
    inspect_parser.add_argument("input", type=Path, help="Path to adjacency file")
    inspect_parser.add_argument(
        "--top",
        "-t",
        type=int,
        default=10,
        help="Number of top edges to list (0 to skip betweenness)",
    )

    for p in (run_parser, inspect_parser):
        p.add_argument(
            "--parallelism",
            "-p",
            type=int,
            default=None,
            help="Worker processes for the betweenness computation",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        if args.command == "run":
            _run(args)
        elif args.command == "inspect":
            _inspect(args)
    except (OSError, ValueError) as exc:
        logger.error(f"{type(exc).__name__}: {exc}")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
