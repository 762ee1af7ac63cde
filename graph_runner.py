"""
CLI that builds a graph from a YAML file and prints every report.

Usage:
    python graph_runner.py graph.yml [--start A] [--log-level DEBUG]
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence
import argparse
import logging
import sys

from config import LOG_LEVELS, build_graph, load_config
from errors import GraphError
from weighted_graph import WeightedGraph


logger = logging.getLogger(__name__)


def render_report(graph: WeightedGraph, start: str) -> str:
    """
    Text report of the graph and all three algorithms run from start.

    The breadth-first traversal and spanning tree run before the depth-first
    traversal, which may leave visited flags set.
    """
    sections = [
        f"Nodes: {graph.list_nodes()}",
        "Edges:\n" + graph.display_edges(),
        "Matrix:\n" + graph.display_matrix(),
        graph.breadth_first_traversal(start) or f"Node {start} not found\n",
        f"Minimum spanning tree: {graph.minimum_spanning_tree(start)}\n"
        f"Total weight: {graph.spanning_tree_weight(start)}",
        graph.depth_first_traversal(start) or f"Node {start} not found",
    ]
    return "\n".join(sections) + "\n"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a weighted graph and run its traversals")
    parser.add_argument("config", type=Path, help="YAML graph description")
    parser.add_argument("--start", help="start label (defaults to the config's start, then the first node)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="override the config's log level",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (OSError, GraphError) as exc:
        print(f"[graph] cannot load {args.config}: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=args.log_level or cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        graph, rejected = build_graph(cfg)
    except (GraphError, ValueError) as exc:
        print(f"[graph] cannot build graph: {exc}", file=sys.stderr)
        return 1

    for edge in rejected:
        print(f"[graph] skipped edge {edge.start}-{edge.end} ({edge.weight}): unknown node or self-loop")
    logger.info("built graph with %d nodes from %s", len(graph), args.config)

    start = args.start or cfg.start or (graph.nodes()[0].label if len(graph) else None)
    if start is None:
        print("[graph] graph is empty, nothing to traverse")
        return 0

    print(render_report(graph, start), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
