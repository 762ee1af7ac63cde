"""
YAML configuration for building a WeightedGraph.

A document looks like:

    capacity: 20              # optional, omit for an unbounded graph
    reset_after_depth_first: false
    log_level: WARNING
    start: A
    nodes: [A, B, C, D]
    edges:
      - [A, B, 1]
      - [B, C, 2]
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

import yaml

from errors import ConfigError
from weighted_graph import WeightedGraph


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EdgeConfig:
    start: str
    end: str
    weight: int


@dataclass(frozen=True)
class GraphConfig:
    capacity: Optional[int] = None
    reset_after_depth_first: bool = False
    log_level: str = "WARNING"
    start: Optional[str] = None
    nodes: Sequence[str] = field(default_factory=tuple)
    edges: Sequence[EdgeConfig] = field(default_factory=tuple)


def parse_config(data: Optional[Mapping[str, Any]]) -> GraphConfig:
    """Validate a decoded YAML mapping and build a GraphConfig from it."""
    if data is None:
        return GraphConfig()
    if not isinstance(data, Mapping):
        raise ConfigError(f"config must be a mapping, got {type(data).__name__}")

    capacity = data.get("capacity")
    if capacity is not None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise ConfigError(f"capacity must be a non-negative integer, got {capacity!r}")

    raw_nodes = data.get("nodes") or []
    if not isinstance(raw_nodes, (list, tuple)):
        raise ConfigError(f"nodes must be a list of labels, got {raw_nodes!r}")
    nodes = [str(label) for label in raw_nodes]

    raw_edges = data.get("edges") or []
    if not isinstance(raw_edges, (list, tuple)):
        raise ConfigError(f"edges must be a list of [start, end, weight], got {raw_edges!r}")

    edges = []
    for raw in raw_edges:
        if not isinstance(raw, (list, tuple)) or len(raw) != 3:
            raise ConfigError(f"edge must be [start, end, weight], got {raw!r}")
        start, end, weight = raw
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ConfigError(f"edge weight must be an integer, got {raw!r}")
        edges.append(EdgeConfig(start=str(start), end=str(end), weight=weight))

    reset_after_depth_first = data.get("reset_after_depth_first", False)
    if not isinstance(reset_after_depth_first, bool):
        raise ConfigError(
            f"reset_after_depth_first must be true or false, got {reset_after_depth_first!r}"
        )

    log_level = str(data.get("log_level", "WARNING")).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"unknown log_level {log_level!r}")

    start = data.get("start")
    return GraphConfig(
        capacity=capacity,
        reset_after_depth_first=reset_after_depth_first,
        log_level=log_level,
        start=None if start is None else str(start),
        nodes=tuple(nodes),
        edges=tuple(edges),
    )


def load_config(path: Path) -> GraphConfig:
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ConfigError(f"cannot parse {path}: {exc}") from exc
    return parse_config(data)


def build_graph(cfg: GraphConfig) -> tuple[WeightedGraph, list[EdgeConfig]]:
    """
    Build a graph from cfg.

    Returns the graph plus the edges add_edge rejected (unknown label or
    self-loop). Capacity and label errors propagate.
    """
    graph = WeightedGraph(
        capacity=cfg.capacity,
        reset_after_depth_first=cfg.reset_after_depth_first,
    )
    for label in cfg.nodes:
        graph.add_node(label)

    rejected = [e for e in cfg.edges if not graph.add_edge(e.start, e.end, e.weight)]
    return graph, rejected
