"""
Node and edge records for wgraph.

A Node owns its adjacency list; every Edge in it starts at that node.
Edges are stored most-recently-inserted first.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Edge:
    """
    Directed half of an undirected weighted connection.

    start/end are node indices in the owning graph.
    """

    start: int
    end: int
    weight: int


@dataclass
class Node:
    """Labelled vertex with a visited flag used by the traversal engines."""

    label: str
    visited: bool = False
    edges: List[Edge] = field(default_factory=list)

    def add_edge(self, edge: Edge) -> None:
        """Insert edge at the head of the adjacency list."""
        self.edges.insert(0, edge)

    def edge_to(self, end: int) -> Edge | None:
        for edge in self.edges:
            if edge.end == end:
                return edge
        return None
