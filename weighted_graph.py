"""
Concrete undirected, weighted graph for wgraph.

Implements the Graph interface with per-node adjacency lists mirrored by a
numpy weight matrix, plus the text reports and traversal entry points.
"""

from typing import List, Optional, Sequence
import logging
import numbers

import numpy as np

from algorithms import SpanningTreeEngine, TraversalEngine
from errors import CapacityExceeded
from graph import NOT_FOUND, Graph
from nodes import Edge, Node
from spanning_tree_engine import PrimSpanningTreeEngine
from traversal_engine import BreadthFirstEngine, DepthFirstEngine


logger = logging.getLogger(__name__)


class WeightedGraph(Graph):
    """
    Undirected graph over single-character labels with integer edge weights.

    Every connection A-B is stored twice, as an Edge on A pointing to B and
    one on B pointing to A, and both matrix cells [A][B] and [B][A] hold its
    weight. A separate presence mask records which cells are real edges, so
    a weight of 0 is a valid edge even though the matrix report prints 0 for
    "no edge" as well.

    Args:
        capacity: maximum node count, or None to grow without bound.
        reset_after_depth_first: clear visited flags after a depth-first
            traversal too. Off by default: depth-first runs leave reached
            nodes marked, and later runs see them as already explored.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        reset_after_depth_first: bool = False,
        depth_first: Optional[TraversalEngine] = None,
        breadth_first: Optional[TraversalEngine] = None,
        spanning_tree: Optional[SpanningTreeEngine] = None,
    ) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._reset_after_depth_first = reset_after_depth_first
        self._nodes: List[Node] = []

        size = capacity if capacity is not None else 0
        self._weights = np.zeros((size, size), dtype=np.int64)
        self._present = np.zeros((size, size), dtype=bool)

        self._depth_first = depth_first or DepthFirstEngine()
        self._breadth_first = breadth_first or BreadthFirstEngine()
        self._spanning_tree = spanning_tree or PrimSpanningTreeEngine()

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def __len__(self) -> int:
        return len(self._nodes)

    # --- Mutation API --------------------------------------------------------

    def add_node(self, label: str) -> None:
        """
        Append a new unvisited node with no edges.

        Raises:
            CapacityExceeded: the graph already holds `capacity` nodes.
            ValueError: label is not a single character or is already used.
        """
        if not isinstance(label, str) or len(label) != 1:
            raise ValueError(f"node label must be a single character, got {label!r}")
        if self._capacity is not None and len(self._nodes) >= self._capacity:
            raise CapacityExceeded(self._capacity)
        if self.find_node(label) != NOT_FOUND:
            raise ValueError(f"duplicate node label {label!r}")

        if len(self._nodes) == self._weights.shape[0]:
            self._grow_matrix()
        self._nodes.append(Node(label))
        logger.debug("added node %r at index %d", label, len(self._nodes) - 1)

    def add_edge(self, start_label: str, end_label: str, weight: int) -> bool:
        """
        Connect two nodes with an undirected weighted edge.

        Returns False, changing nothing, when either label is unknown or both
        name the same node. Connecting an already connected pair updates the
        weight on both edge records instead of adding parallel edges.

        Raises:
            TypeError: weight is not an integer.
        """
        if start_label == end_label:
            logger.debug("rejected self-loop on %r", start_label)
            return False

        start = self.find_node(start_label)
        end = self.find_node(end_label)
        if start == NOT_FOUND or end == NOT_FOUND:
            logger.debug("rejected edge %r-%r: unknown label", start_label, end_label)
            return False

        if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
            raise TypeError(f"edge weight must be an integer, got {weight!r}")
        weight = int(weight)
        self._weights[start, end] = weight
        self._weights[end, start] = weight
        self._present[start, end] = True
        self._present[end, start] = True

        existing = self._nodes[start].edge_to(end)
        if existing is not None:
            existing.weight = weight
            self._nodes[end].edge_to(start).weight = weight
            logger.debug("updated edge %r-%r to weight %d", start_label, end_label, weight)
            return True

        self._nodes[start].add_edge(Edge(start, end, weight))
        self._nodes[end].add_edge(Edge(end, start, weight))
        logger.debug("added edge %r-%r weight %d", start_label, end_label, weight)
        return True

    def _grow_matrix(self) -> None:
        old = self._weights.shape[0]
        new = max(1, old * 2)
        pad = ((0, new - old), (0, new - old))
        self._weights = np.pad(self._weights, pad)
        self._present = np.pad(self._present, pad)

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> Sequence[Node]:
        return tuple(self._nodes)

    def neighbours(self, index: int) -> Sequence[Edge]:
        return tuple(self._nodes[index].edges)

    def find_node(self, label: str) -> int:
        for index, node in enumerate(self._nodes):
            if node.label == label:
                return index
        return NOT_FOUND

    def node(self, index: int) -> Node:
        return self._nodes[index]

    # --- Queries -------------------------------------------------------------

    def weight(self, start_label: str, end_label: str) -> Optional[int]:
        """Weight of the edge between two labels, or None if there is none."""
        start = self.find_node(start_label)
        end = self.find_node(end_label)
        if start == NOT_FOUND or end == NOT_FOUND or not self._present[start, end]:
            return None
        return int(self._weights[start, end])

    def weight_matrix(self) -> np.ndarray:
        """Copy of the n x n weight matrix, 0 where there is no edge."""
        n = len(self._nodes)
        return self._weights[:n, :n].copy()

    # --- Reports -------------------------------------------------------------

    def list_nodes(self) -> str:
        return "".join(f"{node.label} " for node in self._nodes)

    def display_edges(self) -> str:
        lines = []
        for node in self._nodes:
            neighbours = "".join(f"{self._nodes[edge.end].label} " for edge in node.edges)
            lines.append(f"{node.label}-{neighbours}\n")
        return "".join(lines)

    def display_matrix(self) -> str:
        n = len(self._nodes)
        rows = [f"{' ':>2}" + "".join(f"{node.label:>4}" for node in self._nodes) + "\n"]
        for i, node in enumerate(self._nodes):
            cells = "".join(f"{int(self._weights[i, j]):>4}" for j in range(n))
            rows.append(f"{node.label:>2}{cells}\n")
        return "".join(rows)

    # --- Traversals ----------------------------------------------------------

    def depth_first_traversal(self, label: str) -> str:
        """
        Depth-first listing from label, or "" if label is unknown.

        Visited flags are left set afterwards unless the graph was built
        with reset_after_depth_first.
        """
        start = self.find_node(label)
        if start == NOT_FOUND:
            return ""

        order = self._depth_first.traverse(self, start)
        if self._reset_after_depth_first:
            self.reset_visited()
        return f"Depth first traversal starting at {label}\n" + self._format_order(order)

    def breadth_first_traversal(self, label: str) -> str:
        """Breadth-first listing from label, or "" if label is unknown."""
        start = self.find_node(label)
        if start == NOT_FOUND:
            return ""

        order = self._breadth_first.traverse(self, start)
        self.reset_visited()
        return f"Breadth first traversal starting at {label}\n" + self._format_order(order) + "\n"

    def minimum_spanning_tree(self, label: str) -> str:
        """
        Prim spanning tree from label as "X-Y " pairs in selection order.

        Returns "" if label is unknown.
        """
        if self.find_node(label) == NOT_FOUND:
            return ""

        pairs = "".join(
            f"{self._nodes[edge.start].label}-{self._nodes[edge.end].label} "
            for edge in self.spanning_tree_edges(label)
        )
        return f"{label} : {pairs}"

    def spanning_tree_edges(self, label: str) -> List[Edge]:
        """Edges of the spanning tree from label; empty if label is unknown."""
        start = self.find_node(label)
        if start == NOT_FOUND:
            return []

        try:
            return self._spanning_tree.spanning_tree(self, start)
        finally:
            self.reset_visited()

    def spanning_tree_weight(self, label: str) -> int:
        return sum(edge.weight for edge in self.spanning_tree_edges(label))

    def _format_order(self, order: Sequence[int]) -> str:
        first, *rest = order
        return f"{self._nodes[first].label} : " + "".join(f"{self._nodes[i].label} " for i in rest)
