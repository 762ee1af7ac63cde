"""
Heap-based edge priority queue for wgraph.

Uses Python's heapq to hand out Edge references in ascending weight order.
The queue never owns its edges; they stay on the graph's adjacency lists.
"""

from typing import Iterable, List, Tuple
import heapq
import itertools

from errors import QueueEmpty
from nodes import Edge


class EdgePriorityQueue:
    """
    Min-queue of edges keyed on weight.

    Ties are broken by insertion order: of two edges with the same weight the
    one inserted first is removed first. Heap entries are (weight, seq, edge)
    so Edge objects are never compared directly.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, Edge]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def insert_edge(self, edge: Edge) -> None:
        heapq.heappush(self._heap, (edge.weight, next(self._counter), edge))

    def insert_adjacency_list(self, edges: Iterable[Edge]) -> None:
        """Insert every edge of an adjacency list, head first."""
        for edge in edges:
            self.insert_edge(edge)

    def remove_min(self) -> Edge:
        """
        Remove and return the lightest edge.

        Raises:
            QueueEmpty: if no edges remain; check is_empty() first.
        """
        if not self._heap:
            raise QueueEmpty("remove_min() on an empty edge queue")
        _, _, edge = heapq.heappop(self._heap)
        return edge

    def peek_min(self) -> Edge:
        if not self._heap:
            raise QueueEmpty("peek_min() on an empty edge queue")
        return self._heap[0][2]

    def is_empty(self) -> bool:
        return not self._heap
