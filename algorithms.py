"""
Algorithm interfaces for wgraph.

Keeps traversal and spanning-tree construction separate from graph storage
and text rendering.
"""

from abc import ABC, abstractmethod
from typing import List

from graph import Graph
from nodes import Edge


class TraversalEngine(ABC):
    """
    Interface for a whole-graph walk from a single start node.
    """

    @abstractmethod
    def traverse(self, graph: Graph, start: int) -> List[int]:
        """
        Walk every node reachable from start that is not already visited.

        Returns:
            Node indices in the order they were visited, start first.
            Visited flags are left set; callers decide whether to reset.
        """
        raise NotImplementedError


class SpanningTreeEngine(ABC):
    """
    Interface for minimum-cost spanning tree construction.
    """

    @abstractmethod
    def spanning_tree(self, graph: Graph, start: int) -> List[Edge]:
        """
        Build a minimum spanning tree over the component containing start.

        Returns:
            Selected edges in selection order, each pointing away from the tree.
        """
        raise NotImplementedError
