"""
Undirected, weighted graph abstraction for wgraph.

Nodes are addressed by their insertion index.
Each undirected connection appears as an Edge on both of its endpoints.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from nodes import Edge, Node


# Returned by find_node for a label that is not in the graph.
NOT_FOUND = -1


class Graph(ABC):
    """Read-only view the traversal and spanning-tree engines work against."""

    @abstractmethod
    def nodes(self) -> Sequence[Node]:
        """Return all nodes in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def neighbours(self, index: int) -> Sequence[Edge]:
        """
        Adjacency list of the node at index.

        Returns: edges starting at that node, most recent first.
        """
        raise NotImplementedError

    @abstractmethod
    def find_node(self, label: str) -> int:
        """Index of the node with label, or NOT_FOUND."""
        raise NotImplementedError

    def node(self, index: int) -> Node:
        return self.nodes()[index]

    def reset_visited(self) -> None:
        """Mark every node unvisited."""
        for node in self.nodes():
            node.visited = False
