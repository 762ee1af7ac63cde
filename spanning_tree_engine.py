"""
Prim-style minimum spanning tree engine.

Grows a tree from the start node by repeatedly taking the lightest queued
edge that leads out of the tree.
"""

from typing import List
import logging

from algorithms import SpanningTreeEngine
from graph import Graph
from nodes import Edge
from priority_queue import EdgePriorityQueue


logger = logging.getLogger(__name__)


class PrimSpanningTreeEngine(SpanningTreeEngine):
    """
    Prim's algorithm over an EdgePriorityQueue.

    Complexity:
        O(E log E) over the component containing the start node.
    """

    def spanning_tree(self, graph: Graph, start: int) -> List[Edge]:
        """
        Select tree edges in the order Prim's algorithm takes them.

        The start node is marked visited and its whole adjacency list seeds the
        queue. Each removed edge whose far end is still unvisited joins the
        tree: the far end is marked visited and its edges to unvisited nodes
        are queued. An edge whose far end was reached by a lighter edge after
        it was queued is dropped. Nodes in other components are never reached
        and simply do not appear in the result.
        """
        selected: List[Edge] = []
        pq = EdgePriorityQueue()

        graph.node(start).visited = True
        pq.insert_adjacency_list(graph.neighbours(start))

        while not pq.is_empty():
            shortest = pq.remove_min()
            reached = graph.node(shortest.end)
            if reached.visited:
                continue

            reached.visited = True
            selected.append(shortest)

            for edge in graph.neighbours(shortest.end):
                if not graph.node(edge.end).visited:
                    pq.insert_edge(edge)

        logger.debug(
            "spanning tree from %d selected %d edges (total weight %d)",
            start,
            len(selected),
            sum(edge.weight for edge in selected),
        )
        return selected
