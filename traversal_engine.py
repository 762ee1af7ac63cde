"""
Depth-first and breadth-first traversal engines.

Both walk the adjacency lists in stored order (most recent edge first) and
treat any node whose visited flag is already set as explored.
"""

from collections import deque
from typing import Deque, List
import logging

from algorithms import TraversalEngine
from graph import Graph


logger = logging.getLogger(__name__)


class DepthFirstEngine(TraversalEngine):
    """
    Stack-based depth-first walk.

    Only one unvisited neighbour is explored per step; the current node goes
    back on the stack first so its remaining neighbours are examined after
    backtracking.
    """

    def traverse(self, graph: Graph, start: int) -> List[int]:
        order = [start]
        stack: List[int] = [start]
        graph.node(start).visited = True

        while stack:
            current = stack.pop()
            for edge in graph.neighbours(current):
                other = graph.node(edge.end)
                if not other.visited:
                    stack.append(current)
                    stack.append(edge.end)
                    other.visited = True
                    order.append(edge.end)
                    break

        logger.debug("depth first from %d reached %d nodes", start, len(order))
        return order


class BreadthFirstEngine(TraversalEngine):
    """
    Queue-based breadth-first walk.

    Nodes are marked visited when enqueued, so none is queued twice.
    """

    def traverse(self, graph: Graph, start: int) -> List[int]:
        order = [start]
        queue: Deque[int] = deque([start])
        graph.node(start).visited = True

        while queue:
            current = queue.popleft()
            for edge in graph.neighbours(current):
                other = graph.node(edge.end)
                if not other.visited:
                    other.visited = True
                    queue.append(edge.end)
                    order.append(edge.end)

        logger.debug("breadth first from %d reached %d nodes", start, len(order))
        return order
