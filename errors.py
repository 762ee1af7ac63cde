"""
Exception types for wgraph.

Only capacity overflow is a hard failure for callers building a graph; bad
edge requests and unknown start labels are reported through return values.
"""


class GraphError(Exception):
    """Base class for all wgraph errors."""


class CapacityExceeded(GraphError, OverflowError):
    """Raised when a node is added to a graph that is already at capacity."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Graph size exceeded: capacity is {capacity} nodes")
        self.capacity = capacity


class QueueEmpty(GraphError, IndexError):
    """Raised when the minimum is requested from an empty priority queue."""


class ConfigError(GraphError, ValueError):
    """Raised for a malformed graph configuration document."""
