"""
Shared fixtures for wgraph tests.
"""

from pathlib import Path

import pytest

from weighted_graph import WeightedGraph


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def diamond() -> WeightedGraph:
    """
    A, B, C, D in that order with A-B (1), B-C (2), A-C (4), C-D (1).

    Adjacency lists (most recent edge first):
        A: C B    B: C A    C: D A B    D: C
    """
    g = WeightedGraph()
    for label in "ABCD":
        g.add_node(label)
    assert g.add_edge("A", "B", 1)
    assert g.add_edge("B", "C", 2)
    assert g.add_edge("A", "C", 4)
    assert g.add_edge("C", "D", 1)
    return g
