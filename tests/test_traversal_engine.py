"""
Depth-first and breadth-first traversals, through the engines and through
the WeightedGraph string entry points.
"""

from traversal_engine import BreadthFirstEngine, DepthFirstEngine
from weighted_graph import WeightedGraph


def _visited(graph):
    return [n.label for n in graph.nodes() if n.visited]


def test_depth_first_engine_order(diamond):
    order = DepthFirstEngine().traverse(diamond, diamond.find_node("A"))

    # A -> C (head of A's list) -> D, back to C -> B
    assert [diamond.node(i).label for i in order] == ["A", "C", "D", "B"]


def test_breadth_first_engine_order(diamond):
    order = BreadthFirstEngine().traverse(diamond, diamond.find_node("A"))

    # A's neighbours most recent first, then D from C
    assert [diamond.node(i).label for i in order] == ["A", "C", "B", "D"]


def test_engines_leave_flags_for_caller(diamond):
    BreadthFirstEngine().traverse(diamond, 0)
    assert _visited(diamond) == ["A", "B", "C", "D"]


def test_breadth_first_traversal_text(diamond):
    assert diamond.breadth_first_traversal("A") == (
        "Breadth first traversal starting at A\nA : C B D \n"
    )


def test_breadth_first_traversal_resets_and_repeats(diamond):
    first = diamond.breadth_first_traversal("A")
    assert _visited(diamond) == []
    assert diamond.breadth_first_traversal("A") == first


def test_depth_first_traversal_text(diamond):
    assert diamond.depth_first_traversal("A") == (
        "Depth first traversal starting at A\nA : C D B "
    )


def test_depth_first_traversal_leaves_nodes_visited(diamond):
    first = diamond.depth_first_traversal("A")
    assert _visited(diamond) == ["A", "B", "C", "D"]

    # Stale flags: a second run finds nothing left to explore
    second = diamond.depth_first_traversal("A")
    assert second != first
    assert second == "Depth first traversal starting at A\nA : "
    assert diamond.depth_first_traversal("B") == "Depth first traversal starting at B\nB : "

    # Breadth first sees the same stale state, then clears it
    assert diamond.breadth_first_traversal("A") == "Breadth first traversal starting at A\nA : \n"
    assert diamond.depth_first_traversal("A") == first


def test_reset_visited_after_depth_first(diamond):
    diamond.depth_first_traversal("A")
    diamond.reset_visited()

    assert _visited(diamond) == []
    assert diamond.depth_first_traversal("D") == (
        "Depth first traversal starting at D\nD : C A B "
    )


def test_reset_after_depth_first_option():
    g = WeightedGraph(reset_after_depth_first=True)
    for label in "ABC":
        g.add_node(label)
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 1)

    first = g.depth_first_traversal("A")
    assert first == "Depth first traversal starting at A\nA : B C "
    assert _visited(g) == []
    assert g.depth_first_traversal("A") == first


def test_unreached_nodes_are_left_out(diamond):
    diamond.add_node("E")

    assert diamond.breadth_first_traversal("A").endswith("A : C B D \n")
    assert diamond.breadth_first_traversal("E") == "Breadth first traversal starting at E\nE : \n"
    assert diamond.depth_first_traversal("E") == "Depth first traversal starting at E\nE : "


def test_unknown_start_returns_empty_string(diamond):
    assert diamond.depth_first_traversal("Z") == ""
    assert diamond.breadth_first_traversal("Z") == ""
    assert _visited(diamond) == []
