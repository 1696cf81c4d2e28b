import pytest

from labeled_graph import LabeledGraph, check_invariants


class CheckedLabeledGraph(LabeledGraph):
    """LabeledGraph that verifies its invariants after every mutation, even failed ones."""

    def __init__(self) -> None:
        super().__init__()
        check_invariants(self)

    def add_node(self, node) -> None:
        try:
            super().add_node(node)
        finally:
            check_invariants(self)

    def add_edge(self, from_node, to_node, label) -> None:
        try:
            super().add_edge(from_node, to_node, label)
        finally:
            check_invariants(self)


@pytest.fixture
def graph():
    return CheckedLabeledGraph()


@pytest.fixture
def chain_graph():
    # 0 -> 1 -> ... -> 9, edge i labeled str(i)
    g = CheckedLabeledGraph()
    for i in range(10):
        g.add_node(str(i))
    for i in range(9):
        g.add_edge(str(i), str(i + 1), str(i))
    return g
