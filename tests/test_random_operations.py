import random

import networkx as nx
import pytest
from labeled_graph.edge import LabeledEdge
from labeled_graph.errors import DuplicateNodeError, UnknownNodeError
from labeled_graph.interop import to_networkx

NODES = [f"n{i}" for i in range(12)]
LABELS = ["a", "b", "c"]


def run_random_operations(graph, rng: random.Random, steps: int = 200) -> nx.MultiDiGraph:
    """
    Applies a random mix of valid and invalid operations to a graph and to a
    networkx reference model, comparing the two after every step.
    """
    model = nx.MultiDiGraph()

    for _ in range(steps):
        op = rng.choice(["add_node", "add_edge", "add_edge"])
        if op == "add_node":
            node = rng.choice(NODES)
            if node in model:
                with pytest.raises(DuplicateNodeError):
                    graph.add_node(node)
            else:
                graph.add_node(node)
                model.add_node(node)
        else:
            u, v, label = rng.choice(NODES), rng.choice(NODES), rng.choice(LABELS)
            if u not in model:
                with pytest.raises(UnknownNodeError):
                    graph.add_edge(u, v, label)
            else:
                graph.add_edge(u, v, label)
                if not model.has_edge(u, v, key=label):
                    model.add_edge(u, v, key=label)
                assert graph.contains_edge(LabeledEdge(u, v, label))
                assert graph.contains_node(v)

        assert graph.is_empty() == (graph.size() == 0)
        assert set(graph.list_nodes()) == set(model.nodes)
        assert graph.size() == len(set(graph.list_nodes())) == model.number_of_nodes()
        assert graph.edge_count() == model.number_of_edges()

    return model


@pytest.mark.parametrize("seed", range(20))
def test_random_operations_match_reference_model(graph, seed):
    model = run_random_operations(graph, random.Random(seed))

    for node in graph.list_nodes():
        children = graph.list_children(node)
        assert len(children) == len(set(children))
        assert {(e.from_node, e.to_node, e.label) for e in children} == set(model.out_edges(node, keys=True))

    G = to_networkx(graph)
    assert set(G.nodes) == set(model.nodes)
    assert set(G.edges(keys=True)) == set(model.edges(keys=True))


@pytest.mark.parametrize("seed", range(5))
def test_repeated_edges_are_idempotent(graph, seed):
    rng = random.Random(seed)
    graph.add_node("root")
    triples = [("root", rng.choice(NODES), rng.choice(LABELS)) for _ in range(30)]
    for triple in triples:
        graph.add_edge(*triple)
    assert graph.edge_count() == len(set(triples))
    assert len(graph.list_children("root")) == len(set(triples))
