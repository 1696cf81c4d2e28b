import logging

import networkx as nx

from .graph import LabeledGraph

logger = logging.getLogger(__name__)


def to_networkx(graph: LabeledGraph) -> nx.MultiDiGraph:
    """
    Converts a LabeledGraph into a networkx MultiDiGraph.

    Each labeled edge becomes a networkx edge keyed by its label, with the
    label also stored in the edge's "label" attribute, so parallel edges with
    different labels stay distinct.

    Args:
        graph: The graph to convert.

    Returns:
        A new MultiDiGraph with the same nodes and edges.
    """
    G = nx.MultiDiGraph()
    for node in graph.list_nodes():
        G.add_node(node)
    for node in graph.list_nodes():
        for edge in graph.list_children(node):
            G.add_edge(edge.from_node, edge.to_node, key=edge.label, label=edge.label)
    logger.debug(f"Converted {graph!r} to networkx")
    return G
