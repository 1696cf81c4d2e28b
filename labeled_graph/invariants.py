"""
Consistency checks for LabeledGraph.

check_invariants inspects a graph's internal adjacency map and raises
InvariantViolationError on the first broken rule. The library never calls it
itself; the test suite runs it after every mutating call.

Rules checked:
    - every node key is a real value (not None)
    - every outgoing collection is a set of LabeledEdges
    - every edge stored under a node leaves that node
    - every edge target is itself a node of the graph
    - no edge has a None label

Node keys being unique and outgoing sets holding no duplicates follow from
dict and set semantics; the checks confirm the containers are of those types.
"""

import logging

from .edge import LabeledEdge
from .errors import InvariantViolationError
from .graph import LabeledGraph

logger = logging.getLogger(__name__)


def check_invariants(graph: LabeledGraph) -> None:
    """
    Verifies the representation invariants of a graph.

    Args:
        graph: The graph to inspect.

    Raises:
        InvariantViolationError: If any invariant does not hold.
    """
    adjacency = graph._adjacency
    if not isinstance(adjacency, dict):
        raise InvariantViolationError("Adjacency map must be a dict.")

    for node, edges in adjacency.items():
        if node is None:
            raise InvariantViolationError("Graph contains a None node.")
        if not isinstance(edges, set):
            raise InvariantViolationError(f"Outgoing edges of {node} are not stored in a set.")
        for edge in edges:
            if not isinstance(edge, LabeledEdge):
                raise InvariantViolationError(f"Node {node} holds a non-edge value {edge!r}.")
            if edge.label is None:
                raise InvariantViolationError(f"Edge {edge} has a None label.")
            if edge.from_node != node:
                raise InvariantViolationError(f"Edge {edge} is stored under node {node}.")
            if edge.to_node not in adjacency:
                raise InvariantViolationError(f"Edge {edge} points at missing node {edge.to_node}.")

    logger.debug(f"Invariants hold for {graph!r}")
