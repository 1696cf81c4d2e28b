import logging
from typing import Dict, Generic, Hashable, Iterator, List, Set, TypeVar

from .edge import LabeledEdge
from .errors import DuplicateNodeError, InvalidArgumentError, UnknownNodeError

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)
L = TypeVar("L", bound=Hashable)


class LabeledGraph(Generic[N, L]):
    """
    A mutable directed multigraph whose edges carry labels.

    Each node maps to the set of its outgoing LabeledEdges. Two nodes may be
    joined by several edges as long as their labels differ; adding an edge
    that is already present has no effect. Nodes and edges are never removed.

    The graph does no locking of its own. Callers sharing one instance across
    threads must serialize access to it themselves.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[N, Set[LabeledEdge[N, L]]] = {}  # node -> outgoing edges

    def add_node(self, node: N) -> None:
        """
        Adds a node with no outgoing edges.

        Args:
            node: The node to add.

        Raises:
            InvalidArgumentError: If node is None.
            DuplicateNodeError: If the node already exists.
        """
        if node is None:
            raise InvalidArgumentError("Node cannot be None.")
        if node in self._adjacency:
            raise DuplicateNodeError(f"Node {node} already exists.")
        self._adjacency[node] = set()
        logger.debug(f"Added node {node!r}")

    def add_edge(self, from_node: N, to_node: N, label: L) -> None:
        """
        Adds a directed edge labeled `label` from from_node to to_node.
        If to_node is not in the graph yet, it is added with no outgoing edges.
        Adding an edge that already exists leaves the graph unchanged.

        Args:
            from_node: The starting node of the edge. Must already exist.
            to_node: The ending node of the edge.
            label: The label of the edge.

        Raises:
            InvalidArgumentError: If any argument is None.
            UnknownNodeError: If from_node does not exist.
        """
        if from_node is None or to_node is None:
            raise InvalidArgumentError("Edge endpoints cannot be None.")
        if label is None:
            raise InvalidArgumentError("Edge label cannot be None.")
        if from_node not in self._adjacency:
            raise UnknownNodeError(f"Node {from_node} does not exist.")

        edge = LabeledEdge(from_node, to_node, label)
        # membership test hashes the edge; must run before to_node is inserted
        outgoing = self._adjacency[from_node]
        if edge in outgoing:
            logger.debug(f"Ignored duplicate edge {edge}")
            return

        if to_node not in self._adjacency:
            self._adjacency[to_node] = set()
            logger.debug(f"Added node {to_node!r} as target of {edge}")
        outgoing.add(edge)
        logger.debug(f"Added edge {edge}")

    def size(self) -> int:
        """Returns the number of nodes in the graph."""
        return len(self._adjacency)

    def is_empty(self) -> bool:
        """Returns True if the graph has no nodes."""
        return not self._adjacency

    def contains_node(self, node: N) -> bool:
        """
        Checks if a node exists in the graph.

        Raises:
            InvalidArgumentError: If node is None.
        """
        if node is None:
            raise InvalidArgumentError("Node cannot be None.")
        return node in self._adjacency

    def contains_edge(self, edge: LabeledEdge[N, L]) -> bool:
        """
        Checks if an edge exists in the graph.

        An edge whose from_node is not in the graph is simply not contained.

        Args:
            edge: The edge to look for.

        Returns:
            True if an equal edge is among the outgoing edges of edge.from_node.

        Raises:
            InvalidArgumentError: If edge is None or not a LabeledEdge.
        """
        if edge is None:
            raise InvalidArgumentError("Edge cannot be None.")
        if not isinstance(edge, LabeledEdge):
            raise InvalidArgumentError(f"Expected a LabeledEdge, got {type(edge).__name__}.")
        return edge in self._adjacency.get(edge.from_node, ())

    def list_nodes(self) -> List[N]:
        """Returns a new list of all nodes in the graph, in no particular order."""
        return list(self._adjacency)

    def list_children(self, node: N) -> List[LabeledEdge[N, L]]:
        """
        Returns the outgoing edges of a node.

        Args:
            node: The ID of the node.

        Returns:
            A new list holding every edge that leaves node, in no particular order.

        Raises:
            InvalidArgumentError: If node is None.
            UnknownNodeError: If the node does not exist.
        """
        if node is None:
            raise InvalidArgumentError("Node cannot be None.")
        if node not in self._adjacency:
            raise UnknownNodeError(f"Node {node} does not exist.")
        return list(self._adjacency[node])

    def edge_count(self) -> int:
        """Returns the number of edges in the graph."""
        count = 0
        for node in self._adjacency:
            count += len(self._adjacency[node])
        return count

    def __contains__(self, node: object) -> bool:
        """Checks if a node exists in the graph. None is never contained."""
        return node is not None and node in self._adjacency

    def __len__(self) -> int:
        """Returns the number of nodes in the graph."""
        return len(self._adjacency)

    def __iter__(self) -> Iterator[N]:
        """Returns an iterator over a snapshot of the nodes."""
        return iter(self.list_nodes())

    def __repr__(self) -> str:
        return f"<LabeledGraph nodes={len(self)} edges={self.edge_count()}>"

    def __str__(self) -> str:
        # Returns a string representation of the graph
        return "\n".join(
            f"{node}: [{', '.join(str(edge) for edge in edges)}]"
            for node, edges in self._adjacency.items()
        )
