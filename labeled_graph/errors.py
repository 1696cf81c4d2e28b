class GraphError(Exception):
    """Base class for all errors raised by labeled_graph."""


class InvalidArgumentError(GraphError, ValueError):
    """A required node, edge or label was None or of the wrong kind."""


class DuplicateNodeError(GraphError, ValueError):
    """add_node was called with a node that is already in the graph."""


class UnknownNodeError(GraphError, ValueError):
    """An operation referenced a node that is not in the graph."""


class InvariantViolationError(GraphError, AssertionError):
    """Raised by check_invariants when a graph's internal state is inconsistent."""
