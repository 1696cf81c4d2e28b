from .edge import LabeledEdge
from .graph import LabeledGraph
from .errors import (
    GraphError, InvalidArgumentError,
    DuplicateNodeError, UnknownNodeError,
    InvariantViolationError
)
from .invariants import check_invariants
from .interop import to_networkx

__all__ = [
    "LabeledEdge", "LabeledGraph",
    "GraphError", "InvalidArgumentError",
    "DuplicateNodeError", "UnknownNodeError",
    "InvariantViolationError",
    "check_invariants", "to_networkx"
]
