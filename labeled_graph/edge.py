from dataclasses import dataclass
from typing import Generic, Hashable, TypeVar

from .errors import InvalidArgumentError

N = TypeVar("N", bound=Hashable)
L = TypeVar("L", bound=Hashable)


@dataclass(frozen=True)
class LabeledEdge(Generic[N, L]):
    """
    An immutable directed edge from one node to another, carrying a label.

    Two edges are equal when their source, destination and label are all
    equal, and equal edges hash the same, so edges can be kept in sets and
    used as dictionary keys.

    Attributes:
        from_node: The node the edge leaves.
        to_node: The node the edge points at.
        label: The value attached to the edge.
    """

    from_node: N
    to_node: N
    label: L

    def __post_init__(self):
        if self.from_node is None or self.to_node is None:
            raise InvalidArgumentError("Edge endpoints cannot be None.")
        if self.label is None:
            raise InvalidArgumentError("Edge label cannot be None.")

    def __str__(self) -> str:
        return f"{self.from_node} -[{self.label}]-> {self.to_node}"
