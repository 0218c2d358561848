"""
Shared value types for the graph core.

Nodes live in an arena keyed by integer handles; edges reference nodes by
handle rather than by object, so there are no node <-> edge reference cycles.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union

# Returned by Graph.get_edge_weight when the edge does not exist.
NO_EDGE_WEIGHT = -1.0

# A vertex is addressed either by its current index or by its label.
NodeRef = Union[int, str]


class Representation(Enum):
    """Internal storage used for a graph's edges."""

    LIST = "list"
    MATRIX = "matrix"


@dataclass(frozen=True)
class Node:
    """
    A vertex of the graph.

    Attributes:
        handle: Stable arena handle, never reused while the registry lives.
        label: Unique, case-sensitive label.
    """

    handle: int
    label: str


class Edge(NamedTuple):
    """Directed weighted edge between two node handles."""

    origin: int
    destination: int
    weight: float
