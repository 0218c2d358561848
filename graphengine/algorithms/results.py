"""
Result containers shared by the algorithm modules.

Every algorithm returns one of these dataclasses instead of raising or
printing. ``status`` separates a normal run from an empty graph, a missing
vertex, an unmet precondition, and a structurally incomplete answer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Status(Enum):
    """Outcome of an algorithm run."""

    OK = "ok"
    INCOMPLETE = "incomplete"
    EMPTY = "empty"
    NOT_FOUND = "not_found"
    PRECONDITION_FAILED = "precondition_failed"


class _Outcome:
    status: Status

    @property
    def success(self) -> bool:
        """True when the algorithm ran (its answer may still be incomplete)."""
        return self.status in (Status.OK, Status.INCOMPLETE)


@dataclass
class TraversalResult(_Outcome):
    """
    Attributes:
        order: Labels in visitation order.
        parents: Discovery parent of each visited label (None for the origin).
    """

    order: List[str] = field(default_factory=list)
    parents: Dict[str, Optional[str]] = field(default_factory=dict)
    status: Status = Status.OK
    message: str = ""


@dataclass
class ShortestPathResult(_Outcome):
    """
    Attributes:
        source: Label the distances are measured from.
        distances: Label -> total distance (``inf`` when unreachable).
        predecessors: Label -> previous label on the chosen path.
        paths: Label -> source..label path, or None when unreachable.
    """

    source: Optional[str] = None
    distances: Dict[str, float] = field(default_factory=dict)
    predecessors: Dict[str, Optional[str]] = field(default_factory=dict)
    paths: Dict[str, Optional[List[str]]] = field(default_factory=dict)
    status: Status = Status.OK
    message: str = ""


@dataclass
class SpanningTreeResult(_Outcome):
    """
    Attributes:
        edges: Accepted (u, v, weight) edges in the order they were added.
        total_weight: Sum of accepted edge weights.
        node_count: Number of vertices of the input graph.
    """

    edges: List[Tuple[str, str, float]] = field(default_factory=list)
    total_weight: float = 0.0
    node_count: int = 0
    status: Status = Status.OK
    message: str = ""

    @property
    def is_complete(self) -> bool:
        """True when the tree spans every vertex (V - 1 edges)."""
        return self.status == Status.OK and len(self.edges) == max(self.node_count - 1, 0)


@dataclass
class AugmentingPath:
    path: List[str]
    bottleneck: float


@dataclass
class MaxFlowResult(_Outcome):
    """
    Attributes:
        flow_value: Total flow pushed from source to sink.
        augmenting_paths: Paths found, in order, with their bottlenecks.
    """

    source: Optional[str] = None
    sink: Optional[str] = None
    flow_value: float = 0.0
    augmenting_paths: List[AugmentingPath] = field(default_factory=list)
    status: Status = Status.OK
    message: str = ""


@dataclass
class OrientationResult(_Outcome):
    """
    Attributes:
        baseline_flow: Max flow of the graph as given.
        flow_value: Max flow after the accepted edge flips.
        flipped_edges: Original (u, v) orientation of every accepted flip, in order.
        edges: Final (u, v, weight) edge list of the improved orientation.
    """

    baseline_flow: float = 0.0
    flow_value: float = 0.0
    flipped_edges: List[Tuple[str, str]] = field(default_factory=list)
    edges: List[Tuple[str, str, float]] = field(default_factory=list)
    status: Status = Status.OK
    message: str = ""

    @property
    def improvement(self) -> float:
        return self.flow_value - self.baseline_flow


@dataclass
class ColoringResult(_Outcome):
    """
    Attributes:
        coloring: Label -> color (positive integers starting at 1).
        num_colors: Number of distinct colors used.
        algorithm: Name of the heuristic that produced the coloring.
    """

    coloring: Dict[str, int] = field(default_factory=dict)
    num_colors: int = 0
    algorithm: str = ""
    status: Status = Status.OK
    message: str = ""


__all__ = [
    "Status",
    "TraversalResult",
    "ShortestPathResult",
    "SpanningTreeResult",
    "AugmentingPath",
    "MaxFlowResult",
    "OrientationResult",
    "ColoringResult",
]
