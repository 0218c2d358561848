"""
Edge storage backends.

Two interchangeable variants sit behind the EdgeStore interface:

- ListEdgeStore keeps, per node, the ordered list of its outgoing edges.
- MatrixEdgeStore keeps a square weight matrix whose row/column order matches
  the node storage order; a cell value of 0 means "no edge".

Stores only know about handles and weights. Symmetry for undirected graphs
and weight validation are the Graph facade's job.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from .types import Edge


class EdgeStore(ABC):
    """Abstract per-node adjacency storage."""

    @abstractmethod
    def add_vertex(self, handle: int) -> None:
        """Register a new vertex with no edges."""

    @abstractmethod
    def remove_vertex(self, handle: int) -> None:
        """Remove a vertex and every edge incident to it, in both directions."""

    @abstractmethod
    def add_edge(self, origin: int, destination: int, weight: float) -> bool:
        """Insert origin -> destination; False if that ordered pair exists."""

    @abstractmethod
    def remove_edge(self, origin: int, destination: int) -> bool:
        """Delete origin -> destination; False if it does not exist."""

    @abstractmethod
    def weight(self, origin: int, destination: int) -> Optional[float]:
        """Weight of origin -> destination, or None if there is no such edge."""

    @abstractmethod
    def set_weight(self, origin: int, destination: int, weight: float) -> bool:
        """Change the weight of an existing edge; False if it does not exist."""

    @abstractmethod
    def out_edges(self, handle: int) -> List[Edge]:
        """Outgoing edges of ``handle`` in adjacency order."""

    @abstractmethod
    def edge_count(self) -> int:
        """Number of directed edges held."""

    @abstractmethod
    def copy(self) -> "EdgeStore":
        """Independent deep copy of the store."""

    def has_edge(self, origin: int, destination: int) -> bool:
        return self.weight(origin, destination) is not None


@dataclass
class AdjacencyListNode:
    """
    One row of the adjacency list: an index vertex and its outgoing edges.

    The neighbor sequence is derived from the edge list, so the two can never
    drift apart.
    """

    handle: int
    edges: List[Edge] = field(default_factory=list)

    @property
    def neighbors(self) -> List[int]:
        return [edge.destination for edge in self.edges]

    def find(self, destination: int) -> int:
        """Position of the edge to ``destination`` in ``edges``, or -1."""
        for position, edge in enumerate(self.edges):
            if edge.destination == destination:
                return position
        return -1


class ListEdgeStore(EdgeStore):
    """
    Adjacency-list storage.

    Complexity:
        - add_vertex: O(1)
        - remove_vertex: O(V + E)
        - add_edge / remove_edge / weight: O(deg(origin))
        - out_edges: O(deg(v))
    """

    def __init__(self) -> None:
        self._rows: Dict[int, AdjacencyListNode] = {}

    def add_vertex(self, handle: int) -> None:
        self._rows[handle] = AdjacencyListNode(handle)

    def remove_vertex(self, handle: int) -> None:
        self._rows.pop(handle, None)
        for row in self._rows.values():
            row.edges = [edge for edge in row.edges if edge.destination != handle]

    def add_edge(self, origin: int, destination: int, weight: float) -> bool:
        row = self._rows[origin]
        if row.find(destination) >= 0:
            return False
        row.edges.append(Edge(origin, destination, weight))
        return True

    def remove_edge(self, origin: int, destination: int) -> bool:
        row = self._rows[origin]
        position = row.find(destination)
        if position < 0:
            return False
        del row.edges[position]
        return True

    def weight(self, origin: int, destination: int) -> Optional[float]:
        row = self._rows[origin]
        position = row.find(destination)
        if position < 0:
            return None
        return row.edges[position].weight

    def set_weight(self, origin: int, destination: int, weight: float) -> bool:
        row = self._rows[origin]
        position = row.find(destination)
        if position < 0:
            return False
        # Edges are immutable; replace in place to keep the adjacency order
        row.edges[position] = Edge(origin, destination, weight)
        return True

    def out_edges(self, handle: int) -> List[Edge]:
        return list(self._rows[handle].edges)

    def row(self, handle: int) -> AdjacencyListNode:
        return self._rows[handle]

    def edge_count(self) -> int:
        return sum(len(row.edges) for row in self._rows.values())

    def copy(self) -> "ListEdgeStore":
        clone = ListEdgeStore()
        clone._rows = {
            handle: AdjacencyListNode(handle, list(row.edges))
            for handle, row in self._rows.items()
        }
        return clone


class MatrixEdgeStore(EdgeStore):
    """
    Adjacency-matrix storage backed by a numpy weight matrix.

    Row ``i`` / column ``j`` belong to the i-th / j-th vertex in insertion
    order. Every vertex insertion or removal resizes every row. Alongside the
    matrix, each vertex keeps the destinations of its edges in insertion order,
    so out_edges lists them exactly as ListEdgeStore would.

    Complexity:
        - add_vertex / remove_vertex: O(V^2) (matrix is reallocated)
        - add_edge / remove_edge / weight: O(V) (handle position lookup)
        - out_edges: O(V * deg(v))
    """

    def __init__(self) -> None:
        self._handles: List[int] = []
        self._matrix = np.zeros((0, 0), dtype=float)
        self._order: Dict[int, List[int]] = {}

    def _position(self, handle: int) -> int:
        return self._handles.index(handle)

    def add_vertex(self, handle: int) -> None:
        n = len(self._handles)
        grown = np.zeros((n + 1, n + 1), dtype=float)
        grown[:n, :n] = self._matrix
        self._matrix = grown
        self._handles.append(handle)
        self._order[handle] = []

    def remove_vertex(self, handle: int) -> None:
        if handle not in self._handles:
            return
        position = self._position(handle)
        self._matrix = np.delete(np.delete(self._matrix, position, axis=0), position, axis=1)
        del self._handles[position]
        del self._order[handle]
        for destinations in self._order.values():
            if handle in destinations:
                destinations.remove(handle)

    def add_edge(self, origin: int, destination: int, weight: float) -> bool:
        i, j = self._position(origin), self._position(destination)
        if self._matrix[i, j] != 0.0:
            return False
        self._matrix[i, j] = weight
        self._order[origin].append(destination)
        return True

    def remove_edge(self, origin: int, destination: int) -> bool:
        i, j = self._position(origin), self._position(destination)
        if self._matrix[i, j] == 0.0:
            return False
        self._matrix[i, j] = 0.0
        self._order[origin].remove(destination)
        return True

    def weight(self, origin: int, destination: int) -> Optional[float]:
        value = self._matrix[self._position(origin), self._position(destination)]
        if value == 0.0:
            return None
        return float(value)

    def set_weight(self, origin: int, destination: int, weight: float) -> bool:
        i, j = self._position(origin), self._position(destination)
        if self._matrix[i, j] == 0.0:
            return False
        self._matrix[i, j] = weight
        return True

    def out_edges(self, handle: int) -> List[Edge]:
        row = self._matrix[self._position(handle)]
        return [
            Edge(handle, destination, float(row[self._position(destination)]))
            for destination in self._order[handle]
        ]

    def connectivity(self) -> np.ndarray:
        """Boolean matrix of connectivity flags."""
        return self._matrix != 0.0

    def weights(self) -> np.ndarray:
        """Copy of the weight matrix."""
        return self._matrix.copy()

    def edge_count(self) -> int:
        return int(np.count_nonzero(self._matrix))

    def copy(self) -> "MatrixEdgeStore":
        clone = MatrixEdgeStore()
        clone._handles = list(self._handles)
        clone._matrix = self._matrix.copy()
        clone._order = {handle: list(destinations) for handle, destinations in self._order.items()}
        return clone
