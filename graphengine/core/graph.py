"""
Graph facade.

Graph combines the node registry with one edge-store variant (adjacency list
or adjacency matrix, chosen at construction) behind a single API. It is the
only mutation and query surface used by the algorithm modules.

Mutations never raise on bad input: they return False (or a sentinel for
queries) and log the reason at DEBUG level.
"""

import math
import numbers
from typing import Dict, Iterable, List, Optional, Tuple, Union

import numpy as np

from graphengine.diagnostics.core import check_graph_consistency
from graphengine.diagnostics.debug_mode import is_debug_enabled
from graphengine.logging import get_logger

from .registry import NodeRegistry
from .storage import EdgeStore, ListEdgeStore, MatrixEdgeStore
from .types import NO_EDGE_WEIGHT, Node, NodeRef, Representation

logger = get_logger(__name__)

_STORE_TYPES: Dict[Representation, type] = {
    Representation.LIST: ListEdgeStore,
    Representation.MATRIX: MatrixEdgeStore,
}


class Graph:
    """
    Directed or undirected, weighted or unweighted graph.

    Vertices are addressed by a NodeRef: an ``int`` index (current storage
    position) or a ``str`` label. Removing a vertex shifts the indices of every
    later vertex down by one; labels stay valid.

    Attributes:
        directed: If True, edges are one-way; otherwise every edge is mirrored.
        weighted: If False, every edge weight is fixed at 1.
        representation: Storage variant holding the edges.

    Example:
        >>> G = Graph(directed=False, weighted=True)
        >>> G.insert_node("A")
        True
        >>> G.insert_node("B")
        True
        >>> G.add_edge("A", "B", 2.5)
        True
        >>> G.get_edge_weight(1, 0)
        2.5
    """

    def __init__(
        self,
        directed: bool = False,
        weighted: bool = False,
        representation: Union[Representation, str] = Representation.LIST,
    ):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
            weighted: If True, edges carry arbitrary non-zero weights.
            representation: Representation.LIST / Representation.MATRIX or the
                strings "list" / "matrix".

        Raises:
            ValueError: If the representation is unknown.
        """
        self._directed = bool(directed)
        self._weighted = bool(weighted)
        self._representation = Representation(representation)
        self._registry = NodeRegistry()
        self._store: EdgeStore = _STORE_TYPES[self._representation]()

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    @property
    def representation(self) -> Representation:
        return self._representation

    # ------------------------------------------------------------------
    # Resolution helpers
    # ------------------------------------------------------------------

    def _resolve(self, ref: NodeRef) -> Optional[int]:
        """Map an index or label onto a node handle (None if it does not exist)."""
        if isinstance(ref, bool):
            return None
        if isinstance(ref, (int, np.integer)):
            return self._registry.handle_at(int(ref))
        if isinstance(ref, str):
            return self._registry.handle_of(ref)
        return None

    def resolve_label(self, ref: NodeRef) -> Optional[str]:
        """
        Return the label of the vertex addressed by ``ref``.

        Args:
            ref: Index or label.

        Returns:
            The label, or None if no such vertex exists.
        """
        handle = self._resolve(ref)
        if handle is None:
            return None
        return self._registry.label_of(handle)

    def has_node(self, ref: NodeRef) -> bool:
        return self._resolve(ref) is not None

    def _reject(self, operation: str, reason: str) -> bool:
        logger.debug("%s rejected: %s", operation, reason)
        return False

    def _validate_weight(self, weight: float) -> Optional[str]:
        if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
            return f"weight {weight!r} is not a real number"
        if not math.isfinite(weight):
            return f"weight {weight!r} is not finite"
        if self._weighted and weight == 0:
            return "weight 0 is reserved for 'no edge'"
        if not self._weighted and weight != 1:
            return f"unweighted graph requires weight 1, got {weight!r}"
        return None

    def _after_mutation(self) -> None:
        if is_debug_enabled():
            check_graph_consistency(self)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def insert_node(self, label: str) -> bool:
        """
        Insert a vertex at the end of the storage order.

        Args:
            label: Unique non-empty label.

        Returns:
            True on success, False if the label is empty or already present.
        """
        if not isinstance(label, str) or not label:
            return self._reject("insert_node", f"invalid label {label!r}")

        node = self._registry.add(label)
        if node is None:
            return self._reject("insert_node", f"label {label!r} already present")

        self._store.add_vertex(node.handle)
        logger.debug("inserted node %r at index %d", label, len(self._registry) - 1)
        self._after_mutation()
        return True

    def insert_nodes(self, labels: Union[str, Iterable[str]]) -> int:
        """
        Insert several vertices at once.

        Labels are stripped; blank entries are skipped and duplicates are
        rejected individually.

        Args:
            labels: Iterable of labels or a comma-separated string.

        Returns:
            Number of vertices actually inserted.
        """
        if isinstance(labels, str):
            labels = labels.split(",")

        count = 0
        for label in labels:
            if not isinstance(label, str) or not label.strip():
                continue
            if self.insert_node(label.strip()):
                count += 1
        return count

    def remove_node(self, ref: NodeRef) -> bool:
        """
        Remove a vertex and every edge incident to it.

        Args:
            ref: Index or label of the vertex.

        Returns:
            True on success, False if the vertex does not exist.
        """
        handle = self._resolve(ref)
        if handle is None:
            return self._reject("remove_node", f"no vertex {ref!r}")

        label = self._registry.label_of(handle)
        self._store.remove_vertex(handle)
        self._registry.remove(handle)
        logger.debug("removed node %r", label)
        self._after_mutation()
        return True

    def add_edge(self, origin: NodeRef, destination: NodeRef, weight: float = 1) -> bool:
        """
        Add an edge from origin to destination.

        For undirected graphs the mirror edge is inserted too; if either
        direction cannot be inserted nothing is changed.

        Args:
            origin: Index or label of the origin vertex.
            destination: Index or label of the destination vertex.
            weight: Edge weight; must be 1 on unweighted graphs and non-zero on
                weighted graphs.

        Returns:
            True on success, False on any validation failure.
        """
        origin_handle = self._resolve(origin)
        destination_handle = self._resolve(destination)
        if origin_handle is None or destination_handle is None:
            return self._reject("add_edge", f"endpoint ({origin!r}, {destination!r}) does not exist")

        reason = self._validate_weight(weight)
        if reason is not None:
            return self._reject("add_edge", reason)

        if not self._directed and origin_handle == destination_handle:
            return self._reject("add_edge", "self-loops are not allowed in undirected graphs")

        weight = float(weight)
        if not self._store.add_edge(origin_handle, destination_handle, weight):
            return self._reject("add_edge", f"edge ({origin!r}, {destination!r}) already exists")

        if not self._directed and not self._store.add_edge(destination_handle, origin_handle, weight):
            self._store.remove_edge(origin_handle, destination_handle)
            return self._reject("add_edge", f"mirror edge ({destination!r}, {origin!r}) already exists")

        self._after_mutation()
        return True

    def remove_edge(self, origin: NodeRef, destination: NodeRef) -> bool:
        """
        Remove the edge from origin to destination (and its mirror if undirected).

        Returns:
            True on success, False if either endpoint or the edge does not exist.
        """
        origin_handle = self._resolve(origin)
        destination_handle = self._resolve(destination)
        if origin_handle is None or destination_handle is None:
            return self._reject("remove_edge", f"endpoint ({origin!r}, {destination!r}) does not exist")

        if not self._store.remove_edge(origin_handle, destination_handle):
            return self._reject("remove_edge", f"edge ({origin!r}, {destination!r}) does not exist")

        if not self._directed:
            self._store.remove_edge(destination_handle, origin_handle)

        self._after_mutation()
        return True

    def set_edge_weight(self, origin: NodeRef, destination: NodeRef, weight: float) -> bool:
        """
        Change the weight of an existing edge, keeping its adjacency position.

        Returns:
            True on success, False if the edge does not exist or the weight is
            invalid for this graph.
        """
        origin_handle = self._resolve(origin)
        destination_handle = self._resolve(destination)
        if origin_handle is None or destination_handle is None:
            return self._reject("set_edge_weight", f"endpoint ({origin!r}, {destination!r}) does not exist")

        reason = self._validate_weight(weight)
        if reason is not None:
            return self._reject("set_edge_weight", reason)

        weight = float(weight)
        if not self._store.set_weight(origin_handle, destination_handle, weight):
            return self._reject("set_edge_weight", f"edge ({origin!r}, {destination!r}) does not exist")

        if not self._directed:
            self._store.set_weight(destination_handle, origin_handle, weight)

        self._after_mutation()
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def does_edge_exist(self, origin: NodeRef, destination: NodeRef) -> bool:
        origin_handle = self._resolve(origin)
        destination_handle = self._resolve(destination)
        if origin_handle is None or destination_handle is None:
            return False
        return self._store.has_edge(origin_handle, destination_handle)

    def get_edge_weight(self, origin: NodeRef, destination: NodeRef) -> float:
        """
        Return the weight of origin -> destination.

        Returns:
            The weight, or NO_EDGE_WEIGHT (-1) if the edge or an endpoint is missing.
        """
        origin_handle = self._resolve(origin)
        destination_handle = self._resolve(destination)
        if origin_handle is None or destination_handle is None:
            return NO_EDGE_WEIGHT

        weight = self._store.weight(origin_handle, destination_handle)
        return NO_EDGE_WEIGHT if weight is None else weight

    def get_adjacent_nodes(self, ref: NodeRef) -> List[Node]:
        """
        Return the out-neighbors of a vertex in adjacency order.

        Returns:
            List of Node; empty if the vertex does not exist.
        """
        handle = self._resolve(ref)
        if handle is None:
            return []
        return [self._registry.node(edge.destination) for edge in self._store.out_edges(handle)]

    def label_node(self, index: int) -> Optional[str]:
        """Return the label at ``index``, or None when the index is out of range."""
        if isinstance(index, str):
            return None
        return self.resolve_label(index)

    def get_node_index_by_label(self, label: str) -> int:
        """Return the current index of ``label``, or -1 if absent."""
        handle = self._registry.handle_of(label)
        if handle is None:
            return -1
        return self._registry.index_of(handle)

    def neighbors(self, ref: NodeRef) -> List[Tuple[str, float]]:
        """
        Return ``(label, weight)`` pairs for the out-edges of a vertex.

        Returns:
            Pairs in adjacency order; empty if the vertex does not exist.
        """
        handle = self._resolve(ref)
        if handle is None:
            return []
        return [
            (self._registry.label_of(edge.destination), edge.weight)
            for edge in self._store.out_edges(handle)
        ]

    def degree(self, ref: NodeRef) -> int:
        """Out-degree of a vertex (0 if it does not exist)."""
        handle = self._resolve(ref)
        if handle is None:
            return 0
        return len(self._store.out_edges(handle))

    def labels(self) -> List[str]:
        """Labels in storage (index) order."""
        return self._registry.labels()

    def nodes(self) -> List[Node]:
        return list(self._registry)

    def edges(self) -> List[Tuple[str, str, float]]:
        """
        Return all edges as ``(origin, destination, weight)`` label triples.

        Origins follow storage order and destinations adjacency order. For
        undirected graphs each edge appears once, oriented from the endpoint
        met first.

        Returns:
            List of (u, v, weight) tuples.
        """
        edges_list = []
        seen = set()

        for node in self._registry:
            for edge in self._store.out_edges(node.handle):
                if not self._directed:
                    pair = frozenset((edge.origin, edge.destination))
                    if pair in seen:
                        continue
                    seen.add(pair)
                edges_list.append(
                    (node.label, self._registry.label_of(edge.destination), edge.weight)
                )

        return edges_list

    @property
    def node_count(self) -> int:
        return len(self._registry)

    @property
    def edge_count(self) -> int:
        """Number of edges; an undirected edge counts once."""
        count = self._store.edge_count()
        return count if self._directed else count // 2

    def adjacency_matrix(self) -> np.ndarray:
        """
        Return the weight matrix in storage order (0 means "no edge").

        Works for both representations; the result is a fresh array.
        """
        if isinstance(self._store, MatrixEdgeStore):
            return self._store.weights()

        handles = self._registry.handles()
        position = {handle: i for i, handle in enumerate(handles)}
        matrix = np.zeros((len(handles), len(handles)))
        for handle in handles:
            for edge in self._store.out_edges(handle):
                matrix[position[handle], position[edge.destination]] = edge.weight
        return matrix

    def copy(self) -> "Graph":
        """
        Return an independent copy with identical flags, nodes, and edge order.
        """
        clone = Graph(self._directed, self._weighted, self._representation)
        clone._registry = self._registry.copy()
        clone._store = self._store.copy()
        return clone

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, label: object) -> bool:
        return label in self._registry

    def __repr__(self) -> str:
        return (
            f"Graph(directed={self._directed}, weighted={self._weighted}, "
            f"representation={self._representation.value!r}, "
            f"nodes={self.node_count}, edges={self.edge_count})"
        )
