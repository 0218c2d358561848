"""
Single-source shortest paths: Dijkstra's algorithm.

The priority queue is ordered by (distance, label), which makes both the
distances and the chosen predecessor paths reproducible across runs.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from typing import Dict, Optional

from graphengine.core import Graph, NodeRef
from graphengine.logging import get_logger

from .results import ShortestPathResult, Status
from .utils import IndexedPriorityQueue, reconstruct_path

logger = get_logger(__name__)


def dijkstra(graph: Graph, origin: NodeRef) -> ShortestPathResult:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Preconditions are checked before any computation: the graph must be
    weighted and must not contain a negative edge weight.

    Args:
        graph: Weighted graph with non-negative edge weights.
        origin: Index or label of the source vertex.

    Returns:
        ShortestPathResult with a distance, predecessor, and path entry for
        every vertex. Status PRECONDITION_FAILED on an unweighted graph or a
        negative edge, NOT_FOUND if the source does not exist.

    Complexity: O(E log V) using a binary heap priority queue.

    Example:
        >>> G = Graph(directed=True, weighted=True)
        >>> G.insert_nodes("A,B,C")
        3
        >>> G.add_edge("A", "B", 1.0), G.add_edge("B", "C", 2.0)
        (True, True)
        >>> dijkstra(G, "A").distances["C"]
        3.0
    """
    if not graph.weighted:
        return ShortestPathResult(
            status=Status.PRECONDITION_FAILED,
            message="Dijkstra requires a weighted graph",
        )

    source = graph.resolve_label(origin)
    if source is None:
        return ShortestPathResult(
            status=Status.NOT_FOUND, message=f"Source node {origin!r} not in graph"
        )

    for u, v, weight in graph.edges():
        if weight < 0:
            return ShortestPathResult(
                source=source,
                status=Status.PRECONDITION_FAILED,
                message=(
                    f"Dijkstra requires non-negative weights. "
                    f"Found negative weight {weight} on edge ({u}, {v})"
                ),
            )

    dist: Dict[str, float] = {label: float("inf") for label in graph.labels()}
    parent: Dict[str, Optional[str]] = {label: None for label in graph.labels()}
    dist[source] = 0.0

    pq = IndexedPriorityQueue()
    pq.push(source, (0.0, source))
    settled: set = set()

    while pq:
        u, (d, _) = pq.pop()
        settled.add(u)

        for v, weight in graph.neighbors(u):
            if v in settled:
                continue

            new_dist = d + weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                # Replaces v's stale entry, if any
                pq.push(v, (new_dist, v))

    paths = {
        label: reconstruct_path(parent, source, label) if dist[label] != float("inf") else None
        for label in graph.labels()
    }
    logger.debug("dijkstra from %r settled %d of %d nodes", source, len(settled), len(dist))

    return ShortestPathResult(source=source, distances=dist, predecessors=parent, paths=paths)
