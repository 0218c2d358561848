"""
Minimum spanning tree algorithms: Prim and Kruskal.

Prim grows a single tree by repeatedly scanning every boundary edge.
Kruskal sorts the undirected edges and joins components with an
array-backed union-find.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 21.3 (disjoint-set forests), 23.2 (Kruskal and Prim).
"""

from typing import List, Optional, Tuple

from graphengine.core import Graph
from graphengine.logging import get_logger

from .results import SpanningTreeResult, Status

logger = get_logger(__name__)


class UnionFind:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by rank.

    Elements are the integers 0..size-1. Used by Kruskal's algorithm for
    cycle detection.
    """

    def __init__(self, size: int):
        """
        Initialize ``size`` singleton sets.

        Args:
            size: Number of elements.
        """
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size

    def find(self, x: int) -> int:
        """
        Find root of x with path compression.

        Args:
            x: Element to find root for.

        Returns:
            Root element.
        """
        if self.parent[x] != x:
            self.parent[x] = self.find(self.parent[x])
        return self.parent[x]

    def union(self, x: int, y: int) -> bool:
        """
        Union sets containing x and y using union by rank.

        Args:
            x: First element.
            y: Second element.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        # Union by rank
        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        return True


def _tree_result(edges: List[Tuple[str, str, float]], node_count: int, name: str) -> SpanningTreeResult:
    total = sum(weight for _, _, weight in edges)
    if len(edges) < node_count - 1:
        logger.info(
            "%s: graph is disconnected, tree has %d of %d edges", name, len(edges), node_count - 1
        )
        return SpanningTreeResult(
            edges=edges,
            total_weight=total,
            node_count=node_count,
            status=Status.INCOMPLETE,
            message="Graph is disconnected; spanning tree is incomplete",
        )
    return SpanningTreeResult(edges=edges, total_weight=total, node_count=node_count)


def prim(graph: Graph) -> SpanningTreeResult:
    """
    Prim's algorithm for minimum spanning tree.

    Starts from the first vertex in storage order. Each round scans every
    edge from an included vertex to an excluded one and takes the globally
    cheapest (ties go to the earlier origin, then adjacency order).

    Args:
        graph: Weighted graph.

    Returns:
        SpanningTreeResult with edges in the order they were added. Status
        INCOMPLETE for disconnected graphs, EMPTY for a graph with no
        vertices, PRECONDITION_FAILED for an unweighted graph.

    Complexity: O(V * E), one full boundary scan per added vertex.

    Example:
        >>> G = Graph(weighted=True)
        >>> G.insert_nodes("A,B,C")
        3
        >>> G.add_edge("A", "B", 1.0), G.add_edge("B", "C", 2.0), G.add_edge("A", "C", 3.0)
        (True, True, True)
        >>> prim(G).total_weight
        3.0
    """
    if not graph.weighted:
        return SpanningTreeResult(
            status=Status.PRECONDITION_FAILED, message="Prim requires a weighted graph"
        )

    labels = graph.labels()
    if not labels:
        return SpanningTreeResult(status=Status.EMPTY, message="Graph has no vertices")

    included = {labels[0]}
    remaining = labels[1:]
    tree_edges: List[Tuple[str, str, float]] = []

    while remaining:
        best: Optional[Tuple[str, str, float]] = None
        for u in labels:
            if u not in included:
                continue
            for v, weight in graph.neighbors(u):
                if v not in included and (best is None or weight < best[2]):
                    best = (u, v, weight)

        if best is None:
            break

        tree_edges.append(best)
        included.add(best[1])
        remaining.remove(best[1])

    return _tree_result(tree_edges, len(labels), "prim")


def kruskal(graph: Graph) -> SpanningTreeResult:
    """
    Kruskal's algorithm for minimum spanning tree.

    Each undirected edge is considered once, in ascending weight order (ties
    keep edge listing order). An edge is accepted when its endpoints lie in
    different union-find components; the scan stops at V - 1 edges.

    Args:
        graph: Weighted, undirected graph.

    Returns:
        SpanningTreeResult with edges in acceptance order. Status INCOMPLETE
        for disconnected graphs (spanning forest), EMPTY for a graph with no
        vertices, PRECONDITION_FAILED for unweighted or directed graphs.

    Complexity: O(E log E) for sorting plus near-constant union-find operations.
    """
    if not graph.weighted:
        return SpanningTreeResult(
            status=Status.PRECONDITION_FAILED, message="Kruskal requires a weighted graph"
        )
    if graph.directed:
        return SpanningTreeResult(
            status=Status.PRECONDITION_FAILED, message="Kruskal requires an undirected graph"
        )

    labels = graph.labels()
    if not labels:
        return SpanningTreeResult(status=Status.EMPTY, message="Graph has no vertices")

    index = {label: i for i, label in enumerate(labels)}

    candidates = []
    seen = set()
    for u, v, weight in graph.edges():
        pair = frozenset((u, v))
        if pair not in seen:
            seen.add(pair)
            candidates.append((u, v, weight))
    candidates.sort(key=lambda edge: edge[2])

    uf = UnionFind(len(labels))
    tree_edges: List[Tuple[str, str, float]] = []

    for u, v, weight in candidates:
        if len(tree_edges) == len(labels) - 1:
            break
        if uf.union(index[u], index[v]):
            tree_edges.append((u, v, weight))

    return _tree_result(tree_edges, len(labels), "kruskal")
