"""
Graph traversal algorithms: BFS and DFS.

DFS follows adjacency order; BFS enqueues neighbors in ascending label order
so its result does not depend on edge insertion order.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Dict, List, Optional, Tuple

from graphengine.core import Graph, NodeRef

from .results import Status, TraversalResult


def dfs(graph: Graph, origin: NodeRef) -> TraversalResult:
    """
    Depth-first search (iterative, explicit stack).

    Nodes are recorded in pre-order. A node that is already visited is
    skipped when it is popped, not when it is pushed, so the stack may hold
    duplicate entries.

    Args:
        graph: Graph to traverse.
        origin: Index or label of the start vertex.

    Returns:
        TraversalResult with the pre-order visitation order and discovery
        parents. Status NOT_FOUND (empty order) if the origin does not exist.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = Graph()
        >>> G.insert_nodes("A,B,C")
        3
        >>> G.add_edge("A", "B"), G.add_edge("A", "C")
        (True, True)
        >>> dfs(G, "A").order
        ['A', 'B', 'C']
    """
    source = graph.resolve_label(origin)
    if source is None:
        return TraversalResult(status=Status.NOT_FOUND, message=f"Origin {origin!r} not in graph")

    order: List[str] = []
    parents: Dict[str, Optional[str]] = {}
    visited: set = set()
    stack: List[Tuple[str, Optional[str]]] = [(source, None)]  # (node, pushed_by)

    while stack:
        u, pushed_by = stack.pop()
        if u in visited:
            continue

        visited.add(u)
        order.append(u)
        parents[u] = pushed_by

        # Push in reverse so neighbors pop in adjacency order
        for v, _ in reversed(graph.neighbors(u)):
            stack.append((v, u))

    return TraversalResult(order=order, parents=parents)


def bfs(graph: Graph, origin: NodeRef) -> TraversalResult:
    """
    Breadth-first search from an origin vertex.

    Args:
        graph: Graph to traverse.
        origin: Index or label of the start vertex.

    Returns:
        TraversalResult with the BFS visitation order and discovery parents.
        Status NOT_FOUND (empty order) if the origin does not exist.

    Complexity: O(V + E log deg) because each neighbor list is sorted.

    Example:
        >>> G = Graph()
        >>> G.insert_nodes("A,C,B")
        3
        >>> G.add_edge("A", "C"), G.add_edge("A", "B")
        (True, True)
        >>> bfs(G, "A").order
        ['A', 'B', 'C']
    """
    source = graph.resolve_label(origin)
    if source is None:
        return TraversalResult(status=Status.NOT_FOUND, message=f"Origin {origin!r} not in graph")

    order: List[str] = []
    parents: Dict[str, Optional[str]] = {source: None}
    queue = deque([source])

    while queue:
        u = queue.popleft()
        order.append(u)

        for v in sorted(label for label, _ in graph.neighbors(u)):
            if v not in parents:
                parents[v] = u
                queue.append(v)

    return TraversalResult(order=order, parents=parents)
