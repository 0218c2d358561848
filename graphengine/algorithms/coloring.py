"""
Vertex coloring heuristics.

All functions treat adjacency as undirected (an edge in either direction
makes two vertices neighbors) and ignore self-loops. Colors are positive
integers starting at 1. None of them mutate the graph.

- brute_force_coloring: exhaustive search for the smallest k
- welsh_powell_coloring: descending-degree sweeps, one color per sweep
- dsatur_coloring: saturation-degree ordering (Brelaz)
- greedy_coloring: storage order, first available color

References:
    - Welsh, D. J. A., Powell, M. B. "An upper bound for the chromatic number
      of a graph and its application to timetabling problems" (1967).
    - Brelaz, D. "New methods to color the vertices of a graph" (1979).
"""

import itertools
from typing import Dict, List, Optional

from graphengine.core import Graph, NodeRef
from graphengine.logging import get_logger

from .results import ColoringResult, Status

logger = get_logger(__name__)


def _coloring_adjacency(graph: Graph) -> Dict[str, List[str]]:
    adjacency: Dict[str, List[str]] = {label: [] for label in graph.labels()}
    for u, v, _ in graph.edges():
        if u == v:
            continue
        if v not in adjacency[u]:
            adjacency[u].append(v)
        if u not in adjacency[v]:
            adjacency[v].append(u)
    return adjacency


def _smallest_free_color(neighbors: List[str], coloring: Dict[str, int]) -> int:
    used = {coloring[n] for n in neighbors if n in coloring}
    color = 1
    while color in used:
        color += 1
    return color


def _finish(coloring: Dict[str, int], algorithm: str) -> ColoringResult:
    num_colors = len(set(coloring.values()))
    logger.debug("%s coloring used %d colors", algorithm, num_colors)
    return ColoringResult(coloring=coloring, num_colors=num_colors, algorithm=algorithm)


def first_available_color(graph: Graph, node: NodeRef, coloring: Dict[str, int]) -> int:
    """
    Smallest positive color not held by any already-colored neighbor of ``node``.

    Args:
        graph: Graph the node belongs to.
        node: Index or label of the vertex.
        coloring: Partial label -> color assignment.

    Returns:
        The color (1 if the node does not exist).
    """
    label = graph.resolve_label(node)
    if label is None:
        return 1
    return _smallest_free_color(_coloring_adjacency(graph)[label], coloring)


def brute_force_coloring(graph: Graph, max_colors: Optional[int] = None) -> ColoringResult:
    """
    Exhaustive search for a proper coloring with the fewest colors.

    For k = 1, 2, ... the k-colorings of the vertex sequence are enumerated
    as a base-k counter (last vertex changes fastest) until one has no
    monochromatic edge.

    Args:
        graph: Graph to color.
        max_colors: Upper bound on k (defaults to the vertex count).

    Returns:
        ColoringResult; status INCOMPLETE with an empty coloring when no
        proper coloring exists within ``max_colors``, EMPTY for a graph with
        no vertices.

    Complexity: O(k^V * E) in the worst case; only practical for small graphs.
    """
    labels = graph.labels()
    if not labels:
        return ColoringResult(algorithm="brute_force", status=Status.EMPTY, message="Graph has no vertices")

    adjacency = _coloring_adjacency(graph)
    index = {label: i for i, label in enumerate(labels)}
    conflicts = [
        (index[u], index[v]) for u in labels for v in adjacency[u] if index[u] < index[v]
    ]

    limit = len(labels) if max_colors is None else min(len(labels), max_colors)
    for k in range(1, limit + 1):
        for assignment in itertools.product(range(1, k + 1), repeat=len(labels)):
            if all(assignment[i] != assignment[j] for i, j in conflicts):
                return _finish(dict(zip(labels, assignment)), "brute_force")

    return ColoringResult(
        algorithm="brute_force",
        status=Status.INCOMPLETE,
        message=f"No proper coloring with at most {limit} colors",
    )


def welsh_powell_coloring(graph: Graph) -> ColoringResult:
    """
    Welsh-Powell coloring.

    Vertices are sorted by descending degree (ties keep storage order). Each
    sweep over that list gives the current color to every uncolored vertex
    with no neighbor already holding it; then the next color starts a new sweep.

    Complexity: O(V^2 + E) per color.
    """
    labels = graph.labels()
    if not labels:
        return ColoringResult(algorithm="welsh_powell", status=Status.EMPTY, message="Graph has no vertices")

    adjacency = _coloring_adjacency(graph)
    order = sorted(labels, key=lambda label: -len(adjacency[label]))

    coloring: Dict[str, int] = {}
    color = 0
    while len(coloring) < len(labels):
        color += 1
        for label in order:
            if label in coloring:
                continue
            if all(coloring.get(n) != color for n in adjacency[label]):
                coloring[label] = color

    return _finish({label: coloring[label] for label in labels}, "welsh_powell")


def dsatur_coloring(graph: Graph) -> ColoringResult:
    """
    DSATUR coloring.

    The highest-degree vertex gets color 1. Then, repeatedly, the uncolored
    vertex with the most distinctly colored neighbors (saturation) is picked,
    ties broken by degree and then storage order, and given the first
    available color.

    Complexity: O(V^2 + E).
    """
    labels = graph.labels()
    if not labels:
        return ColoringResult(algorithm="dsatur", status=Status.EMPTY, message="Graph has no vertices")

    adjacency = _coloring_adjacency(graph)
    neighbor_colors: Dict[str, set] = {label: set() for label in labels}
    coloring: Dict[str, int] = {}

    def assign(label: str, color: int) -> None:
        coloring[label] = color
        for n in adjacency[label]:
            neighbor_colors[n].add(color)

    assign(max(labels, key=lambda label: len(adjacency[label])), 1)

    while len(coloring) < len(labels):
        uncolored = [label for label in labels if label not in coloring]
        chosen = max(
            uncolored, key=lambda label: (len(neighbor_colors[label]), len(adjacency[label]))
        )
        assign(chosen, _smallest_free_color(adjacency[chosen], coloring))

    return _finish({label: coloring[label] for label in labels}, "dsatur")


def greedy_coloring(graph: Graph) -> ColoringResult:
    """
    Naive greedy coloring in storage order using the first available color.

    Complexity: O(V + E).
    """
    labels = graph.labels()
    if not labels:
        return ColoringResult(algorithm="greedy", status=Status.EMPTY, message="Graph has no vertices")

    adjacency = _coloring_adjacency(graph)
    coloring: Dict[str, int] = {}
    for label in labels:
        coloring[label] = _smallest_free_color(adjacency[label], coloring)

    return _finish(coloring, "greedy")
