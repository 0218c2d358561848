"""
Maximum flow: Ford-Fulkerson and an edge-orientation local search.

Ford-Fulkerson works on a private residual copy of the graph (directed,
weighted, capacities = edge weights; unweighted edges have capacity 1).
Augmenting paths are found with a stack-based DFS, so the first path found is
used and no shortest-path guarantee applies (this is not Edmonds-Karp).

The orientation search treats a max-flow value as the objective and
hill-climbs over single edge reversals.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 26.2 (Ford-Fulkerson method).
"""

import math
from typing import Dict, List, Optional

from graphengine.core import Graph, NodeRef
from graphengine.logging import get_logger

from .results import AugmentingPath, MaxFlowResult, OrientationResult, Status
from .utils import reconstruct_path

logger = get_logger(__name__)


def _residual_copy(graph: Graph) -> Graph:
    residual = Graph(directed=True, weighted=True, representation=graph.representation)
    for label in graph.labels():
        residual.insert_node(label)
    for u in graph.labels():
        for v, capacity in graph.neighbors(u):
            residual.add_edge(u, v, capacity)
    return residual


def _find_augmenting_path(residual: Graph, source: str, sink: str) -> Optional[List[str]]:
    """DFS over edges with positive residual capacity; first path found wins."""
    parent: Dict[str, Optional[str]] = {source: None}
    stack = [source]

    while stack:
        u = stack.pop()
        if u == sink:
            break
        for v, capacity in residual.neighbors(u):
            if capacity > 0 and v not in parent:
                parent[v] = u
                stack.append(v)

    return reconstruct_path(parent, source, sink)


def _augment(residual: Graph, path: List[str], bottleneck: float) -> None:
    for u, v in zip(path, path[1:]):
        capacity = residual.get_edge_weight(u, v)
        if math.isclose(capacity, bottleneck):
            residual.remove_edge(u, v)
        else:
            residual.set_edge_weight(u, v, capacity - bottleneck)

        if residual.does_edge_exist(v, u):
            residual.set_edge_weight(v, u, residual.get_edge_weight(v, u) + bottleneck)
        else:
            residual.add_edge(v, u, bottleneck)


def ford_fulkerson(graph: Graph, source: NodeRef, sink: NodeRef) -> MaxFlowResult:
    """
    Ford-Fulkerson maximum flow from source to sink.

    Args:
        graph: Graph whose edge weights are capacities (1 on unweighted graphs).
        source: Index or label of the source vertex.
        sink: Index or label of the sink vertex.

    Returns:
        MaxFlowResult with the flow value and every augmenting path used.
        Status NOT_FOUND if source or sink is missing, PRECONDITION_FAILED if
        they coincide or a capacity is negative.

    Complexity: O(E * f) where f is the max-flow value (integer capacities).

    Example:
        >>> G = Graph(directed=True, weighted=True)
        >>> G.insert_nodes("s,a,t")
        3
        >>> G.add_edge("s", "a", 3), G.add_edge("a", "t", 2)
        (True, True)
        >>> ford_fulkerson(G, "s", "t").flow_value
        2.0
    """
    source_label = graph.resolve_label(source)
    sink_label = graph.resolve_label(sink)
    if source_label is None or sink_label is None:
        return MaxFlowResult(
            source=source_label,
            sink=sink_label,
            status=Status.NOT_FOUND,
            message=f"Source {source!r} or sink {sink!r} not in graph",
        )
    if source_label == sink_label:
        return MaxFlowResult(
            source=source_label,
            sink=sink_label,
            status=Status.PRECONDITION_FAILED,
            message="Source and sink must be different vertices",
        )
    for u, v, capacity in graph.edges():
        if capacity < 0:
            return MaxFlowResult(
                source=source_label,
                sink=sink_label,
                status=Status.PRECONDITION_FAILED,
                message=f"Negative capacity {capacity} on edge ({u}, {v})",
            )

    residual = _residual_copy(graph)
    flow = 0.0
    paths: List[AugmentingPath] = []

    while True:
        path = _find_augmenting_path(residual, source_label, sink_label)
        if path is None:
            break

        bottleneck = min(residual.get_edge_weight(u, v) for u, v in zip(path, path[1:]))
        _augment(residual, path, bottleneck)
        flow += bottleneck
        paths.append(AugmentingPath(path=path, bottleneck=bottleneck))

    logger.debug(
        "max flow %r -> %r: %s over %d augmenting paths", source_label, sink_label, flow, len(paths)
    )
    return MaxFlowResult(
        source=source_label, sink=sink_label, flow_value=flow, augmenting_paths=paths
    )


def optimize_edge_orientation(graph: Graph, source: NodeRef, sink: NodeRef) -> OrientationResult:
    """
    Local search over edge orientations to increase the max flow.

    Starting from the Ford-Fulkerson value of ``graph``, each pass tries
    reversing the current edges one at a time on a private copy and
    recomputes the max flow. The first strictly improving reversal is
    accepted and the pass restarts; the search ends after a full pass without
    improvement. A reversal is skipped when the opposite edge already exists.
    ``graph`` itself is never modified.

    Args:
        graph: Directed graph.
        source: Index or label of the source vertex.
        sink: Index or label of the sink vertex.

    Returns:
        OrientationResult with baseline and improved flow values, the accepted
        flips, and the final edge list. Status PRECONDITION_FAILED on an
        undirected graph; otherwise the Ford-Fulkerson status of the baseline
        when that run fails.

    Complexity: O(P * E * F) where P is the number of passes and F the cost
    of one max-flow computation.
    """
    if not graph.directed:
        return OrientationResult(
            status=Status.PRECONDITION_FAILED,
            message="Edge orientation search requires a directed graph",
        )

    baseline = ford_fulkerson(graph, source, sink)
    if not baseline.success:
        return OrientationResult(status=baseline.status, message=baseline.message)

    current = graph.copy()
    best_flow = baseline.flow_value
    flips = []

    improved = True
    while improved:
        improved = False
        for u, v, weight in current.edges():
            if current.does_edge_exist(v, u):
                continue

            candidate = current.copy()
            candidate.remove_edge(u, v)
            candidate.add_edge(v, u, weight)

            flow = ford_fulkerson(candidate, source, sink).flow_value
            if flow > best_flow and not math.isclose(flow, best_flow):
                logger.debug("flipping (%r, %r) raises flow %s -> %s", u, v, best_flow, flow)
                current = candidate
                best_flow = flow
                flips.append((u, v))
                improved = True
                break

    return OrientationResult(
        baseline_flow=baseline.flow_value,
        flow_value=best_flow,
        flipped_edges=flips,
        edges=current.edges(),
    )
