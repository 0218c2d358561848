"""Consistency checks for graph representations."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import numpy as np

if TYPE_CHECKING:
    from graphengine.core.graph import Graph


class GraphInvariantError(ValueError):
    """Raised when a graph violates one of its structural invariants."""


def graph_consistency_violations(graph: Graph) -> List[str]:
    """
    Collect every invariant violation found in ``graph``.

    Checks performed:
        - labels are unique
        - no ordered (origin, destination) pair appears twice
        - weights follow the weighted/unweighted rule
        - undirected graphs hold every edge in both directions with equal weight
        - the weight matrix agrees with the adjacency lists

    Parameters
    ----------
    graph:
        Graph to inspect.

    Returns
    -------
    List[str]
        Human-readable descriptions; empty when the graph is consistent.
    """
    violations: List[str] = []
    labels = graph.labels()

    if len(set(labels)) != len(labels):
        violations.append("duplicate node labels")

    index = {label: i for i, label in enumerate(labels)}
    expected = np.zeros((len(labels), len(labels)))

    for u in labels:
        neighbors = graph.neighbors(u)
        targets = [v for v, _ in neighbors]
        if len(set(targets)) != len(targets):
            violations.append(f"parallel edges leaving {u!r}")

        for v, weight in neighbors:
            expected[index[u], index[v]] = weight
            if graph.weighted and weight == 0:
                violations.append(f"zero weight on edge ({u!r}, {v!r})")
            if not graph.weighted and weight != 1:
                violations.append(f"weight {weight} on unweighted edge ({u!r}, {v!r})")
            if not graph.directed:
                mirror = graph.get_edge_weight(v, u) if graph.does_edge_exist(v, u) else None
                if mirror != weight:
                    violations.append(f"edge ({u!r}, {v!r}) has no matching mirror")

    if not np.array_equal(graph.adjacency_matrix(), expected):
        violations.append("weight matrix disagrees with adjacency lists")

    return violations


def check_graph_consistency(graph: Graph) -> None:
    """
    Raise if ``graph`` violates any structural invariant.

    Raises
    ------
    GraphInvariantError
        Listing every violation found.
    """
    violations = graph_consistency_violations(graph)
    if violations:
        raise GraphInvariantError("; ".join(violations))


def is_graph_consistent(graph: Graph) -> bool:
    return not graph_consistency_violations(graph)
