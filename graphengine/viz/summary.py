"""Graph summary and text rendering utilities.

This module provides the human-readable view of a graph: one line per
vertex with its index, label, and adjacent labels.
"""

from __future__ import annotations

import sys
from typing import IO, Any, Dict, Optional

from graphengine.core import Graph


def graph_summary(graph: Graph) -> Dict[str, Any]:
    """
    Generate a summary dictionary for a graph.

    Parameters
    ----------
    graph:
        Graph to summarize.

    Returns
    -------
    Dict[str, Any]
        Dictionary containing:
        - representation: str ("list" or "matrix")
        - directed: bool
        - weighted: bool
        - node_count: int
        - edge_count: int
        - adjacency: Dict[str, List[str]] (out-neighbors in adjacency order)
    """
    return {
        "representation": graph.representation.value,
        "directed": graph.directed,
        "weighted": graph.weighted,
        "node_count": graph.node_count,
        "edge_count": graph.edge_count,
        "adjacency": {
            label: [v for v, _ in graph.neighbors(label)] for label in graph.labels()
        },
    }


def format_graph(graph: Graph) -> str:
    """
    Render the adjacency view of a graph as text.

    The first line is the column header ``index | label | adjacent nodes``,
    followed by ``<index> - <label> - [<a>, <b>, ...]`` for every vertex.
    """
    lines = ["index | label | adjacent nodes"]
    for index, label in enumerate(graph.labels()):
        adjacent = ", ".join(v for v, _ in graph.neighbors(label))
        lines.append(f"{index} - {label} - [{adjacent}]")
    return "\n".join(lines)


def print_graph(graph: Graph, file: Optional[IO[str]] = None) -> None:
    """
    Pretty-print a graph to stdout or a file.

    This is a utility function for human-readable output, so it uses print()
    intentionally. For programmatic access, use graph_summary() instead.

    Parameters
    ----------
    graph:
        Graph to print.
    file:
        File-like object to write to. If None, writes to sys.stdout.
    """
    if file is None:
        file = sys.stdout

    kind = "directed" if graph.directed else "undirected"
    weight = "weighted" if graph.weighted else "unweighted"
    print(f"Graph ({graph.representation.value}, {kind}, {weight})", file=file)
    print(format_graph(graph), file=file)
