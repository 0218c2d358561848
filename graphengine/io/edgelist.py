"""Edge-list text import and export.

Format::

    V E D W
    origin destination [weight]
    ...
    label

The header gives the vertex count ``V``, the edge count ``E``, and the
directed/weighted flags ``D``/``W`` (``0`` or ``1``). Every following
non-blank line is a record: two tokens (three on weighted graphs) define an
edge, a single token defines an isolated vertex. Lines starting with ``#``
are comments. Vertex labels are the distinct tokens of all records, inserted
in numeric order when every label is an integer and in first-appearance order
otherwise. Unweighted graphs ignore a third column.

Malformed text raises GraphParseError. Records the graph itself rejects
(duplicate edges, a zero weight on a weighted graph) are logged and skipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple, Union

from graphengine.core import Graph, Representation
from graphengine.logging import get_logger

from .utils import (
    GraphParseError,
    format_weight,
    parse_count,
    parse_flag,
    parse_weight,
    sort_labels,
)

logger = get_logger(__name__)


def _records(text: str) -> List[Tuple[int, List[str]]]:
    """Return (line number, tokens) for every non-blank, non-comment line."""
    records = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        records.append((lineno, stripped.split()))
    return records


def parse_graph_string(
    text: str, representation: Union[Representation, str] = Representation.LIST
) -> Graph:
    """
    Parse edge-list text into a Graph.

    Parameters
    ----------
    text : str
        Edge-list source.
    representation : Representation or str
        Storage used by the resulting graph.

    Returns
    -------
    Graph
        Graph with the nodes and edges in the order supplied.

    Raises
    ------
    GraphParseError
        If the header is malformed, a flag is not 0/1, a weight is not a
        number, a record has the wrong number of fields, or the record counts
        disagree with the header.
    """
    records = _records(text)
    if not records:
        raise GraphParseError("Missing header line 'V E D W'.")

    header_line, header = records[0]
    if len(header) != 4:
        raise GraphParseError(
            f"Line {header_line}: header must have 4 fields 'V E D W', got {len(header)}."
        )
    vertex_count = parse_count(header[0], "vertex count")
    edge_count = parse_count(header[1], "edge count")
    directed = parse_flag(header[2], "directed flag")
    weighted = parse_flag(header[3], "weighted flag")

    labels: List[str] = []
    seen = set()
    edges: List[Tuple[str, str, float]] = []

    def remember(label: str) -> None:
        if label not in seen:
            seen.add(label)
            labels.append(label)

    for lineno, tokens in records[1:]:
        if len(tokens) == 1:
            remember(tokens[0])
        elif len(tokens) == 2 and not weighted:
            remember(tokens[0])
            remember(tokens[1])
            edges.append((tokens[0], tokens[1], 1.0))
        elif len(tokens) == 3:
            remember(tokens[0])
            remember(tokens[1])
            weight = parse_weight(tokens[2]) if weighted else 1.0
            edges.append((tokens[0], tokens[1], weight))
        else:
            expected = "'origin destination weight'" if weighted else "'origin destination'"
            raise GraphParseError(f"Line {lineno}: expected {expected} or a single label, got {tokens}.")

    if len(edges) != edge_count:
        raise GraphParseError(f"Header declares {edge_count} edges, found {len(edges)}.")
    if len(labels) != vertex_count:
        raise GraphParseError(f"Header declares {vertex_count} vertices, found {len(labels)}.")

    graph = Graph(directed=directed, weighted=weighted, representation=representation)
    for label in sort_labels(labels):
        graph.insert_node(label)

    rejected = 0
    for origin, destination, weight in edges:
        if not graph.add_edge(origin, destination, weight):
            rejected += 1
            logger.warning("Skipped edge (%s, %s, %s): rejected by graph", origin, destination, weight)

    logger.info(
        "Imported %d nodes and %d edges (%d rejected)", graph.node_count, len(edges) - rejected, rejected
    )
    return graph


def parse_graph_file(
    path: Union[str, Path], representation: Union[Representation, str] = Representation.LIST
) -> Graph:
    """
    Parse an edge-list file into a Graph.

    Parameters
    ----------
    path : str or Path
        Path to the edge-list file.
    representation : Representation or str
        Storage used by the resulting graph.

    Returns
    -------
    Graph

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    GraphParseError
        If the file content is malformed.
    """
    with open(path, "r", encoding="utf-8") as f:
        return parse_graph_string(f.read(), representation)


def export_graph_string(graph: Graph) -> str:
    """
    Serialize a Graph to edge-list text.

    Undirected edges are written once. Vertices without any incident edge
    are written as single-label records.

    Raises
    ------
    ValueError
        If a label contains whitespace and cannot be written as a token.
    """
    for label in graph.labels():
        if len(label.split()) != 1 or label.startswith("#"):
            raise ValueError(f"Label {label!r} cannot be written as an edge-list token.")

    edges = graph.edges()
    touched = {u for u, _, _ in edges} | {v for _, v, _ in edges}

    lines = [f"{graph.node_count} {len(edges)} {int(graph.directed)} {int(graph.weighted)}"]
    for u, v, weight in edges:
        if graph.weighted:
            lines.append(f"{u} {v} {format_weight(weight)}")
        else:
            lines.append(f"{u} {v}")
    lines.extend(label for label in graph.labels() if label not in touched)

    return "\n".join(lines) + "\n"


def export_graph_file(graph: Graph, path: Union[str, Path]) -> None:
    """Write ``graph`` to ``path`` in edge-list format."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(export_graph_string(graph))
