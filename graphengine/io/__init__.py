"""I/O for the edge-list text format."""

from .edgelist import export_graph_file, export_graph_string, parse_graph_file, parse_graph_string
from .utils import GraphParseError, parse_weight

__all__ = [
    "parse_graph_string",
    "parse_graph_file",
    "export_graph_string",
    "export_graph_file",
    "GraphParseError",
    "parse_weight",
]
