"""Human-readable graph summaries."""

from .summary import format_graph, graph_summary, print_graph

__all__ = ["graph_summary", "format_graph", "print_graph"]
