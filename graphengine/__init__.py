"""graphengine - graph representations and classic graph algorithms."""

__version__ = "0.1.0"

# Algorithms
from .algorithms import (
    AugmentingPath,
    ColoringResult,
    IndexedPriorityQueue,
    MaxFlowResult,
    OrientationResult,
    ShortestPathResult,
    SpanningTreeResult,
    Status,
    TraversalResult,
    UnionFind,
    bfs,
    brute_force_coloring,
    dfs,
    dijkstra,
    dsatur_coloring,
    first_available_color,
    ford_fulkerson,
    greedy_coloring,
    kruskal,
    optimize_edge_orientation,
    prim,
    reconstruct_path,
    welsh_powell_coloring,
)

# Core representations
from .core import NO_EDGE_WEIGHT, Edge, Graph, Node, NodeRef, Representation

# Diagnostics
from .diagnostics import (
    GraphInvariantError,
    check_graph_consistency,
    debug_context,
    is_debug_enabled,
    is_graph_consistent,
    set_debug_enabled,
)

# Edge-list I/O
from .io import (
    GraphParseError,
    export_graph_file,
    export_graph_string,
    parse_graph_file,
    parse_graph_string,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Summaries
from .viz import format_graph, graph_summary, print_graph

__all__ = [
    "__version__",
    # Core
    "Graph",
    "Node",
    "Edge",
    "NodeRef",
    "Representation",
    "NO_EDGE_WEIGHT",
    # Algorithms
    "dfs",
    "bfs",
    "dijkstra",
    "prim",
    "kruskal",
    "UnionFind",
    "ford_fulkerson",
    "optimize_edge_orientation",
    "first_available_color",
    "brute_force_coloring",
    "welsh_powell_coloring",
    "dsatur_coloring",
    "greedy_coloring",
    "reconstruct_path",
    "IndexedPriorityQueue",
    # Results
    "Status",
    "TraversalResult",
    "ShortestPathResult",
    "SpanningTreeResult",
    "AugmentingPath",
    "MaxFlowResult",
    "OrientationResult",
    "ColoringResult",
    # Diagnostics
    "GraphInvariantError",
    "check_graph_consistency",
    "is_graph_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # I/O
    "GraphParseError",
    "parse_graph_string",
    "parse_graph_file",
    "export_graph_string",
    "export_graph_file",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Summaries
    "graph_summary",
    "format_graph",
    "print_graph",
]

# Example usage:
# from graphengine import Graph, dijkstra
#
# G = Graph(directed=True, weighted=True)
# G.insert_nodes("A,B,C")
# G.add_edge("A", "B", 1.0)
# G.add_edge("B", "C", 2.0)
# dijkstra(G, "A").paths["C"]  # ['A', 'B', 'C']
