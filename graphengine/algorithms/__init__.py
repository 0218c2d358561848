"""
Graph algorithms.

- Traversal: dfs, bfs
- Shortest paths: dijkstra
- Minimum spanning trees: prim, kruskal (UnionFind)
- Maximum flow: ford_fulkerson, optimize_edge_orientation
- Vertex coloring: brute force, Welsh-Powell, DSATUR, greedy

Every entry point takes a Graph and returns a result dataclass carrying a
Status; none of them print or mutate their input.
"""

from .coloring import (
    brute_force_coloring,
    dsatur_coloring,
    first_available_color,
    greedy_coloring,
    welsh_powell_coloring,
)
from .flow import ford_fulkerson, optimize_edge_orientation
from .mst import UnionFind, kruskal, prim
from .results import (
    AugmentingPath,
    ColoringResult,
    MaxFlowResult,
    OrientationResult,
    ShortestPathResult,
    SpanningTreeResult,
    Status,
    TraversalResult,
)
from .shortest import dijkstra
from .traversal import bfs, dfs
from .utils import IndexedPriorityQueue, reconstruct_path

__all__ = [
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
    "Status",
    "TraversalResult",
    "ShortestPathResult",
    "SpanningTreeResult",
    "AugmentingPath",
    "MaxFlowResult",
    "OrientationResult",
    "ColoringResult",
    "IndexedPriorityQueue",
    "reconstruct_path",
]
