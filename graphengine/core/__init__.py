"""
Graph representation core.

- NodeRegistry: arena of uniquely labelled vertices with stable handles
- EdgeStore variants: ListEdgeStore (adjacency list), MatrixEdgeStore (numpy matrix)
- Graph: representation-agnostic facade used by every algorithm
"""

from .graph import Graph
from .registry import NodeRegistry
from .storage import AdjacencyListNode, EdgeStore, ListEdgeStore, MatrixEdgeStore
from .types import NO_EDGE_WEIGHT, Edge, Node, NodeRef, Representation

__all__ = [
    "Graph",
    "NodeRegistry",
    "EdgeStore",
    "ListEdgeStore",
    "MatrixEdgeStore",
    "AdjacencyListNode",
    "Node",
    "Edge",
    "NodeRef",
    "Representation",
    "NO_EDGE_WEIGHT",
]
