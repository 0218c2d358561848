"""Diagnostics and debugging utilities for graphengine."""

from .core import (
    GraphInvariantError,
    check_graph_consistency,
    graph_consistency_violations,
    is_graph_consistent,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "GraphInvariantError",
    "check_graph_consistency",
    "graph_consistency_violations",
    "is_graph_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
