"""Debug mode for graphengine.

While debug mode is on, every successful Graph mutation (node or edge
insertion, removal, weight change) re-runs
:func:`graphengine.diagnostics.check_graph_consistency` and raises
GraphInvariantError as soon as the representation drifts. Rejected mutations
change nothing and are not checked.

The flag starts from the ``GRAPHENGINE_DEBUG`` environment variable
(``1``/``true``/``yes``/``on``) and is process-wide.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "GRAPHENGINE_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def is_debug_enabled() -> bool:
    """Return True when graph mutations are followed by a consistency check."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn per-mutation consistency checks on or off for every graph.

    Parameters
    ----------
    enabled:
        True to check graphs after each successful mutation.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Switch consistency checks on (or off) for the duration of a block.

    The previous setting is restored on exit, including when the block
    raises GraphInvariantError.

    Example
    -------
    >>> G = Graph(weighted=True, representation="matrix")
    >>> G.insert_nodes("A,B")
    2
    >>> with debug_context(True):
    ...     G.add_edge("A", "B", 2.0)  # matrix and adjacency re-checked here
    True
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
