"""Tests for debug mode functionality."""

import pytest

from graphengine import Graph
from graphengine.core.types import Edge
from graphengine.diagnostics import (
    GraphInvariantError,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        assert not is_debug_enabled()

        with debug_context(True):
            assert is_debug_enabled()

        # Back to previous (False in this block)
        assert not is_debug_enabled()

        set_debug_enabled(True)
        assert is_debug_enabled()

        with debug_context(False):
            assert not is_debug_enabled()

        # Back to True
        assert is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_mode_catches_corrupted_store() -> None:
    """Test that a mutation on a corrupted graph raises in debug mode."""
    G = Graph()
    G.insert_nodes("A,B,C")
    G.add_edge("A", "B")

    # Drop the mirror edge behind the facade's back
    G._store.remove_edge(G._registry.handle_of("B"), G._registry.handle_of("A"))

    with debug_context(True):
        with pytest.raises(GraphInvariantError, match="mirror"):
            G.insert_node("D")


def test_debug_mode_off_skips_checks() -> None:
    """Test that no check runs when debug mode is disabled."""
    G = Graph(weighted=True)
    G.insert_nodes("A,B")
    a, b = G._registry.handle_of("A"), G._registry.handle_of("B")
    G._store.row(a).edges.append(Edge(a, b, 0.0))

    with debug_context(False):
        assert G.insert_node("C")

    with debug_context(True):
        with pytest.raises(GraphInvariantError):
            G.insert_node("D")


def test_debug_context_restores_after_invariant_error() -> None:
    """Test the previous setting comes back when a checked mutation raises."""
    G = Graph(weighted=True, representation="matrix")
    G.insert_nodes("A,B")
    G._store._order[G._registry.handle_of("A")].append(G._registry.handle_of("B"))

    original = is_debug_enabled()
    try:
        set_debug_enabled(False)
        with pytest.raises(GraphInvariantError):
            with debug_context(True):
                G.insert_node("C")
        assert not is_debug_enabled()
    finally:
        set_debug_enabled(original)
