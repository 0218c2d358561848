"""Pytest configuration and shared fixtures for graphengine tests.

This module provides:
- A deterministic numpy RNG fixture
- A factory fixture building random graphs for property-style tests
- The A..F reference graph used by several algorithm tests
"""

import os
from typing import Callable, Iterator

import numpy as np
import pytest

from graphengine import Graph, Representation, set_debug_enabled

REPRESENTATIONS = [Representation.LIST, Representation.MATRIX]


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_mode_on() -> Iterator[None]:
    """Run every test with consistency checks after each graph mutation."""
    set_debug_enabled(True)
    yield
    set_debug_enabled(False)


@pytest.fixture(params=REPRESENTATIONS, ids=lambda r: r.value)
def representation(request) -> Representation:
    """Parametrize a test over both storage representations."""
    return request.param


@pytest.fixture
def random_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory building a random graph with labels N0..N{n-1}.

    Weights are integers in [1, 9] on weighted graphs.
    """

    def build(
        n: int = 8,
        density: float = 0.35,
        directed: bool = False,
        weighted: bool = True,
        representation: Representation = Representation.LIST,
    ) -> Graph:
        G = Graph(directed=directed, weighted=weighted, representation=representation)
        labels = [f"N{i}" for i in range(n)]
        G.insert_nodes(labels)
        for u in labels:
            for v in labels:
                if u == v or rng.random() >= density:
                    continue
                weight = int(rng.integers(1, 10)) if weighted else 1
                # Undirected duplicates are rejected by the graph itself
                G.add_edge(u, v, weight)
        return G

    return build


@pytest.fixture
def six_node_graph(representation: Representation) -> Graph:
    """Undirected weighted graph on A..F with ten edges."""
    G = Graph(directed=False, weighted=True, representation=representation)
    G.insert_nodes("A,B,C,D,E,F")
    for u, v, w in [
        ("A", "B", 1), ("A", "C", 2), ("A", "D", 3), ("A", "E", 4), ("A", "F", 5),
        ("B", "C", 6), ("B", "F", 7), ("C", "D", 8), ("D", "E", 9), ("E", "F", 10),
    ]:
        assert G.add_edge(u, v, w)
    return G
