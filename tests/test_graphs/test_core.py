"""Tests for the Graph facade."""

import numpy as np
import pytest

from graphengine import NO_EDGE_WEIGHT, Graph, Representation


class TestNodes:
    """Tests for vertex insertion, lookup, and removal."""

    def test_empty_graph(self, representation):
        """Test empty graph creation."""
        G = Graph(representation=representation)
        assert G.directed is False
        assert G.weighted is False
        assert G.representation is representation
        assert G.node_count == 0
        assert G.edge_count == 0
        assert G.labels() == []
        assert G.edges() == []

    def test_representation_from_string(self):
        """Test that representations can be given by name."""
        assert Graph(representation="matrix").representation is Representation.MATRIX
        assert Graph(representation="list").representation is Representation.LIST
        with pytest.raises(ValueError):
            Graph(representation="tree")

    def test_insert_node(self, representation):
        """Test inserting nodes assigns indices in order."""
        G = Graph(representation=representation)
        assert G.insert_node("A")
        assert G.insert_node("B")
        assert G.labels() == ["A", "B"]
        assert G.get_node_index_by_label("B") == 1
        assert G.label_node(0) == "A"
        assert "A" in G
        assert len(G) == 2

    def test_insert_duplicate_label(self, representation):
        """Test that duplicate labels are rejected."""
        G = Graph(representation=representation)
        assert G.insert_node("A")
        assert not G.insert_node("A")
        assert G.node_count == 1

    def test_labels_are_case_sensitive(self):
        """Test that labels differing only in case are distinct."""
        G = Graph()
        assert G.insert_node("a")
        assert G.insert_node("A")
        assert G.node_count == 2

    def test_insert_empty_label(self):
        """Test that empty labels are rejected."""
        G = Graph()
        assert not G.insert_node("")
        assert G.node_count == 0

    def test_insert_nodes_batch(self, representation):
        """Test batch insertion from a comma-separated string."""
        G = Graph(representation=representation)
        assert G.insert_nodes(" A, B,,C , A") == 3
        assert G.labels() == ["A", "B", "C"]

    def test_insert_nodes_iterable(self):
        """Test batch insertion from an iterable."""
        G = Graph()
        assert G.insert_nodes(["X", "Y", " "]) == 2

    def test_missing_lookups(self):
        """Test lookups of unknown labels and indices."""
        G = Graph()
        G.insert_node("A")
        assert G.get_node_index_by_label("Z") == -1
        assert G.label_node(5) is None
        assert G.label_node(-1) is None
        assert G.get_adjacent_nodes(3) == []
        assert G.get_adjacent_nodes("Z") == []

    def test_bool_is_not_an_index(self):
        """Test that True/False are not treated as indices 1/0."""
        G = Graph()
        G.insert_nodes("A,B")
        assert not G.has_node(True)
        assert not G.add_edge(False, True)

    def test_remove_node_by_index_and_label(self, representation):
        """Test removal by index and by label."""
        G = Graph(representation=representation)
        G.insert_nodes("A,B,C")
        assert G.remove_node(1)
        assert G.labels() == ["A", "C"]
        assert G.remove_node("A")
        assert G.labels() == ["C"]

    def test_remove_missing_node(self):
        """Test that removing an unknown vertex fails."""
        G = Graph()
        G.insert_node("A")
        assert not G.remove_node(1)
        assert not G.remove_node("B")
        assert G.node_count == 1

    def test_remove_node_shifts_indices(self, representation):
        """Test that later indices shift down after removal."""
        G = Graph(representation=representation)
        G.insert_nodes("A,B,C,D")
        G.remove_node("B")
        assert G.get_node_index_by_label("C") == 1
        assert G.get_node_index_by_label("D") == 2
        assert G.label_node(1) == "C"


class TestEdges:
    """Tests for edge insertion, removal, and queries."""

    def test_add_edge_undirected(self, representation):
        """Test that undirected edges are mirrored."""
        G = Graph(representation=representation)
        G.insert_nodes("A,B,C")
        assert G.add_edge(0, 1)
        assert G.does_edge_exist(0, 1)
        assert G.does_edge_exist(1, 0)
        assert G.edge_count == 1
        assert [n.label for n in G.get_adjacent_nodes("B")] == ["A"]

    def test_add_edge_directed(self, representation):
        """Test that directed edges are one-way."""
        G = Graph(directed=True, representation=representation)
        G.insert_nodes("A,B")
        assert G.add_edge("A", "B")
        assert G.does_edge_exist("A", "B")
        assert not G.does_edge_exist("B", "A")
        assert G.edge_count == 1

    def test_duplicate_edge_rejected(self, representation):
        """Test that a second edge between the same ordered pair is rejected."""
        G = Graph(directed=True, weighted=True, representation=representation)
        G.insert_nodes("A,B")
        assert G.add_edge("A", "B", 2)
        assert not G.add_edge("A", "B", 3)
        assert G.get_edge_weight("A", "B") == 2.0
        # The opposite direction is a different ordered pair
        assert G.add_edge("B", "A", 3)

    def test_undirected_reverse_duplicate_rejected(self):
        """Test that (v, u) duplicates an existing undirected (u, v)."""
        G = Graph()
        G.insert_nodes("A,B")
        assert G.add_edge("A", "B")
        assert not G.add_edge("B", "A")
        assert G.edge_count == 1

    def test_invalid_endpoints(self, representation):
        """Test edges with out-of-range endpoints."""
        G = Graph(representation=representation)
        G.insert_nodes("A,B")
        assert not G.add_edge(0, 2)
        assert not G.add_edge(-1, 0)
        assert not G.add_edge("A", "Z")
        assert G.edge_count == 0

    def test_unweighted_requires_weight_one(self, representation):
        """Test weight validation on unweighted graphs."""
        G = Graph(representation=representation)
        G.insert_nodes("A,B")
        assert not G.add_edge("A", "B", 2)
        assert not G.does_edge_exist("A", "B")
        assert G.add_edge("A", "B", 1)
        assert G.get_edge_weight("A", "B") == 1.0

    def test_weighted_rejects_zero(self, representation):
        """Test that weight 0 is rejected on weighted graphs."""
        G = Graph(weighted=True, representation=representation)
        G.insert_nodes("A,B")
        assert not G.add_edge("A", "B", 0)
        assert G.add_edge("A", "B", -2.5)
        assert G.get_edge_weight("B", "A") == -2.5

    def test_non_numeric_weights_rejected(self):
        """Test that non-finite or non-numeric weights are rejected."""
        G = Graph(weighted=True)
        G.insert_nodes("A,B")
        assert not G.add_edge("A", "B", float("nan"))
        assert not G.add_edge("A", "B", float("inf"))
        assert not G.add_edge("A", "B", "3")
        assert not G.add_edge("A", "B", True)
        assert G.edge_count == 0

    def test_self_loops(self, representation):
        """Test self-loops: allowed when directed, rejected when undirected."""
        directed = Graph(directed=True, representation=representation)
        directed.insert_node("A")
        assert directed.add_edge("A", "A")
        assert directed.does_edge_exist("A", "A")

        undirected = Graph(representation=representation)
        undirected.insert_node("A")
        assert not undirected.add_edge("A", "A")
        assert undirected.edge_count == 0

    def test_remove_edge(self, representation):
        """Test symmetric edge removal."""
        G = Graph(weighted=True, representation=representation)
        G.insert_nodes("A,B")
        G.add_edge("A", "B", 4)
        assert G.remove_edge("B", "A")
        assert not G.does_edge_exist("A", "B")
        assert not G.does_edge_exist("B", "A")
        assert not G.remove_edge("A", "B")

    def test_remove_edge_directed_keeps_reverse(self, representation):
        """Test that removing u->v leaves v->u in place."""
        G = Graph(directed=True, representation=representation)
        G.insert_nodes("A,B")
        G.add_edge("A", "B")
        G.add_edge("B", "A")
        assert G.remove_edge("A", "B")
        assert G.does_edge_exist("B", "A")

    def test_get_edge_weight_sentinel(self, representation):
        """Test the -1 sentinel for missing edges."""
        G = Graph(weighted=True, representation=representation)
        G.insert_nodes("A,B")
        assert G.get_edge_weight("A", "B") == NO_EDGE_WEIGHT
        assert G.get_edge_weight("A", 9) == NO_EDGE_WEIGHT

    def test_set_edge_weight(self, representation):
        """Test changing a weight in place."""
        G = Graph(weighted=True, representation=representation)
        G.insert_nodes("A,B,C")
        G.add_edge("A", "B", 1)
        G.add_edge("A", "C", 2)
        assert G.set_edge_weight("A", "B", 7)
        assert G.get_edge_weight("B", "A") == 7.0
        assert [v for v, _ in G.neighbors("A")] == ["B", "C"]
        assert not G.set_edge_weight("B", "C", 1)
        assert not G.set_edge_weight("A", "B", 0)

    def test_remove_node_purges_edges(self, representation):
        """Test that removing a vertex deletes its edges in both directions."""
        G = Graph(directed=True, representation=representation)
        G.insert_nodes("A,B,C")
        G.add_edge("A", "B")
        G.add_edge("B", "C")
        G.add_edge("C", "B")
        G.add_edge("C", "A")

        assert G.remove_node("B")
        for label in G.labels():
            assert "B" not in [n.label for n in G.get_adjacent_nodes(label)]
        assert G.edges() == [("C", "A", 1.0)]

    def test_neighbors_in_insertion_order(self, representation):
        """Test that adjacency keeps edge insertion order."""
        G = Graph(directed=True, representation=representation)
        G.insert_nodes("A,B,C,D")
        G.add_edge("A", "D")
        G.add_edge("A", "B")
        G.add_edge("A", "C")
        assert [v for v, _ in G.neighbors("A")] == ["D", "B", "C"]

    def test_neighbors_order_survives_removal(self, representation):
        """Test that removing an edge or vertex keeps the remaining order."""
        G = Graph(directed=True, representation=representation)
        G.insert_nodes("A,B,C,D")
        G.add_edge("A", "D")
        G.add_edge("A", "B")
        G.add_edge("A", "C")
        G.remove_edge("A", "B")
        G.add_edge("A", "B")
        assert [v for v, _ in G.neighbors("A")] == ["D", "C", "B"]
        G.remove_node("C")
        assert [v for v, _ in G.neighbors("A")] == ["D", "B"]

    def test_edges_undirected_listed_once(self, representation):
        """Test that undirected edges appear once in edges()."""
        G = Graph(weighted=True, representation=representation)
        G.insert_nodes("A,B,C")
        G.add_edge("B", "A", 2)
        G.add_edge("B", "C", 3)
        edges = G.edges()
        assert len(edges) == 2
        assert {frozenset((u, v)) for u, v, _ in edges} == {
            frozenset(("A", "B")),
            frozenset(("B", "C")),
        }


class TestMatrixAndCopy:
    """Tests for the adjacency matrix view and graph copies."""

    def test_adjacency_matrix(self, representation):
        """Test the weight matrix view."""
        G = Graph(directed=True, weighted=True, representation=representation)
        G.insert_nodes("A,B,C")
        G.add_edge("A", "C", 5)
        G.add_edge("C", "B", 2)
        expected = np.array([[0, 0, 5], [0, 0, 0], [0, 2, 0]], dtype=float)
        np.testing.assert_array_equal(G.adjacency_matrix(), expected)

    def test_matrix_resizes_on_insert_and_remove(self):
        """Test that every row is resized with the vertex count."""
        G = Graph(weighted=True, representation="matrix")
        G.insert_nodes("A,B,C")
        G.add_edge("A", "C", 4)
        assert G.adjacency_matrix().shape == (3, 3)
        G.remove_node("B")
        matrix = G.adjacency_matrix()
        assert matrix.shape == (2, 2)
        assert matrix[0, 1] == 4
        assert matrix[1, 0] == 4

    def test_copy_is_independent(self, representation):
        """Test that a copy shares no state with its source."""
        G = Graph(directed=True, representation=representation)
        G.insert_nodes("A,B")
        G.add_edge("A", "B")

        H = G.copy()
        H.remove_edge("A", "B")
        H.insert_node("C")

        assert G.does_edge_exist("A", "B")
        assert G.labels() == ["A", "B"]
        assert H.representation is G.representation

    def test_copy_preserves_adjacency_order(self):
        """Test that a copy keeps edge order exactly."""
        G = Graph()
        G.insert_nodes("A,B,C")
        G.add_edge("B", "C")
        G.add_edge("A", "B")
        assert G.copy().neighbors("B") == G.neighbors("B")

    def test_repr(self):
        """Test the string representation."""
        G = Graph(directed=True, weighted=True, representation="matrix")
        assert "matrix" in repr(G)
        assert "directed=True" in repr(G)
