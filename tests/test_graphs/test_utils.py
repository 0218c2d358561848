"""Tests for graph algorithm utilities."""

import pytest

from graphengine import IndexedPriorityQueue, reconstruct_path


class TestReconstructPath:
    """Tests for path reconstruction."""

    def test_reconstruct_path_simple(self):
        """Test simple path reconstruction."""
        parent = {"A": None, "B": "A", "C": "B"}
        assert reconstruct_path(parent, "A", "C") == ["A", "B", "C"]

    def test_reconstruct_path_single_node(self):
        """Test path to the source itself."""
        assert reconstruct_path({"A": None}, "A", "A") == ["A"]

    def test_reconstruct_path_unreachable(self):
        """Test unreachable target."""
        parent = {"A": None, "B": "A", "C": None}
        assert reconstruct_path(parent, "A", "C") is None

    def test_reconstruct_path_unknown_target(self):
        """Test target missing from the parent map."""
        assert reconstruct_path({"A": None}, "A", "Z") is None

    def test_reconstruct_path_cycle(self):
        """Test that a cyclic parent map does not loop forever."""
        parent = {"A": None, "B": "C", "C": "B"}
        assert reconstruct_path(parent, "A", "B") is None


class TestIndexedPriorityQueue:
    """Tests for the indexed priority queue."""

    def test_pop_in_priority_order(self):
        """Test items come out lowest priority first."""
        pq = IndexedPriorityQueue()
        pq.push("C", (3.0, "C"))
        pq.push("A", (1.0, "A"))
        pq.push("B", (2.0, "B"))
        assert [pq.pop()[0] for _ in range(3)] == ["A", "B", "C"]

    def test_ties_broken_by_second_key(self):
        """Test equal distances are ordered by label."""
        pq = IndexedPriorityQueue()
        pq.push("Z", (1.0, "Z"))
        pq.push("M", (1.0, "M"))
        assert pq.pop() == ("M", (1.0, "M"))

    def test_push_replaces_existing_entry(self):
        """Test that re-pushing keeps a single live entry."""
        pq = IndexedPriorityQueue()
        pq.push("A", (5.0, "A"))
        pq.push("B", (3.0, "B"))
        pq.push("A", (1.0, "A"))

        assert len(pq) == 2
        assert pq.pop() == ("A", (1.0, "A"))
        assert pq.pop() == ("B", (3.0, "B"))
        assert len(pq) == 0
        assert not pq

    def test_remove_and_contains(self):
        """Test explicit removal."""
        pq = IndexedPriorityQueue()
        pq.push("A", (1.0, "A"))
        pq.push("B", (2.0, "B"))
        pq.remove("A")
        assert "A" not in pq
        assert "B" in pq
        assert pq.pop()[0] == "B"

    def test_pop_empty(self):
        """Test popping an empty queue."""
        pq = IndexedPriorityQueue()
        with pytest.raises(KeyError):
            pq.pop()
