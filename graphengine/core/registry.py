"""
Node registry: the arena that owns every vertex of a graph.

Each node gets a stable integer handle on insertion. The registry also keeps
the storage order, which defines the index of a node; indices are derived from
that order on every lookup and are never cached.
"""

from typing import Dict, Iterator, List, Optional

from .types import Node


class NodeRegistry:
    """
    Ordered arena of uniquely labelled nodes.

    Complexity:
        - add: O(1)
        - remove: O(V) (storage order is a list)
        - handle_of: O(1)
        - index_of: O(V)
    """

    def __init__(self) -> None:
        self._nodes: Dict[int, Node] = {}
        self._order: List[int] = []
        self._by_label: Dict[str, int] = {}
        self._next_handle = 0

    def add(self, label: str) -> Optional[Node]:
        """
        Allocate a node for ``label`` at the end of the storage order.

        Args:
            label: Node label.

        Returns:
            The new Node, or None if the label is already registered.
        """
        if label in self._by_label:
            return None

        node = Node(handle=self._next_handle, label=label)
        self._next_handle += 1

        self._nodes[node.handle] = node
        self._order.append(node.handle)
        self._by_label[label] = node.handle
        return node

    def remove(self, handle: int) -> Optional[Node]:
        """
        Drop a node; every later node shifts down one index.

        Returns:
            The removed Node, or None if the handle is unknown.
        """
        node = self._nodes.pop(handle, None)
        if node is None:
            return None

        self._order.remove(handle)
        del self._by_label[node.label]
        return node

    def handle_of(self, label: str) -> Optional[int]:
        return self._by_label.get(label)

    def handle_at(self, index: int) -> Optional[int]:
        """Return the handle stored at ``index``, or None when out of range."""
        if 0 <= index < len(self._order):
            return self._order[index]
        return None

    def index_of(self, handle: int) -> int:
        """Return the current index of ``handle``, or -1 if it is unknown."""
        if handle not in self._nodes:
            return -1
        return self._order.index(handle)

    def node(self, handle: int) -> Node:
        return self._nodes[handle]

    def label_of(self, handle: int) -> str:
        return self._nodes[handle].label

    def handles(self) -> List[int]:
        """Handles in storage order."""
        return list(self._order)

    def labels(self) -> List[str]:
        """Labels in storage order."""
        return [self._nodes[handle].label for handle in self._order]

    def copy(self) -> "NodeRegistry":
        """Return an independent registry with the same nodes and handles."""
        clone = NodeRegistry()
        clone._nodes = dict(self._nodes)
        clone._order = list(self._order)
        clone._by_label = dict(self._by_label)
        clone._next_handle = self._next_handle
        return clone

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Node]:
        return (self._nodes[handle] for handle in self._order)

    def __contains__(self, label: object) -> bool:
        return label in self._by_label
