"""
Utility helpers for graph algorithms.

Provides path reconstruction from parent maps and an indexed priority queue
that keeps at most one live entry per item.
"""

import heapq
import itertools
from typing import Dict, Hashable, List, Optional, Tuple


def reconstruct_path(
    parent: Dict[str, Optional[str]], source: str, target: str
) -> Optional[List[str]]:
    """
    Reconstruct the path from source to target using a parent map.

    Args:
        parent: Dictionary mapping label -> previous label (None for the
            source and for unreached labels).
        source: Start of the path.
        target: End of the path.

    Returns:
        List of labels from source to target (inclusive), or None if target
        is not reachable from source.

    Example:
        >>> parent = {'A': None, 'B': 'A', 'C': 'B', 'D': None}
        >>> reconstruct_path(parent, 'A', 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parent, 'A', 'D') is None
        True
    """
    if target not in parent:
        return None

    path = []
    current: Optional[str] = target
    visited = set()
    while current is not None:
        if current in visited:
            # Cycle in the parent map
            return None
        visited.add(current)
        path.append(current)
        if current == source:
            path.reverse()
            return path
        current = parent.get(current)

    return None


class IndexedPriorityQueue:
    """
    Min-priority queue with decrease-key by removal.

    Pushing an item that is already queued first invalidates its old entry, so
    the queue never holds two live entries for the same item. Invalidated
    entries are dropped lazily when they surface at the top of the heap.

    Example:
        >>> pq = IndexedPriorityQueue()
        >>> pq.push('B', (5.0, 'B'))
        >>> pq.push('B', (2.0, 'B'))
        >>> len(pq)
        1
        >>> pq.pop()
        ('B', (2.0, 'B'))
    """

    _REMOVED = object()

    def __init__(self) -> None:
        self._heap: List[list] = []
        self._entries: Dict[Hashable, list] = {}
        self._counter = itertools.count()

    def push(self, item: Hashable, priority: Tuple) -> None:
        if item in self._entries:
            self.remove(item)
        entry = [priority, next(self._counter), item]
        self._entries[item] = entry
        heapq.heappush(self._heap, entry)

    def remove(self, item: Hashable) -> None:
        entry = self._entries.pop(item)
        entry[-1] = self._REMOVED

    def pop(self) -> Tuple[Hashable, Tuple]:
        """
        Remove and return ``(item, priority)`` with the lowest priority.

        Raises:
            KeyError: If the queue is empty.
        """
        while self._heap:
            priority, _, item = heapq.heappop(self._heap)
            if item is not self._REMOVED:
                del self._entries[item]
                return item, priority
        raise KeyError("pop from an empty priority queue")

    def __contains__(self, item: Hashable) -> bool:
        return item in self._entries

    def __len__(self) -> int:
        return len(self._entries)
