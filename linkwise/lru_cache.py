"""Least-recently-used cache of integer keys and values."""

from __future__ import annotations

from collections import OrderedDict


class LRUCache:
    """Bounded cache that evicts the least recently used key when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it recently used; -1 when absent."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the least recently used when full."""
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) == self._capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value