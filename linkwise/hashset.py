"""Integer hash set built on separate chaining."""

from __future__ import annotations

_BUCKET_COUNT = 15000


class HashSet:
    """A set of integer keys."""

    def __init__(self) -> None:
        self._buckets: list[list[int]] = [[] for _ in range(_BUCKET_COUNT)]

    def _chain(self, key: int) -> list[int]:
        return self._buckets[key % _BUCKET_COUNT]

    def add(self, key: int) -> None:
        """Insert ``key`` unless it is already present."""
        chain = self._chain(key)
        if key not in chain:
            chain.append(key)

    def remove(self, key: int) -> None:
        """Drop ``key`` if it is present."""
        chain = self._chain(key)
        if key in chain:
            chain.remove(key)

    def contains(self, key: int) -> bool:
        """Tell whether ``key`` is in the set."""
        return key in self._chain(key)