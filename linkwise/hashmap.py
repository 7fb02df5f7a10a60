"""Integer-keyed hash map built on separate chaining."""

from __future__ import annotations

_BUCKET_COUNT = 10000


class HashMap:
    """Map integer keys to integer values; missing keys read as -1."""

    def __init__(self) -> None:
        self._buckets: list[list[tuple[int, int]]] = [[] for _ in range(_BUCKET_COUNT)]

    def _chain(self, key: int) -> list[tuple[int, int]]:
        return self._buckets[key % _BUCKET_COUNT]

    def put(self, key: int, value: int) -> None:
        """Set ``key`` to ``value``, replacing any earlier value."""
        chain = self._chain(key)
        for index, (existing, _) in enumerate(chain):
            if existing == key:
                chain[index] = (key, value)
                return
        chain.append((key, value))

    def get(self, key: int) -> int:
        """Return the value stored for ``key``, or -1 when there is none."""
        return next((value for existing, value in self._chain(key) if existing == key), -1)

    def remove(self, key: int) -> None:
        """Forget ``key`` if it is present."""
        chain = self._chain(key)
        for index, (existing, _) in enumerate(chain):
            if existing == key:
                del chain[index]
                return