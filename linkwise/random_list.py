"""Linked list whose nodes also carry a pointer to an arbitrary node."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class RandomNode:
    """A list node with ``next`` and an extra ``random`` link. Compared by identity."""

    val: int
    next: RandomNode | None = field(default=None, repr=False)
    random: RandomNode | None = field(default=None, repr=False)

    def __repr__(self) -> str:
        return f"RandomNode({self.val!r})"


def copy_random_list(head: RandomNode | None) -> RandomNode | None:
    """Deep-copy the list, keeping ``next`` and ``random`` links among the copies."""
    clones: dict[RandomNode, RandomNode] = {}
    node = head
    while node is not None:
        clones[node] = RandomNode(node.val)
        node = node.next
    for original, clone in clones.items():
        clone.next = clones[original.next] if original.next is not None else None
        clone.random = clones[original.random] if original.random is not None else None
    return clones.get(head) if head is not None else None