"""Singly linked list node and helpers for converting to and from Python sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    val: int = 0
    next: ListNode | None = field(default=None, repr=False)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; ``None`` when empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head`` as a Python list."""
    return list(head) if head is not None else []