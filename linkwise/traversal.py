"""Read-only queries over singly linked lists."""

from __future__ import annotations

from linkwise.node import ListNode


def get_decimal_value(head: ListNode | None) -> int:
    """Read the list as binary digits, most significant first."""
    value = 0
    node = head
    while node is not None:
        value = value * 2 + node.val
        node = node.next
    return value


def _length(head: ListNode | None) -> int:
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def _advance(node: ListNode | None, steps: int) -> ListNode | None:
    for _ in range(steps):
        node = node.next
    return node


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or ``None``."""
    len_a = _length(head_a)
    len_b = _length(head_b)
    a = _advance(head_a, max(0, len_a - len_b))
    b = _advance(head_b, max(0, len_b - len_a))
    while a is not b:
        a = a.next
        b = b.next
    return a


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; the second of the two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def _reverse(head: ListNode | None) -> ListNode | None:
    prev = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the list reads the same in both directions.

    The second half is reversed for the comparison and restored afterwards.
    """
    middle = middle_node(head)
    tail = _reverse(middle)
    try:
        left, right = head, tail
        while left is not None and right is not None:
            if left.val != right.val:
                return False
            left = left.next
            right = right.next
        return True
    finally:
        _reverse(tail)