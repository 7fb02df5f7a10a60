"""Operations that build or rearrange singly linked lists."""

from __future__ import annotations

from linkwise.node import ListNode


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def delete_middle(head: ListNode | None) -> ListNode | None:
    """Unlink the middle node (index ``n // 2``) and return the head."""
    if head is None or head.next is None:
        return None
    prev = None
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        prev = slow
        slow = slow.next
    prev.next = slow.next
    return head


def merge_two_lists(
    list1: ListNode | None, list2: ListNode | None
) -> ListNode | None:
    """Splice two sorted lists into one; on equal values ``list2`` goes first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Group nodes at odd positions before those at even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even_head = even = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop adjacent repeated values from a sorted list."""
    current = head
    while current is not None and current.next is not None:
        if current.val == current.next.val:
            current.next = current.next.next
        else:
            current = current.next
    return head


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end (1 is the last node)."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    dummy = ListNode(0, head)
    fast: ListNode | None = dummy
    for _ in range(n + 1):
        if fast is None:
            raise ValueError(f"n={n} exceeds the length of the list")
        fast = fast.next
    slow = dummy
    while fast is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    prev = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each run of ``k`` nodes; a shorter tail is left as it is."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        first = group_prev.next
        prev, curr = group_next, first
        while curr is not group_next:
            curr.next, prev, curr = prev, curr, curr.next
        group_prev.next = kth
        group_prev = first


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list by value with merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    mid = slow.next
    slow.next = None
    return merge_two_lists(sort_list(head), sort_list(mid))