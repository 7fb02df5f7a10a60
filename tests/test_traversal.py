import pytest

from linkwise.node import ListNode, from_values, to_values
from linkwise.traversal import (
    get_decimal_value,
    get_intersection_node,
    has_cycle,
    is_palindrome,
    middle_node,
)


def test_decimal_value_worked_example():
    assert get_decimal_value(from_values([1, 0, 1])) == 5


def test_decimal_value_empty_list():
    assert get_decimal_value(None) == 0


@pytest.mark.parametrize("number", range(0, 130))
def test_decimal_value_matches_binary_digits(number):
    bits = [int(c) for c in format(number, "b")]
    assert get_decimal_value(from_values(bits)) == number


def test_decimal_value_ignores_leading_zeros():
    bits = [1, 1, 0]
    assert get_decimal_value(from_values([0, 0] + bits)) == get_decimal_value(
        from_values(bits)
    )


def _joined(prefix_a, prefix_b, shared):
    shared_head = from_values(shared)
    heads = []
    for prefix in (prefix_a, prefix_b):
        head = from_values(prefix)
        if head is None:
            heads.append(shared_head)
            continue
        tail = head
        while tail.next is not None:
            tail = tail.next
        tail.next = shared_head
        heads.append(head)
    return heads[0], heads[1], shared_head


@pytest.mark.parametrize(
    "prefix_a, prefix_b",
    [([4, 1], [5, 6, 1]), ([1, 9, 1], [3]), ([], [7, 7]), ([2], [])],
)
def test_intersection_found(prefix_a, prefix_b):
    head_a, head_b, shared = _joined(prefix_a, prefix_b, [8, 4, 5])
    assert get_intersection_node(head_a, head_b) is shared


def test_intersection_absent():
    head_a = from_values([2, 6, 4])
    head_b = from_values([1, 5])
    assert get_intersection_node(head_a, head_b) is None


def test_intersection_with_empty_list():
    assert get_intersection_node(None, from_values([1, 2])) is None


def test_intersection_is_identity_not_value():
    head_a = from_values([1, 2, 3])
    head_b = from_values([1, 2, 3])
    assert get_intersection_node(head_a, head_b) is None


def test_has_cycle_true():
    head = from_values([3, 2, 0, -4])
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = head.next
    assert has_cycle(head) is True


def test_has_cycle_self_loop():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True


@pytest.mark.parametrize("values", [[], [1], [1, 2], list(range(11))])
def test_has_cycle_false(values):
    assert has_cycle(from_values(values)) is False


@pytest.mark.parametrize("length", range(1, 12))
def test_middle_node_position(length):
    values = list(range(length))
    assert to_values(middle_node(from_values(values))) == values[length // 2 :]


def test_middle_node_of_empty_list():
    assert middle_node(None) is None


@pytest.mark.parametrize(
    "values", [[], [1], [1, 1], [1, 2, 2, 1], [1, 2, 3, 2, 1], [7, 0, 7]]
)
def test_palindromes(values):
    assert is_palindrome(from_values(values)) is True


@pytest.mark.parametrize("values", [[1, 2], [1, 2, 3], [1, 2, 2, 3], [1, 2, 1, 1]])
def test_non_palindromes(values):
    assert is_palindrome(from_values(values)) is False


@pytest.mark.parametrize("values", [[1, 2, 3, 2, 1], [1, 2, 3, 4], [5, 5]])
def test_palindrome_leaves_list_intact(values):
    head = from_values(values)
    is_palindrome(head)
    assert to_values(head) == values