import pytest

from solvebook.linked_list import ListNode, from_iterable, get_intersection_node, reverse_list


@pytest.mark.parametrize("values", [[1], [1, 2, 3], ["a", "b"]])
def test_from_iterable_round_trip(values):
    assert list(from_iterable(values)) == values


def test_from_iterable_empty():
    assert from_iterable([]) is None


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert list(reverse_list(from_iterable(values))) == values[::-1]


def test_reverse_list_empty():
    assert reverse_list(None) is None


def test_reverse_list_twice_restores():
    head = from_iterable([5, 6, 7])
    assert list(reverse_list(reverse_list(head))) == [5, 6, 7]


def test_intersection_found():
    shared = from_iterable([8, 4, 5])
    head_a = ListNode(4, ListNode(1, shared))
    head_b = ListNode(5, ListNode(6, ListNode(1, shared)))
    assert get_intersection_node(head_a, head_b) is shared


def test_intersection_at_head():
    head = from_iterable([1, 2])
    assert get_intersection_node(head, head) is head


def test_intersection_none():
    head_a = from_iterable([2, 6, 4])
    head_b = from_iterable([1, 5])
    assert get_intersection_node(head_a, head_b) is None


def test_intersection_with_empty():
    assert get_intersection_node(from_iterable([1]), None) is None