import pytest

from codedrills.linked_list import (
    ListNode,
    delete_middle,
    from_values,
    middle_node,
    odd_even_list,
    pair_sum,
    reverse_list,
    to_values,
)

SAMPLES = [[1], [1, 2], [1, 2, 3], [4, 5, 6, 7], [1, 3, 4, 7, 1, 2, 6], list(range(10))]


@pytest.mark.parametrize("values", SAMPLES)
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_empty_round_trip():
    assert from_values([]) is None
    assert to_values(None) == []


def test_list_node_links():
    tail = ListNode(2)
    head = ListNode(1, tail)
    assert to_values(head) == [1, 2]
    assert head.next is tail


@pytest.mark.parametrize("values", [v for v in SAMPLES if len(v) > 1])
def test_delete_middle_removes_middle_index(values):
    mid = len(values) // 2
    assert to_values(delete_middle(from_values(values))) == values[:mid] + values[mid + 1:]


def test_delete_middle_example():
    assert to_values(delete_middle(from_values([1, 3, 4, 7, 1, 2, 6]))) == [1, 3, 4, 1, 2, 6]


def test_delete_middle_short_lists():
    assert delete_middle(None) is None
    assert delete_middle(from_values([1])) is None


def test_delete_middle_keeps_head():
    head = from_values([1, 2, 3, 4])
    assert delete_middle(head) is head


def test_pair_sum_example():
    assert pair_sum(from_values([5, 4, 2, 1])) == 6


def test_pair_sum_two_nodes():
    assert pair_sum(from_values([7, 9])) == 7 + 9


def test_pair_sum_floor_is_zero():
    assert pair_sum(from_values([-5, -4])) == 0


def test_pair_sum_symmetric_under_reversal():
    values = [1, 100000, 3, 8, 2, 6]
    assert pair_sum(from_values(values)) == pair_sum(from_values(values[::-1]))


@pytest.mark.parametrize("values", SAMPLES)
def test_middle_node_value(values):
    head = from_values(values)
    assert middle_node(head).val == values[len(values) // 2]


def test_middle_node_is_node_of_list():
    head = from_values([1, 2, 3, 4, 5])
    node = middle_node(head)
    assert node is head.next.next


def test_middle_node_empty():
    assert middle_node(None) is None


@pytest.mark.parametrize("values", SAMPLES)
def test_odd_even_order(values):
    assert to_values(odd_even_list(from_values(values))) == values[0::2] + values[1::2]


def test_odd_even_reuses_nodes():
    head = from_values([1, 2, 3, 4, 5])
    original = []
    node = head
    while node is not None:
        original.append(id(node))
        node = node.next
    result = odd_even_list(head)
    regrouped = []
    while result is not None:
        regrouped.append(id(result))
        result = result.next
    assert sorted(regrouped) == sorted(original)
    assert regrouped[0] == original[0]


def test_odd_even_empty():
    assert odd_even_list(None) is None


@pytest.mark.parametrize("values", SAMPLES)
def test_reverse_list(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]


@pytest.mark.parametrize("values", SAMPLES)
def test_reverse_twice_restores(values):
    assert to_values(reverse_list(reverse_list(from_values(values)))) == values


def test_reverse_empty():
    assert reverse_list(None) is None