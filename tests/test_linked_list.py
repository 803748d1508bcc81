import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.linked_list import DoublyLinkedList, ListNode, merge_sorted


def test_empty_list():
    items = DoublyLinkedList()
    assert list(items) == []
    assert list(reversed(items)) == []
    assert len(items) == 0


def test_delete_begin_on_empty_raises():
    with pytest.raises(IndexError):
        DoublyLinkedList().delete_begin()


def test_delete_end_on_empty_raises():
    with pytest.raises(IndexError):
        DoublyLinkedList().delete_end()


def test_driver_sequence():
    items = DoublyLinkedList()
    items.insert_begin(100)
    items.insert_begin(200)
    assert list(items) == [200, 100]
    assert list(reversed(items)) == [100, 200]
    items.insert_end(400)
    items.insert_end(500)
    assert list(items) == [200, 100, 400, 500]
    assert list(reversed(items)) == [500, 400, 100, 200]
    assert items.delete_begin() == 200
    assert items.delete_begin() == 100
    assert items.delete_end() == 500
    assert list(items) == [400]


def test_single_node_delete_end_empties_list():
    items = DoublyLinkedList([7])
    assert items.delete_end() == 7
    assert list(items) == []
    items.insert_begin(8)
    assert list(reversed(items)) == [8]


@given(st.lists(st.integers()))
def test_construction_and_reverse_agree(values):
    items = DoublyLinkedList(values)
    assert list(items) == values
    assert list(reversed(items)) == values[::-1]
    assert len(items) == len(values)


@given(st.lists(st.integers()))
def test_insert_begin_reverses(values):
    items = DoublyLinkedList()
    for value in values:
        items.insert_begin(value)
    assert list(items) == values[::-1]


@given(st.lists(st.integers()))
def test_draining_from_both_ends(values):
    items = DoublyLinkedList(values)
    taken = []
    while len(items):
        taken.append(items.delete_end() if len(taken) % 2 else items.delete_begin())
        assert list(reversed(items)) == list(items)[::-1]
    assert sorted(taken) == sorted(values)


def test_from_iterable_empty_is_none():
    assert ListNode.from_iterable([]) is None


@given(st.lists(st.integers(), min_size=1))
def test_from_iterable_round_trip(values):
    head = ListNode.from_iterable(values)
    assert list(head.values()) == values


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_merge_sorted_is_sorted_union(first, second):
    head = merge_sorted(
        ListNode.from_iterable(sorted(first)), ListNode.from_iterable(sorted(second))
    )
    merged = [] if head is None else list(head.values())
    assert merged == sorted(first + second)


def test_merge_with_empty_returns_other_head():
    head = ListNode.from_iterable([1, 2])
    assert merge_sorted(None, head) is head
    assert merge_sorted(head, None) is head
    assert merge_sorted(None, None) is None


def test_ties_take_second_chain_first():
    first = ListNode.from_iterable([3])
    second = ListNode.from_iterable([3])
    merged = merge_sorted(first, second)
    assert merged is second
    assert merged.next is first


def test_merge_relinks_existing_nodes():
    first = ListNode.from_iterable([1, 4])
    second = ListNode.from_iterable([2, 3])
    merged = merge_sorted(first, second)
    assert merged is first
    assert first.next is second
    assert list(merged.values()) == [1, 2, 3, 4]