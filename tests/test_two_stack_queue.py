import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.circular_queue import QueueEmptyError, QueueFullError
from dsalgo.two_stack_queue import TwoStackQueue


def test_dequeue_on_empty_raises():
    with pytest.raises(QueueEmptyError):
        TwoStackQueue().dequeue()


def test_driver_sequence():
    queue = TwoStackQueue()
    for element in (100, 200, 300, 400):
        queue.enqueue(element)
    assert queue.dequeue() == 100
    assert queue.dequeue() == 200
    for element in (500, 600, 700):
        queue.enqueue(element)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(800)
    assert queue.dequeue() == 300
    assert len(queue) == 4


def test_empties_after_all_dequeued():
    queue = TwoStackQueue()
    queue.enqueue("a")
    queue.enqueue("b")
    assert [queue.dequeue(), queue.dequeue()] == ["a", "b"]
    assert queue.is_empty()


def test_custom_capacity():
    queue = TwoStackQueue(capacity=2)
    queue.enqueue(1)
    queue.enqueue(2)
    with pytest.raises(QueueFullError):
        queue.enqueue(3)
    assert queue.capacity == 2


@given(st.lists(st.integers(), max_size=10))
def test_fifo_order(values):
    queue = TwoStackQueue(capacity=max(len(values), 1))
    for value in values:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


@given(
    st.integers(min_value=1, max_value=6),
    st.lists(st.booleans(), max_size=50),
)
def test_matches_reference_under_mixed_operations(capacity, operations):
    queue = TwoStackQueue(capacity)
    reference = []
    for counter, is_add in enumerate(operations):
        if is_add:
            if len(reference) == capacity:
                with pytest.raises(QueueFullError):
                    queue.enqueue(counter)
            else:
                queue.enqueue(counter)
                reference.append(counter)
        else:
            try:
                expected = reference.pop(0)
            except IndexError:
                with pytest.raises(QueueEmptyError):
                    queue.dequeue()
            else:
                assert queue.dequeue() == expected
        assert len(queue) == len(reference)