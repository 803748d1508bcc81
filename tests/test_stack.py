import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.stack import DEFAULT_CAPACITY, Stack, StackOverflowError, StackUnderflowError


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty()
    assert len(stack) == 0


def test_pop_on_empty_raises():
    with pytest.raises(StackUnderflowError):
        Stack().pop()


def test_peek_on_empty_raises():
    with pytest.raises(StackUnderflowError):
        Stack().peek()


def test_underflow_is_an_index_error():
    with pytest.raises(IndexError):
        Stack().pop()


def test_driver_sequence():
    stack = Stack()
    stack.push(100)
    stack.push(200)
    assert stack.pop() == 200
    stack.push(300)
    assert stack.pop() == 300
    for element in (400, 500, 600, 700):
        stack.push(element)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(800)
    assert stack.peek() == 700


def test_default_capacity_is_five():
    stack = Stack()
    for element in range(DEFAULT_CAPACITY):
        stack.push(element)
    assert stack.is_full()
    assert DEFAULT_CAPACITY == 5


def test_peek_does_not_remove():
    stack = Stack()
    stack.push("a")
    assert stack.peek() == "a"
    assert len(stack) == 1


def test_invalid_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(0)


@given(st.lists(st.integers(), max_size=20))
def test_pop_reverses_push_order(values):
    stack = Stack(capacity=max(len(values), 1))
    for value in values:
        stack.push(value)
    assert list(stack) == values[::-1]
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]
    assert stack.is_empty()


@given(st.integers(min_value=1, max_value=10))
def test_overflow_exactly_at_capacity(capacity):
    stack = Stack(capacity)
    for value in range(capacity):
        assert not stack.is_full()
        stack.push(value)
    with pytest.raises(StackOverflowError):
        stack.push(capacity)
    assert len(stack) == capacity