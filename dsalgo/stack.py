"""A bounded last-in, first-out stack."""

from collections.abc import Iterator
from typing import Any

__all__ = ["DEFAULT_CAPACITY", "Stack", "StackOverflowError", "StackUnderflowError"]

DEFAULT_CAPACITY = 5


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when taking from an empty stack."""


class Stack:
    """A stack that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, element: Any) -> None:
        """Put ``element`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError(f"stack is full, cannot push {element!r}")
        self._items.append(element)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self.is_empty():
            raise StackUnderflowError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if self.is_empty():
            raise StackUnderflowError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when no more elements fit."""
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity}, items={self._items!r})"