"""A bounded first-in, first-out queue over a fixed ring of slots."""

from collections.abc import Iterator
from typing import Any

__all__ = ["DEFAULT_CAPACITY", "CircularQueue", "QueueEmptyError", "QueueFullError"]

DEFAULT_CAPACITY = 5


class QueueFullError(Exception):
    """Raised when adding to a full queue."""


class QueueEmptyError(IndexError):
    """Raised when removing from an empty queue."""


class CircularQueue:
    """A queue whose front and rear positions wrap around a fixed ring.

    ``front`` and ``rear`` are the slot positions of the oldest and newest
    elements; both are -1 while the queue is empty.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    @property
    def front(self) -> int:
        return self._front

    @property
    def rear(self) -> int:
        return self._rear

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return self._front == -1

    def is_full(self) -> bool:
        """Return True when the slot after the rear is the front."""
        return (self._rear + 1) % self.capacity == self._front

    def add(self, element: Any) -> None:
        """Append ``element`` at the rear."""
        if self.is_full():
            raise QueueFullError(f"queue is full, cannot add {element!r}")
        self._rear = (self._rear + 1) % self.capacity
        self._slots[self._rear] = element
        if self._front == -1:
            self._front = 0

    def remove(self) -> Any:
        """Remove and return the element at the front."""
        if self.is_empty():
            raise QueueEmptyError("remove from an empty queue")
        element = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front = (self._front + 1) % self.capacity
        return element

    def __len__(self) -> int:
        if self.is_empty():
            return 0
        return (self._rear - self._front) % self.capacity + 1

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear without removing anything."""
        for offset in range(len(self)):
            yield self._slots[(self._front + offset) % self.capacity]

    def __repr__(self) -> str:
        return f"CircularQueue(capacity={self.capacity}, items={list(self)!r})"