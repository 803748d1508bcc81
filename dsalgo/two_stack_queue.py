"""A bounded queue kept in one stack, using a second stack while dequeuing."""

from typing import Any

from dsalgo.circular_queue import QueueEmptyError, QueueFullError
from dsalgo.stack import DEFAULT_CAPACITY, Stack

__all__ = ["TwoStackQueue"]


class TwoStackQueue:
    """A first-in, first-out queue built on two stacks.

    The primary stack holds the elements with the newest on top; dequeuing
    moves them onto an auxiliary stack, takes the oldest and moves the rest
    back.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._primary = Stack(capacity)
        self._auxiliary = Stack(capacity)

    @property
    def capacity(self) -> int:
        return self._primary.capacity

    def enqueue(self, element: Any) -> None:
        """Append ``element`` at the back of the queue."""
        if self._primary.is_full():
            raise QueueFullError(f"queue is full, cannot add {element!r}")
        self._primary.push(element)

    def dequeue(self) -> Any:
        """Remove and return the oldest element."""
        if self._primary.is_empty():
            raise QueueEmptyError("dequeue from an empty queue")
        self._transfer(self._primary, self._auxiliary)
        front = self._auxiliary.pop()
        self._transfer(self._auxiliary, self._primary)
        return front

    @staticmethod
    def _transfer(source: Stack, target: Stack) -> None:
        while not source.is_empty():
            target.push(source.pop())

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return self._primary.is_empty()

    def is_full(self) -> bool:
        """Return True when no more elements fit."""
        return self._primary.is_full()

    def __len__(self) -> int:
        return len(self._primary)

    def __repr__(self) -> str:
        return f"TwoStackQueue(capacity={self.capacity}, size={len(self)})"