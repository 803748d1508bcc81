"""A doubly linked list and merging of sorted singly linked chains."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["DoublyLinkedList", "ListNode", "merge_sorted"]


@dataclass(eq=False)
class _Node:
    info: Any
    next: _Node | None = None
    prev: _Node | None = None


class DoublyLinkedList:
    """A list whose nodes link both to the next and the previous node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._start: _Node | None = None
        self._end: _Node | None = None
        self._size = 0
        for item in items:
            self.insert_end(item)

    def insert_begin(self, item: Any) -> None:
        """Put ``item`` before the first node."""
        node = _Node(item, next=self._start)
        if self._start is None:
            self._end = node
        else:
            self._start.prev = node
        self._start = node
        self._size += 1

    def insert_end(self, item: Any) -> None:
        """Put ``item`` after the last node."""
        node = _Node(item, prev=self._end)
        if self._end is None:
            self._start = node
        else:
            self._end.next = node
        self._end = node
        self._size += 1

    def delete_begin(self) -> Any:
        """Remove the first node and return its item."""
        node = self._start
        if node is None:
            raise IndexError("delete from an empty list")
        self._start = node.next
        if self._start is None:
            self._end = None
        else:
            self._start.prev = None
        self._size -= 1
        return node.info

    def delete_end(self) -> Any:
        """Remove the last node and return its item."""
        node = self._end
        if node is None:
            raise IndexError("delete from an empty list")
        self._end = node.prev
        if self._end is None:
            self._start = None
        else:
            self._end.next = None
        self._size -= 1
        return node.info

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._start
        while node is not None:
            yield node.info
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._end
        while node is not None:
            yield node.info
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked chain."""

    data: Any
    next: ListNode | None = None

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> ListNode | None:
        """Build a chain holding ``values`` in order and return its head."""
        head: ListNode | None = None
        tail: ListNode | None = None
        for value in values:
            node = cls(value)
            if tail is None:
                head = node
            else:
                tail.next = node
            tail = node
        return head

    def values(self) -> Iterator[Any]:
        """Yield the data of this node and every node after it."""
        node: ListNode | None = self
        while node is not None:
            yield node.data
            node = node.next


def merge_sorted(head1: ListNode | None, head2: ListNode | None) -> ListNode | None:
    """Splice two ascending chains into one ascending chain and return its head.

    The nodes themselves are relinked; on equal data the node from the second
    chain comes first.
    """
    sentinel = ListNode(None)
    tail = sentinel
    p, q = head1, head2
    while p is not None and q is not None:
        if p.data < q.data:
            tail.next, p = p, p.next
        else:
            tail.next, q = q, q.next
        tail = tail.next
    tail.next = p if p is not None else q
    return sentinel.next