"""Simple counting problems solved greedily."""

from collections.abc import Hashable, Iterable, Sequence
from itertools import pairwise
from typing import Any

__all__ = ["collecting_rounds", "distinct_count"]


def collecting_rounds(numbers: Sequence[Any]) -> int:
    """Return how many left-to-right passes collect ``numbers`` in ascending order.

    Each pass picks up values in increasing order as they are met; equal
    values are collected in the order they stand.
    """
    order = sorted(range(len(numbers)), key=lambda position: (numbers[position], position))
    if not order:
        return 0
    return 1 + sum(1 for before, after in pairwise(order) if after < before)


def distinct_count(numbers: Iterable[Hashable]) -> int:
    """Return the number of distinct values."""
    return len(set(numbers))