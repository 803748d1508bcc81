"""Searching in sorted sequences."""

from collections.abc import Sequence
from typing import Any

__all__ = ["binary_search", "ternary_search"]


def binary_search(values: Sequence[Any], key: Any) -> int:
    """Return the index of ``key`` in the ascending sequence ``values``, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        probe = values[mid]
        if probe == key:
            return mid
        if probe > key:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def ternary_search(values: Sequence[Any], key: Any) -> int:
    """Return the index of ``key`` in the ascending sequence ``values``, or -1.

    Each step probes two points that split the remaining range into thirds.
    """
    low, high = 0, len(values) - 1
    while low <= high:
        third = (high - low) // 3
        mid1 = low + third
        mid2 = high - third
        if values[mid1] == key:
            return mid1
        if values[mid2] == key:
            return mid2
        if key < values[mid1]:
            high = mid1 - 1
        elif key > values[mid2]:
            low = mid2 + 1
        else:
            low, high = mid1 + 1, mid2 - 1
    return -1