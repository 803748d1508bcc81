"""Greedy solution of the fractional knapsack problem."""

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["Item", "fractional_knapsack"]


@dataclass(frozen=True)
class Item:
    """An item with a value and a positive weight."""

    value: float
    weight: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(f"weight must be positive, got {self.weight}")

    def ratio(self) -> float:
        """Return value per unit of weight."""
        return self.value / self.weight


def fractional_knapsack(capacity: float, items: Iterable[Item]) -> float:
    """Return the largest value that fits in ``capacity``, items being divisible.

    Items are taken whole in order of falling value per weight; the first one
    that does not fit is taken in part and the filling stops there.
    """
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    remaining = capacity
    total = 0.0
    for item in sorted(items, key=Item.ratio, reverse=True):
        if item.weight <= remaining:
            remaining -= item.weight
            total += item.value
        else:
            total += item.value * (remaining / item.weight)
            break
    return total