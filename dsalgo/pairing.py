"""Totals for skills of two kinds where alternating kinds doubles the second."""

from collections.abc import Iterable

__all__ = ["doubled_pair_total", "max_alternating_damage"]


def _split(kinds: Iterable[int], values: Iterable[int]) -> tuple[list[int], list[int]]:
    kind_list = list(kinds)
    value_list = list(values)
    if len(kind_list) != len(value_list):
        raise ValueError("kinds and values must have the same length")
    ones = sorted((v for k, v in zip(kind_list, value_list) if k), reverse=True)
    zeros = sorted((v for k, v in zip(kind_list, value_list) if not k), reverse=True)
    return ones, zeros


def _doubled(ones: list[int], zeros: list[int]) -> int:
    paired = min(len(ones), len(zeros))
    return sum(ones) + sum(zeros) + sum(ones[:paired]) + sum(zeros[:paired])


def doubled_pair_total(kinds: Iterable[int], values: Iterable[int]) -> int:
    """Return the total when the largest ``min(#ones, #zeros)`` values of each kind count twice."""
    ones, zeros = _split(kinds, values)
    return _doubled(ones, zeros)


def max_alternating_damage(kinds: Iterable[int], values: Iterable[int]) -> int:
    """Return the best total when each skill after one of the other kind counts twice.

    With equally many skills of both kinds the first skill used cannot be
    doubled, so the smallest value overall of the two kinds' minima is counted once.
    """
    ones, zeros = _split(kinds, values)
    total = _doubled(ones, zeros)
    if ones and len(ones) == len(zeros):
        total -= min(ones[-1], zeros[-1])
    return total