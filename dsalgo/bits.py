"""Counting the bits of non-negative integers."""

import operator

__all__ = ["count_one_bits", "count_zero_bits"]


def _checked(value: int) -> int:
    number = operator.index(value)
    if number < 0:
        raise ValueError(f"value must be non-negative, got {number}")
    return number


def count_one_bits(value: int) -> int:
    """Return the number of set bits in ``value``."""
    return bin(_checked(value)).count("1")


def count_zero_bits(value: int) -> int:
    """Return the number of clear bits below the highest set bit of ``value``."""
    number = _checked(value)
    return number.bit_length() - bin(number).count("1")