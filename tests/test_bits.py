import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.bits import count_one_bits, count_zero_bits

naturals = st.integers(min_value=0, max_value=2**64)


def test_zero_has_no_bits():
    assert count_one_bits(0) == 0
    assert count_zero_bits(0) == 0


@pytest.mark.parametrize("width", [1, 2, 5, 31, 64])
def test_all_ones(width):
    value = (1 << width) - 1
    assert count_one_bits(value) == width
    assert count_zero_bits(value) == 0


@pytest.mark.parametrize("shift", [0, 1, 4, 30, 100])
def test_powers_of_two(shift):
    value = 1 << shift
    assert count_one_bits(value) == 1
    assert count_zero_bits(value) == shift


@given(value=naturals)
def test_ones_and_zeros_cover_bit_length(value):
    assert count_one_bits(value) + count_zero_bits(value) == value.bit_length()


@given(value=naturals)
def test_shifting_left_adds_a_zero(value):
    doubled = value << 1
    assert count_one_bits(doubled) == count_one_bits(value)
    if value:
        assert count_zero_bits(doubled) == count_zero_bits(value) + 1


@given(value=naturals)
def test_complement_within_width_swaps_counts(value):
    if value.bit_length() < 2:
        mask_width = 1
    else:
        mask_width = value.bit_length()
    top = 1 << (mask_width - 1)
    value |= top
    flipped = (~value) & ((1 << mask_width) - 1) | top
    assert count_one_bits(flipped) == count_zero_bits(value) + 1


@pytest.mark.parametrize("function", [count_one_bits, count_zero_bits])
def test_negative_rejected(function):
    with pytest.raises(ValueError):
        function(-1)


@pytest.mark.parametrize("function", [count_one_bits, count_zero_bits])
def test_non_integer_rejected(function):
    with pytest.raises(TypeError):
        function(1.5)