from hypothesis import given
from hypothesis import strategies as st

from dsalgo.greedy import collecting_rounds, distinct_count


def test_collecting_rounds_worked_example():
    assert collecting_rounds([4, 2, 1, 5, 3]) == 3


def test_collecting_rounds_empty():
    assert collecting_rounds([]) == 0


@given(st.integers(min_value=1, max_value=50))
def test_collecting_rounds_descending_needs_one_pass_each(n):
    assert collecting_rounds(list(range(n, 0, -1))) == n


@given(st.lists(st.integers(), min_size=1))
def test_collecting_rounds_sorted_input_is_one_pass(values):
    assert collecting_rounds(sorted(values)) == collecting_rounds(sorted(values)[:1])


@given(st.permutations(list(range(1, 12))))
def test_collecting_rounds_bounds(perm):
    rounds = collecting_rounds(perm)
    assert 1 <= rounds <= len(perm)


@given(st.lists(st.integers(min_value=-5, max_value=5)))
def test_distinct_count_bounds(values):
    assert distinct_count(values) <= len(values)
    assert distinct_count(values + values) == distinct_count(values)


@given(st.integers(min_value=0, max_value=100))
def test_distinct_count_of_range(n):
    assert distinct_count(range(n)) == n


def test_distinct_count_repeated():
    assert distinct_count([7, 7, 7]) == distinct_count([7])