import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortsearch.rounds import count_rounds, count_rounds_by_positions, rounds_after_swaps

permutations = st.integers(0, 30).flatmap(
    lambda n: st.permutations(list(range(1, n + 1)))
)


@given(permutations)
def test_both_counting_methods_agree(permutation):
    assert count_rounds(permutation) == count_rounds_by_positions(permutation)


@given(permutations)
def test_rounds_are_bounded_by_length(permutation):
    result = count_rounds(permutation)
    if permutation:
        assert 1 <= result <= len(permutation)
    else:
        assert result == 0


def test_sorted_needs_one_round():
    assert count_rounds(list(range(1, 11))) == 1


def test_reversed_needs_one_round_per_value():
    values = list(range(1, 11))
    assert count_rounds_by_positions(values[::-1]) == len(values)


def test_invalid_permutation_rejected():
    with pytest.raises(ValueError):
        count_rounds_by_positions([1, 3])


@given(st.data())
def test_swaps_match_full_recount(data):
    n = data.draw(st.integers(1, 20))
    permutation = data.draw(st.permutations(list(range(1, n + 1))))
    swaps = data.draw(
        st.lists(st.tuples(st.integers(1, n), st.integers(1, n)), max_size=15)
    )
    results = rounds_after_swaps(permutation, swaps)
    current = list(permutation)
    expected = []
    for left, right in swaps:
        current[left - 1], current[right - 1] = current[right - 1], current[left - 1]
        expected.append(count_rounds(current))
    assert results == expected


def test_swaps_leave_input_untouched():
    permutation = [4, 2, 1, 5, 3]
    rounds_after_swaps(permutation, [(2, 3), (1, 5)])
    assert permutation == [4, 2, 1, 5, 3]


def test_swap_out_of_range_rejected():
    with pytest.raises(ValueError):
        rounds_after_swaps([1, 2], [(0, 1)])