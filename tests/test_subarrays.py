import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortsearch.subarrays import (
    longest_unique_run,
    longest_unique_run_tracking,
    max_subarray_sum,
)

SOURCE_CASES = [
    ([1, 2, 1, 3, 2, 7, 4, 2], 5),
    ([1, 2, 1, 1, 2, 3, 2, 7, 4, 2], 4),
]


@pytest.mark.parametrize("values, expected", SOURCE_CASES)
def test_longest_unique_run_source_cases(values, expected):
    assert longest_unique_run(values) == expected


@pytest.mark.parametrize("values, expected", SOURCE_CASES)
def test_tracking_version_source_cases(values, expected):
    assert longest_unique_run_tracking(values) == expected


small_lists = st.lists(st.integers(-20, 20), max_size=40)


@given(small_lists)
def test_run_versions_agree(values):
    assert longest_unique_run(values) == longest_unique_run_tracking(values)


@given(small_lists)
def test_run_is_achievable_and_maximal(values):
    length = longest_unique_run(values)
    assert length <= len(set(values))
    windows = [values[i : i + length] for i in range(len(values) - length + 1)]
    assert any(len(set(window)) == length for window in windows)
    longer = [values[i : i + length + 1] for i in range(len(values) - length)]
    assert all(len(set(window)) <= length for window in longer)


def test_empty_run_is_zero():
    assert longest_unique_run([]) == 0
    assert longest_unique_run_tracking([]) == 0


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=40))
def test_sum_bounds(values):
    result = max_subarray_sum(values)
    assert result >= max(values)
    assert result >= sum(values)
    assert result <= sum(v for v in values if v > 0) or result == max(values)


@given(st.lists(st.integers(-100, -1), min_size=1, max_size=40))
def test_all_negative_picks_largest(values):
    assert max_subarray_sum(values) == max(values)


@given(st.lists(st.integers(0, 100), min_size=1, max_size=40))
def test_non_negative_takes_everything(values):
    assert max_subarray_sum(values) == sum(values)


def test_empty_sum_rejected():
    with pytest.raises(ValueError):
        max_subarray_sum([])