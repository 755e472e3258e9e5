import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortsearch.josephus import josephus, josephus_k, josephus_queue


def test_queue_worked_example():
    assert josephus_queue(7) == [2, 4, 6, 1, 5, 3, 7]


def test_skip_two_worked_example():
    assert josephus_k(7, 2) == [3, 6, 2, 7, 5, 1, 4]


@given(st.integers(0, 200))
def test_link_and_queue_versions_agree(n):
    assert josephus(n) == josephus_queue(n)


@given(st.integers(0, 100))
def test_order_is_a_permutation(n):
    assert sorted(josephus(n)) == list(range(1, n + 1))


@given(st.integers(0, 100))
def test_skip_one_is_every_second(n):
    assert josephus_k(n, 1) == josephus_queue(n)


@given(st.integers(0, 50), st.integers(0, 20))
def test_skip_k_is_a_permutation(n, k):
    assert sorted(josephus_k(n, k)) == list(range(1, n + 1))


@given(st.integers(0, 50))
def test_skip_zero_removes_in_order(n):
    assert josephus_k(n, 0) == list(range(1, n + 1))


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        josephus(-1)
    with pytest.raises(ValueError):
        josephus_queue(-1)


def test_negative_skip_rejected():
    with pytest.raises(ValueError):
        josephus_k(5, -1)