"""Best contiguous runs: largest sum and longest run without repeats."""

from __future__ import annotations

from collections import deque
from typing import Iterable


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    best = current = first
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best


def longest_unique_run(values: Iterable[int]) -> int:
    """Length of the longest contiguous run with no repeated value."""
    last_seen: dict[int, int] = {}
    start = 0
    best = 0
    for end, value in enumerate(values):
        previous = last_seen.get(value)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[value] = end
        best = max(best, end - start + 1)
    return best


def longest_unique_run_tracking(values: Iterable[int]) -> int:
    """Same as longest_unique_run, keeping the current run explicitly."""
    run: deque[int] = deque()
    members: set[int] = set()
    best = 0
    for value in values:
        if value in members:
            while (dropped := run.popleft()) != value:
                members.discard(dropped)
        else:
            members.add(value)
        run.append(value)
        best = max(best, len(run))
    return best