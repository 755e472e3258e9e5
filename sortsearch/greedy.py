"""Greedy and sorting-based solutions to classic allocation problems."""

from __future__ import annotations

import heapq
from typing import Iterable, Optional, Sequence

from sortedcontainers import SortedList


def count_matched_apartments(
    desired: Iterable[int], available: Iterable[int], threshold: int
) -> int:
    """Count applicants given an apartment within `threshold` of their desired size."""
    wants = sorted(desired)
    sizes = sorted(available)
    matched = 0
    pos = 0
    for want in wants:
        while pos < len(sizes) and sizes[pos] < want - threshold:
            pos += 1
        if pos < len(sizes) and sizes[pos] <= want + threshold:
            matched += 1
            pos += 1
    return matched


def assign_tickets(
    tickets: Iterable[int], budgets: Iterable[int]
) -> list[Optional[int]]:
    """Give each customer, in turn, the dearest remaining ticket within budget.

    A customer who can afford no remaining ticket gets None.
    """
    remaining = SortedList(tickets)
    result: list[Optional[int]] = []
    for budget in budgets:
        idx = remaining.bisect_right(budget)
        if idx == 0:
            result.append(None)
        else:
            result.append(remaining.pop(idx - 1))
    return result


def count_distinct(values: Iterable[int]) -> int:
    """Return how many different values occur."""
    return len(set(values))


def gondolas_needed(weights: Iterable[int], limit: int) -> int:
    """Minimum gondolas carrying at most two children of total weight <= limit."""
    ordered = sorted(weights, reverse=True)
    if not ordered:
        return 0
    if ordered[0] > limit:
        raise ValueError("a child is heavier than the gondola limit")
    result = 0
    heavy, light = 0, len(ordered) - 1
    while heavy <= light:
        if ordered[heavy] + ordered[light] <= limit:
            light -= 1
        heavy += 1
        result += 1
    return result


def max_movies(movies: Iterable[tuple[int, int]]) -> int:
    """Most (start, end) movies watchable in full without overlap."""
    count = 0
    current_end: Optional[int] = None
    for start, end in sorted(movies, key=lambda movie: movie[1]):
        if current_end is None or start >= current_end:
            count += 1
            current_end = end
    return count


def max_customers(visits: Iterable[tuple[int, int]]) -> int:
    """Largest number of (arrival, departure) customers present at once."""
    departures: list[int] = []
    best = 0
    for arrival, departure in sorted(visits, key=lambda visit: visit[0]):
        heapq.heappush(departures, departure)
        while departures and departures[0] <= arrival:
            heapq.heappop(departures)
        best = max(best, len(departures))
    return best


def min_stick_cost(lengths: Iterable[int]) -> int:
    """Least total change needed to make all sticks the same length."""
    ordered = sorted(lengths)
    if not ordered:
        return 0
    median = ordered[len(ordered) // 2]
    return sum(abs(length - median) for length in ordered)


def find_two_sum(values: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Find two distinct indices whose values add up to `target`.

    The index of the smaller value comes first; None if there is no such pair.
    """
    ordered = sorted((value, index) for index, value in enumerate(values))
    low, high = 0, len(ordered) - 1
    while low < high:
        total = ordered[low][0] + ordered[high][0]
        if total == target:
            return ordered[low][1], ordered[high][1]
        if total > target:
            high -= 1
        else:
            low += 1
    return None


def smallest_missing_sum(coins: Iterable[int]) -> int:
    """Smallest positive sum that no subset of the coins adds up to."""
    reachable = 1
    for coin in sorted(coins):
        if coin > reachable:
            break
        reachable += coin
    return reachable