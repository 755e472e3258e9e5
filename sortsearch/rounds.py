"""Counting the rounds needed to collect 1..n from left to right."""

from __future__ import annotations

from typing import Iterable, Sequence


def count_rounds(permutation: Iterable[int]) -> int:
    """Number of left-to-right passes needed to collect the values in increasing order.

    Each pass extends chains of consecutive values; the answer is the number of
    chains, tracked by the value each open chain is waiting for next.
    """
    waiting_for: set[int] = set()
    for value in permutation:
        waiting_for.discard(value)
        waiting_for.add(value + 1)
    return len(waiting_for)


def _positions(permutation: Sequence[int]) -> list[int]:
    """Return a list mapping each value 1..n to its 1-based position."""
    n = len(permutation)
    if sorted(permutation) != list(range(1, n + 1)):
        raise ValueError("expected a permutation of 1..n")
    positions = [0] * (n + 1)
    for index, value in enumerate(permutation, start=1):
        positions[value] = index
    return positions


def count_rounds_by_positions(permutation: Sequence[int]) -> int:
    """Rounds for a permutation of 1..n: one plus each value found after its successor."""
    positions = _positions(permutation)
    n = len(permutation)
    if n == 0:
        return 0
    return 1 + sum(positions[value] > positions[value + 1] for value in range(1, n))


def rounds_after_swaps(
    permutation: Sequence[int], swaps: Iterable[tuple[int, int]]
) -> list[int]:
    """Apply 1-based position swaps in turn; return the round count after each one.

    The input permutation is left untouched.
    """
    positions = _positions(permutation)
    n = len(permutation)
    values = [0, *permutation]
    rounds = count_rounds_by_positions(permutation)
    results: list[int] = []

    def inversions(pairs: set[tuple[int, int]]) -> int:
        return sum(positions[low] > positions[high] for low, high in pairs)

    for left, right in swaps:
        if not (1 <= left <= n and 1 <= right <= n):
            raise ValueError(f"swap positions out of range: ({left}, {right})")
        affected: set[tuple[int, int]] = set()
        for pos in (left, right):
            value = values[pos]
            if value > 1:
                affected.add((value - 1, value))
            if value < n:
                affected.add((value, value + 1))
        rounds -= inversions(affected)
        values[left], values[right] = values[right], values[left]
        positions[values[left]] = left
        positions[values[right]] = right
        rounds += inversions(affected)
        results.append(rounds)
    return results