"""Elimination orders for children standing in a circle."""

from __future__ import annotations

from collections import deque


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("number of children must be non-negative")


def josephus(n: int) -> list[int]:
    """Removal order when every second child of 1..n is removed.

    Uses successor links that skip over removed children.
    """
    _check_count(n)
    if n == 0:
        return []
    following = [*range(1, n), 0]
    order: list[int] = []
    current = 0
    for _ in range(n):
        victim = following[current]
        order.append(victim + 1)
        following[current] = following[victim]
        current = following[current]
    return order


def josephus_queue(n: int) -> list[int]:
    """Removal order when every second child of 1..n is removed, using a queue."""
    _check_count(n)
    circle = deque(range(1, n + 1))
    order: list[int] = []
    while circle:
        circle.rotate(-1)
        order.append(circle.popleft())
    return order


def josephus_k(n: int, k: int) -> list[int]:
    """Removal order when, repeatedly, k children are skipped and the next is removed."""
    _check_count(n)
    if k < 0:
        raise ValueError("skip count must be non-negative")
    remaining = list(range(1, n + 1))
    order: list[int] = []
    idx = 0
    while remaining:
        idx = (idx + k) % len(remaining)
        order.append(remaining.pop(idx))
    return order