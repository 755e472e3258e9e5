"""Command line: read a problem's input from stdin and print its answer."""

from __future__ import annotations

import argparse
import itertools
import sys
from typing import Callable, Iterable, Optional, Sequence

from sortsearch.greedy import (
    assign_tickets,
    count_distinct,
    count_matched_apartments,
    find_two_sum,
    gondolas_needed,
    max_customers,
    max_movies,
    min_stick_cost,
    smallest_missing_sum,
)
from sortsearch.josephus import josephus_k, josephus_queue
from sortsearch.rounds import count_rounds, rounds_after_swaps
from sortsearch.subarrays import longest_unique_run, max_subarray_sum

Reader = Callable[[int], list[int]]


def _reader(text: str) -> Reader:
    tokens = iter(text.split())

    def take(count: int) -> list[int]:
        values = [int(token) for token in itertools.islice(tokens, count)]
        if len(values) < count:
            raise ValueError("input ended early")
        return values

    return take


def _pairs(flat: Sequence[int]) -> list[tuple[int, int]]:
    return list(zip(flat[::2], flat[1::2]))


def _one(value: int) -> list[str]:
    return [str(value)]


def _apartments(take: Reader) -> list[str]:
    n, m, k = take(3)
    desired = take(n)
    available = take(m)
    return _one(count_matched_apartments(desired, available, k))


def _collecting_numbers(take: Reader) -> list[str]:
    (n,) = take(1)
    return _one(count_rounds(take(n)))


def _collecting_numbers2(take: Reader) -> list[str]:
    n, m = take(2)
    permutation = take(n)
    swaps = _pairs(take(2 * m))
    return [str(rounds) for rounds in rounds_after_swaps(permutation, swaps)]


def _concert_tickets(take: Reader) -> list[str]:
    n, m = take(2)
    tickets = take(n)
    budgets = take(m)
    return ["-1" if price is None else str(price) for price in assign_tickets(tickets, budgets)]


def _distinct_numbers(take: Reader) -> list[str]:
    (n,) = take(1)
    return _one(count_distinct(take(n)))


def _ferris_wheel(take: Reader) -> list[str]:
    n, limit = take(2)
    weights = take(n)
    try:
        return _one(gondolas_needed(weights, limit))
    except ValueError:
        return ["-1"]


def _joined(order: Iterable[int]) -> list[str]:
    return [" ".join(map(str, order))]


def _josephus_i(take: Reader) -> list[str]:
    (n,) = take(1)
    return _joined(josephus_queue(n))


def _josephus_ii(take: Reader) -> list[str]:
    n, k = take(2)
    return _joined(josephus_k(n, k))


def _maximum_subarray_sum(take: Reader) -> list[str]:
    (n,) = take(1)
    return _one(max_subarray_sum(take(n)))


def _missing_coin_sum(take: Reader) -> list[str]:
    (n,) = take(1)
    return _one(smallest_missing_sum(take(n)))


def _movie_festival(take: Reader) -> list[str]:
    (n,) = take(1)
    return _one(max_movies(_pairs(take(2 * n))))


def _playlist(take: Reader) -> list[str]:
    (n,) = take(1)
    return _one(longest_unique_run(take(n)))


def _restaurant_customers(take: Reader) -> list[str]:
    (n,) = take(1)
    return _one(max_customers(_pairs(take(2 * n))))


def _stick_lengths(take: Reader) -> list[str]:
    (n,) = take(1)
    return _one(min_stick_cost(take(n)))


def _sum_two_values(take: Reader) -> list[str]:
    n, target = take(2)
    found = find_two_sum(take(n), target)
    if found is None:
        return ["IMPOSSIBLE"]
    first, second = found
    return [f"{first + 1} {second + 1}"]


PROBLEMS: dict[str, Callable[[Reader], list[str]]] = {
    "apartments": _apartments,
    "collecting_numbers": _collecting_numbers,
    "collecting_numbers2": _collecting_numbers2,
    "concert_tickets": _concert_tickets,
    "distinct_numbers": _distinct_numbers,
    "ferris_wheel": _ferris_wheel,
    "josephus_i": _josephus_i,
    "josephus_ii": _josephus_ii,
    "maximum_subarray_sum": _maximum_subarray_sum,
    "missing_coin_sum": _missing_coin_sum,
    "movie_festival": _movie_festival,
    "playlist": _playlist,
    "restaurant_customers": _restaurant_customers,
    "stick_lengths": _stick_lengths,
    "sum_two_values": _sum_two_values,
}


def solve(problem: str, text: str) -> str:
    """Solve `problem` for the whitespace-separated integers in `text`."""
    handler = PROBLEMS.get(problem)
    if handler is None:
        raise ValueError(f"unknown problem: {problem}")
    lines = handler(_reader(text))
    return "".join(f"{line}\n" for line in lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read input from stdin, write the answer to stdout; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="sortsearch", description="Solve a sorting and searching problem."
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    args = parser.parse_args(argv)
    try:
        output = solve(args.problem, sys.stdin.read())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())