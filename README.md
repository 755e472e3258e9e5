# sortsearch

Solutions to classic sorting-and-searching problems as plain Python
functions, a few small data-structure helpers, and a command that reads a
problem's input from standard input and prints its answer.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library

### `sortsearch.greedy`

```python
from sortsearch.greedy import assign_tickets, count_distinct, smallest_missing_sum

count_distinct([2, 3, 2, 2, 3])              # 2
assign_tickets([5, 3, 7, 8, 5], [4, 8, 3])   # [3, 8, None]
smallest_missing_sum([2, 9, 1, 2, 7])        # 6
```

- `count_matched_apartments(desired, available, threshold)`: how many
  applicants get an apartment within `threshold` of the size they want.
- `assign_tickets(tickets, budgets)`: each customer in turn takes the
  dearest remaining ticket within budget; `None` if none is affordable.
- `count_distinct(values)`: number of different values.
- `gondolas_needed(weights, limit)`: fewest gondolas holding at most two
  children each; raises `ValueError` if one child is over the limit.
- `max_movies(movies)`: most `(start, end)` movies watchable in full.
- `max_customers(visits)`: most `(arrival, departure)` customers present
  at once.
- `min_stick_cost(lengths)`: least total change to make all sticks equal.
- `find_two_sum(values, target)`: two distinct 0-based indices whose
  values add up to `target`, or `None`.
- `smallest_missing_sum(coins)`: smallest positive sum no subset makes.

### `sortsearch.rounds`

- `count_rounds(permutation)`: left-to-right passes needed to collect the
  values in increasing order.
- `count_rounds_by_positions(permutation)`: the same for a permutation of
  1..n; raises `ValueError` if it is not one.
- `rounds_after_swaps(permutation, swaps)`: applies 1-based position swaps
  in turn and returns the round count after each.

### `sortsearch.josephus`

- `josephus(n)` and `josephus_queue(n)`: removal order of 1..n in a circle
  when every second child is removed.
- `josephus_k(n, k)`: removal order when `k` children are skipped before
  each removal.

### `sortsearch.subarrays`

- `max_subarray_sum(values)`: largest sum of a non-empty contiguous
  subarray; raises `ValueError` on empty input.
- `longest_unique_run(values)` and `longest_unique_run_tracking(values)`:
  length of the longest contiguous run without a repeated value.

### `sortsearch.structures`

- `ListNode`, `DLListNode`, `TreeNode` dataclasses.
- `list_from_values`, `doubly_linked_from_values` (returns `(head, tail)`),
  `insert_bst` (equal values go left), `tree_from_heap_array` (1-based
  layout, `-1` for a missing node).
- `format_linked_list`, `format_doubly_linked`, `format_tree`: text
  renderings.
- `powmod(base, exp)`: `base ** exp` modulo 1e9+7.
- `bit_string(value, width)`: the lowest `width` bits, high bit first.
- `Stopwatch`: `tik()` starts, `tok()` returns elapsed milliseconds,
  `format_time_taken()` describes the last measurement.

## Command line

```
sortsearch PROBLEM < input.txt
```

`PROBLEM` is one of `apartments`, `collecting_numbers`,
`collecting_numbers2`, `concert_tickets`, `distinct_numbers`,
`ferris_wheel`, `josephus_i`, `josephus_ii`, `maximum_subarray_sum`,
`missing_coin_sum`, `movie_festival`, `playlist`,
`restaurant_customers`, `stick_lengths`, `sum_two_values`. Input is
whitespace-separated integers in the usual format for that problem.

```
echo "5 2 3 2 2 3" | sortsearch distinct_numbers       # 2
echo "7" | sortsearch josephus_i                       # 2 4 6 1 5 3 7
echo "8 1 2 1 3 2 7 4 2" | sortsearch playlist         # 5
```

A customer without a ticket prints `-1`, an impossible ferris wheel prints
`-1`, and a missing pair prints `IMPOSSIBLE`. Malformed or short input
prints an error on standard error and exits with status 1.

From Python, `sortsearch.cli.solve(problem, text)` returns the same output
as a string, and `sortsearch.cli.main(argv)` runs the command.