"""Sorting and searching algorithms for classic problems, data-structure helpers and a command-line solver."""

__version__ = "0.1.0"

__all__ = ["structures", "greedy", "rounds", "josephus", "subarrays", "cli"]