"""Linked lists, binary trees, modular powers, bit strings and a stopwatch."""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import Iterable, Iterator, Optional, Sequence

MOD = 10**9 + 7


class Stopwatch:
    """Measures elapsed wall-clock time in milliseconds."""

    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.time_taken: float = -1.0

    def tik(self) -> None:
        """Start (or restart) the measurement."""
        self._start = perf_counter()

    def tok(self) -> float:
        """Return the milliseconds since the last tik() and remember them."""
        if self._start is None:
            raise RuntimeError("tok() called before tik()")
        self.time_taken = (perf_counter() - self._start) * 1000.0
        return self.time_taken

    def format_time_taken(self) -> str:
        """Describe the last measurement, or -1 if there is none yet."""
        return f"Time taken: {self.time_taken:g}ms"


@dataclass(eq=False)
class ListNode:
    """Node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


@dataclass(eq=False)
class DLListNode:
    """Node of a doubly linked list."""

    val: int
    next: Optional[DLListNode] = None
    prev: Optional[DLListNode] = None


@dataclass(eq=False)
class TreeNode:
    """Node of a binary tree."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def powmod(base: int, exp: int) -> int:
    """Return base ** exp modulo 1e9+7."""
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exp, MOD)


def bit_string(value: int, width: int) -> str:
    """Return the lowest `width` bits of `value` (two's complement), high bit first."""
    if width <= 0:
        raise ValueError("width must be positive")
    return format(value & ((1 << width) - 1), f"0{width}b")


def list_from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a singly linked list holding `values` in order; None if empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def doubly_linked_from_values(
    values: Iterable[int],
) -> tuple[Optional[DLListNode], Optional[DLListNode]]:
    """Build a doubly linked list and return its (head, tail)."""
    head: Optional[DLListNode] = None
    tail: Optional[DLListNode] = None
    for value in values:
        node = DLListNode(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head, tail


def format_linked_list(head: Optional[ListNode]) -> str:
    """Render a singly linked list as 'a->b->c->'."""
    if head is None:
        return ""
    return "".join(f"{value}->" for value in head)


def format_doubly_linked(node: DLListNode) -> str:
    """Render a doubly linked list from its head forwards or its tail backwards."""
    if node.next is None:
        label, step = "TAIL", "prev"
    else:
        label, step = "HEAD", "next"
    parts = []
    current: Optional[DLListNode] = node
    while current is not None:
        parts.append(f"{current.val}<=>")
        current = getattr(current, step)
    return f"{label} {''.join(parts)}NULL"


def format_tree(root: Optional[TreeNode]) -> str:
    """Render a tree sideways: right subtree on top, four spaces per level."""
    lines: list[str] = []
    stack: list[tuple[TreeNode, int]] = []
    node, space = root, 4
    while stack or node is not None:
        while node is not None:
            stack.append((node, space))
            node = node.right
            space += 4
        node, space = stack.pop()
        lines.append(" " * space + str(node.val))
        node = node.left
        space += 4
    return "\n".join(lines)


def insert_bst(root: Optional[TreeNode], value: int) -> TreeNode:
    """Insert into a binary search tree (equal values go left); return the root."""
    new_node = TreeNode(value)
    if root is None:
        return new_node
    node = root
    while True:
        if value <= node.val:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def tree_from_heap_array(values: Sequence[int]) -> Optional[TreeNode]:
    """Build a tree from a 1-based heap layout; index 0 is ignored and -1 marks no node."""

    def build(idx: int) -> Optional[TreeNode]:
        if idx >= len(values) or values[idx] == -1:
            return None
        return TreeNode(values[idx], build(2 * idx), build(2 * idx + 1))

    return build(1)