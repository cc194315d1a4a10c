"""Bubble sort, quicksort and tree sort benchmarks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from cpubench.common import BenchmarkError, make_sort_list

__all__ = [
    "TreeNode",
    "bubble_sort",
    "quicksort",
    "tree_insert",
    "check_tree",
    "tree_values",
    "run_bubble",
    "run_quick",
    "run_tree",
]

SORT_ELEMENTS = 5000
BUBBLE_ELEMENTS = 500


@dataclass
class TreeNode:
    """A node of the sort tree; larger values go left, smaller values right."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by bubble sort."""
    items = list(values)
    for top in range(len(items) - 1, 0, -1):
        for i in range(top):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def quicksort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by middle-pivot quicksort."""
    items = list(values)
    if not items:
        return items
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        i, j = low, high
        pivot = items[(low + high) // 2]
        while i <= j:
            while items[i] < pivot:
                i += 1
            while pivot < items[j]:
                j -= 1
            if i <= j:
                items[i], items[j] = items[j], items[i]
                i += 1
                j -= 1
        if i < high:
            pending.append((i, high))
        if low < j:
            pending.append((low, j))
    return items


def tree_insert(root: TreeNode, value: int) -> None:
    """Insert a value into the tree; values already present are ignored."""
    node = root
    while True:
        if value > node.val:
            if node.left is None:
                node.left = TreeNode(value)
                return
            node = node.left
        elif value < node.val:
            if node.right is None:
                node.right = TreeNode(value)
                return
            node = node.right
        else:
            return


def check_tree(node: TreeNode) -> bool:
    """Return True if every left child is larger and every right child smaller."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.left is not None:
            if current.left.val <= current.val:
                return False
            stack.append(current.left)
        if current.right is not None:
            if current.right.val >= current.val:
                return False
            stack.append(current.right)
    return True


def tree_values(node: Optional[TreeNode]) -> Iterator[int]:
    """Yield the tree's values in order, largest first."""
    stack: list[TreeNode] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.val
        current = current.right


def _checked_sort(count: int, sorter, name: str) -> list[int]:
    values, biggest, littlest = make_sort_list(count)
    ordered = sorter(values)
    if ordered[0] != littlest or ordered[-1] != biggest:
        raise BenchmarkError(f"Error in {name}.")
    return ordered


def run_bubble(run: int) -> int:
    """Run the bubble sort benchmark once and return the element at index ``run``."""
    return _checked_sort(BUBBLE_ELEMENTS, bubble_sort, "Bubble")[run]


def run_quick(run: int) -> int:
    """Run the quicksort benchmark once and return the element at index ``run``."""
    return _checked_sort(SORT_ELEMENTS, quicksort, "Quick")[run]


def run_tree(run: int) -> int:
    """Run the tree sort benchmark once and return input element ``run + 1``."""
    values, _, _ = make_sort_list(SORT_ELEMENTS)
    root = TreeNode(values[0])
    for value in values[1:]:
        tree_insert(root, value)
    if not check_tree(root):
        raise BenchmarkError("Error in Tree.")
    return values[run + 1]