import random

import pytest

from cpubench.common import make_sort_list
from cpubench.sorting import (
    TreeNode,
    bubble_sort,
    check_tree,
    quicksort,
    run_bubble,
    run_quick,
    run_tree,
    tree_insert,
    tree_values,
)


@pytest.fixture
def sample():
    rnd = random.Random(1234)
    return [rnd.randint(-100, 100) for _ in range(300)]


def test_bubble_sort_matches_sorted(sample):
    assert bubble_sort(sample) == sorted(sample)


def test_bubble_sort_does_not_mutate(sample):
    copy = list(sample)
    bubble_sort(sample)
    assert sample == copy


@pytest.mark.parametrize("values", [[], [1], [2, 1], [3, 3, 3], [5, -1, 5, 0]])
def test_quicksort_small_cases(values):
    assert quicksort(values) == sorted(values)


def test_quicksort_matches_sorted(sample):
    assert quicksort(sample) == sorted(sample)


def test_quicksort_does_not_mutate(sample):
    copy = list(sample)
    quicksort(sample)
    assert sample == copy


def test_tree_values_descending_and_unique(sample):
    root = TreeNode(sample[0])
    for value in sample[1:]:
        tree_insert(root, value)
    assert list(tree_values(root)) == sorted(set(sample), reverse=True)
    assert check_tree(root)


def test_tree_insert_places_larger_left():
    root = TreeNode(10)
    tree_insert(root, 20)
    tree_insert(root, 5)
    assert root.left.val == 20
    assert root.right.val == 5


def test_check_tree_detects_bad_order():
    bad = TreeNode(10, left=TreeNode(3))
    assert not check_tree(bad)
    deep_bad = TreeNode(10, right=TreeNode(5, right=TreeNode(7)))
    assert not check_tree(deep_bad)


def test_tree_values_empty():
    assert list(tree_values(None)) == []


@pytest.mark.parametrize("run", [0, 1, 50, 99])
def test_run_bubble_returns_sorted_element(run):
    values, _, _ = make_sort_list(500)
    assert run_bubble(run) == sorted(values)[run]


def test_run_bubble_first_is_smallest():
    _, _, littlest = make_sort_list(500)
    assert run_bubble(0) == littlest


@pytest.mark.parametrize("run", [0, 42, 99])
def test_run_quick_returns_sorted_element(run):
    values, _, _ = make_sort_list(5000)
    assert run_quick(run) == sorted(values)[run]


@pytest.mark.parametrize("run", [0, 7, 99])
def test_run_tree_returns_input_element(run):
    values, _, _ = make_sort_list(5000)
    assert run_tree(run) == values[run + 1]