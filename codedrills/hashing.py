"""Drills built on counting and hashing."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def find_difference(nums1: Iterable[int], nums2: Iterable[int]) -> list[list[int]]:
    """Distinct values only in ``nums1`` and distinct values only in ``nums2``, each sorted."""
    first, second = set(nums1), set(nums2)
    return [sorted(first - second), sorted(second - first)]


def equal_pairs(grid: Sequence[Sequence[int]]) -> int:
    """Count (row, column) pairs holding the same values in the same order."""
    columns: dict[int, list[int]] = {}
    for row in grid:
        for index, value in enumerate(row):
            columns.setdefault(index, []).append(value)
    rows = Counter(tuple(row) for row in grid)
    return sum(rows[tuple(column)] for column in columns.values())


def unique_occurrences(arr: Iterable[int]) -> bool:
    """Tell whether every distinct value occurs a different number of times."""
    counts = list(Counter(arr).values())
    return len(counts) == len(set(counts))


def max_operations(nums: Iterable[int], k: int) -> int:
    """Most pairs adding up to ``k`` that can be removed, each value used once."""
    waiting: Counter[int] = Counter()
    operations = 0
    for value in nums:
        complement = k - value
        if waiting[complement] > 0:
            operations += 1
            waiting[complement] -= 1
        else:
            waiting[value] += 1
    return operations


def close_strings(word1: str, word2: str) -> bool:
    """Tell whether one word turns into the other by swapping positions or letters."""
    if len(word1) != len(word2):
        return False
    first, second = Counter(word1), Counter(word2)
    return first.keys() == second.keys() and sorted(first.values()) == sorted(
        second.values()
    )