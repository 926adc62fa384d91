"""Counting and dynamic-programming drills."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """All sets of ``k`` distinct digits 1-9 adding up to ``n``, in lexicographic order."""
    if k < 0:
        return []
    return [list(combo) for combo in combinations(range(1, 10), k) if sum(combo) == n]


def count_bits(n: int) -> list[int]:
    """Number of set bits for every integer from 0 to ``n``."""
    return [bin(value).count("1") for value in range(n + 1)]


def rob(nums: Sequence[int]) -> int:
    """Largest total from houses no two of which are adjacent."""
    if not nums:
        raise ValueError("no houses to rob")
    before_previous, previous = 0, nums[0]
    for value in nums[1:]:
        before_previous, previous = previous, max(value + before_previous, previous)
    return previous


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top, starting on step 0 or 1, climbing 1 or 2 at a time."""
    two_back = one_back = 0
    for step in range(2, len(cost) + 1):
        two_back, one_back = one_back, min(
            cost[step - 2] + two_back, cost[step - 1] + one_back
        )
    return one_back


def tribonacci(n: int) -> int:
    """The n-th tribonacci number: T0 = 0, T1 = T2 = 1, Tn the sum of the previous three."""
    if n < 0:
        raise ValueError(f"index must not be negative, got {n}")
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a