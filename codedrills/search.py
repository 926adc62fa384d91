"""Binary-search drills."""

from __future__ import annotations

from collections.abc import Callable, Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or -1 when absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return low


def first_bad_version(n: int, is_bad: Callable[[int], bool]) -> int:
    """First version in 1..n for which ``is_bad`` holds, or -1 if none.

    ``is_bad`` may be asked about version 0.
    """
    low, high = 1, n
    while low <= high:
        mid = low + (high - low) // 2
        before, here = is_bad(mid - 1), is_bad(mid)
        if here and not before:
            return mid
        if here:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the picked number in 1..n.

    ``guess`` returns 0 on a hit, -1 when the pick is lower and 1 when it is
    higher. Returns -1 if the answers never lead to a hit.
    """
    low, high = 1, n
    while low <= high:
        mid = low + (high - low) // 2
        answer = guess(mid)
        if answer == 0:
            return mid
        if answer == -1:
            high = mid - 1
        else:
            low = mid + 1
    return -1