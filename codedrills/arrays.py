"""Array drills: two pointers, sliding windows, prefix sums and friends."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence
from itertools import accumulate

# Floor for the best average when no window of the requested size fits.
_NO_WINDOW_AVERAGE = float(-(2**31 - 1))


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two of the given walls."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def pivot_index(nums: Sequence[int]) -> int:
    """Leftmost index whose left and right sums are equal, or -1."""
    right_sum = sum(nums)
    left_sum = 0
    for index, value in enumerate(nums):
        right_sum -= value
        if left_sum == right_sum:
            return index
        left_sum += value
    return -1


def largest_altitude(gain: Sequence[int]) -> int:
    """Highest altitude reached starting from zero, never below zero."""
    return max([0, *accumulate(gain)])


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Tell whether there are indices i < j < k with nums[i] < nums[j] < nums[k]."""
    smallest = middle = math.inf
    for value in nums:
        if value > middle:
            return True
        if smallest < value < middle:
            middle = value
        elif value < smallest:
            smallest = value
    return False


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """For each kid, whether the extra candies give them the most of all."""
    if not candies:
        return []
    most = max(candies)
    return [count + extra_candies >= most for count in candies]


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """The k-th largest value, counting duplicates."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return sorted(nums)[len(nums) - k]


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Longest run of ones after flipping at most ``k`` zeros."""
    start = 0
    for value in nums:
        if value == 0:
            k -= 1
        if k < 0:
            if nums[start] == 0:
                k += 1
            start += 1
    return len(nums) - start


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Largest average over contiguous windows of length ``k``.

    When ``k`` exceeds the length of ``nums`` no window fits and the result is
    the floor value -2147483647.0.
    """
    if k < 1:
        raise ValueError(f"window length must be positive, got {k}")
    best = _NO_WINDOW_AVERAGE
    window = 0.0
    for index, value in enumerate(nums):
        window += value
        if index >= k - 1:
            best = max(best, window / k)
            window -= nums[index - k + 1]
    return best


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the rest."""
    kept = [value for value in nums if value != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of all the other values."""
    zeros = sum(1 for value in nums if value == 0)
    if zeros > 1:
        return [0] * len(nums)
    product = math.prod(value for value in nums if value != 0)
    if zeros == 1:
        return [product if value == 0 else 0 for value in nums]
    return [product // value for value in nums]


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Compact the values other than ``val`` to the front; return their count.

    Positions past the returned count keep whatever they held before.
    """
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` steps in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def running_sum(nums: Sequence[int]) -> list[int]:
    """Prefix sums of ``nums``."""
    return list(accumulate(nums))


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Squares of the values in ascending order."""
    return sorted(value * value for value in nums)


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """One-based indices of pairs adding up to ``target``.

    The first pair found is reported after a full search; once a pair is
    found, each later index is only checked against its right neighbour, and
    every such hit is appended as well.
    """
    result: list[int] = []
    found = False
    for i, first in enumerate(nums):
        for j in range(i + 1, len(nums)):
            if first + nums[j] == target:
                result.extend((i + 1, j + 1))
                found = True
                break
            if found:
                break
    return result


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """One-based indices of two values of sorted ``numbers`` adding to ``target``."""
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total > target:
            right -= 1
        else:
            left += 1
    return []


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` flowers fit with no two in adjacent plots.

    An empty flowerbed always answers False.
    """
    bed = [0, *flowerbed, 0]
    for index in range(1, len(bed) - 1):
        if bed[index - 1] == bed[index] == bed[index + 1] == 0:
            bed[index] = 1
            n -= 1
        if n <= 0:
            return True
    return False


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of all values of both arrays together."""
    merged = sorted([*nums1, *nums2])
    if not merged:
        raise ValueError("median of no values")
    half = len(merged) // 2
    if len(merged) % 2:
        return float(merged[half])
    return (merged[half - 1] + merged[half]) / 2