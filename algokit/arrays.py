"""Algorithms over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import accumulate, pairwise

__all__ = [
    "two_sum",
    "max_area",
    "max_profit",
    "running_sum",
    "majority_element",
    "rotate",
    "minimum_deletions",
    "remove_duplicates",
    "missing_number",
    "max_frequency_elements",
    "intersection",
    "next_greater_element",
    "max_subarray",
    "pivot_index",
    "asteroid_collision",
]


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Return ``[i, j]`` with ``i < j`` and ``nums[i] + nums[j] == target``.

    The pair found is the one whose second index is smallest. An empty list
    is returned when no pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []


def max_area(height: Sequence[int]) -> int:
    """Return the most water held between two of the given vertical lines."""
    lo, hi = 0, len(height) - 1
    best = 0
    while lo < hi:
        best = max(best, (hi - lo) * min(height[lo], height[hi]))
        if height[lo] < height[hi]:
            lo += 1
        else:
            hi -= 1
    return best


def max_profit(prices: Iterable[int]) -> int:
    """Return the best gain from buying once and later selling once."""
    it = iter(prices)
    try:
        lowest = next(it)
    except StopIteration:
        raise ValueError("prices must not be empty") from None
    profit = 0
    for price in it:
        lowest = min(lowest, price)
        profit = max(profit, price - lowest)
    return profit


def running_sum(nums: Iterable[int]) -> list[int]:
    """Return the prefix sums of ``nums``."""
    return list(accumulate(nums))


def majority_element(nums: Iterable[int]) -> int:
    """Return the value occurring more than half the time (Boyer-Moore vote)."""
    candidate = 0
    balance = 0
    seen_any = False
    for value in nums:
        seen_any = True
        if balance == 0:
            candidate = value
        balance += 1 if value == candidate else -1
    if not seen_any:
        raise ValueError("nums must not be empty")
    return candidate


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` in place ``k`` steps to the right."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = [*nums[-k:], *nums[:-k]]


def minimum_deletions(nums: Sequence[int]) -> int:
    """Return the fewest deletions from either end that remove both the minimum and maximum."""
    if not nums:
        raise ValueError("nums must not be empty")
    n = len(nums)
    lo = min(range(n), key=nums.__getitem__)
    hi = max(range(n), key=nums.__getitem__)
    lo, hi = sorted((lo, hi))
    return min(hi + 1, n - lo, (lo + 1) + (n - hi))


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted sequence in place and return the count of distinct values.

    The first returned-count positions hold the distinct values in order; the
    rest of the sequence is left as it was.
    """
    if not nums:
        return 0
    unique = [nums[0], *(cur for prev, cur in pairwise(nums) if cur != prev)]
    nums[: len(unique)] = unique
    return len(unique)


def missing_number(nums: Sequence[int]) -> int:
    """Return the one value of ``0..len(nums)`` absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def max_frequency_elements(nums: Iterable[int]) -> int:
    """Return the total occurrences of all values that share the highest frequency."""
    counts = Counter(nums)
    if not counts:
        return 0
    top = max(counts.values())
    return top * sum(1 for count in counts.values() if count == top)


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values present in both inputs, in no particular order."""
    return list(set(nums1).intersection(nums2))


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the first greater value to its right in ``nums2``.

    Values with no greater successor, or absent from ``nums2``, map to -1.
    """
    wanted = {value: index for index, value in enumerate(nums1)}
    result = [-1] * len(nums1)
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        if value in wanted:
            result[wanted[value]] = stack[-1] if stack else -1
        stack.append(value)
    return result


def max_subarray(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    best: int | None = None
    running = 0
    for value in nums:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("nums must not be empty")
    return best


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums match, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Return the asteroids that survive all collisions, in their original order.

    Positive values move right, negative values move left; on collision the
    smaller one explodes and equal sizes both explode.
    """
    stack: list[int] = []
    for asteroid in asteroids:
        if asteroid > 0:
            stack.append(asteroid)
            continue
        while stack and 0 < stack[-1] < -asteroid:
            stack.pop()
        if not stack or stack[-1] < 0:
            stack.append(asteroid)
        if stack and stack[-1] == -asteroid:
            stack.pop()
    return stack