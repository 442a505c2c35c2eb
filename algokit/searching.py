"""Binary-search style lookups over rotated arrays, sorted matrices and rates."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

__all__ = [
    "MAX_SPEED",
    "search_rotated",
    "search_rotated_with_duplicates",
    "search_matrix",
    "min_eating_speed",
    "can_eat_in_time",
]

MAX_SPEED = 1_000_000_000
"""Largest eating speed considered by :func:`min_eating_speed`."""


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated ascending sequence of distinct values, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[lo] <= nums[mid]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] < target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Return True if ``target`` occurs in a rotated ascending sequence that may repeat values."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return True
        if nums[mid] == nums[lo]:
            lo += 1
        elif nums[lo] <= nums[mid]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] < target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return False


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return True if ``target`` is in a matrix whose rows and columns ascend.

    The search walks from the top-right corner, moving down when the target
    is larger and left when it is smaller.
    """
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        current = matrix[row][col]
        if current == target:
            return True
        if target > current:
            row += 1
        else:
            col -= 1
    return False


def can_eat_in_time(piles: Iterable[int], k: int, h: int) -> bool:
    """Return True if eating ``k`` per hour, one pile at a time, finishes within ``h`` hours."""
    if k <= 0:
        raise ValueError("eating speed must be positive")
    return sum(-(-pile // k) for pile in piles) <= h


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the smallest speed, at most ``MAX_SPEED``, that finishes ``piles`` within ``h`` hours."""
    if not can_eat_in_time(piles, MAX_SPEED, h):
        raise ValueError("no speed up to MAX_SPEED finishes the piles in time")
    speeds = range(1, MAX_SPEED + 1)
    return speeds[bisect_left(speeds, True, key=lambda k: can_eat_in_time(piles, k, h))]