"""In-place and returning sorts: Dutch national flag, tail merge and merge sort."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from heapq import merge
from typing import TypeVar

__all__ = ["sort_colors", "merge_sorted", "merge_sort"]

T = TypeVar("T")


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass.

    Any value other than 0 or 1 is moved to the end as if it were 2.
    """
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def merge_sorted(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place.

    Both prefixes must be ascending, and ``nums1`` must have room for
    ``m + n`` values; positions beyond that are left untouched.
    """
    if m < 0 or n < 0:
        raise ValueError("counts must not be negative")
    if len(nums1) < m + n or len(nums2) < n:
        raise ValueError("sequences are too short for the given counts")
    nums1[: m + n] = list(merge(nums1[:m], nums2[:n]))


def _merge_sorted_halves(items: list[T]) -> list[T]:
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    left = _merge_sorted_halves(items[:middle])
    right = _merge_sorted_halves(items[middle:])
    merged: list[T] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] < right[ri]:  # type: ignore[operator]
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(nums: list[T]) -> list[T]:
    """Sort ``nums`` in place with merge sort and return it."""
    nums[:] = _merge_sorted_halves(list(nums))
    return nums