"""In-place sorting algorithms for mutable sequences."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import Any


def bubble_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place with bubble sort, stopping early once sorted."""
    for unsorted_end in range(len(nums) - 1, 0, -1):
        swapped = False
        for j in range(unsorted_end):
            if nums[j] > nums[j + 1]:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]
                swapped = True
        if not swapped:
            break


def quick_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place with quicksort using a random pivot."""
    pending = [(0, len(nums) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            pivot_at = _partition(nums, start, end)
            pending.append((start, pivot_at - 1))
            pending.append((pivot_at + 1, end))


def _partition(nums: MutableSequence[Any], start: int, end: int) -> int:
    chosen = random.randint(start, end)
    nums[start], nums[chosen] = nums[chosen], nums[start]
    pivot = nums[start]
    left, right = start, end
    while left < right:
        while left < right and nums[right] >= pivot:
            right -= 1
        nums[left] = nums[right]
        while left < right and nums[left] < pivot:
            left += 1
        nums[right] = nums[left]
    nums[left] = pivot
    return left