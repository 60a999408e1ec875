"""In-place sorting routines for integer lists."""

from __future__ import annotations

from collections.abc import MutableSequence


def swap(nums: MutableSequence[int], left: int, right: int) -> None:
    """Exchange the items at positions ``left`` and ``right``."""
    nums[left], nums[right] = nums[right], nums[left]


def bubble_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place, stopping early once a pass makes no swap."""
    for done in range(len(items)):
        changed = False
        for j in range(len(items) - 1 - done):
            if items[j] > items[j + 1]:
                swap(items, j, j + 1)
                changed = True
        if not changed:
            break


def _partition(low: int, high: int, nums: MutableSequence[int]) -> int:
    pivot = nums[low]
    while low < high:
        while nums[high] > pivot and high > low:
            high -= 1
        nums[low] = nums[high]
        while nums[low] < pivot and high > low:
            low += 1
        nums[high] = nums[low]
    nums[low] = pivot
    return low


def quick_sort(low: int, high: int, nums: MutableSequence[int]) -> None:
    """Partition-based in-place sort of ``nums`` between ``low`` and ``high``.

    After sorting the part right of the pivot, the prefix up to ``low`` is
    sorted again from index 0.
    """
    if low < high:
        pivot = _partition(low, high, nums)
        quick_sort(pivot + 1, high, nums)
        quick_sort(0, low, nums)