"""Array drills: searching, in-place removal, squares, windows and triples."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import accumulate

from drills.sorting import bubble_sort


def search(nums: Sequence[int], target: int) -> int:
    """Binary-search a sorted sequence; return the index of ``target`` or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        middle = (low + high) // 2
        if nums[middle] == target:
            return middle
        if target > nums[middle]:
            low = middle + 1
        else:
            high = middle - 1
    return -1


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every item not equal to ``val`` to the front, keeping order.

    Returns how many items were kept; the tail beyond them is left as it was.
    """
    kept = [v for v in nums if v != val]
    nums[: len(kept)] = kept
    return len(kept)


def remove_element_counting(nums: MutableSequence[int], val: int) -> int:
    """Like :func:`remove_element`, but fill the tail with ``val``."""
    kept = [v for v in nums if v != val]
    if kept:
        nums[:] = kept + [val] * (len(nums) - len(kept))
    return len(kept)


def sorted_squares(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Square every item in place, sort them and return the same list."""
    nums[:] = [v * v for v in nums]
    bubble_sort(nums)
    return nums


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest contiguous run whose sum reaches ``target``.

    Returns 0 when no run starting at the front reaches it.
    """
    best = 0
    for start in range(len(nums)):
        for length, total in enumerate(accumulate(nums[start:]), start=1):
            if total >= target:
                best = length if best == 0 else min(best, length)
                break
        if best == 0:
            return 0
    return best


def three_sum(nums: MutableSequence[int]) -> list[list[int]]:
    """Sort ``nums`` in place and find triples summing to zero.

    Each result is a list of three indices into the sorted ``nums``.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    nums.sort()
    result: list[list[int]] = []
    if nums[0] > 0 or nums[-1] < 0:
        return result

    for i in range(len(nums) - 2):
        if nums[i] > 0:
            return result
        if i and nums[i] == nums[i - 1]:
            continue
        left, right = i + 1, len(nums) - 1
        while left < right:
            total = nums[i] + nums[left] + nums[right]
            if total == 0:
                result.append([i, left, right])
                while nums[left] == nums[left - 1] and left < right:
                    left += 1
                while nums[right] == nums[right - 1] and left < right:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result