import pytest

from drills.sorting import bubble_sort, quick_sort, swap


def test_swap_exchanges_positions():
    nums = [1, 2, 3]
    swap(nums, 0, 2)
    assert nums == [3, 2, 1]


def test_bubble_sort_source_case():
    nums = [3, 2, 1, 4, 5]
    bubble_sort(nums)
    assert nums == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "nums",
    [[], [7], [1, 2, 3], [5, 4, 3, 2, 1], [2, 2, 1, 1], [0, -3, 8, -3, 4]],
)
def test_bubble_sort_orders_and_keeps_items(nums):
    original = list(nums)
    bubble_sort(nums)
    assert nums == sorted(original)


def test_quick_sort_source_case():
    nums = [5, 7, 2, 1, 9, 8, 10]
    quick_sort(0, len(nums) - 1, nums)
    assert nums == [1, 2, 5, 7, 8, 9, 10]


@pytest.mark.parametrize("nums", [[3, 1, 2], [4, 9, 1, 7], [10, 3, 8, 6, 2]])
def test_quick_sort_keeps_items(nums):
    original = list(nums)
    quick_sort(0, len(nums) - 1, nums)
    assert sorted(nums) == sorted(original)


def test_quick_sort_empty_range_leaves_list():
    nums = [3, 1, 2]
    quick_sort(2, 1, nums)
    assert nums == [3, 1, 2]