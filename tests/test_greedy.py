import random

import pytest

from drills.greedy import find_content_children


def test_only_one_child_fits():
    assert find_content_children([1, 2, 3], [1, 1]) == 1


def test_large_cookies_satisfy_everyone():
    greed = [4, 1, 3, 2]
    assert find_content_children(greed, [100] * 5) == len(greed)


def test_no_cookies():
    assert find_content_children([1, 2], []) == 0


@pytest.mark.parametrize(
    "greed, sizes",
    [([1, 2], [1, 2, 3]), ([5, 5, 5], [1, 6]), ([2, 3], [1, 1, 1]), ([], [3])],
)
def test_result_bounded_by_both_lists(greed, sizes):
    result = find_content_children(greed, sizes)
    assert result <= min(len(greed), len(sizes))


def test_order_of_inputs_does_not_matter():
    rng = random.Random(7)
    greed = [rng.randint(1, 20) for _ in range(15)]
    sizes = [rng.randint(1, 20) for _ in range(12)]
    expected = find_content_children(greed, sizes)
    shuffled_greed = greed[:]
    shuffled_sizes = sizes[:]
    rng.shuffle(shuffled_greed)
    rng.shuffle(shuffled_sizes)
    assert find_content_children(shuffled_greed, shuffled_sizes) == expected


def test_inputs_are_left_untouched():
    greed = [3, 1, 2]
    sizes = [2, 3, 1]
    find_content_children(greed, sizes)
    assert greed == [3, 1, 2]
    assert sizes == [2, 3, 1]