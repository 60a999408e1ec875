"""Greedy assignment problems."""

from __future__ import annotations

from collections.abc import Sequence


def find_content_children(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Return how many children can be satisfied, one cookie each.

    A cookie satisfies a child when its size is at least the child's greed.
    """
    wants = sorted(greed)
    cookies = sorted(sizes)
    satisfied = 0
    child = 0
    for size in cookies:
        if child == len(wants):
            break
        if size >= wants[child]:
            satisfied += 1
            child += 1
    return satisfied