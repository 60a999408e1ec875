"""Counting-based set and multiset checks."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values present in both inputs."""
    seen = set(nums1)
    return list(dict.fromkeys(v for v in nums2 if v in seen))


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Whether ``ransom_note`` can be spelled using the letters of ``magazine``."""
    return not Counter(ransom_note) - Counter(magazine)