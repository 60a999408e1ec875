"""String drills: reversing, word order, searching and repetition."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def reverse_string(chars: MutableSequence[Any]) -> None:
    """Reverse a mutable sequence of characters or bytes in place."""
    chars[:] = chars[::-1]


def reverse_str(s: str, k: int) -> str:
    """Reverse the first ``k`` characters of every ``2k`` block of ``s``."""
    if k < 1:
        raise ValueError("k must be positive")
    return "".join(
        s[start : start + k][::-1] + s[start + k : start + 2 * k]
        for start in range(0, len(s), 2 * k)
    )


def reverse_words(s: str) -> str:
    """Reverse the order of space-separated words, collapsing extra spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1.

    An empty haystack never matches, not even an empty needle.
    """
    if not haystack:
        return -1
    return haystack.find(needle)


def repeated_substring_pattern(s: str) -> bool:
    """Whether ``s`` is a shorter substring repeated two or more times."""
    size = len(s)
    return any(
        size % width == 0 and s[:width] * (size // width) == s
        for width in range(1, size // 2 + 1)
    )