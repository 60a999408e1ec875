import pytest

from drills.strings import (
    repeated_substring_pattern,
    reverse_str,
    reverse_string,
    reverse_words,
    str_str,
)


def test_reverse_string_source_case():
    chars = bytearray(b"world")
    reverse_string(chars)
    assert chars == bytearray(b"dlrow")


def test_reverse_string_list_of_chars():
    chars = list("hello")
    reverse_string(chars)
    assert chars == list("olleh")


def test_reverse_string_twice_is_identity():
    chars = list("abcde")
    reverse_string(chars)
    reverse_string(chars)
    assert chars == list("abcde")


def test_reverse_str_source_case():
    assert reverse_str("abcdef", 3) == "cbadef"


def test_reverse_str_with_short_tail():
    assert reverse_str("abcdefg", 2) == "bacdfeg"


def test_reverse_str_tail_shorter_than_k():
    assert reverse_str("abcd", 5) == "dcba"


def test_reverse_str_rejects_zero():
    with pytest.raises(ValueError):
        reverse_str("abc", 0)


def test_reverse_words_collapses_spaces():
    assert reverse_words(" the           sky is blue  ") == "blue is sky the"


def test_reverse_words_empty():
    assert reverse_words("   ") == ""


@pytest.mark.parametrize(
    "haystack, needle, expected",
    [
        ("sadbutsad", "sad", 0),
        ("leetcode", "leeto", -1),
        ("hello", "ll", 2),
        ("abc", "", 0),
        ("", "", -1),
        ("ab", "abc", -1),
    ],
)
def test_str_str(haystack, needle, expected):
    assert str_str(haystack, needle) == expected


@pytest.mark.parametrize(
    "s, expected",
    [
        ("abab", True),
        ("aba", False),
        ("abcabcabcabc", True),
        ("aa", True),
        ("a", False),
        ("", False),
    ],
)
def test_repeated_substring_pattern(s, expected):
    assert repeated_substring_pattern(s) is expected