import pytest

from drills.linked_list import (
    ListNode,
    format_list,
    make_link_list,
    remove_elements,
    remove_nth_from_end,
    to_list,
)


def test_make_link_list_round_trip():
    assert to_list(make_link_list([3, 1, 4, 1, 5])) == [3, 1, 4, 1, 5]


def test_make_link_list_empty_is_none():
    assert make_link_list([]) is None


def test_make_link_list_links_nodes():
    head = make_link_list([1, 2])
    assert head.val == 1
    assert head.next.val == 2
    assert head.next.next is None


def test_format_list():
    assert format_list(make_link_list([1, 2, 3])) == "1 -> 2 -> 3 -> "


def test_format_empty_list():
    assert format_list(None) == ""


def test_remove_elements_all_equal():
    head = remove_elements(make_link_list([7, 7, 7, 7]), 7)
    assert head is None
    assert format_list(head) == ""


def test_remove_elements_mixed():
    head = make_link_list([1, 2, 6, 3, 4, 5, 6])
    assert to_list(remove_elements(head, 6)) == [1, 2, 3, 4, 5]


def test_remove_elements_head_and_missing():
    assert to_list(remove_elements(make_link_list([6, 6, 1]), 6)) == [1]
    assert to_list(remove_elements(make_link_list([1, 2]), 9)) == [1, 2]


def test_remove_nth_from_end_head():
    head = remove_nth_from_end(make_link_list([1, 2]), 2)
    assert to_list(head) == [2]


def test_remove_nth_from_end_last():
    assert to_list(remove_nth_from_end(make_link_list([1, 2, 3]), 1)) == [1, 2]


def test_remove_nth_from_end_middle():
    head = make_link_list([1, 2, 3, 4, 5])
    assert to_list(remove_nth_from_end(head, 2)) == [1, 2, 3, 5]


def test_remove_nth_from_end_short_lists():
    assert remove_nth_from_end(None, 1) is None
    assert remove_nth_from_end(ListNode(1), 1) is None


@pytest.mark.parametrize("n", [0, 4, -1])
def test_remove_nth_from_end_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(make_link_list([1, 2, 3]), n)