# drills

A small library of classic algorithm exercises, written as plain Python
functions and classes. It depends on nothing outside the standard library.

## Installation

```
pip install .
```

## Modules

### `drills.sorting`

- `swap(nums, left, right)` exchanges two items in place.
- `bubble_sort(items)` sorts in place, stopping early once a pass makes no swap.
- `quick_sort(low, high, nums)` is a partition-based in-place sort between
  `low` and `high`; after the part right of the pivot it sorts the prefix
  up to `low` again from index 0.

### `drills.greedy`

- `find_content_children(greed, sizes)` counts how many children can be
  satisfied with one cookie each, a cookie satisfying a child when its size
  is at least the child's greed.

### `drills.arrays`

- `search(nums, target)` binary-searches a sorted sequence; returns the index
  or -1.
- `remove_element(nums, val)` moves the items not equal to `val` to the front,
  keeping their order, and returns how many were kept; the tail is left as it was.
- `remove_element_counting(nums, val)` does the same but fills the tail with `val`.
- `sorted_squares(nums)` squares every item in place, sorts, and returns the same list.
- `min_subarray_len(target, nums)` gives the length of the shortest contiguous
  run whose sum reaches `target`, or 0 when none starting at the front does.
- `three_sum(nums)` sorts `nums` in place and returns triples of *indices* into
  the sorted list whose values sum to zero; raises `ValueError` on an empty list.

### `drills.hashing`

- `intersection(nums1, nums2)` returns the distinct values present in both.
- `can_construct(ransom_note, magazine)` tells whether the note can be spelled
  from the magazine's letters.

### `drills.strings`

- `reverse_string(chars)` reverses a mutable sequence of characters or bytes in place.
- `reverse_str(s, k)` reverses the first `k` characters of every `2k` block;
  raises `ValueError` when `k` is below 1.
- `reverse_words(s)` reverses the order of space-separated words, collapsing
  extra spaces.
- `str_str(haystack, needle)` returns the index of the first occurrence, or -1;
  an empty haystack never matches, not even an empty needle.
- `repeated_substring_pattern(s)` tells whether `s` is a shorter substring
  repeated two or more times.

### `drills.linked_list`

- `ListNode(val, next=None)` is a singly linked list node.
- `make_link_list(values)` builds a list (None when empty); `to_list(head)`
  reads it back; `format_list(head)` renders it as `"1 -> 2 -> "`.
- `remove_elements(head, val)` unlinks every node equal to `val` and returns
  the new head.
- `remove_nth_from_end(head, n)` removes the `n`-th node from the end; a list
  of at most one node always becomes empty, otherwise `n` outside
  `1..length` raises `ValueError`.

### `drills.stacks`

- `Stack` has `push`, `pop`, `peek`, `is_empty` and `len()`; `pop` and `peek`
  raise `IndexError` when empty.
- `TwoStackQueue` is a first-in, first-out queue kept in two stacks: `pop` and
  `peek` work on the oldest item, `pop_bottom` and `bottom` on the newest,
  plus `push`, `is_empty` and `len()`. Reading an empty queue raises `IndexError`.
- `is_valid(s)` checks that brackets `()[]{}` are closed in order; an empty or
  odd-length string is never valid.
- `remove_duplicates(s)` repeatedly drops adjacent equal characters.

### `drills.graph`

- `all_paths(graph, n)` lists every path from node 1 to node `n` in a directed
  acyclic graph given as an adjacency matrix indexed by node number
  (`graph[s][t] == 1` marks an edge). Paths start with 1 and come in
  depth-first order.
- `num_islands(grid, breadth_first=False)` counts groups of `"1"` cells joined
  horizontally or vertically; rows may be strings or sequences of characters.

### `drills.trees`

- `TreeNode(val, left=None, right=None)` is a binary tree node.
- `build_tree(values)` builds a tree from a level-order list in which `None`
  marks a missing node; `inorder_values(root)` lists values in in-order.
- `is_symmetric`, `max_depth`, `min_depth`, `count_nodes`, `sum_of_left_leaves`
  and `has_path_sum(root, target_sum)` do what their names say.
- `is_balanced(root)` checks at every node only that the left subtree is at
  most one level deeper than the right; a deeper right subtree is accepted.
- `binary_tree_paths(root)` yields one entry per empty child link in
  pre-order, each the value of the node it hangs from followed by `"->"`;
  an empty tree gives `[""]`.
- `find_bottom_left_value(root)` returns the leftmost value on the deepest
  level; raises `ValueError` for an empty tree.
- `trim_bst(root, low, high)` removes, in place, every node of a binary search
  tree outside `[low, high]` and returns the new root.

## Examples

```python
from drills.arrays import search
from drills.linked_list import make_link_list, remove_elements, to_list
from drills.trees import build_tree, max_depth

search([1, 2, 3, 4, 5], 4)            # 3
search([1, 2, 3, 4, 5], -2)           # -1

head = remove_elements(make_link_list([1, 7, 2, 7]), 7)
to_list(head)                          # [1, 2]

root = build_tree([3, 9, 20, None, None, 15, 7])
max_depth(root)                        # 3
```

## What it does not do

This is a library only: there is no command-line tool and nothing reads
problem input from files or standard input. Call the functions from Python.

## Running the tests

```
pip install .[test]
pytest
```