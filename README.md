# algopractice

A small, dependency-free collection of classic algorithm building blocks:

- **`algopractice.sorting`** – in-place bubble sort and randomised quicksort.
- **`algopractice.linked_list`** – a singly linked `ListNode`, plus helpers to build, compare, measure, render and print lists.
- **`algopractice.tree`** – a `TreeNode`, plus helpers to build a tree from level-order values, flatten it back, compare trees, measure depth, render and print them.
- **`algopractice.utils`** – absolute value and in-place reversal.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Sorting

Both sorts change the sequence they are given and return `None`. They work on
any mutable sequence whose items can be compared with `<`, `>` and `>=`.

```python
from algopractice.sorting import bubble_sort, quick_sort

nums = [9, -1, 3, 0, 2, 1]
quick_sort(nums)
assert nums == [-1, 0, 1, 2, 3, 9]

nums = [5, 3, 8, 4, 2]
bubble_sort(nums)
assert nums == [2, 3, 4, 5, 8]
```

`bubble_sort` stops early as soon as a pass makes no swaps. `quick_sort` picks a
random pivot for each partition and works through the partitions with an
explicit stack rather than recursion.

## Linked lists

```python
from algopractice.linked_list import (
    ListNode, build_list, format_list, list_length, lists_equal, list_to_values,
)

head = build_list([1, 2, 3])
assert list_to_values(head) == [1, 2, 3]
assert list(head) == [1, 2, 3]          # a node iterates over its values onward
assert list_length(head) == 3
assert lists_equal(head, build_list([1, 2, 3]))
assert format_list(head) == "1 -> 2 -> 3 -> nil"
```

`build_list([])` returns `None`, which stands for the empty list; the helpers
all accept `None` (`format_list(None)` is `"nil"`). `print_list(head)` writes
the `format_list` text to standard output.

`ListNode` has the fields `val` and `next`. Two nodes compare equal only if
they are the same object; use `lists_equal` to compare contents.

## Binary trees

Trees are built from a level-order sequence in which `-1` marks a missing child.

```python
from algopractice.tree import (
    TreeNode, build_tree, tree_to_values, is_same_tree, max_depth, format_tree,
)

root = build_tree([3, 9, 20, -1, -1, 15, 7])
assert root.val == 3 and root.right.left.val == 15
assert tree_to_values(root) == [3, 9, 20, -1, -1, 15, 7]
assert max_depth(root) == 3
assert is_same_tree(root, build_tree([3, 9, 20, -1, -1, 15, 7]))
print(format_tree(root), end="")
```

An empty sequence, or one starting with `-1`, gives `None`. `tree_to_values`
writes `-1` for missing nodes and drops trailing `-1` entries; because `-1` is
the gap marker, a tree holding the value `-1` does not survive the round trip.

`format_tree` renders one level per line, each value followed by a space and
missing children shown as `nil`; an empty tree renders as `"nil\n"`.
`print_tree(root)` prints that text.

`TreeNode` has the fields `val`, `left` and `right`. As with `ListNode`, nodes
compare equal only by identity; use `is_same_tree` to compare shape and values.

## Utilities

```python
from algopractice.utils import absolute, reverse_in_place

assert absolute(-4) == 4
assert absolute(-2.5) == 2.5

items = [1, 2, 3]
assert reverse_in_place(items) is items
assert items == [3, 2, 1]
```

## What it does not do

This is a library only: it has no command-line program, and it does not read
or store data anywhere. It offers no graph structures.