# algokit

A small library of well-known algorithm solutions written as plain Python
functions and a few small classes. It is meant for study, for checking your
own answers, and as a reference for common techniques: two pointers, sliding
windows, binary search, bit manipulation, backtracking, dynamic programming,
hashing, intervals, stacks, linked lists and binary trees.

It needs nothing beyond the Python standard library and runs on Python 3.10
or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.contest` | `distinct_after_pair_removal`, `max_fibonacciness`, `min_assignments` |
| `algokit.strings` | `is_subsequence`, `is_palindrome`, `length_of_last_word`, `longest_common_prefix`, `encode`, `decode`, `is_anagram`, `is_isomorphic`, `can_construct`, `roman_to_int`, `is_valid_parentheses`, `simplify_path`, `add_binary` |
| `algokit.arrays` | `min_candies`, `can_complete_circuit`, `h_index`, `find_min_rotated`, `find_peak`, `remove_element`, `search_rotated`, `search_insert`, `max_area` |
| `algokit.bits` | `range_bitwise_and`, `count_bits`, `hamming_weight`, `reverse_bits`, `single_number`, `single_number_ii` |
| `algokit.numeric` | `is_palindrome_number`, `plus_one`, `my_pow`, `int_sqrt` |
| `algokit.backtracking` | `combine`, `letter_combinations`, `combination_sum` |
| `algokit.dynamic` | `climb_stairs`, `rob`, `rob_circular` |
| `algokit.hashing` | `contains_nearby_duplicate`, `is_happy`, `longest_consecutive`, `find_kth_largest` |
| `algokit.intervals` | `Interval`, `can_attend_meetings`, `min_meeting_rooms`, `merge_intervals`, `summary_ranges` |
| `algokit.matrix` | `spiral_order`, `is_valid_sudoku` |
| `algokit.sliding_window` | `character_replacement`, `min_subarray_len`, `min_window` |
| `algokit.min_stack` | `MinStack` with `push`, `pop`, `top`, `get_min` |
| `algokit.linked_list` | `ListNode`, `build_list`, `list_values`, `add_two_numbers`, `merge_k_lists`, `remove_nth_from_end`, `reorder_list` |
| `algokit.tree` | `TreeNode`, `tree_from_level_order`, `build_tree`, `level_order`, `average_of_levels`, `count_nodes`, `flatten`, `invert_tree`, `kth_smallest`, `lowest_common_ancestor`, `bst_lowest_common_ancestor`, `min_abs_difference`, `right_side_view`, `is_symmetric`, `is_valid_bst`, `has_path_sum` |

## Examples

```python
from algokit.strings import roman_to_int, simplify_path, encode, decode
from algokit.contest import distinct_after_pair_removal, max_fibonacciness
from algokit.intervals import merge_intervals
from algokit.min_stack import MinStack

roman_to_int("MCMXCIV")                      # 1994
simplify_path("/a/./b/../../c/")             # "/c"
decode(encode(["a#b", ""]))                  # ["a#b", ""]
distinct_after_pair_removal("aaabcc")        # 4
max_fibonacciness(1, 1, 3, 5)                # 3
merge_intervals([[1, 3], [2, 6], [8, 10]])   # [[1, 6], [8, 10]]

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                              # 1
stack.pop()                                  # 1
stack.get_min()                              # 3
```

Linked lists and trees are built from plain Python lists:

```python
from algokit.linked_list import build_list, list_values, add_two_numbers
from algokit.tree import tree_from_level_order, level_order, right_side_view

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
list_values(total)                           # [7, 0, 8]

root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
level_order(root)                            # [[3], [9, 20], [15, 7]]
right_side_view(root)                        # [3, 20, 7]
```

`tree_from_level_order` reads values breadth first, with `None` standing for
a missing child. `ListNode` objects can be iterated to get their values.

## Errors

Inputs that have no answer raise exceptions instead of returning a marker
value. For example:

- `MinStack.pop`, `top` and `get_min` raise `IndexError` on an empty stack.
- `decode` raises `ValueError` on malformed input; `roman_to_int`,
  `add_binary` and `letter_combinations` raise `ValueError` on characters they
  do not accept.
- `find_min_rotated` and `find_peak` raise `ValueError` on an empty sequence;
  `find_kth_largest` and `kth_smallest` raise `ValueError` when `k` is out of
  range; `min_abs_difference` needs a tree of at least two nodes.
- `remove_nth_from_end` raises `ValueError` when `n` is below 1 or larger
  than the list.

Some functions still return a sentinel where that is the answer itself:
`can_complete_circuit` and `search_rotated` return `-1` when there is no
station or no match, and `min_subarray_len` returns `0` when no run reaches
the target.

## What this package does not do

It is a library only. There is no command-line program, and nothing reads
test cases from standard input or prints answers: the functions in
`algokit.contest` take already-parsed values and return their results.