# algodrills

A collection of classic algorithm exercises written as small, self-contained
Python functions: searching and sorting, integer sequences, combinatorics,
brackets, binary trees, linked lists, grids, text processing and dynamic
programming. It has no dependencies beyond the standard library.

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
| `algodrills.cache` | `LRUCache` with `get` and `put` |
| `algodrills.misc` | `count_distinct_squares`, `rand7`, `rand10`, `unique_paths`, `integer_sqrt` |
| `algodrills.searching` | `find_kth_largest`, `quick_select`, `quick_sort`, `sort_descending`, `find_median_sorted_arrays`, `find_peak_element`, `binary_search`, `search_rotated` |
| `algodrills.combinatorics` | `permute`, `subsets`, `combination_sum`, `generate_parenthesis` |
| `algodrills.sequences` | `daily_temperatures`, `first_missing_positive`, `length_of_lis`, `length_of_lis_dp`, `longest_consecutive`, `majority_element`, `max_profit`, `max_profit_multi`, `max_sub_array`, `merge_sorted`, `min_sub_array_len`, `next_permutation`, `rob`, `three_sum`, `two_sum` |
| `algodrills.brackets` | `is_valid`, `longest_valid_parentheses` |
| `algodrills.trees` | `TreeNode`, `inorder_traversal`, `preorder_traversal`, `preorder_traversal_iterative`, `level_order`, `level_order_grouped`, `zigzag_level_order`, `right_side_view`, `build_tree` |
| `algodrills.tree_properties` | `is_symmetric`, `is_symmetric_iterative`, `diameter_of_binary_tree`, `has_path_sum`, `invert_tree`, `is_balanced`, `height`, `is_complete_tree`, `is_valid_bst`, `kth_smallest`, `lowest_common_ancestor`, `max_depth`, `max_path_sum`, `path_sum`, `sum_numbers` |
| `algodrills.dynamic` | `change`, `climb_stairs`, `coin_change`, `find_length`, `exist`, `longest_common_subsequence`, `longest_palindrome` |
| `algodrills.linked_list` | `ListNode`, `from_values`, `to_values`, `add_two_numbers`, `has_cycle`, `has_cycle_two_pointer`, `detect_cycle`, `delete_duplicates`, `delete_all_duplicates`, `get_intersection_node`, `is_palindrome`, `length`, `remove_nth_from_end` |
| `algodrills.list_reorder` | `reverse_list`, `reverse_list_recursive`, `reverse_k_group`, `merge_two_lists`, `merge_k_lists`, `reorder_list`, `reverse_between`, `sort_list`, `swap_pairs` |
| `algodrills.grid` | `max_area_of_island`, `maximal_square`, `merge_intervals`, `num_islands`, `rotate`, `search_matrix`, `spiral_order` |
| `algodrills.text` | `add_strings`, `calculate`, `compare_version`, `decode_string`, `length_of_longest_substring`, `length_of_longest_substring_brute`, `min_distance`, `min_window`, `my_atoi`, `restore_ip_addresses`, `reverse_words` |

## Examples

```python
import random

from algodrills.cache import LRUCache
from algodrills.dynamic import coin_change, longest_palindrome
from algodrills.linked_list import from_values, to_values
from algodrills.list_reorder import reverse_k_group
from algodrills.misc import rand10
from algodrills.text import decode_string

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.put(3, 3)          # evicts key 1
cache.get(1)             # -> -1

coin_change([1, 2, 5], 11)        # -> 3
longest_palindrome("babad")       # -> "aba" (the last longest one found)
decode_string("3[a2[c]]")         # -> "accaccacc"

head = from_values([0, 1, 2, 3, 4])
to_values(reverse_k_group(head, 2))   # -> [1, 0, 3, 2, 4]

rand10(random.Random(42))         # reproducible value in 1..10
```

`rand7` and `rand10` take an optional `random.Random` instance; without one
they use the `random` module.

## Nodes

`TreeNode` (fields `val`, `left`, `right`) and `ListNode` (fields `val`,
`next`) are dataclasses that compare by identity, so functions such as
`lowest_common_ancestor`, `detect_cycle` and `get_intersection_node` return
the very node objects passed in. `from_values` and `to_values` convert between
Python lists and linked lists; `to_values` and `length` raise `ValueError` on a
list with a cycle.

## Things that change their arguments

Several functions work in place:

- `rotate`, `next_permutation`, `merge_sorted`, `quick_sort`, `sort_descending`
  rearrange the list or matrix they are given.
- `find_kth_largest` and `quick_select` partition `nums`; `three_sum` and
  `merge_intervals` sort their argument before answering.
- `num_islands` and `max_area_of_island` overwrite the land cells they visit.
- `exist` leaves the board untouched.
- Linked list functions in `algodrills.list_reorder`, `delete_duplicates`,
  `delete_all_duplicates`, `remove_nth_from_end` and `invert_tree` relink the
  nodes they are given.

## Behaviour worth knowing

- `num_islands` and `maximal_square` expect grids of the strings `"1"` and
  `"0"`; `max_area_of_island` expects integers `1` and `0` and treats cells in
  the first row and first column as water while measuring an island.
- `spiral_order` gives a true clockwise spiral only for square matrices.
- `level_order` returns each node as its own one-element list; use
  `level_order_grouped` for values grouped by depth.
- `is_symmetric_iterative` stops with `True` at the first pair of positions
  that are both empty, so it can disagree with `is_symmetric`.
- `count_distinct_squares` compares its right-hand squares against the index
  rather than the square value, so its count is not always the number of
  distinct squares.
- `my_atoi` clamps to the 32-bit signed range; `calculate` truncates division
  toward zero.
- Invalid input such as an empty list where one element is needed, an
  out-of-range `k` or `n`, or a non-square matrix for `rotate` raises
  `ValueError`.

## What it does not do

This is a library only. It has no command-line tool, no interactive mode and
no storage; every function is called from Python code.