# codedrills

Compact solutions to well-known programming exercises, grouped by topic and
ready to import. The package has no runtime dependencies and is a library
only: it has no command-line interface.

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
| `codedrills.arrays` | `max_area`, `pivot_index`, `largest_altitude`, `increasing_triplet`, `kids_with_candies`, `find_kth_largest`, `longest_ones`, `find_max_average`, `move_zeroes`, `product_except_self`, `remove_element`, `rotate`, `running_sum`, `sorted_squares`, `two_sum`, `two_sum_sorted`, `can_place_flowers`, `find_median_sorted_arrays` |
| `codedrills.strings` | `freq_alphabets`, `gcd_of_strings`, `is_subsequence`, `length_of_longest_substring`, `max_vowels`, `merge_alternately`, `reverse_string`, `reverse_vowels`, `reverse_words`, `compress` |
| `codedrills.hashing` | `find_difference`, `equal_pairs`, `unique_occurrences`, `max_operations`, `close_strings` |
| `codedrills.integers` | `is_palindrome`, `reverse_integer` |
| `codedrills.dp` | `combination_sum3`, `count_bits`, `rob`, `min_cost_climbing_stairs`, `tribonacci` |
| `codedrills.search` | `binary_search`, `search_insert`, `first_bad_version`, `guess_number` |
| `codedrills.stacks` | `asteroid_collision`, `daily_temperatures`, `decode_string`, `predict_party_victory`, `remove_stars`, `is_valid`, `RecentCounter`, `StockSpanner` |
| `codedrills.intervals` | `find_min_arrow_shots`, `erase_overlap_intervals` |
| `codedrills.graphs` | `flood_fill`, `can_visit_all_rooms`, `min_reorder` |
| `codedrills.linked_list` | `ListNode`, `from_values`, `to_values`, `delete_middle`, `pair_sum`, `middle_node`, `odd_even_list`, `reverse_list` |
| `codedrills.trees` | `TreeNode`, `build_tree`, `delete_node`, `leaf_values`, `leaf_similar`, `longest_zigzag`, `lowest_common_ancestor`, `max_depth`, `path_sum`, `search_bst` |

## Examples

```python
from codedrills.arrays import max_area, running_sum
from codedrills.strings import reverse_words
from codedrills.stacks import decode_string, StockSpanner
from codedrills.linked_list import from_values, to_values, reverse_list

max_area([4, 3, 2, 1, 4])            # 16
running_sum([1, 2, 3, 4])            # [1, 3, 6, 10]
reverse_words("the sky is blue")     # "blue is sky the"
decode_string("2[abc]3[cd]ef")       # "abcabccdcdcdef"

to_values(reverse_list(from_values([1, 2, 3])))  # [3, 2, 1]

spanner = StockSpanner()
[spanner.next(p) for p in (100, 80, 60, 70, 60, 75, 85)]  # [1, 1, 1, 2, 1, 4, 6]
```

Functions that search against an oracle take it as an argument.
`first_bad_version` takes a predicate that may also be asked about version 0;
`guess_number` takes a function returning 0 on a hit, -1 when the pick is
lower and 1 when it is higher. Both return -1 when nothing is found.

```python
from codedrills.search import first_bad_version, guess_number

first_bad_version(5, lambda version: version >= 4)  # 4
guess_number(10, lambda n: (6 > n) - (6 < n))       # 6
```

Trees can be built from a level-order list, with `None` marking a gap, and
linked lists from any iterable of values:

```python
from codedrills.trees import build_tree, max_depth

max_depth(build_tree([3, 9, 20, None, None, 15, 7]))  # 3
```

## Behaviour worth knowing

- In place: `move_zeroes`, `remove_element`, `rotate`, `reverse_string`,
  `compress` and `flood_fill` change the sequence they are given.
  `remove_element` and `compress` return the new length; `flood_fill`
  returns the image it was given.
- The linked-list and tree drills rewire the nodes they are given rather
  than copying them.
- Errors are raised as exceptions: for example `find_kth_largest` with `k`
  out of range, `rob` with no houses, `find_median_sorted_arrays` with no
  values, `erase_overlap_intervals` with no intervals, `remove_stars` with a
  `*` that has nothing to remove, and `decode_string` with an unmatched `]`
  raise `ValueError`; `flood_fill` with a start outside the image raises
  `IndexError`.
- `reverse_integer` returns 0 when the result would reach or pass the limits
  of a signed 32-bit integer.
- `find_max_average` returns -2147483647.0 when the window is longer than the
  input.
- `RecentCounter.ping(t)` counts the requests in `[t - 3000, t]`.