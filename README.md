# algodrills

Solutions to a set of well-known medium-difficulty algorithm exercises,
written as plain Python functions and a few small classes. The package has
no runtime dependencies and needs Python 3.10 or later.

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
| `algodrills.lists` | `ListNode`, `build_list`, `list_values`, `add_two_numbers`, `nodes_between_critical_points`, `merge_nodes` |
| `algodrills.trees` | `TreeNode`, `largest_values`, `validate_binary_tree_nodes` |
| `algodrills.structures` | `SeatManager`, `NestedIterator` |
| `algodrills.sums` | `three_sum`, `three_sum_two_pointer`, `three_sum_closest`, `four_sum`, `combination_sum2`, `combination_sum4` |
| `algodrills.sorting` | `search_range`, `sort_array`, `find_score`, `eliminate_maximum`, `maximum_element_after_decrementing_and_rearranging`, `max_coins`, `min_pair_sum`, `reduction_operations`, `max_frequency`, `get_sum_absolute_differences` |
| `algodrills.windows` | `max_area`, `number_of_subarrays`, `max_satisfied`, `max_vowels`, `min_swaps`, `length_of_longest_substring` |
| `algodrills.arrays` | `find_132_pattern`, `majority_element`, `check_arithmetic_subarrays`, `find_diagonal_order`, `find_array`, `restore_array`, `get_winner`, `count_nice_pairs`, `average_waiting_time`, `get_last_moment`, `garbage_collection`, `maximum_importance` |
| `algodrills.grids` | `champagne_tower`, `largest_submatrix`, `min_path_sum`, `is_reachable_at_time` |
| `algodrills.strings` | `count_homogenous`, `find_different_binary_string`, `find_different_binary_string_by_search`, `int_to_roman`, `letter_combinations`, `longest_palindrome`, `winner_of_game`, `remove_duplicate_letters`, `sort_vowels`, `my_atoi`, `count_palindromic_subsequence`, `convert`, `build_array` |
| `algodrills.numbers` | `num_factored_binary_trees`, `integer_break`, `kth_grammar`, `knight_dialer`, `reverse_integer`, `reverse_integer_by_digits`, `find_the_winner` |

## Examples

```python
from algodrills.sums import three_sum
from algodrills.lists import build_list, list_values, add_two_numbers
from algodrills.strings import int_to_roman
from algodrills.structures import SeatManager, NestedIterator

three_sum([-1, 0, 1, 2, -1, -4])          # [[-1, -1, 2], [-1, 0, 1]]

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
list_values(total)                         # [7, 0, 8]

int_to_roman(1994)                         # 'MCMXCIV'

seats = SeatManager(3)
seats.reserve()                            # 1
seats.reserve()                            # 2
seats.unreserve(1)
seats.reserve()                            # 1

list(NestedIterator([1, [2, [3]], 4]))     # [1, 2, 3, 4]
```

## Notes

- Linked lists are built from `ListNode` objects; `build_list` links a
  sequence of values and returns the head (or `None` for no values), and
  `list_values` reads them back. A `ListNode` can also be iterated directly.
- `NestedIterator` takes a list whose items are integers or further nested
  iterables. It is a Python iterator and also offers `has_next()`.
- `SeatManager.reserve()` raises `IndexError` when no seat is free.
- Results that the exercises define modulo 10^9 + 7 are returned reduced
  modulo 10^9 + 7. `combination_sum4` keeps its counts modulo 2^32.
- Inputs outside an exercise's stated range raise `ValueError`, for example
  `int_to_roman` outside 0..3999, `reverse_integer` outside the signed
  32-bit range, `kth_grammar` with `k` outside 1..2^(n-1), or
  `min_pair_sum` with fewer than two numbers.

## What it does not do

The package is a library only. It has no command-line interface and does not
read problem input from standard input; call the functions from Python.