# puzzlekit

Plain-Python solutions to well-known algorithmic puzzles. It covers arrays, strings, digits,
linked lists, binary trees, tries, grids and a few small container classes. It uses only the
standard library.

## Installation

```
pip install puzzlekit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Modules

- `puzzlekit.arrays`: `candy`, `count_max_or_subsets`, `divide_players`, `min_groups`,
  `jump`, `max_width_ramp`, `count_pairs`, `num_rabbits`, `min_subarray`,
  `smallest_range`, `smallest_chair`
- `puzzlekit.digits`: `find_kth_number`, `lexical_order`, `maximum_swap`
- `puzzlekit.strings`: `longest_even_vowel_substring`, `longest_diverse_string`,
  `min_add_to_make_valid`, `parse_bool_expr`, `check_inclusion`, `longest_dup_substring`,
  `max_unique_split`, `diff_ways_to_compute`, `find_kth_bit`
- `puzzlekit.tries`: `min_valid_strings`, `remove_subfolders`, `sum_prefix_scores`
- `puzzlekit.grids`: `count_squares`, `maximum_safeness_factor`
- `puzzlekit.linked_lists`: `ListNode`, `from_values`, `to_values`,
  `insert_greatest_common_divisors`, `spiral_matrix`
- `puzzlekit.trees`: `TreeNode`, `from_level_order`, `to_level_order`, `tree_queries`,
  `replace_value_in_tree`, `flip_equiv`, `kth_largest_level_sum`
- `puzzlekit.containers`: `CircularDeque`, `CustomStack`, `MyCalendar`, `MyCalendarTwo`,
  `reverse_stack`, `sort_stack`

## Examples

```python
from puzzlekit.arrays import candy, jump
from puzzlekit.strings import parse_bool_expr, find_kth_bit
from puzzlekit.trees import from_level_order, kth_largest_level_sum
from puzzlekit.linked_lists import from_values, to_values, insert_greatest_common_divisors
from puzzlekit.containers import MyCalendar

candy([1, 0, 2])                  # 5
jump([2, 3, 1, 1, 4])             # 2
parse_bool_expr("|(f,t)")         # True
find_kth_bit(3, 1)                # '0'

root = from_level_order([5, 8, 9, 2, 1, 3, 7, 4, 6])
kth_largest_level_sum(root, 2)    # 13

head = from_values([18, 6, 10, 3])
to_values(insert_greatest_common_divisors(head))  # [18, 6, 6, 2, 10, 1, 3]

calendar = MyCalendar()
calendar.book(10, 20)             # True
calendar.book(15, 25)             # False
```

## Conventions

- Trees are built from level-order lists in which `None` marks a missing child, and read
  back with `to_level_order`, which drops trailing `None`s.
- Linked lists are built from a plain sequence with `from_values` and read back with
  `to_values`. `spiral_matrix` fills cells it has no value for with `-1`.
- `replace_value_in_tree` and `insert_greatest_common_divisors` change their input in place
  and return it.
- Stacks passed to `reverse_stack` and `sort_stack` are lists with the top at the end; both
  change the list in place. `sort_stack` leaves the greatest item on top.
- `CircularDeque` always accepts an item while it is empty, whatever its capacity;
  `get_front` and `get_rear` return `-1` when it is empty. `CustomStack.pop` returns `-1`
  when the stack is empty, and `push` ignores items once the stack is full.
- Invalid input raises: for example `ValueError` for an empty tree in `tree_queries`, an
  unreachable end in `jump`, or an out-of-range `k` in `find_kth_number` and
  `find_kth_bit`; `IndexError` for an unknown friend in `smallest_chair`.

## What it does not do

puzzlekit is a library only. It has no command-line program, reads no files and keeps no
state beyond the objects you create.