# solvebook

Plain-Python solutions to well-known algorithm puzzles, grouped by theme.
Each solution is an ordinary function that takes built-in types (ints,
lists, strings) and returns a result. The package needs only the standard
library.

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

| Module | What it holds |
| --- | --- |
| `solvebook.numbers` | `add_digits`, `arrange_coins`, `fib`, `nth_fibonacci`, `is_happy`, `is_palindrome_number`, `fizz_buzz`, `plus_one` |
| `solvebook.strings` | `array_strings_are_equal`, `interpret`, `longest_common_prefix`, `most_words_found`, `reverse_words`, `restore_string`, `is_anagram`, `next_greatest_letter`, `next_greatest_letter_linear` |
| `solvebook.searching` | `search_matrix`, `search_rotated`, `search_insert`, `single_non_duplicate`, `peak_index_in_mountain_array`, `two_sum_sorted`, `count_negatives`, `find_duplicate` |
| `solvebook.linked_list` | `ListNode`, `from_iterable`, `get_intersection_node`, `reverse_list` |
| `solvebook.arrays` | `three_sum`, `max_profit`, `get_concatenation`, `max_area`, `contains_duplicate`, `kids_with_candies`, `majority_element`, `max_sub_array`, `merge_intervals`, `merge_sorted`, `next_permutation`, `num_identical_pairs`, `product_except_self`, `remove_duplicates`, `remove_element`, `running_sum`, `single_number`, `sort_colors` |
| `solvebook.combinatorics` | `combination_sum`, `permute`, `subsets`, `subsets_with_dup` |
| `solvebook.grids` | `num_islands`, `rotate`, `set_zeroes` |
| `solvebook.greedy` | `find_content_children`, `count_gondolas`, `min_coins`, and the two command-line entry points `ferris_wheel_main` and `minimizing_coins_main` |

### Functions that change their argument

These work in place on the list they are given and return `None`:
`merge_sorted`, `next_permutation`, `sort_colors`, `rotate` and
`set_zeroes`. `remove_duplicates` and `remove_element` also rearrange the
list in place, and return how many entries at its front are kept.
`reverse_list` relinks the nodes it is given and returns the new head.

All other functions leave their inputs alone. `num_islands`, for example,
does not modify the grid.

### Errors

Inputs that have no answer raise `ValueError`. Examples are an empty list
where a value must be picked (`max_sub_array`, `majority_element`,
`max_area`, `kids_with_candies`, `single_non_duplicate`,
`next_greatest_letter`), `two_sum_sorted` when no pair adds up to the
target, `interpret` on text that is not made of `G`, `()` and `(al)`,
`reverse_words` on a string with no words, `rotate` on a non-square matrix,
`combination_sum` with non-positive candidates, and `min_coins` with a
negative amount or coin.

### Particular behaviour

- `nth_fibonacci` returns its result modulo 1 000 000 007. `fib` returns the
  exact value.
- `is_palindrome_number` is false for negative numbers. It is also false once
  the reversed value would reach the 32-bit integer limit.
- `find_duplicate` returns the first value seen twice, or `-1`.
- `search_rotated` returns `-1` when the target is absent. `search_insert`
  returns the insertion index instead.
- `two_sum_sorted` returns 1-based positions as a tuple.
- `ListNode` iterates over its values from that node onwards. Nodes compare
  by identity.

## Examples

```python
from solvebook.arrays import three_sum, max_sub_array
from solvebook.strings import reverse_words
from solvebook.numbers import fizz_buzz
from solvebook.linked_list import from_iterable, reverse_list

three_sum([-1, 0, 1, 2, -1, -4])        # [[-1, -1, 2], [-1, 0, 1]]
max_sub_array([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
reverse_words("  the sky   is blue ")    # "blue is sky the"
fizz_buzz(5)                             # ["1", "2", "Fizz", "4", "Buzz"]

head = reverse_list(from_iterable([1, 2, 3]))
list(head)                               # [3, 2, 1]
```

```python
from solvebook.greedy import count_gondolas, min_coins

count_gondolas([7, 2, 3, 9], 10)   # 3
min_coins([1, 5, 7], 11)           # 3
min_coins([2], 3)                  # -1, the amount cannot be made
```

## Command-line tools

Two problems are also available as small programs. They read
whitespace-separated integers from standard input. Input that is not
integers, or that holds fewer values than announced, ends with a usage
error.

`solvebook-ferris-wheel` reads the number of children `n` and the gondola
weight limit `x`, then `n` weights. It prints how many gondolas are needed;
each gondola carries at most two children:

```
echo "4 10 7 2 3 9" | solvebook-ferris-wheel
3
```

`solvebook-minimizing-coins` reads the number of coin kinds `n` and the
target sum `x`, then `n` coin values. It prints the fewest coins that add
up to `x`, or `-1` if no combination does:

```
echo "3 11 1 5 7" | solvebook-minimizing-coins
3
```

These two programs are the only commands. All other puzzles are available
only as functions to import.