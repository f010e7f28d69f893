# algodrills

Classic interview-style exercises on matrices, arrays, searching, sorting and
linked lists, written as plain Python functions and small classes. The package
uses only the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Conventions

- Matrices are lists of rows. Functions that check shape raise `ValueError`
  for ragged rows or incompatible dimensions.
- Searches that can fail return `None` rather than a sentinel index.
- The sorting functions and most array functions return new lists and leave
  their input untouched; `matrix.rotate_in_place` is the one matrix function
  that changes its argument.
- Linked-list algorithms work on chains of `nodes.Node` and return the new
  head of the chain. Many of them relink the nodes they are given.
- Positions in the list classes are 1-based.

## Modules

### `algodrills.matrix`

`multiply`, `rotate` (90 degrees clockwise, new matrix), `rotate_in_place`
(square matrices only), `transpose`, `spiral` (clockwise from the top-left),
`set_zeroes` (returns a copy), `contains`, `search_sorted_rows` (binary search
in each sorted row) and `format_matrix` (space-separated lines).

### `algodrills.searching`

`binary_search`, `first_occurrence`, `last_occurrence`, `occurrence_range`
(a `(first, last)` pair or `None`), `lower_bound` and `upper_bound` (returning
`len(items)` when no element qualifies), `search_insert`, `peak_element`,
`rotation_count`, `find_pivot`, `search_rotated`, `integer_sqrt` and
`sqrt_precise(n, digits)`, which truncates the root to the given number of
decimal places.

### `algodrills.arrays`

`max_profit` and `max_profit_brute`, `kth_largest` and `kth_smallest`,
`majority_element` (Boyer-Moore vote) and `majority_brute`,
`max_length_subarray_sum`, `missing_number` and `missing_number_by_sum`,
`union`, `find_duplicate` (cycle detection), `leaders`, `move_zeroes_to_end`,
`remove_sorted_duplicates`, `sort_by_frequency`, `max_subarray_sum` (Kadane),
`max_window_sum`, `three_sum` (indices into a sorted sequence), `two_sum`,
`two_sum_brute` and `has_pair_with_sum`.

### `algodrills.sorting`

`merge_sort`, `quick_sort`, `bubble_sort`, `selection_sort` and
`insertion_sort`, each returning a sorted copy.

### `algodrills.nodes`

The `Node` class (`data`, `next`) and the helpers `from_values`, `to_values`,
`iter_nodes`, `length` and `format_list`, which renders `a->b->...->NULL`.

### `algodrills.singly`

`SinglyLinkedList` with `insert_at_head`, `insert_at_tail`,
`insert_at_position(position, data)` and `values`, plus chain algorithms:
`reverse`, `find_middle`, `sort_012`, `odd_even_positions`,
`remove_duplicates`, `remove_kth_from_end`, `reverse_k_group`,
`swap_pair_values`, `merge_sorted` and `multiply` (chains read as decimal
digits).

### `algodrills.problems`

`add_numbers` (digit chains, most significant first), `cycle_start`,
`has_cycle`, `has_cycle_by_set`, `remove_kth_from_end_by_reversal`,
`reverse_in_groups`, `drop_adjacent_duplicates`, `swap_kth`, `is_palindrome`,
`is_palindrome_by_reversal` (restores the chain before returning),
`partition_012`, `partition_even_odd`, `swap_pairs` and `sort_list`
(merge sort).

### `algodrills.circular`

`CircularList` with `insert_at_head`, `values` (once around the ring) and
`format`, which renders `a -> b -> ...` or `List is empty.`.

### `algodrills.doubly`

`DoublyNode` and `DoublyLinkedList` with `insert_at_head`, `insert_at_tail`,
`insert_at_position(data, position)`, `delete(position)` (returns the removed
data and raises `IndexError` for an empty list or a bad position), `values`,
`values_backward` and `format`.

## Example

```python
from algodrills.matrix import spiral
from algodrills.searching import binary_search
from algodrills.nodes import from_values, to_values
from algodrills.singly import reverse

spiral([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]])
# [1, 2, 3, 4, 8, 12, 11, 10, 9, 5, 6, 7]

binary_search([3, 4, 6, 7, 9, 12, 16, 17], 9)
# 4

to_values(reverse(from_values([10, 20, 30])))
# [30, 20, 10]
```

## What it does not do

This is a library only. It has no command-line program and reads no input;
results are returned from functions, and the `format_*` helpers and `format`
methods return strings rather than printing.