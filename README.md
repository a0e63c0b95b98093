# dsakit

Classic algorithm and data-structure routines in plain Python, with no
third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
|---|---|
| `dsakit.numbers` | `count_digits`, `reverse_number`, `is_palindrome`, `gcd`, `lcm_and_gcd`, `is_armstrong`, `is_cube_armstrong`, `divisors`, `sum_of_divisors`, `evenly_divides`, `is_prime`, `primes_up_to` |
| `dsakit.frequency` | `analyze_frequencies`, returning a `FrequencyReport` with counts and the most and least frequent elements |
| `dsakit.recursion` | `repeat_line`, `count_up`, `count_down`, `sum_of_n`, `factorial`, `reverse_in_place`, `is_palindrome_string`, `fibonacci` |
| `dsakit.sorting` | `selection_sort`, `bubble_sort`, `recursive_bubble_sort`, `insertion_sort`, `recursive_insertion_sort`, `merge_sort`, `quick_sort`, `quick_sort_first_pivot`, `merge_sorted_in_place` |
| `dsakit.arrays_easy` | largest and second largest element, sortedness check, removing duplicates, rotation, moving zeros, linear search, union, missing number |
| `dsakit.arrays_medium` | consecutive ones, single number, longest subarray with a given sum, two-sum, Dutch national flag, majority element, Kadane, stock profit |
| `dsakit.arrays_advanced` | alternating signs, next permutation, leaders, longest consecutive run, matrix zeros, matrix rotation, spiral order, subarray sum counts, Pascal's triangle, n/3 majority, 3-sum, 4-sum, longest zero-sum subarray |
| `dsakit.arrays_hard` | XOR subarray counts, interval merging, gap-method merge, repeating and missing number, inversion count, maximum product subarray, reverse pairs |
| `dsakit.search` | `binary_search`, `lower_bound`, `upper_bound`, `find_floor`, `floor_and_ceil`, `floor_and_ceil_unsorted`, `search_insert_position`, `first_and_last`, `find_first`, `find_last`, `search_range`, `count_occurrences` |
| `dsakit.rotated` | searching rotated sorted sequences (with and without duplicates), their minimum and rotation count, single element among pairs, peak index |
| `dsakit.answer_search` | `integer_sqrt`, `nth_root`, `min_eating_speed`, `min_days_bouquets`, `smallest_divisor`, `ship_within_days`, `kth_missing_positive` |
| `dsakit.partition_search` | `aggressive_cows`, `book_allocation`, `split_array_largest_sum`, `painters_partition`, `minimize_max_gas_distance`, `median_sorted_arrays`, `kth_element` |
| `dsakit.matrix_search` | `row_with_max_ones`, `search_matrix`, `search_sorted_matrix`, `find_peak_2d`, `matrix_median` |
| `dsakit.linked_list` | `LinkedList` of `Node`s, with `push_front`, `append`, `insert_at` (1-based), `remove`, `len()`, `in`, iteration and a `str()` form |

## Conventions

- The sorting functions, and routines such as `reverse_in_place`,
  `left_rotate`, `move_zeros_to_end`, `sort_colors`, `next_permutation`,
  `set_matrix_zeros`, `rotate_matrix`, `merge_gap` and `remove_duplicates`,
  change the list passed in. The other routines return new values.
- Searches that return an index use `-1` for "not found". Routines that return
  a value use `None` when there is none, for example `second_largest`,
  `two_sum`, `floor_and_ceil`, `nth_root`, `min_days_bouquets` and
  `find_peak_2d`.
- Input that has no meaningful answer, such as an empty sequence where one
  element is needed, raises `ValueError`; `LinkedList.insert_at` raises
  `IndexError` for a position outside `1..len(list) + 1`.

## Examples

```python
from dsakit.numbers import lcm_and_gcd, primes_up_to
from dsakit.sorting import merge_sort
from dsakit.search import first_and_last
from dsakit.linked_list import LinkedList

lcm_and_gcd(12, 15)            # (60, 3)
primes_up_to(10)               # [2, 3, 5, 7]

data = [12, 11, 13, 5, 6]
merge_sort(data)               # sorts in place
data                           # [5, 6, 11, 12, 13]

first_and_last([1, 2, 4, 4, 4, 6, 7], 4)   # (2, 4)

items = LinkedList([1, 2, 3])
items.push_front(0)
items.append(4)
str(items)                     # '0 → 1 → 2 → 3 → 4 → NULL'
3 in items                     # True
```

## What it does not do

dsakit is a library only. It installs no command-line program and reads no
input of its own; call its functions from your own code.