# puzzlekit

A small collection of solutions to well-known algorithm puzzles, written as
plain functions that take ordinary Python values and return results. It has
no dependencies outside the standard library.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Functions |
| --- | --- |
| `puzzlekit.roman` | `to_roman`, `from_roman` |
| `puzzlekit.strings` | `longest_common_prefix`, `run_length_encode`, `count_and_say`, `thousand_separator`, `longest_palindrome` |
| `puzzlekit.counting` | `count_even_digit_numbers`, `count_good_triplets`, `count_equal_divisible_pairs`, `distinct_averages`, `count_subarrays_product_less_than`, `time_to_buy_tickets`, `can_split_array` |
| `puzzlekit.sequences` | `max_triplet_value_brute`, `max_triplet_value`, `find_even_numbers`, `find_matrix`, `generate_key`, `intersection`, `find_content_children`, `max_count`, `trap`, `triangle_type` |
| `puzzlekit.dynamic` | `most_points`, `can_partition` |
| `puzzlekit.sudoku` | `is_valid_sudoku` |
| `puzzlekit.graph` | `shortest_times`, `network_delay_time` |

## Examples

```python
from puzzlekit.roman import to_roman, from_roman
from puzzlekit.strings import count_and_say, thousand_separator
from puzzlekit.sequences import trap
from puzzlekit.dynamic import can_partition
from puzzlekit.graph import network_delay_time, shortest_times

to_roman(1994)                 # 'MCMXCIV'
from_roman("MCMXCIV")          # 1994
count_and_say(4)               # '1211'
thousand_separator(51040)      # '51.040'
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
can_partition([1, 2, 3, 5])    # False
network_delay_time([[2, 1, 1], [2, 3, 1], [3, 4, 1]], 4, 2)  # 2
shortest_times([[2, 1, 1], [2, 3, 1], [3, 4, 1]], 4, 2)
# {1: 1, 2: 0, 3: 1, 4: 2}
```

## Notes on behaviour

- `to_roman` accepts 0 to 3999 (zero gives an empty string) and raises
  `ValueError` outside that range; `from_roman` raises `ValueError` on a
  character that is not a Roman symbol.
- `shortest_times` returns a dict from each node `1..n` to its shortest
  arrival time from node `k`, with `math.inf` for unreachable nodes, and
  raises `ValueError` for a source or edge outside `1..n`.
  `network_delay_time` returns `-1` when some node cannot be reached.
- `is_valid_sudoku` expects 9 rows of 9 cells; cells other than the digits
  `"1"` to `"9"` are treated as empty.
- Invalid arguments are reported with `ValueError` (or `IndexError` for a
  position outside the queue in `time_to_buy_tickets`).

## What it does not do

puzzlekit is a library only: it installs no command and reads nothing from
standard input. Call the functions from your own code.