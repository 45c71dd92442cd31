# algokit

Classic algorithms and data structures written as plain Python functions and
classes: sorting, binary search, bit tricks, array and contest puzzles, linked
lists, stacks, recursion, backtracking, binary trees and shortest paths. There
is also a small attendance report that reads a meeting join/leave log in CSV
form. It has no dependencies outside the standard library and needs
Python 3.10 or later.

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
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort` |
| `algokit.searching` | `binary_search`, `first_occurrence`, `last_occurrence`, `count_occurrences` |
| `algokit.bits` | `is_power_of_two`, `single_unique`, `two_uniques`, `get_bit`, `set_bit`, `toggle_bit`, `update_bit`, `count_ones`, `hamming_distance`, `count_within_distance`, `subsets` |
| `algokit.arrays` | `longest_arithmetic_subarray`, `max_of_prefix`, `even_sum_triplets`, `first_repeated`, `running_pair_sums`, `subarray_with_sum` |
| `algokit.contests` | `badge_students`, `closest_pair_with_sum`, `rank_qualifiers`, `sliding_window_max`, `unique_permutations` |
| `algokit.numbers` | `interesting_count`, `min_ops_for_gcd`, `matrix_multiply`, `matrix_power`, `sieve` |
| `algokit.linked_lists` | `Node`, `LinkedList`, `LinkedQueue`, `LinkedStack` |
| `algokit.stacks` | `TwoStacks`, `BoundedStack`, `reverse_words` |
| `algokit.stack_apps` | `stock_span`, `bracket_sequences`, `precedence`, `infix_to_postfix`, `reverse_stack` |
| `algokit.recursion` | `is_sorted`, `spaced_combinations`, `subsequences`, `ascii_subsequences`, `down_and_up`, `replace_pi`, `reverse_string`, `tower_of_hanoi` |
| `algokit.strings` | `min_extra_stages`, `max_pawns_reaching`, `is_palindrome` |
| `algokit.backtracking` | `rat_in_maze`, `n_queens` |
| `algokit.trees` | `TreeNode`, `build_tree`, `inorder`, `level_order` |
| `algokit.graphs` | `dijkstra` |
| `algokit.attendance` | `AttendanceRecord`, `AttendeeSummary`, `parse_time`, `read_records`, `summarize`, `format_report`, `main` |

The sorting functions leave their input alone and return a new list. The
searches work on sorted sequences and return `-1` when the target is absent.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.numbers import sieve
from algokit.stack_apps import infix_to_postfix
from algokit.bits import is_power_of_two
from algokit.linked_lists import LinkedList

merge_sort([5, 2, 9, 1])           # [1, 2, 5, 9]
sieve(20)                          # [2, 3, 5, 7, 11, 13, 17, 19]
infix_to_postfix("a+b*c")          # "abc*+"
is_power_of_two(64)                # True

items = LinkedList([10, 20, 30])
items.reverse()
print(items)                       # 30->20->10->NULL
```

Shortest distances from a source vertex, given an adjacency matrix where `0`
means "no edge"; unreachable vertices get `math.inf`:

```python
from algokit.graphs import dijkstra

graph = [
    [0, 4, 0],
    [4, 0, 8],
    [0, 8, 0],
]
dijkstra(graph, 0)                 # [0, 4, 12]
```

Backtracking and trees:

```python
from algokit.backtracking import n_queens
from algokit.trees import build_tree, level_order

n_queens(4)          # first placement found, queens marked 1; None if there is none
root = build_tree([1, 2, 3], [2, 1, 3])
level_order(root)    # [1, 2, 3]
```

## Errors

Invalid input raises ordinary Python exceptions rather than returning a
sentinel: for instance `LinkedStack.pop` and `BoundedStack.pop` raise
`IndexError` when empty, `BoundedStack.push` and `TwoStacks.push1`/`push2`
raise `OverflowError` when full, and functions given out-of-range arguments
raise `ValueError`.

## Attendance report

`algokit.attendance` reads a CSV log whose first line is a header and whose
other rows hold a name, a status (`Joined` or `Left`) and a timestamp
containing a clock time `H:MM:SS`. Consecutive rows with the same name form
one attendee. A `Joined` followed by a `Left` counts the time between them; a
run ending in `Joined` counts up to 5:00:00, less one minute. Percentages are
taken of a class length of 2 hours 50 minutes. These times are fixed.

```
algokit-attendance [path]
```

`path` defaults to `sheet.csv`. The command prints a table with each
attendee's name, number of entries and attendance percentage. It prints
`No file found!` and exits with status 1 if the file is missing, and reports a
malformed row on standard error with status 1.

From Python, the same steps are `read_records`, `summarize` and
`format_report`.

## What this package does not do

Apart from `algokit-attendance` there is no command-line program: the
algorithms are library functions to call from Python, with no interactive
driver reading problems from standard input. The attendance report has no
options for other class times or lengths, and stores nothing.