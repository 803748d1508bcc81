# dsalgo

A small library of classic data structures and algorithms in plain Python.
It has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsalgo.searching` | `binary_search` and `ternary_search` on ascending sequences. Each returns an index, or `-1` when the key is missing |
| `dsalgo.sorting` | `bubble_sort`, `heap_sort`, `insertion_sort`, `merge_sort` and `quick_sort`. Each returns a new ascending list and leaves its argument alone |
| `dsalgo.bits` | `count_one_bits` and `count_zero_bits` for non-negative integers. Zero bits are counted below the highest set bit |
| `dsalgo.knapsack` | `Item` (value, positive weight, `ratio()`) and `fractional_knapsack` |
| `dsalgo.stack` | bounded `Stack` (default capacity 5), raising `StackOverflowError` and `StackUnderflowError` |
| `dsalgo.circular_queue` | bounded `CircularQueue` over a ring of slots, with `front` and `rear` positions, raising `QueueFullError` and `QueueEmptyError` |
| `dsalgo.two_stack_queue` | `TwoStackQueue`, a bounded queue built from two `Stack`s, raising the same queue errors |
| `dsalgo.linked_list` | `DoublyLinkedList` with insertion and deletion at both ends, plus `ListNode` and `merge_sorted` for sorted singly linked chains |
| `dsalgo.polynomial` | `Polynomial` made of `Term`s. `+` merges two polynomials whose terms are listed by falling exponent, dropping terms that cancel; calling a polynomial evaluates it |
| `dsalgo.sparse_matrix` | `SparseMatrix` of `SparseEntry` triples, with `from_dense`, `to_dense` and `format` |
| `dsalgo.graphs` | `breadth_first` and `depth_first` over a labelled adjacency matrix, and `WeightedGraph` with Dijkstra's `shortest_paths` and `path` (`NoPathError` when the destination is unreachable) |
| `dsalgo.dp` | `array_descriptions`, `book_shop`, `ordered_coin_combinations`, `unordered_coin_combinations`, `dice_combinations`, `grid_paths`, `minimizing_coins`, `removing_digits`. Counts are taken modulo `MOD` (10^9 + 7); `minimizing_coins` returns `None` when no combination works |
| `dsalgo.greedy` | `collecting_rounds` and `distinct_count` |
| `dsalgo.pairing` | `doubled_pair_total` and `max_alternating_damage` for values of two kinds |

## Examples

Searching and sorting:

```python
from dsalgo.searching import binary_search, ternary_search
from dsalgo.sorting import merge_sort

binary_search([1, 3, 5, 7], 5)                         # 2
ternary_search([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 50)    # -1
merge_sort([75, -56, -21, 32, 25, 54, 9, 8])
# [-56, -21, 8, 9, 25, 32, 54, 75]
```

Fractional knapsack:

```python
from dsalgo.knapsack import Item, fractional_knapsack

fractional_knapsack(50, [Item(60, 10), Item(100, 20), Item(120, 30)])  # 240.0
```

Bounded containers raise exceptions instead of returning sentinel values:

```python
from dsalgo.stack import Stack, StackUnderflowError

stack = Stack()
stack.push(100)
stack.pop()        # 100
try:
    stack.pop()
except StackUnderflowError:
    ...
```

Graph traversal over an adjacency matrix with vertex labels:

```python
from dsalgo.graphs import breadth_first, depth_first

labels = [1, 2, 3, 6, 7, 8, 9, 12]
matrix = [
    [0, 1, 0, 0, 1, 1, 0, 0],
    [1, 0, 1, 1, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0, 0, 1, 1],
    [0, 0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 0, 1, 0, 0],
]
breadth_first(labels, matrix, 1)   # [1, 2, 7, 8, 3, 6, 9, 12]
depth_first(labels, matrix, 1)     # [1, 2, 3, 6, 7, 8, 9, 12]
```

Dynamic programming:

```python
from dsalgo.dp import dice_combinations, minimizing_coins

dice_combinations(3)              # 4
minimizing_coins([1, 5, 7], 11)   # 3
```

## What it does not do

`dsalgo` is a library only. It installs no command-line programs and reads
nothing from standard input; every function takes its data as arguments and
returns its result.