# classic_algorithms

A small library of classic data structures and algorithms, written in plain
Python with no third-party dependencies.

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
| `classic_algorithms.avl` | `AVLTree`: insertion that rebalances by rotations, deletion (which does not rebalance), `level_order()`, `height()` |
| `classic_algorithms.binary_tree` | `Node`, `BinaryTree`: `insert_level_order`, `insert_at` with an `"l"`/`"r"` path; `breadth_first`, `preorder`, `inorder`, `postorder` and `morris_inorder`, each returning a list |
| `classic_algorithms.trie` | `Trie` of words over the letters a-z: `insert`, `search`, `delete` (returns whether the word was present) |
| `classic_algorithms.heap` | `MinHeap` with a fixed capacity: `insert_key`, `decrease_key`, `extract_min`, `delete_key`, `get_min`, `len()`; `HeapOverflowError` |
| `classic_algorithms.huffman` | `HuffmanNode`, `build_huffman_tree`, `huffman_codes` |
| `classic_algorithms.stacks` | `Stack` with an optional capacity (default 100, `None` for no limit), `StackOverflowError`, `StackUnderflowError` |
| `classic_algorithms.queues` | `CircularQueue` built on a ring of linked nodes: `enqueue`, `dequeue`, `traverse`, iteration, `len()` |
| `classic_algorithms.linked_lists` | `ArrayLinkedList` kept in a fixed node pool, `PoolExhaustedError`; `ListNode` with `from_iterable`, `to_list`, `selection_sort_linked_list` |
| `classic_algorithms.polynomial` | `Term`, polynomial `multiply`, `format_terms` |
| `classic_algorithms.sorting` | `bubble_sort`, `merge_sort` (stable), `format_values` |
| `classic_algorithms.sorted_sets` | `sorted_intersection`, `sorted_union` of ascending sequences |
| `classic_algorithms.numbers` | `gcd_subtraction`, `gcd_euclid`, `reverse_digits`, `reverse_of_reverse_sum`, `reverse_number_text`, `power_digits`, `max_of_three`, `max_and_runner_up`, `reverse_string`, `name_fragment`, `hanoi_moves` |
| `classic_algorithms.primes` | `sieve`, `primes_up_to`, `prime_factorization` |
| `classic_algorithms.graph` | adjacency-matrix `Graph` (a weight of zero means no edge) and `dijkstra` |
| `classic_algorithms.knapsack` | `Item` and greedy `fractional_knapsack` |
| `classic_algorithms.raster` | `bresenham_line`, `dda_line`, `generalized_bresenham`, each returning a list of `(x, y)` points |
| `classic_algorithms.records` | `IntPair` (`+` and unary `-`), `ClockTime` (`+` with carrying), `Person`, `Resident`, `format_matrix` |

## Examples

```python
from classic_algorithms.avl import AVLTree

tree = AVLTree(range(1, 8))
print(tree.level_order())   # values in breadth-first order
tree.delete(4)
print(tree.height())
```

```python
from classic_algorithms.huffman import huffman_codes

codes = huffman_codes({"a": 5, "b": 9, "c": 12, "d": 13, "e": 16, "f": 45})
for symbol, code in codes.items():
    print(symbol, code)
```

```python
from classic_algorithms.graph import Graph, dijkstra

graph = Graph(3)
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, 1)
print(dijkstra(graph, 0))   # [0, 4, 5]; math.inf marks unreachable vertices
```

```python
from classic_algorithms.primes import prime_factorization

print(prime_factorization(360))   # [(2, 3), (3, 2), (5, 1)]
```

```python
from classic_algorithms.knapsack import Item, fractional_knapsack

total, taken = fractional_knapsack([Item(10, 60), Item(20, 100), Item(30, 120)], 50)
```

```python
from classic_algorithms.raster import bresenham_line

print(bresenham_line(1, 1, 8, 5))  # pixel coordinates along the line
```

## Errors

Errors are raised as exceptions:

- pushing onto a full `Stack` raises `StackOverflowError`; popping or peeking
  an empty one raises `StackUnderflowError`;
- inserting into a full `MinHeap` raises `HeapOverflowError`; extracting from
  or reading the minimum of an empty heap raises `IndexError`, and
  `decrease_key` with a larger value raises `ValueError`;
- `ArrayLinkedList` raises `PoolExhaustedError` when its pool has no free node;
- `CircularQueue.dequeue` on an empty queue raises `IndexError`;
- `Trie` methods raise `ValueError` for characters outside a-z;
- `Graph.add_edge` and `dijkstra` raise `IndexError` for a vertex out of bounds;
- `polynomial.multiply` raises `ValueError` when either polynomial has no terms.

## What this package does not do

It is a library only: it has no command-line program and no interactive
menus for entering data. The line-drawing functions in
`classic_algorithms.raster` compute pixel coordinates; they do not draw to a
screen or window.