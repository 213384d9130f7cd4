# algobox

Classic algorithms and data structures in plain Python. There are no
third-party dependencies.

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

### `algobox.sorting`

`insertion_sort`, `merge_sort`, `heap_sort` and `selection_sort` take any
iterable. Each returns a new sorted list and leaves the input unchanged.
`merge_sort` is stable.

### `algobox.searching`

- `linear_search(items, target)` returns the index of the first equal element.
- `binary_search(items, target)` and `ternary_search(items, target)` search an
  ascending sequence.

All three return `None` when the target is absent.

### `algobox.numeric`

- `binpow(base, exponent, modulus)` computes modular exponentiation by repeated
  squaring. It raises `ValueError` for a non-positive modulus or a negative
  exponent.
- `factorial(n)` raises `ValueError` for negative `n`.
- `mccarthy91(n)` evaluates the nested recursion
  `f(n) = n - 10 if n > 100 else f(f(n + 11))`.
- `max_subarray_sum(values)` uses Kadane's algorithm. The empty subarray counts,
  so the result is never below 0.
- `longest_nondecreasing_subsequence(values)` returns a length and runs in
  O(n log n).
- `reverse_items(items)` returns a reversed copy as a list.

### `algobox.strings`

- `is_palindrome(text)`
- `palindrome_partitions(text)` yields every split of the text into palindromic
  pieces, each as a list of strings.
- `is_pangram(sentence)` returns True if every lowercase English letter appears.
- `next_palindrome(digits)` returns the smallest palindromic number greater
  than a string of decimal digits. It raises `ValueError` for anything else.
- `z_function(text)` returns the Z-array. Entry 0 is 0.
- `all_palindromic_numbers(numbers)` returns True if there is at least one
  number and every number is a decimal palindrome.

### `algobox.graphs`

- `Edge(u, v, weight)` is a frozen dataclass.
- `bfs(adjacency)` returns the breadth-first order of every vertex
  `0..n-1`. Each unvisited vertex, taken in index order, starts a new
  traversal.
- `topological_sort(vertex_count, edges)` orders vertices `1..vertex_count`
  with Kahn's algorithm. It raises `ValueError` on a cycle.
- `kruskal(vertex_count, edges)` finds the minimum spanning forest of vertices
  `0..vertex_count-1`. It returns `(total_weight, chosen_edges)`. Edges may be
  given as `Edge` objects or as `(u, v, weight)` tuples.

### `algobox.trees`

`AncestorTable(vertex_count, edges, root=1)` builds a binary-lifting table for
a tree with nodes `1..vertex_count`. You can also build one with
`AncestorTable.from_parent_links(vertex_count, links)` from `(parent, child)`
pairs. It offers these queries:

- `depth(node)`
- `lca(a, b)`
- `distance(a, b)`
- `kth_ancestor(node, k)`, which returns `None` when the step passes the root

Both constructors raise `ValueError` if the input is not a tree.

### `algobox.linked_list`

`SinglyLinkedList(items=())` supports `len()` and iteration. It has these
methods:

- `push_front(value)` and `append(value)`
- `insert_at(position, value)` and `delete_at(position)`. Positions are
  1-based, and both raise `IndexError` when out of range.
- `insert_after(key, value)` and `remove(value)`. Both raise `ValueError` when
  the value is missing.
- `reverse()`, which works in place.

### `algobox.circular_list`

`CircularLinkedList(items=())` supports `len()` and iteration. It has
`add_front`, `add_end`, `add_after(item, value)` and `remove(key)`. The last
two raise `ValueError` when the item is missing.

## Examples

```python
from algobox.sorting import merge_sort
from algobox.numeric import binpow
from algobox.strings import next_palindrome
from algobox.trees import AncestorTable

merge_sort([12, 11, 13, 5, 6, 7])        # [5, 6, 7, 11, 12, 13]
binpow(2, 10, 1_000_000_007)             # 1024
next_palindrome("999")                   # "1001"

tree = AncestorTable(5, [(1, 2), (1, 3), (2, 4), (2, 5)], root=1)
tree.lca(4, 5)                           # 2
tree.distance(4, 3)                      # 3
```

```python
from algobox.linked_list import SinglyLinkedList

items = SinglyLinkedList([10, 20, 30])
items.reverse()
list(items)                              # [30, 20, 10]
```

## What it does not do

algobox is a library only:

- It installs no command-line program.
- It does not read input or print results; every function returns its answer.