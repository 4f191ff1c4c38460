# algolab

Classic algorithms and data structures in plain Python, with no third-party
dependencies. Everything is a function or class that takes and returns
ordinary Python values.

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

- `algolab.dynamic`: `nth_fibonacci_memo` and `nth_fibonacci_table` (counting
  0 as the first Fibonacci number), `min_squares_memo` and `min_squares_table`
  (fewest perfect squares summing to n), `knapsack(weights, values, capacity)`,
  `lis_ending_at_last` and `longest_increasing_subsequence`.
- `algolab.hashing`: `frequencies`, `vertical_order` of a binary tree built
  from `TreeNode`, `count_zero_sum_subarrays`, `min_window_sum` and
  `top_k_frequent`.
- `algolab.heaps`: `heap_sort`, `smallest_count_reaching` (how many of the
  largest values reach a sum, or `None`) and `RunningMedian` with `insert` and
  `median`.
- `algolab.searching`: `binary_search`, `jump_search`, `interpolation_search`
  and `exponential_search` over sorted sequences; each returns an index or
  `None`.
- `algolab.sorting`: `selection_sort`, `insertion_sort` and `merge_sort`; each
  returns a new ascending list.
- `algolab.graphs`: `adjacency_list`, `format_adjacency_list`,
  `adjacency_matrix`, `bfs_order`, `component_sizes`, `cross_group_pairs`,
  `has_undirected_cycle`, `has_directed_cycle`, `is_bipartite` and
  `topological_order` (raises `ValueError` on a cycle).
- `algolab.paths`: `bellman_ford`, `dijkstra`, `floyd_warshall`, `kruskal`,
  `has_cycle_dsu` and a `DisjointSet` with `find` and `union`. Unreachable
  vertices are reported as `None`; `floyd_warshall` uses `math.inf` for
  missing edges.
- `algolab.grids`: `snakes_and_ladders` (fewest rolls from square 1 to 100, or
  `None`) and `capture_surrounded`.
- `algolab.backtracking`: `rat_in_maze`, `permutations_distinct`,
  `unique_permutations` and `n_queens`.
- `algolab.recursion`: small exercises such as `tower_of_hanoi`,
  `subsequences`, `subsequences_with_ascii`, `keypad_words`,
  `string_permutations`, `count_dice_paths`, `count_grid_paths`,
  `tiling_ways`, `friend_pairings` and `knapsack_recursive`, plus string
  helpers like `replace_pi`, `move_x_to_end` and
  `remove_consecutive_duplicates`.
- `algolab.containers`: `ArrayQueue` (fixed slots, default 100),
  `LinkedQueue`, `ArrayStack` (default capacity 5) and `LinkedStack`. Adding to
  a full container raises `ContainerFullError`; taking from an empty one raises
  `ContainerEmptyError`.
- `algolab.trie`: `Trie` with `insert` and `search` for words made of the
  letters a to z.

## Examples

```python
from algolab.dynamic import knapsack, longest_increasing_subsequence
from algolab.paths import dijkstra
from algolab.heaps import RunningMedian
from algolab.trie import Trie

knapsack([15, 30, 45], [60, 100, 150], 60)                           # 210
longest_increasing_subsequence([10, 22, 9, 33, 21, 50, 52, 60, 80])  # 7

dijkstra(4, [(1, 2, 24), (1, 4, 20), (3, 1, 3), (4, 3, 12)], 1)      # [0, 24, 3, 15]

stream = RunningMedian()
for x in (10, 15, 21):
    stream.insert(x)
stream.median()                                                      # 15.0

words = Trie()
words.insert("hello")
words.search("hello")                                                # True
```

## What it does not do

The package is a library only. It has no command-line programs and no
interactive menus: nothing reads input from a terminal or prints results.
Callers pass in their data and format the results themselves.