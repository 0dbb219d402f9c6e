# contest_solvers

Plain-Python solvers for well-known competitive-programming problems, written
as ordinary functions and a few small data-structure classes. Every solver takes
Python values (integers, lists, tuples, strings) and returns its answer. Bad
input, such as a vertex outside the graph, raises an exception.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `contest_solvers.arithmetic` | factorial sums, negative-base and general base conversion, and small number puzzles such as `is_reachable`, `teleport_answers` and `shadow_length` |
| `contest_solvers.primes` | linear and Eratosthenes sieves, segmented prime counting, Miller–Rabin `is_prime`, `binomial_mod`, `lucas`, `min_currency_system` |
| `contest_solvers.digit_dp` | `count_beautiful` and `count_beautiful_between`: numbers divisible by all of their non-zero digits |
| `contest_solvers.search` | polynomial trisection, best average segment, minimum largest segment sum |
| `contest_solvers.fenwick` | `FenwickTree` (point add, range sum), `RangeAddFenwick` (range add, point read) |
| `contest_solvers.sparse_table` | `SparseTable` for range-maximum queries |
| `contest_solvers.segment_tree` | `LazySegmentTree` with range add and range sum |
| `contest_solvers.order_statistics` | `OrderedMultiset` with rank, k-th, predecessor and successor, and the query drivers `balanced_tree_queries` and `bst_queries` |
| `contest_solvers.disjoint_set` | `DisjointSet` and problems solved with it |
| `contest_solvers.heaps` | greedy solutions that use priority queues: merge cost, running medians, caching, change planning |
| `contest_solvers.sliding_window` | window minima and maxima with monotone queues |
| `contest_solvers.sequences` | candy balancing, de-duplication, LCS of permutations, two increasing subsequences, jump counting |
| `contest_solvers.dynamic_programming` | edit distance, largest square, bitmask tour, convex-hull-trick waiting time and more |
| `contest_solvers.text_puzzles` | bracket completion, compressed-text expansion, `count_added_males` |
| `contest_solvers.string_matching` | `prefix_function`, `find_occurrences`, `AhoCorasick`, `shortest_rewrite` |
| `contest_solvers.grid_search` | 0/1 BFS on a grid, lift presses, maze with teleporters, coloured-board costs, matrix decompression |
| `contest_solvers.shortest_paths` | shortest-path counting, parity distances, negative cycles, doubling jumps |
| `contest_solvers.dag` | acyclicity after one removal, food chains, drainage flows as `Fraction`s, minimum spanning tree |
| `contest_solvers.components` | strongly connected components, heaviest condensed walk, articulation points |
| `contest_solvers.backtracking` | Euler letter path, stick reconstruction, best mining path |
| `contest_solvers.trees` | tree DP: book locations, max subtree sum, party planning, apple tree |
| `contest_solvers.lca` | offline lowest common ancestors and minimax path queries |

## Examples

```python
from contest_solvers.arithmetic import format_negative_base
from contest_solvers.primes import is_prime
from contest_solvers.fenwick import FenwickTree
from contest_solvers.string_matching import find_occurrences, shortest_rewrite
from contest_solvers.shortest_paths import count_shortest_paths

format_negative_base(30000, -2)        # '30000=11011010101110000(base-2)'
is_prime(998244353)                    # True

tree = FenwickTree(5)
for i, v in enumerate([1, 5, 4, 2, 3], start=1):
    tree.add(i, v)
tree.range_sum(2, 4)                   # 11

find_occurrences("ABABABC", "ABA")     # [0, 2]

count_shortest_paths(5, [(1, 2), (1, 3), (2, 4), (3, 4), (2, 3), (4, 5), (4, 5)])
# [1, 1, 1, 2, 4]
```

Some solvers report "no answer" with a value rather than an exception:
`shortest_rewrite` and `corn_maze_time` return `None`, `elevator_presses` and
`min_board_cost` return `-1`. Others raise: `minimum_spanning_tree_weight`
raises `ValueError` for a graph that is not connected, and
`OrderedMultiset.remove` raises `KeyError` for a value that is not there.

## What it does not do

The package is a library only. It has no command-line program, does not read
problem input from standard input or files, and prints nothing; parsing input
and formatting output is left to the caller.