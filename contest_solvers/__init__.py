"""Solvers for classic competitive-programming problems, one module per topic."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "primes",
    "digit_dp",
    "search",
    "fenwick",
    "sparse_table",
    "segment_tree",
    "order_statistics",
    "disjoint_set",
    "heaps",
    "sliding_window",
    "sequences",
    "dynamic_programming",
    "text_puzzles",
    "string_matching",
    "grid_search",
    "shortest_paths",
    "dag",
    "components",
    "backtracking",
    "trees",
    "lca",
]