"""Classic algorithms and data structures as plain Python functions and classes."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "containers",
    "dynamic",
    "graphs",
    "grids",
    "hashing",
    "heaps",
    "paths",
    "recursion",
    "searching",
    "sorting",
    "trie",
]