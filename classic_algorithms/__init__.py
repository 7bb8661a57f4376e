"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "binary_tree",
    "trie",
    "heap",
    "huffman",
    "stacks",
    "queues",
    "linked_lists",
    "polynomial",
    "sorting",
    "sorted_sets",
    "numbers",
    "primes",
    "graph",
    "knapsack",
    "raster",
    "records",
]