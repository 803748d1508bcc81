"""Classic data structures and algorithms: searching, sorting, bounded containers,
linked lists, polynomials, sparse matrices, graphs and dynamic programming."""

__version__ = "0.1.0"