"""Matrix, array, search, sort and linked-list exercises as plain functions and small classes."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "circular",
    "doubly",
    "matrix",
    "nodes",
    "problems",
    "searching",
    "singly",
    "sorting",
]