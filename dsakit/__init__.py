"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "arrays",
    "circular_linked",
    "doubly_linked",
    "matrices",
    "searching",
    "singly_linked",
    "sorting",
    "stacks",
    "strings",
    "trees",
]