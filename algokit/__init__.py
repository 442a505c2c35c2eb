"""Classic algorithms and data structures for arrays, strings, searching, sorting, matrices, linked lists, trees and small containers."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "containers",
    "linked_lists",
    "matrices",
    "searching",
    "sorting",
    "strings",
    "trees",
]