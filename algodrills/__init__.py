"""Solutions to classic algorithm exercises on arrays, strings, linked lists, trees and grids."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "grids",
    "lists",
    "numbers",
    "sorting",
    "strings",
    "structures",
    "sums",
    "trees",
    "windows",
]