"""Solutions to classic algorithm puzzles, grouped by theme into modules."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "combinatorics",
    "greedy",
    "grids",
    "linked_list",
    "numbers",
    "searching",
    "strings",
]