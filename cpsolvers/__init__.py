"""Solutions to short competitive-programming problems, grouped by rating, with a command-line runner."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "rating800a",
    "rating800b",
    "rating900a",
    "rating900b",
    "rating1100a",
    "rating1100b",
]