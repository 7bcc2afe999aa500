"""In-memory inventory of workshop parts that can be added, deleted, sorted and listed."""

__version__ = "0.1.0"
__all__ = ["element", "ordering", "strutils", "workshop"]