"""Two-stack integer sorting with a restricted instruction set, and a checker."""

__version__ = "1.0.0"
__all__ = ["checker", "cli", "operations", "parsing", "sorter", "stack"]