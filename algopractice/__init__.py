"""Sorting routines, linked-list and binary-tree helpers, and small utilities."""

__version__ = "0.1.0"
__all__ = ["sorting", "linked_list", "tree", "utils"]