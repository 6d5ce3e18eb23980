"""Data-structure lab exercises: an AVL tree with ASCII drawing, word dictionaries, memoized recursion and PNG edge sketching."""

__version__ = "0.1.0"