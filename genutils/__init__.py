"""Generic container types: circular linked lists, a stack and a binary search tree."""

__version__ = "1.0.0"

__all__ = ["nodes", "cdll", "stack", "csll", "binary_tree", "tree_ops"]