"""Binary search tree keyed by strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from genutils.nodes import DoubleNode


@dataclass
class KeyValue:
    """A key and the value stored under it."""

    key: str
    value: Any = None


class BinaryTree:
    """An unbalanced binary search tree mapping string keys to values.

    Each node's ``value`` is a :class:`KeyValue`; ``first`` is the left
    child (smaller keys) and ``second`` the right child (greater keys).
    """

    def __init__(self) -> None:
        self._root: Optional[DoubleNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._find(key)[0] is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size})"

    @staticmethod
    def _check_key(key: object) -> str:
        if not isinstance(key, str):
            raise TypeError(f"keys must be str, not {type(key).__name__}")
        return key

    def _find(self, key: str) -> tuple[Optional[DoubleNode], Optional[DoubleNode]]:
        """Return the node holding ``key`` and its parent."""
        parent: Optional[DoubleNode] = None
        node = self._root
        while node is not None:
            current = node.value.key
            if key < current:
                parent, node = node, node.first
            elif key > current:
                parent, node = node, node.second
            else:
                return node, parent
        return None, parent

    def is_empty(self) -> bool:
        """Return True when the tree holds no elements."""
        return self._size == 0

    def root(self) -> Optional[DoubleNode]:
        """Return the root node, or None when the tree is empty."""
        return self._root

    def get(self, key: str) -> Any:
        """Return the value stored under ``key``."""
        node, _ = self._find(self._check_key(key))
        if node is None:
            raise KeyError(key)
        return node.value.value

    def set(self, key: str, value: Any) -> None:
        """Replace the value of an existing ``key``."""
        node, _ = self._find(self._check_key(key))
        if node is None:
            raise KeyError(key)
        node.value.value = value

    def insert(self, key: str, value: Any) -> DoubleNode:
        """Add a new leaf for ``key`` and return it.

        Raises KeyError if the key is already present.
        """
        key = self._check_key(key)
        node, parent = self._find(key)
        if node is not None:
            raise KeyError(f"duplicate key: {key!r}")
        leaf = DoubleNode(KeyValue(key, value))
        if parent is None:
            self._root = leaf
        elif key < parent.value.key:
            parent.first = leaf
        else:
            parent.second = leaf
        self._size += 1
        return leaf

    def _replace_child(
        self, parent: Optional[DoubleNode], old: DoubleNode, new: Optional[DoubleNode]
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.first is old:
            parent.first = new
        else:
            parent.second = new

    def remove(self, key: str) -> Any:
        """Remove ``key`` from the tree and return its value.

        A node with two children is replaced by the greatest node of its
        left subtree.
        """
        node, parent = self._find(self._check_key(key))
        if node is None:
            raise KeyError(key)
        if node.first is None or node.second is None:
            child = node.first if node.first is not None else node.second
            self._replace_child(parent, node, child)
        else:
            before: Optional[DoubleNode] = None
            replacement = node.first
            while replacement.second is not None:
                before, replacement = replacement, replacement.second
            if before is not None:
                before.second = replacement.first
                replacement.first = node.first
            replacement.second = node.second
            self._replace_child(parent, node, replacement)
        node.first = None
        node.second = None
        self._size -= 1
        return node.value.value

    def clear(self) -> None:
        """Remove every element."""
        self._root = None
        self._size = 0