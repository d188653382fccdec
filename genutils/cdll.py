"""Circular doubly linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

from genutils.nodes import DoubleNode


class CDLL:
    """A circular doubly linked list of arbitrary values.

    Each node's ``first`` link points to the previous node and ``second``
    to the next one; the tail's ``second`` is the head.
    """

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[DoubleNode] = None
        self._size = 0
        for value in values or ():
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        for _ in range(self._size):
            yield node.value
            node = node.second

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self._size == 0

    def begin(self) -> Optional[DoubleNode]:
        """Return the head node, or None when the list is empty."""
        return self._head

    def end(self) -> Optional[DoubleNode]:
        """Return the tail node, or None when the list is empty."""
        return None if self._head is None else self._head.first

    def _start(self, value: Any) -> DoubleNode:
        node = DoubleNode(value)
        node.first = node.second = node
        self._head = node
        self._size = 1
        return node

    @staticmethod
    def _check_linked(node: Optional[DoubleNode]) -> DoubleNode:
        if node is None or node.first is None or node.second is None:
            raise ValueError("node is not linked into a list")
        return node

    def _link(self, previous: DoubleNode, following: DoubleNode, value: Any) -> DoubleNode:
        new = DoubleNode(value, previous, following)
        previous.second = new
        following.first = new
        self._size += 1
        return new

    def insert(self, node: Optional[DoubleNode], value: Any) -> DoubleNode:
        """Insert ``value`` before ``node`` and return the new node.

        On an empty list ``node`` is ignored and the value becomes the head.
        Inserting before the head makes the new node the head.
        """
        if self._size == 0:
            return self._start(value)
        node = self._check_linked(node)
        new = self._link(node.first, node, value)
        if node is self._head:
            self._head = new
        return new

    def insert_after(self, node: Optional[DoubleNode], value: Any) -> DoubleNode:
        """Insert ``value`` after ``node`` and return the new node.

        On an empty list ``node`` is ignored and the value becomes the head.
        """
        if self._size == 0:
            return self._start(value)
        node = self._check_linked(node)
        return self._link(node, node.second, value)

    def remove(self, node: Optional[DoubleNode]) -> Any:
        """Unlink ``node`` from the list and return its value."""
        node = self._check_linked(node)
        if self._size == 1:
            self._head = None
            self._size = 0
        else:
            if node is self._head:
                self._head = node.second
            node.first.second = node.second
            node.second.first = node.first
            self._size -= 1
        node.first = node.second = None
        return node.value

    def remove_after(self, node: Optional[DoubleNode]) -> Any:
        """Remove the node following ``node`` and return its value."""
        return self.remove(self._check_linked(node).second)

    def push_back(self, value: Any) -> DoubleNode:
        """Append ``value`` at the tail and return its node."""
        return self.insert_after(self.end(), value)

    def push_front(self, value: Any) -> DoubleNode:
        """Prepend ``value`` at the head and return its node."""
        return self.insert(self.begin(), value)

    def pop_back(self) -> Any:
        """Remove the tail and return its value."""
        if self._size == 0:
            raise IndexError("pop from an empty list")
        return self.remove(self.end())

    def pop_front(self) -> Any:
        """Remove the head and return its value."""
        if self._size == 0:
            raise IndexError("pop from an empty list")
        return self.remove(self.begin())

    def clear(self) -> None:
        """Remove every element."""
        while self._size:
            self.pop_front()

    def iterate(self, function: Callable[[Any, Any], Any], extradata: Any = None) -> None:
        """Call ``function(value, extradata)`` for every value, head first."""
        for value in self:
            function(value, extradata)