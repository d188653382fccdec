"""Circular singly linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

from genutils.nodes import SingleNode


class CSLL:
    """A circular singly linked list of arbitrary values.

    The list keeps both its head and its tail; the tail's ``next`` link
    points back to the head.
    """

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[SingleNode] = None
        self._tail: Optional[SingleNode] = None
        self._size = 0
        for value in values or ():
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self._size == 0

    def begin(self) -> Optional[SingleNode]:
        """Return the head node, or None when the list is empty."""
        return self._head

    def end(self) -> Optional[SingleNode]:
        """Return the tail node, or None when the list is empty."""
        return self._tail

    def _start(self, value: Any) -> SingleNode:
        node = SingleNode(value)
        node.next = node
        self._head = self._tail = node
        self._size = 1
        return node

    @staticmethod
    def _check_linked(node: Optional[SingleNode]) -> SingleNode:
        if node is None or node.next is None:
            raise ValueError("node is not linked into a list")
        return node

    def _predecessor(self, node: SingleNode) -> SingleNode:
        current = self._tail
        for _ in range(self._size):
            if current.next is node:
                return current
            current = current.next
        raise ValueError("node does not belong to this list")

    def _empty_out(self, node: SingleNode) -> Any:
        if node is not self._head:
            raise ValueError("node does not belong to this list")
        self._head = self._tail = None
        self._size = 0
        node.next = None
        return node.value

    def _append_after(self, node: SingleNode, value: Any) -> SingleNode:
        new = SingleNode(value, node.next)
        node.next = new
        self._size += 1
        if node is self._tail:
            self._tail = new
        return new

    def insert(self, node: Optional[SingleNode], value: Any) -> SingleNode:
        """Insert ``value`` before ``node`` and return the node holding it.

        The value is placed into ``node`` itself while its former value moves
        to a fresh node after it, so the returned node is ``node``. On an
        empty list ``node`` is ignored and the value becomes the head.
        """
        if self._size == 0:
            return self._start(value)
        node = self._check_linked(node)
        self._append_after(node, node.value)
        node.value = value
        return node

    def insert_after(self, node: Optional[SingleNode], value: Any) -> SingleNode:
        """Insert ``value`` after ``node`` and return the new node.

        On an empty list ``node`` is ignored and the value becomes the head.
        """
        if self._size == 0:
            return self._start(value)
        return self._append_after(self._check_linked(node), value)

    def remove(self, node: Optional[SingleNode]) -> Any:
        """Unlink ``node`` from the list and return its value.

        This walks the list to find the node's predecessor.
        """
        node = self._check_linked(node)
        if self._size == 1:
            return self._empty_out(node)
        previous = self._predecessor(node)
        if node is self._head:
            self._head = node.next
        elif node is self._tail:
            self._tail = previous
        previous.next = node.next
        self._size -= 1
        node.next = None
        return node.value

    def remove_after(self, node: Optional[SingleNode]) -> Any:
        """Remove the node following ``node`` and return its value."""
        node = self._check_linked(node)
        if self._size == 1:
            return self._empty_out(node)
        target = node.next
        if target is self._tail:
            self._tail = node
        elif target is self._head:
            self._head = target.next
        node.next = target.next
        self._size -= 1
        target.next = None
        return target.value

    def push_back(self, value: Any) -> SingleNode:
        """Append ``value`` at the tail and return its node."""
        return self.insert_after(self.end(), value)

    def push_front(self, value: Any) -> SingleNode:
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