"""Last-in, first-out stack built on the circular doubly linked list."""

from __future__ import annotations

from typing import Any

from genutils.cdll import CDLL


class Stack:
    """A stack whose top is the tail of an underlying CDLL."""

    def __init__(self) -> None:
        self._items = CDLL()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack(top={self._items.end().value!r}, size={len(self)})" if len(self) else "Stack()"

    def is_empty(self) -> bool:
        """Return True when nothing is on the stack."""
        return not self._items

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.push_back(value)

    def _top_node(self):
        node = self._items.end()
        if node is None:
            raise IndexError("the stack is empty")
        return node

    def pop(self) -> Any:
        """Take the top element off the stack and return it."""
        return self._items.remove(self._top_node())

    def top(self) -> Any:
        """Return the top element, leaving it in place."""
        return self._top_node().value

    def clear(self) -> None:
        """Drop everything on the stack."""
        self._items.clear()