"""Traversals and whole-tree operations for :class:`BinaryTree`."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional, Union

from genutils.binary_tree import BinaryTree, KeyValue
from genutils.nodes import DoubleNode

Pair = Union[KeyValue, tuple[str, Any]]


def preorder(tree: BinaryTree) -> Iterator[KeyValue]:
    """Yield the tree's pairs in preorder: node, left subtree, right subtree."""
    stack: list[DoubleNode] = []
    root = tree.root()
    if root is not None:
        stack.append(root)
    while stack:
        node = stack.pop()
        yield node.value
        if node.second is not None:
            stack.append(node.second)
        if node.first is not None:
            stack.append(node.first)


def inorder(tree: BinaryTree) -> Iterator[KeyValue]:
    """Yield the tree's pairs in key order."""
    stack: list[DoubleNode] = []
    node: Optional[DoubleNode] = tree.root()
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.first
        node = stack.pop()
        yield node.value
        node = node.second


def postorder(tree: BinaryTree) -> Iterator[KeyValue]:
    """Yield the tree's pairs in postorder: left subtree, right subtree, node."""
    root = tree.root()
    if root is None:
        return
    stack: list[tuple[DoubleNode, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.value
            continue
        stack.append((node, True))
        if node.second is not None:
            stack.append((node.second, False))
        if node.first is not None:
            stack.append((node.first, False))


def to_list(tree: BinaryTree) -> list[KeyValue]:
    """Return copies of the tree's pairs, sorted by key."""
    return [KeyValue(pair.key, pair.value) for pair in inorder(tree)]


def _as_pair(item: Pair) -> KeyValue:
    if isinstance(item, KeyValue):
        return item
    key, value = item
    return KeyValue(key, value)


def _median_first(items: Sequence[KeyValue]) -> Iterator[KeyValue]:
    """Yield items so that each range's middle comes before its halves."""
    ranges = [(0, len(items))]
    while ranges:
        low, high = ranges.pop()
        if low >= high:
            continue
        middle = (low + high) // 2
        yield items[middle]
        ranges.append((middle + 1, high))
        ranges.append((low, middle))


def from_list(pairs: Iterable[Pair]) -> BinaryTree:
    """Build a tree from key/value pairs.

    Pairs may be :class:`KeyValue` objects or ``(key, value)`` tuples. When
    they are sorted by key the resulting tree is balanced. A repeated key
    raises KeyError.
    """
    items = [_as_pair(item) for item in pairs]
    tree = BinaryTree()
    for pair in _median_first(items):
        tree.insert(pair.key, pair.value)
    return tree


def balance(tree: BinaryTree) -> BinaryTree:
    """Return a new balanced tree holding the same pairs as ``tree``."""
    return from_list(to_list(tree))