# genutils

Small container types with no dependencies outside the standard library:

- `genutils.cdll.CDLL`: a circular doubly linked list
- `genutils.csll.CSLL`: a circular singly linked list
- `genutils.stack.Stack`: a last-in, first-out stack built on `CDLL`
- `genutils.binary_tree.BinaryTree`: an unbalanced binary search tree with `str` keys
- `genutils.tree_ops`: traversals and rebuilding helpers for trees
- `genutils.nodes`: the `SingleNode` and `DoubleNode` types the containers link together

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Linked lists

```python
from genutils.cdll import CDLL

items = CDLL([1, 2, 3])
items.push_front(0)
items.push_back(4)
items.insert_after(items.begin(), 10)
print(list(items))        # [0, 10, 1, 2, 3, 4]
print(items.pop_front())  # 0
print(items.pop_back())   # 4
print(len(items))         # 4
```

`CDLL` and `CSLL` have the same methods:

- `begin()` and `end()` return the head and tail nodes. On an empty list they return `None`.
- `insert(node, value)` puts a value before `node`, and `insert_after(node, value)` puts it after `node`. On an empty list `node` is ignored and the value becomes the only element.
- `push_front(value)` and `push_back(value)` add a value at either end and return its node.
- `remove(node)` and `remove_after(node)` unlink a node and return its value.
- `pop_front()` and `pop_back()` remove a value from either end and return it.
- `clear()` removes every element and `is_empty()` reports whether any are left.
- `iterate(function, extradata=None)` calls `function(value, extradata)` for each value, starting at the head.
- `len()` gives the number of elements. Iterating over a list yields its values from head to tail.

The two lists differ in a few ways:

- In a `CDLL`, node `first` is the previous node and `second` is the next one.
- In a `CSLL`, node `next` is the next node.
- `CSLL.insert` stores the new value in `node` itself and moves the old value into a fresh node after it, so it returns `node`.
- `CSLL.remove` walks the list to find the node's predecessor. `remove_after` does not.

## Stack

```python
from genutils.stack import Stack

stack = Stack()
stack.push("a")
stack.push("b")
print(stack.top())   # b
print(stack.pop())   # b
print(len(stack))    # 1
```

`is_empty()` and `clear()` are also available.

## Binary tree

```python
from genutils.binary_tree import BinaryTree
from genutils.tree_ops import inorder, balance

tree = BinaryTree()
tree.insert("m", 1)
tree.insert("c", 2)
tree.insert("x", 3)
print("c" in tree)        # True
print(tree.get("x"))      # 3
tree.set("x", 30)
tree.remove("m")          # returns 1
print([kv.key for kv in inorder(tree)])  # ['c', 'x']
balanced = balance(tree)
print(len(balanced))      # 2
```

Each tree node holds a `KeyValue` with `key` and `value`. Node `first` is the left child and `second` is the right child. `root()` returns the root node, or `None` when the tree is empty.

### BinaryTree methods

- `insert(key, value)` adds a new leaf and returns it.
- `get(key)` returns the value stored under `key`.
- `set(key, value)` replaces the value of an existing key.
- `remove(key)` deletes the key and returns its value. A node with two children is replaced by the greatest node of its left subtree.
- `clear()` removes everything.

### Functions in `genutils.tree_ops`

- `preorder(tree)`, `inorder(tree)` and `postorder(tree)` are generators that yield the tree's own `KeyValue` objects.
- `to_list(tree)` returns copies of the pairs, sorted by key.
- `from_list(pairs)` builds a new tree. `pairs` may hold `KeyValue` objects or `(key, value)` tuples. Sorted input gives a balanced tree.
- `balance(tree)` returns a new balanced tree with the same pairs. The original tree is left unchanged.

## Errors

Errors are raised as exceptions:

| Situation | Exception |
|---|---|
| Popping from an empty list or stack, or calling `top()` on an empty stack | `IndexError` |
| Passing a node that is not linked into a list | `ValueError` |
| Looking up, setting or removing a missing key | `KeyError` |
| Inserting a duplicate key, including in `from_list` | `KeyError` |
| Using a key that is not a `str` | `TypeError` |

## Limitations

The tree does not rebalance itself as it changes. Call `balance` to get a balanced copy. None of the containers are thread-safe, and none of them save their contents to storage.