# bintree

A small, dependency-free binary tree for Python. Each node holds an integer and links
to its parent and its left and right children. Functions are provided to walk the
tree and to measure its shape.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_left(128)
```

`Node(value, parent=None)` makes a node with no children. It does not attach itself
to the parent; use `insert_left` or `insert_right` for that.

`insert_left` and `insert_right` return the new node. If the parent already has a
child on that side, the new node takes its place and the old child becomes the new
node's child on the same side.

Each node has the attributes `value`, `parent`, `left` and `right`.

Node queries:

- `is_leaf()`: true when the node has no children.
- `is_root()`: true when the node has no parent.
- `sibling()`: the other child of the node's parent, or `None`.
- `uncle()`: the sibling of the node's parent, or `None`.
- `delete()`: detaches the node from its parent and clears the parent and child
  links of every node in its subtree.

## Traversal

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))   # [98, 12, 54, 402, 128]
list(inorder(root))    # [12, 54, 98, 128, 402]
list(postorder(root))  # [54, 12, 128, 402, 98]
```

Each function is a generator that yields the node values in order. The walks do not
recurse, so deep trees are fine. An empty tree (`None`) yields nothing.

## Measuring

```python
from bintree.measure import (
    height, depth, size, leaves, internal_nodes, balance, is_full, is_perfect,
)

height(root)          # edges on the longest path down to a leaf (0 for a leaf)
depth(left)           # edges from the node up to the root
size(root)            # number of nodes
leaves(root)          # nodes with no children
internal_nodes(root)  # nodes with at least one child
balance(root)         # levels in the left subtree minus levels in the right subtree
is_full(root)         # every node has zero or two children
is_perfect(root)      # every level is completely filled
```

Every measurement accepts `None` as an empty tree: counts and `balance` are 0, and
`is_full` and `is_perfect` are false.

## What it does not do

The tree is not a search tree: insertion places nodes exactly where you ask and keeps
no ordering, and there is no lookup by value, no rebalancing and no serialization.