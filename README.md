# arbora

Binary trees made of linked nodes. Every node holds an integer value and
knows its parent and its children. On top of that, arbora provides binary
search trees, AVL trees and max binary heaps, along with traversals,
measurements, rotations and a text printer. It has no dependencies outside
the standard library.

## Installation

```
pip install arbora
```

## Building trees by hand

```python
from arbora.node import Node
from arbora.printer import print_tree

root = Node(98)
left = root.insert_left(12)
left.insert_left(6)
left.insert_right(16)
right = root.insert_right(402)
right.insert_left(256)
right.insert_right(512)

print_tree(root)
```

`Node.insert_left` and `Node.insert_right` add a new child and return it. If
that position already holds a child, the old child becomes the new node's
child on the same side.

A node also offers:

- `is_leaf()` and `is_root()`;
- `depth()`, the number of edges up to the root;
- `sibling()` and `uncle()`, which return `None` when there is none;
- `ancestors()`, which yields the node itself and then each ancestor up to
  the root.

`arbora.node.lowest_common_ancestor(first, second)` returns the deepest node
that both nodes descend from (a node counts as its own ancestor), or `None`
if either argument is `None` or the nodes share no root.

Nodes compare and hash by identity, so they can be kept in sets.

## Traversing

`arbora.traversal` provides `preorder`, `inorder`, `postorder` and
`levelorder`. Each is a generator of node values; an empty tree (`None`)
yields nothing.

```python
from arbora.traversal import inorder, levelorder

list(inorder(root))      # [6, 12, 16, 98, 256, 402, 512]
list(levelorder(root))   # [98, 12, 402, 6, 16, 256, 512]
```

## Measuring

`arbora.measure` works on a root node or `None`:

- `height(tree)`: edges on the longest downward path; 0 for `None` or a leaf.
- `size(tree)`: number of nodes.
- `count_leaves(tree)`: nodes without children.
- `count_internal(tree)`: nodes with at least one child.
- `balance(tree)`: height of the left subtree minus that of the right.
- `is_full(tree)`: every node has zero or two children.
- `is_perfect(tree)`: every internal node has two children and all leaves
  are on the same level.
- `is_complete(tree)`: every level is full except possibly the last, which
  is filled from the left.

The three checks return `False` for `None`.

## Rotating

`arbora.rotate.rotate_left(tree)` and `rotate_right(tree)` rotate a subtree
and return its new root. The returned root has its parent link cleared, so
the caller reattaches it where needed. A tree that lacks the child to rotate
around is returned as it is, apart from losing its parent link.

## Printing

`arbora.printer.format_tree(tree)` returns a drawing of the tree, one line
per level, each value shown as `(%03d)` and joined to its children with
`.---` lines. `print_tree(tree, file=None)` writes that drawing to `file`, or
to standard output. An empty tree gives an empty string.

## Binary search trees

```python
from arbora.bst import array_to_bst, bst_insert, bst_search, bst_remove, is_bst

bst = array_to_bst([79, 47, 68, 87, 84, 91, 21, 32])
bst_insert(bst, 50)          # the new node, or None if 50 was already present
bst_search(bst, 68)          # the node holding 68, or None
bst = bst_remove(bst, 47)    # root of what remains
is_bst(bst)                  # True
```

`bst_insert(None, value)` returns a new one-node tree. `array_to_bst`
accepts any iterable and ignores duplicates. `bst_remove` replaces a node
that has two children with the smallest value of its right subtree, and
returns the new root (or `None` when the tree becomes empty). `is_bst` is
`False` for `None` and for trees holding a value twice.

## AVL trees

```python
from arbora.avl import array_to_avl, avl_insert, avl_remove, sorted_array_to_avl

avl = array_to_avl([98, 402, 12, 46, 128, 256, 512, 50])
avl, node = avl_insert(avl, 1)   # new root and new node (None for a duplicate)
avl = avl_remove(avl, 46)

balanced = sorted_array_to_avl([1, 2, 20, 21, 22, 32, 34, 47])
```

`avl_insert` rebalances with single or double rotations on the way back up
and returns both the root and the inserted node. `avl_remove` removes the
value as in a binary search tree, then rebalances every subtree from the
bottom up with single rotations. `sorted_array_to_avl` builds the tree
directly from sorted values, taking the middle element (the lower one for
an even count) as each subtree's root.

`is_avl(tree)` is `True` when the tree is a valid binary search tree whose
shape is complete in the sense of `is_complete`; it is a stricter check than
height balance alone.

## Max binary heaps

```python
from arbora.heap import array_to_heap, heap_insert, heap_extract, heap_to_sorted_array, is_heap

heap = array_to_heap([79, 47, 68, 87, 84, 91, 21, 32])
heap, node = heap_insert(heap, 50)   # root, and the node now holding 50
heap, largest = heap_extract(heap)   # root of what remains (None once empty), and 91
heap_to_sorted_array(heap)           # remaining values in descending order
```

`heap_insert` places the new value in the next free position of the
complete tree and moves it up while it is larger than its parent; duplicate
values are kept. It raises `ValueError` if the tree is not complete.
`heap_extract` raises `IndexError` on an empty heap. `heap_to_sorted_array`
empties the heap as it goes. `is_heap` checks that the tree is complete and
that every node is larger than all of its descendants.

## What arbora does not do

arbora is a library only: it has no command-line program, and it does not
save trees to or load them from files. Trees live in memory as linked
`Node` objects.