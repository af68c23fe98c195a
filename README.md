# dslib

This package provides two intrusive data structures: a doubly linked list and a self-balancing AA tree.

"Intrusive" means that your own objects are the nodes. You subclass `ListNode` or
`AATreeNode`, add the fields you need, and pass the instances to the container.
The container links your objects to each other directly and does not wrap them.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Linked list

```python
from dslib.linked_list import ListNode, LinkedList

class IntNode(ListNode):
    def __init__(self, val):
        super().__init__()
        self.val = val

freed = []
items = LinkedList(free_node=freed.append)

items.append(IntNode(0))
items.append(IntNode(2))
items.prepend(IntNode(9))
items.insert_after(IntNode(1), items.next(items.first()))

print([n.val for n in items])            # [9, 0, 1, 2]
print([n.val for n in reversed(items)])  # [2, 1, 0, 9]
print(len(items))                        # 4

items.remove(items.last())  # the caller owns the removed node again
items.clear()               # remaining nodes are passed to free_node
```

`LinkedList` has the following members:

- `append`, `prepend`, `insert_before` and `insert_after` link a node into the list.
- `remove` unlinks a node and clears its `prev` and `next` fields. The list does not free a removed node; it belongs to the caller again.
- `clear` empties the list. Each remaining node is passed to `free_node` in order, if a `free_node` callback was given.
- `first()` and `last()` raise `IndexError` when the list is empty.
- `next(node)` and `prev(node)` return the neighbouring node, or `None` at either end of the list.
- `is_empty()` reports whether the list holds any nodes.
- `len()` counts the nodes by walking the list.
- Iteration runs from head to tail, and `reversed()` runs from tail to head.

`insert_before`, `insert_after` and `remove` raise `ValueError` if the node they are given is not linked into the list.

## AA tree

```python
from dslib.aatree import AATreeNode, AATree

class IntTreeNode(AATreeNode):
    def __init__(self, val=0):
        super().__init__()
        self.val = val

def less_than(left, right):
    return left.val < right.val

def copy_node(source, target):
    target.val = source.val

tree = AATree(less_than, copy_node, free_node=lambda node: None)

for v in (16, 53, 3, 98, 79):
    tree.insert(IntTreeNode(v))   # returns False if an equal node exists

print(IntTreeNode(53) in tree)       # True
print(tree.contains(IntTreeNode(4))) # False
found = tree.find(IntTreeNode(98))   # the stored node, or None
tree.remove(IntTreeNode(16))         # True if a node was removed
```

`AATree` takes three callbacks:

- `less_than(a, b)` orders the nodes. Two nodes are equal when neither one is less than the other.
- `copy_node(source, target)` copies a node's payload. The tree calls it when it removes a node that has two children: the contents of the leftmost node in the right subtree are copied into the removed node's place.
- `free_node(node)` is optional. If it is given, the tree calls it on every node that it unlinks.

`insert` raises `ValueError` if the node is already linked somewhere, meaning it has children or a level other than 1.

## Limitations

`AATree` only supports lookup, insertion and removal. It does not support iteration, a size count, or ordered traversal.