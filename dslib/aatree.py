"""Intrusive AA tree: a balanced binary search tree of caller-defined nodes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, Optional, TypeVar


class AATreeNode:
    """Base class for nodes stored in an :class:`AATree`."""

    __slots__ = ("left", "right", "level")

    def __init__(self) -> None:
        self.left: Optional[AATreeNode] = None
        self.right: Optional[AATreeNode] = None
        self.level = 1

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


N = TypeVar("N", bound=AATreeNode)


def _level(node: Optional[AATreeNode]) -> int:
    return 0 if node is None else node.level


def _skew(t: Optional[AATreeNode]) -> Optional[AATreeNode]:
    """Rotate right when ``t`` has a left child on its own level."""
    if t is None or t.left is None or t.left.level != t.level:
        return t
    left = t.left
    t.left = left.right
    left.right = t
    return left


def _split(t: Optional[AATreeNode]) -> Optional[AATreeNode]:
    """Rotate left and raise the middle node when two right links are horizontal."""
    if t is None or t.right is None or t.right.right is None:
        return t
    if t.right.right.level != t.level:
        return t
    right = t.right
    t.right = right.left
    right.left = t
    right.level += 1
    return right


def _rebalance(t: AATreeNode) -> AATreeNode:
    """Restore the AA invariants at ``t`` after a removal beneath it."""
    should_be = min(_level(t.left), _level(t.right)) + 1
    if should_be < t.level:
        t.level = should_be
        if t.right is not None and should_be < t.right.level:
            t.right.level = should_be
    t = _skew(t)
    t.right = _skew(t.right)
    if t.right is not None:
        t.right.right = _skew(t.right.right)
    t = _split(t)
    t.right = _split(t.right)
    return t


class AATree(Generic[N]):
    """Balanced binary search tree holding nodes derived from :class:`AATreeNode`.

    ``less_than(a, b)`` orders nodes; two nodes neither of which is less
    than the other are equal. When a node with two children is removed,
    the leftmost node of its right subtree is chosen as a victim:
    ``copy_node(victim, target)`` copies the victim's contents into the
    removed node's place and the victim itself is passed to ``free_node``.
    """

    def __init__(
        self,
        less_than: Callable[[N, N], bool],
        copy_node: Callable[[N, N], None],
        free_node: Optional[Callable[[N], None]] = None,
    ) -> None:
        self._less_than = less_than
        self._copy_node = copy_node
        self._free_node = free_node
        self._root: Optional[N] = None

    def insert(self, node: N) -> bool:
        """Insert ``node``; return False if an equal node is already present."""
        if node.left is not None or node.right is not None or node.level != 1:
            raise ValueError("node is not in its initial state")
        self._root, inserted = self._insert(self._root, node)
        return inserted

    def find(self, node: N) -> Optional[N]:
        """Return the stored node equal to ``node``, or None."""
        p = self._root
        while p is not None:
            if self._less_than(node, p):
                p = p.left  # type: ignore[assignment]
            elif self._less_than(p, node):
                p = p.right  # type: ignore[assignment]
            else:
                return p
        return None

    def contains(self, node: N) -> bool:
        return self.find(node) is not None

    def __contains__(self, node: object) -> bool:
        return self.contains(node)  # type: ignore[arg-type]

    def remove(self, node: N) -> bool:
        """Remove the stored node equal to ``node``; return False if absent."""
        self._root, removed = self._remove(self._root, node)
        return removed

    def _insert(self, t: Optional[N], node: N) -> tuple[N, bool]:
        if t is None:
            return node, True
        if self._less_than(node, t):
            t.left, inserted = self._insert(t.left, node)  # type: ignore[arg-type]
        elif self._less_than(t, node):
            t.right, inserted = self._insert(t.right, node)  # type: ignore[arg-type]
        else:
            return t, False
        if inserted:
            t = _split(_skew(t))  # type: ignore[assignment]
        return t, inserted

    def _remove(self, t: Optional[N], key: N) -> tuple[Optional[N], bool]:
        if t is None:
            return None, False
        if self._less_than(key, t):
            t.left, removed = self._remove(t.left, key)  # type: ignore[arg-type]
        elif self._less_than(t, key):
            t.right, removed = self._remove(t.right, key)  # type: ignore[arg-type]
        elif t.left is None or t.right is None:
            child = t.left if t.left is not None else t.right
            self._release(t)
            return child, True  # type: ignore[return-value]
        else:
            t.right = self._remove_leftmost(t.right, t)  # type: ignore[arg-type]
            removed = True
        if removed:
            t = _rebalance(t)  # type: ignore[assignment]
        return t, removed

    def _remove_leftmost(self, t: N, target: N) -> Optional[AATreeNode]:
        if t.left is None:
            self._copy_node(t, target)
            right = t.right
            self._release(t)
            return right
        t.left = self._remove_leftmost(t.left, target)  # type: ignore[arg-type]
        return _rebalance(t)

    def _release(self, node: N) -> None:
        node.left = node.right = None
        node.level = 1
        if self._free_node is not None:
            self._free_node(node)