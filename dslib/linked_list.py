"""Intrusive doubly linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, Optional, TypeVar


class ListNode:
    """Base class for nodes stored in a :class:`LinkedList`."""

    __slots__ = ("prev", "next")

    def __init__(
        self, next: Optional[ListNode] = None, prev: Optional[ListNode] = None
    ) -> None:
        self.prev = prev
        self.next = next


N = TypeVar("N", bound=ListNode)


class LinkedList(Generic[N]):
    """A sequence of nodes linked through their ``prev`` and ``next`` fields.

    Nodes added to the list are owned by it: :meth:`clear` hands every
    remaining node to ``free_node``. A node taken out with :meth:`remove`
    is no longer owned by the list.
    """

    def __init__(self, free_node: Optional[Callable[[N], None]] = None) -> None:
        self._free_node = free_node
        self._head: Optional[N] = None
        self._tail: Optional[N] = None

    def next(self, node: N) -> Optional[N]:
        """Return the node after ``node``, or None at the tail."""
        return node.next  # type: ignore[return-value]

    def prev(self, node: N) -> Optional[N]:
        """Return the node before ``node``, or None at the head."""
        return node.prev  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._head is None

    def first(self) -> N:
        """Return the first node; raise IndexError if the list is empty."""
        if self._head is None:
            raise IndexError("first() on an empty list")
        return self._head

    def last(self) -> N:
        """Return the last node; raise IndexError if the list is empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail

    def append(self, node: N) -> None:
        if self._tail is None:
            self._add_initial_node(node)
            return
        self._tail.next = node
        node.prev = self._tail
        node.next = None
        self._tail = node

    def prepend(self, node: N) -> None:
        if self._head is None:
            self._add_initial_node(node)
            return
        self._head.prev = node
        node.next = self._head
        node.prev = None
        self._head = node

    def insert_before(self, node_to_insert: N, existing: N) -> None:
        """Insert ``node_to_insert`` immediately before ``existing``."""
        if existing is self._head:
            if existing.prev is not None:
                raise ValueError("list head has a predecessor")
            self.prepend(node_to_insert)
            return
        prev = existing.prev
        if prev is None:
            raise ValueError("node is not a member of this list")
        prev.next = node_to_insert
        node_to_insert.prev = prev
        node_to_insert.next = existing
        existing.prev = node_to_insert

    def insert_after(self, node_to_insert: N, existing: N) -> None:
        """Insert ``node_to_insert`` immediately after ``existing``."""
        if existing is self._tail:
            if existing.next is not None:
                raise ValueError("list tail has a successor")
            self.append(node_to_insert)
            return
        nxt = existing.next
        if nxt is None:
            raise ValueError("node is not a member of this list")
        existing.next = node_to_insert
        node_to_insert.prev = existing
        node_to_insert.next = nxt
        nxt.prev = node_to_insert

    def remove(self, node_to_remove: N) -> None:
        """Unlink a node; the caller becomes responsible for it."""
        if node_to_remove is self._head:
            if node_to_remove.prev is not None:
                raise ValueError("list head has a predecessor")
            self._head = node_to_remove.next  # type: ignore[assignment]
            if self._head is None:
                self._tail = None
            else:
                self._head.prev = None
        elif node_to_remove is self._tail:
            if node_to_remove.next is not None:
                raise ValueError("list tail has a successor")
            self._tail = node_to_remove.prev  # type: ignore[assignment]
            if self._tail is None:
                self._head = None
            else:
                self._tail.next = None
        else:
            prev, nxt = node_to_remove.prev, node_to_remove.next
            if prev is None or nxt is None:
                raise ValueError("node is not a member of this list")
            prev.next = nxt
            nxt.prev = prev

        node_to_remove.prev = None
        node_to_remove.next = None

    def clear(self) -> None:
        """Empty the list, passing each node to the free function in order."""
        node = self._head
        self._head = self._tail = None
        while node is not None:
            following = node.next
            node.prev = node.next = None
            if self._free_node is not None:
                self._free_node(node)  # type: ignore[arg-type]
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[N]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following  # type: ignore[assignment]

    def __reversed__(self) -> Iterator[N]:
        node = self._tail
        while node is not None:
            preceding = node.prev
            yield node
            node = preceding  # type: ignore[assignment]

    def _add_initial_node(self, node: N) -> None:
        self._head = self._tail = node
        node.next = None
        node.prev = None