"""A doubly linked list whose nodes stay addressable while the list changes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a :class:`DoubleLinkedList`, holding a mutable value."""

    value: Any
    next: Node | None = field(default=None, repr=False)
    prev: Node | None = field(default=None, repr=False)


class DoubleLinkedList:
    """Doubly linked list with constant-time insertion and removal at known nodes."""

    def __init__(self) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0

    @property
    def head(self) -> Node | None:
        """The first node, or None when the list is empty."""
        return self._head

    @property
    def tail(self) -> Node | None:
        """The last node, or None when the list is empty."""
        return self._tail

    def add_head(self, value: Any) -> Node:
        """Insert ``value`` at the front and return its node."""
        node = Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1
        return node

    def add_tail(self, value: Any) -> Node:
        """Append ``value`` at the end and return its node."""
        node = Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1
        return node

    def insert(self, value: Any, before: Node | None = None) -> Node:
        """Insert ``value`` before the node ``before``; at the head when it is None."""
        if before is None or before is self._head:
            return self.add_head(value)
        node = Node(value, next=before, prev=before.prev)
        assert before.prev is not None
        before.prev.next = node
        before.prev = node
        self._size += 1
        return node

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``; do nothing if there is none."""
        node = self.find_node(value)
        if node is not None:
            self.remove_node(node)

    def remove_node(self, node: Node) -> None:
        """Unlink ``node`` from the list."""
        if node.prev is None and node is not self._head:
            raise ValueError("node is not in this list")
        prev, nxt = node.prev, node.next
        if prev is None:
            self._head = nxt
        else:
            prev.next = nxt
        if nxt is None:
            self._tail = prev
        else:
            nxt.prev = prev
        node.next = node.prev = None
        self._size -= 1

    def clear(self) -> None:
        """Remove every node."""
        for node in list(self.nodes()):
            node.next = node.prev = None
        self._head = self._tail = None
        self._size = 0

    def find_node(self, value: Any) -> Node | None:
        """Return the first node whose value equals ``value``, or None."""
        return next((node for node in self.nodes() if node.value == value), None)

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def move_tail_after_head(self) -> None:
        """Relink the tail node so that it directly follows the head."""
        if self._size < 3:
            raise ValueError("moving the tail after the head needs at least three nodes")
        head, tail = self._head, self._tail
        assert head is not None and tail is not None and tail.prev is not None
        assert head.next is not None
        new_tail = tail.prev
        new_tail.next = None
        tail.next = head.next
        head.next.prev = tail
        tail.prev = head
        head.next = tail
        self._tail = new_tail

    def __contains__(self, value: object) -> bool:
        return self.find_node(value) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"