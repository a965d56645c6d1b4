"""A singly linked list whose nodes can be addressed directly."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Node", "SList"]


@dataclass(eq=False)
class Node:
    """One link of an :class:`SList`."""

    value: Any
    next: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class SList:
    """A singly linked list."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in items:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _tail(self) -> Node | None:
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def push_back(self, value: Any) -> Node:
        """Append ``value`` and return its node."""
        node = Node(value)
        tail = self._tail()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def push_front(self, value: Any) -> Node:
        """Prepend ``value`` and return its node."""
        self.head = Node(value, self.head)
        return self.head

    def insert(self, pos: Node | None, value: Any) -> Node:
        """Insert ``value`` before node ``pos``; None means at the end.

        Raises ValueError if ``pos`` is not a node of this list.
        """
        if pos is None:
            return self.push_back(value)
        if pos is self.head:
            return self.push_front(value)
        for node in self._nodes():
            if node.next is pos:
                node.next = Node(value, pos)
                return node.next
        raise ValueError("node is not in this list")

    def find(self, value: Any) -> Node | None:
        """Return the first node holding ``value``, or None."""
        for node in self._nodes():
            if node.value == value:
                return node
        return None

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        if self.head.next is None:
            value = self.head.value
            self.head = None
            return value
        prev = self.head
        while prev.next is not None and prev.next.next is not None:
            prev = prev.next
        last = prev.next
        prev.next = None
        return last.value

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        return node.value

    def erase(self, pos: Node) -> Any:
        """Unlink node ``pos`` and return its value.

        Raises ValueError if ``pos`` is not a node of this list.
        """
        if self.head is None:
            raise IndexError("erase from an empty list")
        if pos is self.head:
            return self.pop_front()
        for node in self._nodes():
            if node.next is pos:
                node.next = pos.next
                pos.next = None
                return pos.value
        raise ValueError("node is not in this list")

    def insert_after(self, pos: Node, value: Any) -> Node:
        """Insert ``value`` right after node ``pos`` and return the new node."""
        pos.next = Node(value, pos.next)
        return pos.next

    def erase_after(self, pos: Node) -> Any:
        """Unlink the node following ``pos`` and return its value."""
        following = pos.next
        if following is None:
            raise ValueError("no node after the given one")
        pos.next = following.next
        following.next = None
        return following.value

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"SList({list(self)!r})"