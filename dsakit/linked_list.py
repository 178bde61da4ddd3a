"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["LinkedList"]


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: _Node | None = None) -> None:
        self.data = data
        self.next = next


class LinkedList:
    """A singly linked list supporting front and back insertion and removal by key."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def find(self, value: Any) -> int | None:
        """Return the 0-based position of the first node holding ``value``, or None."""
        return next(
            (i for i, node in enumerate(self._nodes()) if node.data == value), None
        )

    def _unlink(self, prev: _Node | None, node: _Node) -> Any:
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._size -= 1
        return node.data

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        prev = None
        for node in self._nodes():
            if node.data == value:
                self._unlink(prev, node)
                return
            prev = node
        raise ValueError(f"{value!r} not found in the list")

    def insert_after(self, key: Any, value: Any) -> None:
        """Insert ``value`` right after the first node holding ``key``."""
        for node in self._nodes():
            if node.data == key:
                node.next = _Node(value, node.next)
                if node is self._tail:
                    self._tail = node.next
                self._size += 1
                return
        raise ValueError(f"{key!r} not found in the list")

    def delete_at(self, index: int) -> Any:
        """Remove and return the value at 0-based ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of bounds")
        prev = None
        for position, node in enumerate(self._nodes()):
            if position == index:
                return self._unlink(prev, node)
            prev = node
        raise IndexError(f"index {index} out of bounds")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LinkedList):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"