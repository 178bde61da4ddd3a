"""A bounded last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["StackFullError", "StackEmptyError", "Stack"]


class StackFullError(Exception):
    """Raised when pushing onto a stack that is already full."""


class StackEmptyError(Exception):
    """Raised when popping or peeking at an empty stack."""


class Stack:
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackEmptyError("nothing in the stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackEmptyError("nothing in the stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def extend(self, values: Iterable[Any]) -> None:
        """Push every item of ``values`` in order."""
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity}, items={self._items!r})"