"""First-in, first-out queues: unbounded, linear bounded and circular."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

__all__ = ["QueueFullError", "QueueEmptyError", "Queue", "LinearQueue", "CircularQueue"]


class QueueFullError(Exception):
    """Raised when adding to a queue that has no room left."""


class QueueEmptyError(Exception):
    """Raised when removing from an empty queue."""


class Queue:
    """An unbounded queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise QueueEmptyError("deletion is not possible: queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


class LinearQueue:
    """A bounded queue whose slots are not reused once dequeued.

    At most ``capacity`` items can ever be enqueued, no matter how many have
    been removed since.
    """

    def __init__(self, capacity: int = 50) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._enqueued = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back while unused slots remain."""
        if self._enqueued >= self.capacity:
            raise QueueFullError("queue is full")
        self._items.append(value)
        self._enqueued += 1

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinearQueue(capacity={self.capacity}, items={list(self._items)!r})"


class CircularQueue:
    """A bounded queue over a ring buffer; dequeued slots are reused."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        if self._size == self.capacity:
            raise QueueFullError("queue is full")
        self._slots[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self._size == 0:
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (
            self._slots[(self._front + offset) % self.capacity]
            for offset in range(self._size)
        )

    def __repr__(self) -> str:
        return f"CircularQueue(capacity={self.capacity}, items={list(self)!r})"