"""A fixed-capacity array with positional insert, update and delete."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["ArrayFullError", "BoundedArray"]


class ArrayFullError(Exception):
    """Raised when an insert would exceed the array's capacity."""


class BoundedArray:
    """A sequence that never holds more than ``capacity`` items."""

    def __init__(self, capacity: int = 100, items: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items = list(items)
        if len(self._items) > capacity:
            raise ArrayFullError(
                f"{len(self._items)} items do not fit in capacity {capacity}"
            )
        self.capacity = capacity

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` at ``index`` (0..len), shifting later items right."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        if len(self._items) >= self.capacity:
            raise ArrayFullError("array is full")
        self._items.insert(index, value)

    def update(self, index: int, value: Any) -> None:
        """Replace the item at ``index``."""
        self._check_index(index)
        self._items[index] = value

    def delete(self, index: int) -> Any:
        """Remove and return the item at ``index``, shifting later items left."""
        self._check_index(index)
        return self._items.pop(index)

    def find(self, value: Any) -> int | None:
        """Return the index of the last item equal to ``value``, or None."""
        found = None
        for i, item in enumerate(self._items):
            if item == value:
                found = i
        return found

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundedArray):
            return self.capacity == other.capacity and self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"BoundedArray(capacity={self.capacity}, items={self._items!r})"