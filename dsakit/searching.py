"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["linear_search", "recursive_linear_search", "binary_search"]


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first item equal to ``target``, or None."""
    return next((i for i, item in enumerate(values) if item == target), None)


def recursive_linear_search(
    values: Sequence[Any], target: Any, start: int = 0
) -> int | None:
    """Search recursively from ``start``; return the first matching index or None."""
    if start < 0:
        raise ValueError("start must not be negative")
    if start >= len(values):
        return None
    if values[start] == target:
        return start
    return recursive_linear_search(values, target, start + 1)


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Search an ascending sequence; return an index holding ``target`` or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None