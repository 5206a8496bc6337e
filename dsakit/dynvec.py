"""A growable vector that tracks its capacity explicitly."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

_SIZE_MAX = (1 << 64) - 1
_INITIAL_CAPACITY = 16


class DynVec:
    """A sequence whose capacity doubles when full, starting at 16."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._data: list[Any] = []
        self._capacity = 0
        for item in items:
            self.push(item)

    def push(self, item: Any) -> None:
        """Append ``item``, doubling the capacity when the vector is full."""
        if len(self._data) >= self._capacity:
            if self._capacity > _SIZE_MAX // 2:
                raise OverflowError("vector capacity overflow")
            self.reserve(self._capacity * 2 if self._capacity else _INITIAL_CAPACITY)
        self._data.append(item)

    def reserve(self, capacity: int) -> None:
        """Raise the capacity to at least ``capacity``; never shrink it."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if capacity > _SIZE_MAX:
            raise OverflowError(f"capacity {capacity} is too large")
        if capacity > self._capacity:
            self._capacity = capacity

    def resize(self, size: int, fill: Any = None) -> None:
        """Set the length to ``size``, padding new slots with ``fill``."""
        if size < 0:
            raise ValueError("size must not be negative")
        self.reserve(size)
        if size < len(self._data):
            del self._data[size:]
        else:
            self._data.extend([fill] * (size - len(self._data)))

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._data.clear()

    def capacity(self) -> int:
        """Return how many elements fit before the next growth."""
        return self._capacity

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return self._data[index]
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        if isinstance(index, slice):
            raise TypeError("slice assignment is not supported")
        self._data[index] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)