"""A first-in, first-out queue."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any, TextIO


class Queue:
    """A FIFO queue; iteration runs from the front to the back."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque()
        for item in items:
            self.enqueue(item)

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the back of the queue."""
        self._items.append(data)

    def dequeue(self) -> Any:
        """Remove and return the front element; raise ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def show(self, file: TextIO | None = None) -> None:
        """Print every element, front first, one per line."""
        out = file if file is not None else sys.stdout
        for item in self:
            print(item, file=out)