"""A last-in, first-out stack."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Any, TextIO


class Stack:
    """A LIFO stack; iteration runs from the top down."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for item in items:
            self.push(item)

    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top element; raise ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def show(self, file: TextIO | None = None) -> None:
        """Print every element, top first, one per line."""
        out = file if file is not None else sys.stdout
        for item in self:
            print(item, file=out)