"""An unbalanced binary search tree of comparable values."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, TextIO


@dataclass
class Leaf:
    """A tree node."""

    data: Any
    left: Leaf | None = None
    right: Leaf | None = None


class BinarySearchTree:
    """A binary search tree; equal values go into the left subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Leaf | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> Leaf:
        """Insert ``value`` and return the new node."""
        node = Leaf(value)
        self._size += 1
        if self.root is None:
            self.root = node
            return node
        current = self.root
        while True:
            if value <= current.data:
                if current.left is None:
                    current.left = node
                    return node
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return node
                current = current.right

    def search(self, value: Any) -> Leaf | None:
        """Return the node holding ``value``, or ``None`` if there is none."""
        current = self.root
        while current is not None and current.data != value:
            current = current.left if value < current.data else current.right
        return current

    def delete(self, value: Any) -> bool:
        """Remove one occurrence of ``value``; return whether anything was removed.

        A node with two children takes the value of its in-order successor,
        which is then unlinked.
        """
        parent: Leaf | None = None
        node = self.root
        while node is not None and node.data != value:
            parent = node
            node = node.left if value < node.data else node.right
        if node is None:
            return False

        if node.left is None or node.right is None:
            child = node.right if node.left is None else node.left
            if parent is None:
                self.root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        else:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.data = succ.data
            if succ_parent is node:
                succ_parent.right = succ.right
            else:
                succ_parent.left = succ.right
        self._size -= 1
        return True

    def clear(self) -> None:
        """Remove every node."""
        self.root = None
        self._size = 0

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def __iter__(self) -> Iterator[Any]:
        pending: list[Leaf] = []
        current = self.root
        while pending or current is not None:
            while current is not None:
                pending.append(current)
                current = current.left
            current = pending.pop()
            yield current.data
            current = current.right

    def __len__(self) -> int:
        return self._size

    def print_in_order(self, file: TextIO | None = None) -> None:
        """Print the values in ascending order, each followed by a space."""
        out = file if file is not None else sys.stdout
        for value in self:
            out.write(f"{value} ")


def _describe_search(tree: BinarySearchTree, value: Any) -> str:
    node = tree.search(value)
    if node is None:
        return f"value {value} not found"
    return f"value {value} found: {node.data}"


def main(argv: list[str] | None = None) -> int:
    """Build a small demonstration tree and print what happens to it."""
    tree = BinarySearchTree([10, 7, 12, 13, 11])
    tree.delete(12)
    root = tree.root
    assert root is not None and root.left is not None and root.right is not None
    print(f"root: {root.data} left: {root.left.data} right: {root.right.data}")
    print(_describe_search(tree, 12))
    print(_describe_search(tree, 15))
    tree.insert(6)
    print(f"New value {root.left.left.data}")
    tree.print_in_order()
    print()
    tree.clear()
    print(f"size after clear: {len(tree)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())