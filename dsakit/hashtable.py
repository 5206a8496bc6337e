"""A generic hash table with open addressing and triangular probing."""

from __future__ import annotations

import operator
from collections.abc import Callable, Hashable, Iterator
from enum import Enum
from typing import Any

from dsakit.bits import round_up_pow2

_SIZE_BITS = 64
_SIZE_MASK = (1 << _SIZE_BITS) - 1


def int_hash(value: int) -> int:
    """Hash an integer by reinterpreting it as an unsigned 64-bit value."""
    return value & _SIZE_MASK


def str_hash(text: str) -> int:
    """Hash a string with the ``h * 31 + c`` scheme over its UTF-8 bytes.

    Bytes are taken as signed characters, and hashing stops at the first
    NUL character, as it would for a C string.
    """
    data = text.encode("utf-8").split(b"\0", 1)[0]
    h = 0
    for byte in data:
        signed = byte - 256 if byte >= 128 else byte
        h = (h * 31 + signed) & _SIZE_MASK
    return h


def hash_combine(a: int, b: int) -> int:
    """Combine two hash values into one, for composite keys."""
    a &= _SIZE_MASK
    b &= _SIZE_MASK
    return a ^ ((b + 0x9E3779B9 + (a << 6) + (a >> 2)) & _SIZE_MASK)


def _default_hash(key: Hashable) -> int:
    if isinstance(key, str):
        return str_hash(key)
    if isinstance(key, int):
        return int_hash(key)
    return hash(key) & _SIZE_MASK


class _Slot(Enum):
    EMPTY = 0
    OCCUPIED = 1
    DELETED = 2


class HashTable:
    """A mapping stored in a power-of-two array of slots.

    Deleted slots are kept as tombstones until the next rehash. The table
    grows so that occupied plus deleted slots never exceed 75% of capacity.
    """

    def __init__(
        self,
        hash_func: Callable[[Any], int] | None = None,
        eq_func: Callable[[Any, Any], bool] | None = None,
    ) -> None:
        self._hash = hash_func or _default_hash
        self._eq = eq_func or operator.eq
        self._size = 0
        self._used = 0
        self._max_used = 0
        self._capacity = 0
        self._flags: list[_Slot] = []
        self._keys: list[Any] = []
        self._values: list[Any] = []

    def reserve(self, capacity: int) -> None:
        """Grow the table so that it can hold at least ``capacity`` used slots.

        Raises ``OverflowError`` when the capacity does not fit in 64 bits.
        """
        if capacity <= self._max_used:
            return
        if capacity > _SIZE_MASK:
            raise OverflowError(f"capacity {capacity} is too large")
        new_capacity = round_up_pow2(capacity, _SIZE_BITS)
        if new_capacity < capacity:
            raise OverflowError(f"capacity {capacity} is too large")
        new_max_used = (new_capacity >> 1) + (new_capacity >> 2)
        if new_max_used < capacity:
            new_capacity = (new_capacity << 1) & _SIZE_MASK
            if new_capacity < capacity:
                raise OverflowError(f"capacity {capacity} is too large")
            new_max_used = (new_capacity >> 1) + (new_capacity >> 2)

        flags = [_Slot.EMPTY] * new_capacity
        keys: list[Any] = [None] * new_capacity
        values: list[Any] = [None] * new_capacity
        mask = new_capacity - 1
        for state, key, value in zip(self._flags, self._keys, self._values):
            if state is not _Slot.OCCUPIED:
                continue
            j = self._hash(key) & mask
            step = 0
            while flags[j] is not _Slot.EMPTY:
                step += 1
                j = (j + step) & mask
            flags[j] = _Slot.OCCUPIED
            keys[j] = key
            values[j] = value

        self._flags = flags
        self._keys = keys
        self._values = values
        self._capacity = new_capacity
        self._used = self._size
        self._max_used = new_max_used

    def _find(self, key: Any) -> int | None:
        if not self._size:
            return None
        mask = self._capacity - 1
        i = self._hash(key) & mask
        step = 0
        while True:
            state = self._flags[i]
            if state is _Slot.EMPTY:
                return None
            if state is _Slot.OCCUPIED and self._eq(self._keys[i], key):
                return i
            step += 1
            i = (i + step) & mask

    def _probe_for_insert(self, key: Any) -> tuple[int, bool]:
        mask = self._capacity - 1
        i = self._hash(key) & mask
        step = 0
        tombstone: int | None = None
        while True:
            state = self._flags[i]
            if state is _Slot.EMPTY:
                return (i if tombstone is None else tombstone), False
            if state is _Slot.OCCUPIED and self._eq(self._keys[i], key):
                return i, True
            if state is _Slot.DELETED and tombstone is None:
                tombstone = i
            step += 1
            i = (i + step) & mask

    def _insert(self, key: Any) -> tuple[int, bool]:
        self.reserve(self._used + 1 if self._used else 2)
        index, found = self._probe_for_insert(key)
        if not found:
            if self._flags[index] is _Slot.EMPTY:
                self._used += 1
            self._flags[index] = _Slot.OCCUPIED
            self._keys[index] = key
            self._size += 1
        return index, found

    def put(self, key: Any, value: Any) -> bool:
        """Insert ``key`` with ``value`` if absent; return whether it was inserted.

        An existing key keeps its current value.
        """
        index, found = self._insert(key)
        if not found:
            self._values[index] = value
        return not found

    def __getitem__(self, key: Any) -> Any:
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        return self._values[index]

    def __setitem__(self, key: Any, value: Any) -> None:
        index, _ = self._insert(key)
        self._values[index] = value

    def __delitem__(self, key: Any) -> None:
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        self._flags[index] = _Slot.DELETED
        self._keys[index] = None
        self._values[index] = None
        self._size -= 1

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield keys in slot order; deleting the current key is allowed."""
        for state, key in zip(self._flags, self._keys):
            if state is _Slot.OCCUPIED:
                yield key

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        """Remove every entry, keeping the allocated capacity."""
        self._size = 0
        self._used = 0
        self._flags = [_Slot.EMPTY] * self._capacity
        self._keys = [None] * self._capacity
        self._values = [None] * self._capacity

    def capacity(self) -> int:
        """Return the number of slots."""
        return self._capacity

    def used(self) -> int:
        """Return the number of occupied plus deleted slots."""
        return self._used

    def max_used(self) -> int:
        """Return how many slots may be used before the table grows."""
        return self._max_used