"""A generic hash set with open addressing and triangular probing."""

from __future__ import annotations

import operator
from collections.abc import Callable, Hashable, Iterable, Iterator
from enum import Enum
from typing import Any

from dsakit.bits import round_up_pow2
from dsakit.hashtable import int_hash, str_hash

_SIZE_BITS = 64
_SIZE_MASK = (1 << _SIZE_BITS) - 1


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


class HashSet:
    """A set of keys stored in a power-of-two array of slots.

    Deleted slots are kept as tombstones until the next rehash. The set
    grows so that occupied plus deleted slots never exceed 75% of capacity.
    """

    def __init__(
        self,
        hash_func: Callable[[Any], int] | None = None,
        eq_func: Callable[[Any, Any], bool] | None = None,
        items: Iterable[Any] = (),
    ) -> None:
        self._hash = hash_func or _default_hash
        self._eq = eq_func or operator.eq
        self._size = 0
        self._used = 0
        self._max_used = 0
        self._capacity = 0
        self._flags: list[_Slot] = []
        self._keys: list[Any] = []
        for item in items:
            self.add(item)

    def reserve(self, capacity: int) -> None:
        """Grow the set so that it can hold at least ``capacity`` used slots.

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
        mask = new_capacity - 1
        for state, key in zip(self._flags, self._keys):
            if state is not _Slot.OCCUPIED:
                continue
            j = self._hash(key) & mask
            step = 0
            while flags[j] is not _Slot.EMPTY:
                step += 1
                j = (j + step) & mask
            flags[j] = _Slot.OCCUPIED
            keys[j] = key

        self._flags = flags
        self._keys = keys
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

    def add(self, key: Any) -> bool:
        """Insert ``key`` if absent; return whether it was inserted."""
        self.reserve(self._used + 1 if self._used else 2)
        index, found = self._probe_for_insert(key)
        if found:
            return False
        if self._flags[index] is _Slot.EMPTY:
            self._used += 1
        self._flags[index] = _Slot.OCCUPIED
        self._keys[index] = key
        self._size += 1
        return True

    def discard(self, key: Any) -> bool:
        """Remove ``key`` if present; return whether it was removed."""
        index = self._find(key)
        if index is None:
            return False
        self._flags[index] = _Slot.DELETED
        self._keys[index] = None
        self._size -= 1
        return True

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield keys in slot order; discarding the current key is allowed."""
        for state, key in zip(self._flags, self._keys):
            if state is _Slot.OCCUPIED:
                yield key

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        """Remove every key, keeping the allocated capacity."""
        self._size = 0
        self._used = 0
        self._flags = [_Slot.EMPTY] * self._capacity
        self._keys = [None] * self._capacity

    def capacity(self) -> int:
        """Return the number of slots."""
        return self._capacity

    def used(self) -> int:
        """Return the number of occupied plus deleted slots."""
        return self._used

    def max_used(self) -> int:
        """Return how many slots may be used before the set grows."""
        return self._max_used