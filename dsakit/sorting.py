"""Classic sorting algorithms and binary search over sorted sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any


def _default_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``items`` sorted in ascending order by bubble sort."""
    result = list(items)
    unsorted_end = len(result) - 1
    swapped = True
    while swapped and unsorted_end > 0:
        swapped = False
        for i in range(unsorted_end):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
        unsorted_end -= 1
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``items`` sorted in ascending order by selection sort."""
    result = list(items)
    size = len(result)
    for i in range(size - 1):
        lowest = min(range(i, size), key=result.__getitem__)
        if lowest != i:
            result[i], result[lowest] = result[lowest], result[i]
    return result


def quick_sort(
    items: Iterable[Any], compare: Callable[[Any, Any], int] | None = None
) -> list[Any]:
    """Return a new list sorted by an iterative quicksort.

    ``compare(a, b)`` behaves like ``strcmp``: negative when ``a`` sorts
    before ``b``. By default values are compared with ``<`` and ``>``.
    """
    cmp = compare or _default_compare
    arr = list(items)
    if len(arr) <= 1:
        return arr
    pending = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        pivot = arr[high]
        i = low - 1
        for j in range(low, high):
            if cmp(arr[j], pivot) < 0:
                i += 1
                arr[i], arr[j] = arr[j], arr[i]
        p = i + 1
        arr[p], arr[high] = arr[high], arr[p]
        if p - 1 > low:
            pending.append((low, p - 1))
        if p + 1 < high:
            pending.append((p + 1, high))
    return arr


def binary_search(items: Sequence[Any], value: Any) -> int:
    """Return the index of ``value`` in the ascending sequence ``items``.

    Raises ``ValueError`` when the value is absent.
    """
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        current = items[mid]
        if value == current:
            return mid
        if value < current:
            right = mid - 1
        else:
            left = mid + 1
    raise ValueError(f"{value!r} is not in the sequence")