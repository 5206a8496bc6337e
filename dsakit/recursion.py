"""Small recursive exercises, written to run without deep recursion."""

from __future__ import annotations

from collections.abc import Iterable


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def ladder(n: int) -> int:
    """Count the ways to climb ``n`` steps taking 1, 2 or 3 steps at a time."""
    if n < 0:
        return 0
    # f(-1), f(0), f(1)
    before_prev, prev, current = 0, 1, 1
    if n <= 1:
        return 1
    for _ in range(2, n + 1):
        before_prev, prev, current = prev, current, current + prev + before_prev
    return current


def num_of_symbols(strings: Iterable[str]) -> int:
    """Return the total number of characters in all ``strings``."""
    return sum(len(s) for s in strings)


def filter_even(numbers: Iterable[int]) -> list[int]:
    """Return the even numbers of ``numbers``, in their original order."""
    return [n for n in numbers if n % 2 == 0]


def triangle_numbers(n: int) -> int:
    """Return the ``n``-th triangle number, or 0 when ``n`` is below 1."""
    if n < 1:
        return 0
    return n * (n + 1) // 2