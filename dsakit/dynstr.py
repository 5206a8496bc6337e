"""A mutable string that tracks its capacity and grows geometrically."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from dsakit.bits import round_up_pow2

_SIZE_BITS = 64
_SIZE_MAX = (1 << _SIZE_BITS) - 1
# A block holds a two-word header and a terminating NUL besides the characters.
_MAX_CAPACITY = _SIZE_MAX - 2 * 8 - 1

TextLike = "str | DynStr"


def _text(value: Any) -> str:
    if isinstance(value, DynStr):
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"expected str or DynStr, got {type(value).__name__}")


class DynStr:
    """A string that can be edited in place.

    Besides its characters it keeps a capacity: how many characters it can
    hold before it has to grow. Appending grows the capacity to the next
    power of two, so repeated appends reallocate rarely.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: str | DynStr = "", capacity: int | None = None) -> None:
        text = _text(data)
        self._chars = text
        self._capacity = 0
        self.reserve(len(text) if capacity is None else max(capacity, len(text)))

    @classmethod
    def formatted(cls, fmt: str, *args: Any) -> DynStr:
        """Build a string from a printf-style format and its arguments."""
        return cls(fmt % args)

    def capacity(self) -> int:
        """Return how many characters fit before the string must grow."""
        return self._capacity

    def shrink(self) -> None:
        """Reduce the capacity to the current length."""
        self._capacity = len(self._chars)

    def reserve(self, capacity: int) -> None:
        """Raise the capacity to exactly ``capacity`` if it is currently smaller."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if capacity <= self._capacity:
            return
        if capacity > _MAX_CAPACITY:
            raise OverflowError(f"capacity {capacity} is too large")
        self._capacity = capacity

    def reserve2(self, capacity: int) -> None:
        """Raise the capacity to ``capacity`` rounded up to a power of two."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if capacity <= self._capacity:
            return
        if capacity > _SIZE_MAX:
            raise OverflowError(f"capacity {capacity} is too large")
        rounded = round_up_pow2(capacity, _SIZE_BITS)
        if rounded < capacity:
            raise OverflowError(f"capacity {capacity} is too large")
        self.reserve(rounded)

    def _grow(self, delta: int) -> None:
        self.reserve2(len(self._chars) + delta)

    def resize(self, size: int) -> None:
        """Set the length to ``size``; new characters are NUL."""
        if size < 0:
            raise ValueError("size must not be negative")
        self.reserve(size)
        current = len(self._chars)
        if size <= current:
            self._chars = self._chars[:size]
        else:
            self._chars += "\0" * (size - current)

    def clear(self) -> None:
        """Make the string empty, keeping its capacity."""
        self._chars = ""

    def set(self, data: str | DynStr) -> None:
        """Replace the contents with ``data``."""
        text = _text(data)
        self.reserve(len(text))
        self._chars = text

    def push(self, char: str | int) -> None:
        """Append one character, given as a string of length one or a code point."""
        if isinstance(char, int) and not isinstance(char, bool):
            try:
                char = chr(char)
            except (ValueError, OverflowError) as exc:
                raise ValueError(f"invalid code point {char}") from exc
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("push takes exactly one character")
        self._grow(1)
        self._chars += char

    def append(self, text: str | DynStr) -> None:
        """Append ``text`` to the end."""
        addition = _text(text)
        self._grow(len(addition))
        self._chars += addition

    def printf(self, fmt: str, *args: Any) -> None:
        """Append printf-style formatted text."""
        self.append(fmt % args)

    def range(self, start: int, count: int) -> None:
        """Keep only a substring, in place.

        A negative ``start`` counts from the end. A negative ``count`` sets
        the end that many characters before the end of the string.
        """
        size = len(self._chars)
        if start >= 0:
            begin = start
        else:
            begin = size + start if -start <= size else 0
        if count >= 0:
            end = min(begin + count, size)
        else:
            end = size + count if -count <= size else 0
        if begin < end:
            self._chars = self._chars[begin:end]
        else:
            self.clear()

    @staticmethod
    def _charset(chars: str) -> frozenset[str]:
        # The terminating NUL of the set is matched as well.
        return frozenset(chars) | {"\0"}

    def trim_start(self, chars: str) -> None:
        """Remove leading characters found in ``chars`` (and NUL characters)."""
        charset = self._charset(chars)
        i = 0
        while i < len(self._chars) and self._chars[i] in charset:
            i += 1
        self._chars = self._chars[i:]

    def trim_end(self, chars: str) -> None:
        """Remove trailing characters found in ``chars`` (and NUL characters)."""
        charset = self._charset(chars)
        j = len(self._chars)
        while j > 0 and self._chars[j - 1] in charset:
            j -= 1
        self._chars = self._chars[:j]

    def trim(self, chars: str) -> None:
        """Remove leading and trailing characters found in ``chars``."""
        charset = self._charset(chars)
        i = 0
        while i < len(self._chars) and self._chars[i] in charset:
            i += 1
        j = len(self._chars)
        while j > i and self._chars[j - 1] in charset:
            j -= 1
        self._chars = self._chars[i:j]

    def compare(self, other: str | DynStr) -> int:
        """Return -1, 0 or 1 as this string sorts before, equal to or after ``other``."""
        mine = self._chars.encode("utf-8", "surrogatepass")
        theirs = _text(other).encode("utf-8", "surrogatepass")
        return (mine > theirs) - (mine < theirs)

    def join(self, parts: Iterable[str | DynStr], separator: str) -> None:
        """Append ``parts`` joined by ``separator``."""
        texts = [_text(part) for part in parts]
        total = sum(map(len, texts)) + len(separator) * max(len(texts) - 1, 0)
        self.reserve(len(self._chars) + total)
        self._chars += separator.join(texts)

    def has_prefix(self, prefix: str) -> bool:
        """Return whether the string starts with ``prefix``."""
        return self._chars.startswith(prefix)

    def has_suffix(self, suffix: str) -> bool:
        """Return whether the string ends with ``suffix``."""
        return self._chars.endswith(suffix)

    def __str__(self) -> str:
        return self._chars

    def __repr__(self) -> str:
        return f"DynStr({self._chars!r}, capacity={self._capacity})"

    def __len__(self) -> int:
        return len(self._chars)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (str, DynStr)):
            return self.compare(other) == 0
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (str, DynStr)):
            return self.compare(other) < 0
        return NotImplemented