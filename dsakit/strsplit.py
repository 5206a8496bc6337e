"""Splitting text into dynamic strings and joining them back."""

from __future__ import annotations

from collections.abc import Iterable

from dsakit.dynstr import DynStr


def str_split(text: str, separator: str, max_split: int = 0) -> list[DynStr]:
    """Split ``text`` on every occurrence of ``separator``.

    When ``max_split`` is greater than zero, at most ``max_split`` parts are
    returned and the last one holds the rest of the text unsplit. A text
    without the separator yields a single part. The separator must not be
    empty.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    parts: list[DynStr] = []
    begin = 0
    while max_split <= 0 or len(parts) < max_split - 1:
        end = text.find(separator, begin)
        if end < 0:
            break
        parts.append(DynStr(text[begin:end]))
        begin = end + len(separator)
    parts.append(DynStr(text[begin:]))
    return parts


def join_list(
    parts: Iterable[str | DynStr], separator: str, dest: DynStr | None = None
) -> DynStr:
    """Join ``parts`` with ``separator``.

    When ``dest`` is given the joined text is appended to it and ``dest`` is
    returned; otherwise a new string is built.
    """
    result = DynStr() if dest is None else dest
    result.join(parts, separator)
    return result