"""Filename wildcard matching."""

from __future__ import annotations


def matches_pattern(filename: str | None, pattern: str | None) -> bool:
    """Match ``filename`` against ``pattern`` where ``*`` is any run and ``?`` any one character."""
    if pattern is None or filename is None:
        return False

    def at(text: str, index: int) -> str:
        return text[index] if index < len(text) else ""

    f = p = 0
    star: int | None = None
    star_f = 0
    while f < len(filename):
        current = at(pattern, p)
        if current == "*":
            star = p
            p += 1
            star_f = f
        elif current == "?" or (current and current == filename[f]):
            p += 1
            f += 1
        elif star is not None:
            p = star + 1
            star_f += 1
            f = star_f
        else:
            return False

    while at(pattern, p) == "*":
        p += 1
    return p == len(pattern)