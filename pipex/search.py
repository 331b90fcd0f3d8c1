"""Searching and comparing text and byte sequences.

Text functions treat an embedded NUL character as the end of the string,
so only the part before it is searched or compared. Positions are
returned as indices into the given string, or ``None`` when nothing is
found.
"""

from __future__ import annotations

from itertools import islice, zip_longest

_NUL = "\0"


def _terminated(s: str) -> str:
    """Return the part of *s* before the first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _check_count(n: int, name: str = "n") -> int:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    return n


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL (or the end)."""
    return len(_terminated(s))


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first *c* in *s*, or ``None``.

    Searching for NUL finds the end of the string.
    """
    text = _terminated(s)
    if _single_char(c) == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last *c* in *s*, or ``None``.

    Searching for NUL finds the end of the string.
    """
    text = _terminated(s)
    if _single_char(c) == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find *needle* within the first *length* characters of *haystack*.

    An empty needle matches at index 0. Returns the index of the first
    match that lies wholly inside the window, or ``None``.
    """
    _check_count(length, "length")
    pattern = _terminated(needle)
    if not pattern:
        return 0
    window = _terminated(haystack)[:length]
    if len(pattern) > len(window):
        return None
    index = window.find(pattern)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the first pair of differing character
    codes, the shorter string counting as NUL past its end, or 0 when
    the compared parts are equal.
    """
    _check_count(n)
    pairs = zip_longest(_terminated(s1), _terminated(s2), fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def _check_span(data: bytes, n: int) -> None:
    _check_count(n)
    if n > len(data):
        raise ValueError(f"cannot examine {n} bytes of a {len(data)}-byte buffer")


def memchr(data: bytes, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to *value* in ``data[:n]``.

    *value* is reduced to an unsigned byte. Returns ``None`` when absent.
    """
    _check_span(data, n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first *n* bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0