"""Building and editing strings: joining, copying, mapping and bounded copies.

The bounded copies work on byte buffers holding NUL-terminated strings:
``dst`` is a writable buffer (``bytearray`` or writable ``memoryview``),
``src`` any bytes-like object whose string ends at its first NUL byte or
at its end.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional

from pipex.search import strlen

Buffer = Any


def strjoin(s1: str, s2: str) -> str:
    """Return a new string holding *s1* followed by *s2*."""
    return s1 + s2


def strdup(s: str) -> str:
    """Return a copy of *s* up to its first NUL character."""
    return s[:strlen(s)]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(s: MutableSequence, func: Callable[[int, Any], Optional[Any]]) -> None:
    """Call ``func(index, item)`` on each item of *s*, in place.

    Whatever the callback returns, other than ``None``, replaces the item.
    """
    for index, item in enumerate(s):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement


def _c_length(data: Buffer, limit: Optional[int] = None) -> int:
    """Length of the NUL-terminated string in *data*, bounded by *limit*."""
    raw = bytes(data)
    end = len(raw) if limit is None else min(limit, len(raw))
    index = raw.find(0, 0, end)
    return end if index < 0 else index


def _check_size(dst: Buffer, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds the {len(dst)}-byte destination")


def strlcpy(dst: Buffer, src: Buffer, size: int) -> int:
    """Copy the string in *src* into *dst*, writing at most *size* bytes.

    The copy is always NUL-terminated when *size* is positive. Returns the
    length of the source string, so a result of *size* or more means the
    copy was truncated.
    """
    _check_size(dst, size)
    src_len = _c_length(src)
    if size > 0:
        count = min(src_len, size - 1)
        dst[:count] = bytes(src)[:count]
        dst[count] = 0
    return src_len


def strlcat(dst: Buffer, src: Buffer, size: int) -> int:
    """Append the string in *src* to the string in *dst*, within *size* bytes.

    Returns the length of the string it tried to create: the initial
    destination length (bounded by *size*) plus the source length.
    """
    _check_size(dst, size)
    dest_len = _c_length(dst, size)
    src_len = _c_length(src)
    if size <= dest_len:
        return size + src_len
    count = min(src_len, size - 1 - dest_len)
    dst[dest_len:dest_len + count] = bytes(src)[:count]
    dst[dest_len + count] = 0
    return dest_len + src_len