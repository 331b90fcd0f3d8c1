"""Filling and copying regions of writable byte buffers.

Buffers are ``bytearray`` objects or writable ``memoryview`` slices, so
overlapping regions of one buffer can be expressed as two views of it.
"""

from __future__ import annotations

from typing import Any

Buffer = Any


def _check_span(buf: Buffer, n: int, role: str) -> None:
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"cannot use {n} bytes of a {len(buf)}-byte {role}")


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Set the first *n* bytes of *buf* to *value* reduced to a byte."""
    _check_span(buf, n, "buffer")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    memset(buf, 0, n)


def memcpy(dest: Buffer, src: Buffer, n: int) -> Buffer:
    """Copy the first *n* bytes of *src* into *dest* and return *dest*."""
    _check_span(dest, n, "destination")
    _check_span(src, n, "source")
    dest[:n] = src[:n]
    return dest


def memmove(dest: Buffer, src: Buffer, n: int) -> Buffer:
    """Copy *n* bytes from *src* to *dest*, correct even when they overlap."""
    _check_span(dest, n, "destination")
    _check_span(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest