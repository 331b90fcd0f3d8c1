"""A small formatted-output facility with a fixed set of conversions.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. An unknown conversion character is consumed
and produces no output. Integer conversions follow 32-bit C semantics:
``%d`` and ``%i`` wrap to a signed 32-bit value, ``%u``, ``%x`` and
``%X`` to an unsigned one. ``%p`` prints a 64-bit address in lower-case
hexadecimal after ``0x``, or ``(nil)`` for a null pointer.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

from pipex.numbers import itoa

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    address &= _UINT64
    if address == 0:
        return _NULL_POINTER
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec == "p":
        return _pointer(value)
    number = _as_int(value, spec)
    if spec in "di":
        return itoa(_signed32(number))
    number &= _UINT32
    if spec == "u":
        return str(number)
    if spec == "x":
        return f"{number:x}"
    return f"{number:X}"


def format_string(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the formatted *args*."""
    values = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)