"""Conversions between text and 32-bit signed integers."""

from __future__ import annotations

import re

INT_MIN = -2147483648
INT_MAX = 2147483647

_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace is skipped, one optional sign is accepted and
    digits are read until the first non-digit. Text with no digits in
    that position yields 0.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)