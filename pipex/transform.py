"""Producing new strings from existing ones: splitting, trimming, slicing."""

from __future__ import annotations


def split(s: str, sep: str) -> list[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* beginning at *start*.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return s[start:start + length]