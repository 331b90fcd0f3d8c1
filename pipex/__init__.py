"""A cat | grep pipeline command and C-style string, memory and formatting helpers."""

__version__ = "0.1.0"