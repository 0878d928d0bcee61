"""ASCII character, byte-buffer, NUL-terminated string, output and linked-list helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "memory", "strings", "output", "strops", "lists"]