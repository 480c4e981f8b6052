"""C-style character, string, memory, list, formatting and line-reading utilities."""

__version__ = "0.1.0"

__all__ = ["chars", "memory", "strings", "transform", "linked", "printf", "nextline"]