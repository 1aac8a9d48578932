"""ANSI terminal styling: colors and styles, LS_COLORS parsing, lossy color conversion, an escape-sequence state table and capability queries."""

__version__ = "1.0.0"

__all__ = [
    "style",
    "params",
    "query",
    "palette",
    "lossy",
    "ls",
    "states",
    "transitions",
]