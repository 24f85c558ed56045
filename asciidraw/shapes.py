"""Shapes drawn with asterisks as multi-line text."""

from __future__ import annotations


def square(left_col: int, size: int) -> str:
    """Return a ``size`` x ``size`` square whose left column is ``left_col``."""
    end_col = left_col + size
    indent = max(left_col, 0)
    line = " " * indent + "*" * max(end_col - indent, 0) + "\n"
    return line * max(size, 0)


def triangle(left_col: int, size: int) -> str:
    """Return a triangle of ``size + 1`` rows whose left edge is at ``left_col``."""
    lines = []
    for row in range(size + 1):
        min_col = left_col + size - row
        max_col = left_col + size + row
        indent = max(min_col, 0)
        lines.append(" " * indent + "*" * max(max_col + 1 - indent, 0) + "\n")
    return "".join(lines)


def arrow() -> str:
    """Return an arrow: a triangle head over a square shaft."""
    return triangle(5, 7) + square(10, 5)