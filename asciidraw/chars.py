"""Render single characters from the bitmap fonts as asterisk art."""

from __future__ import annotations

from asciidraw.fonts import FONT_5X7, FONT_8X12


def render_5x7(char: str) -> str:
    """Render ``char`` in the 5x7 font, one glyph column per output line."""
    height = FONT_5X7.height
    lines = (
        "".join("*" if bits & (1 << (height - 1 - row)) else " " for row in range(height))
        for bits in FONT_5X7.glyph(char)
    )
    return "".join(line + "\n" for line in lines) + "\n"


def render_8x12(char: str) -> str:
    """Render ``char`` in the 8x12 font, one glyph row per output line."""
    width = FONT_8X12.width
    lines = (
        "".join("*" if bits & (1 << (width - 1 - col)) else " " for col in range(width))
        for bits in FONT_8X12.glyph(char)
    )
    return "".join(line + "\n" for line in lines) + "\n"