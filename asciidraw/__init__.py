"""ASCII-art shapes, bitmap fonts and an interactive drawing menu."""

__version__ = "0.1.0"
__all__ = ["chars", "cli", "font_11x16", "fonts", "shapes"]