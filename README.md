# asciidraw

Print simple ASCII-art shapes and bitmap-font characters in the terminal.

## Installation

```
pip install .
```

## Interactive use

```
asciidraw
```

The command prints `Welcome!` and then shows a menu asking which drawing to print:

- `t`: a triangle
- `s`: a square
- `c`: the characters `a`, `b`, `c` in the 5x7 font
- `d`: the characters `a`, `b`, `c` in the 8x12 font
- `a`: an arrow (a triangle above a square)
- `q`: quit

Input is read one character at a time. Newlines are skipped, end of input
ends the menu, and any other character is reported as an unrecognized
option. The command takes no arguments apart from `--help`.

## Library use

```python
from asciidraw.shapes import square, triangle, arrow
from asciidraw.chars import render_5x7, render_8x12

print(triangle(5, 7), end="")
print(square(10, 5), end="")
print(arrow(), end="")
print(render_8x12("A"), end="")
```

Every drawing function returns the picture as a string: lit pixels are `*`,
unlit ones are spaces, and every row ends in a newline.

- `square(left_col, size)` draws `size` rows of `size` asterisks, indented
  by `left_col` spaces.
- `triangle(left_col, size)` draws `size + 1` rows; row `n` holds
  `2 * n + 1` asterisks centred on column `left_col + size`.
- `arrow()` is `triangle(5, 7)` followed by `square(10, 5)`.
- `render_5x7(char)` prints one glyph column per line (so the character
  appears turned on its side), followed by a blank line.
- `render_8x12(char)` prints one glyph row per line, followed by a blank
  line.

## Fonts

`asciidraw.fonts` holds `FONT_5X7` (printable ASCII plus a degree symbol
at code 0x7F) and `FONT_8X12` (printable ASCII). Both are `Font` objects
with `name`, `width`, `height`, `glyphs` and `first` attributes. Their
`glyph(char)` method returns the raw bitmap bytes for one character; it
raises `TypeError` for anything that is not a single character and
`ValueError` for a character the font does not cover.

`asciidraw.font_11x16` holds `FONT_11X16`, the bitmap data for an 11x16
font, with each column stored as two big-endian bytes. No rendering
function uses it; it is available as data only.

To drive the menu from your own streams, call
`asciidraw.cli.run(stdin, stdout)` with any text file objects.

## Running the tests

```
pip install ".[test]"
pytest
```