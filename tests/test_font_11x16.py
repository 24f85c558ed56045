import pytest

from asciidraw.font_11x16 import FONT_11X16


PRINTABLE = [chr(c) for c in range(0x20, 0x7F)]


def _columns(char):
    data = FONT_11X16.glyph(char)
    return [int.from_bytes(data[i:i + 2], "big") for i in range(0, len(data), 2)]


def test_covers_printable_ascii():
    assert len(FONT_11X16.glyphs) == 95
    assert FONT_11X16.first == 0x20
    assert [FONT_11X16.glyph(char) for char in PRINTABLE] == list(FONT_11X16.glyphs)
    with pytest.raises(ValueError):
        FONT_11X16.glyph("\x1f")


def test_every_glyph_has_eleven_columns():
    sizes = {len(FONT_11X16.glyph(char)) for char in PRINTABLE}
    assert sizes == {2 * FONT_11X16.width}
    assert FONT_11X16.width == 11


def test_space_is_blank():
    assert _columns(" ") == [0] * 11


def test_exclamation_columns():
    assert _columns("!") == [0x0000, 0x0000, 0x0000, 0x007C, 0x33FF, 0x33FF,
                             0x007C, 0x0000, 0x0000, 0x0000, 0x0000]


def test_capital_a_columns():
    assert _columns("A")[:3] == [0x3800, 0x3F00, 0x07E0]


def test_tilde_is_last_glyph():
    assert _columns("~")[:4] == [0x0010, 0x0018, 0x000C, 0x0004]


def test_del_has_no_glyph():
    with pytest.raises(ValueError):
        FONT_11X16.glyph("\x7f")


def test_parentheses_mirror_each_other():
    assert _columns("(")[2:8] == list(reversed(_columns(")")[2:8]))