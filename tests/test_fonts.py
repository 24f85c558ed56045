import string

import pytest

from asciidraw.fonts import FONT_5X7, FONT_8X12, Font


PRINTABLE = [chr(c) for c in range(0x20, 0x7F)]


def test_5x7_glyph_for_capital_a():
    assert FONT_5X7.glyph("A") == bytes([0x7E, 0x11, 0x11, 0x11, 0x7E])


def test_5x7_glyph_for_lowercase_a():
    assert FONT_5X7.glyph("a") == bytes([0x20, 0x54, 0x54, 0x54, 0x78])


def test_5x7_degree_symbol_is_last_glyph():
    assert FONT_5X7.glyph("\x7f") == bytes([0x00, 0x06, 0x09, 0x09, 0x06])


def test_8x12_glyph_for_capital_a():
    expected = bytes(
        [0x00, 0x38, 0x6C, 0xC6, 0xC6, 0xC6, 0xFE, 0xC6, 0xC6, 0xC6, 0x00, 0x00]
    )
    assert FONT_8X12.glyph("A") == expected


def test_8x12_underscore_sits_on_bottom_row():
    glyph = FONT_8X12.glyph("_")
    assert glyph[-1] == 0xFF
    assert set(glyph[:-1]) == {0}


@pytest.mark.parametrize("font", [FONT_5X7, FONT_8X12])
def test_space_is_blank(font):
    assert set(font.glyph(" ")) == {0}


@pytest.mark.parametrize("char", PRINTABLE)
def test_5x7_glyphs_have_five_columns_of_seven_bits(char):
    glyph = FONT_5X7.glyph(char)
    assert len(glyph) == FONT_5X7.width
    assert all(b < (1 << FONT_5X7.height) for b in glyph)


@pytest.mark.parametrize("char", PRINTABLE)
def test_8x12_glyphs_have_twelve_rows_of_eight_bits(char):
    glyph = FONT_8X12.glyph(char)
    assert len(glyph) == FONT_8X12.height
    assert all(b < (1 << FONT_8X12.width) for b in glyph)


@pytest.mark.parametrize("font", [FONT_5X7, FONT_8X12])
def test_visible_characters_are_not_blank(font):
    visible = string.ascii_letters + string.digits + string.punctuation
    blank = [char for char in visible if not any(font.glyph(char))]
    assert blank == []


@pytest.mark.parametrize("font", [FONT_5X7, FONT_8X12])
def test_upper_and_lower_case_differ(font):
    for upper, lower in zip(string.ascii_uppercase, string.ascii_lowercase):
        assert font.glyph(upper) != font.glyph(lower)


def test_font_sizes():
    assert (FONT_5X7.width, FONT_5X7.height) == (5, 7)
    assert (FONT_8X12.width, FONT_8X12.height) == (8, 12)
    assert len(FONT_5X7.glyphs) == 96
    assert len(FONT_8X12.glyphs) == 95
    assert len(FONT_5X7.glyph("A")) == 5
    assert len(FONT_8X12.glyph("A")) == 12
    assert FONT_5X7.glyph("\x7f") == FONT_5X7.glyphs[-1]
    assert FONT_8X12.glyph("~") == FONT_8X12.glyphs[-1]


@pytest.mark.parametrize("font", [FONT_5X7, FONT_8X12])
def test_control_character_has_no_glyph(font):
    with pytest.raises(ValueError):
        font.glyph("\x1f")


def test_8x12_has_no_degree_glyph():
    with pytest.raises(ValueError):
        FONT_8X12.glyph("\x7f")


@pytest.mark.parametrize("font", [FONT_5X7, FONT_8X12])
def test_non_ascii_has_no_glyph(font):
    with pytest.raises(ValueError):
        font.glyph("\u00e9")


@pytest.mark.parametrize("bad", ["", "ab", 65, None])
def test_glyph_requires_single_character(bad):
    with pytest.raises(TypeError):
        FONT_5X7.glyph(bad)


def test_custom_font_uses_first_offset():
    font = Font(name="tiny", width=1, height=1, glyphs=(b"\x01", b"\x00"), first=0x41)
    assert font.glyph("A") == b"\x01"
    assert font.glyph("B") == b"\x00"
    with pytest.raises(ValueError):
        font.glyph("C")


def test_font_rejects_mixed_glyph_sizes():
    with pytest.raises(ValueError):
        Font(name="broken", width=2, height=2, glyphs=(b"\x00\x00", b"\x00"))