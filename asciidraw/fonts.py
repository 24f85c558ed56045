"""Bitmap fonts covering the printable ASCII range."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Font:
    """A fixed-size bitmap font whose glyphs start at code point ``first``.

    Each glyph is a ``bytes`` object. In the 5x7 font every byte is one
    column, with bit 6 at the top. In the 8x12 font every byte is one row,
    with bit 7 at the left.
    """

    name: str
    width: int
    height: int
    glyphs: tuple[bytes, ...]
    first: int = 0x20

    def __post_init__(self) -> None:
        sizes = {len(g) for g in self.glyphs}
        if len(sizes) > 1:
            raise ValueError(f"font {self.name!r} has glyphs of differing sizes")

    def glyph(self, char: str) -> bytes:
        """Return the bitmap bytes for a single character."""
        if not isinstance(char, str) or len(char) != 1:
            raise TypeError(f"expected a single character, got {char!r}")
        index = ord(char) - self.first
        if not 0 <= index < len(self.glyphs):
            raise ValueError(f"font {self.name!r} has no glyph for {char!r}")
        return self.glyphs[index]


def _table(rows: list[str]) -> tuple[bytes, ...]:
    return tuple(bytes.fromhex(row) for row in rows)


FONT_5X7 = Font(
    name="5x7",
    width=5,
    height=7,
    glyphs=_table([
        "00 00 00 00 00",  # space
        "00 00 5f 00 00",  # !
        "00 07 00 07 00",  # "
        "14 7f 14 7f 14",  # #
        "24 2a 7f 2a 12",  # $
        "23 13 08 64 62",  # %
        "36 49 55 22 50",  # &
        "00 05 03 00 00",  # '
        "00 1c 22 41 00",  # (
        "00 41 22 1c 00",  # )
        "14 08 3e 08 14",  # *
        "08 08 3e 08 08",  # +
        "00 50 30 00 00",  # ,
        "08 08 08 08 08",  # -
        "00 60 60 00 00",  # .
        "20 10 08 04 02",  # /
        "3e 51 49 45 3e",  # 0
        "00 42 7f 40 00",  # 1
        "42 61 51 49 46",  # 2
        "21 41 45 4b 31",  # 3
        "18 14 12 7f 10",  # 4
        "27 45 45 45 39",  # 5
        "3c 4a 49 49 30",  # 6
        "01 71 09 05 03",  # 7
        "36 49 49 49 36",  # 8
        "06 49 49 29 1e",  # 9
        "00 36 36 00 00",  # :
        "00 56 36 00 00",  # ;
        "08 14 22 41 00",  # <
        "14 14 14 14 14",  # =
        "00 41 22 14 08",  # >
        "02 01 51 09 06",  # ?
        "32 49 79 41 3e",  # @
        "7e 11 11 11 7e",  # A
        "7f 49 49 49 36",  # B
        "3e 41 41 41 22",  # C
        "7f 41 41 22 1c",  # D
        "7f 49 49 49 41",  # E
        "7f 09 09 09 01",  # F
        "3e 41 49 49 7a",  # G
        "7f 08 08 08 7f",  # H
        "00 41 7f 41 00",  # I
        "20 40 41 3f 01",  # J
        "7f 08 14 22 41",  # K
        "7f 40 40 40 40",  # L
        "7f 02 0c 02 7f",  # M
        "7f 04 08 10 7f",  # N
        "3e 41 41 41 3e",  # O
        "7f 09 09 09 06",  # P
        "3e 41 51 21 5e",  # Q
        "7f 09 19 29 46",  # R
        "46 49 49 49 31",  # S
        "01 01 7f 01 01",  # T
        "3f 40 40 40 3f",  # U
        "1f 20 40 20 1f",  # V
        "3f 40 38 40 3f",  # W
        "63 14 08 14 63",  # X
        "07 08 70 08 07",  # Y
        "61 51 49 45 43",  # Z
        "00 7f 41 41 00",  # [
        "02 04 08 10 20",  # backslash
        "00 41 41 7f 00",  # ]
        "04 02 01 02 04",  # ^
        "40 40 40 40 40",  # _
        "00 01 02 04 00",  # `
        "20 54 54 54 78",  # a
        "7f 48 44 44 38",  # b
        "38 44 44 44 20",  # c
        "38 44 44 48 7f",  # d
        "38 54 54 54 18",  # e
        "08 7e 09 01 02",  # f
        "0c 52 52 52 3e",  # g
        "7f 08 04 04 78",  # h
        "00 44 7d 40 00",  # i
        "20 40 44 3d 00",  # j
        "7f 10 28 44 00",  # k
        "00 41 7f 40 00",  # l
        "7c 04 18 04 78",  # m
        "7c 08 04 04 78",  # n
        "38 44 44 44 38",  # o
        "7c 14 14 14 08",  # p
        "08 14 14 18 7c",  # q
        "7c 08 04 04 08",  # r
        "48 54 54 54 20",  # s
        "04 3f 44 40 20",  # t
        "3c 40 40 20 7c",  # u
        "1c 20 40 20 1c",  # v
        "3c 40 30 40 3c",  # w
        "44 28 10 28 44",  # x
        "0c 50 50 50 3c",  # y
        "44 64 54 4c 44",  # z
        "00 08 36 41 00",  # {
        "00 00 7f 00 00",  # |
        "00 41 36 08 00",  # }
        "10 08 08 10 08",  # ~
        "00 06 09 09 06",  # degree symbol
    ]),
)


FONT_8X12 = Font(
    name="8x12",
    width=8,
    height=12,
    glyphs=_table([
        "00 00 00 00 00 00 00 00 00 00 00 00",  # space
        "00 18 3C 3C 3C 18 18 00 18 18 00 00",  # !
        "36 36 36 14 00 00 00 00 00 00 00 00",  # "
        "00 6C 6C 6C FE 6C 6C FE 6C 6C 00 00",  # #
        "18 18 7C C6 C0 78 3C 06 C6 7C 18 18",  # $
        "00 00 00 62 66 0C 18 30 66 C6 00 00",  # %
        "00 38 6C 38 38 76 F6 CE CC 76 00 00",  # &
        "0C 0C 0C 18 00 00 00 00 00 00 00 00",  # '
        "00 0C 18 30 30 30 30 30 18 0C 00 00",  # (
        "00 30 18 0C 0C 0C 0C 0C 18 30 00 00",  # )
        "00 00 00 6C 38 FE 38 6C 00 00 00 00",  # *
        "00 00 00 18 18 7E 18 18 00 00 00 00",  # +
        "00 00 00 00 00 00 00 0C 0C 0C 18 00",  # ,
        "00 00 00 00 00 FE 00 00 00 00 00 00",  # -
        "00 00 00 00 00 00 00 00 18 18 00 00",  # .
        "00 00 02 06 0C 18 30 60 C0 80 00 00",  # /
        "00 7C C6 CE DE F6 E6 C6 C6 7C 00 00",  # 0
        "00 18 78 18 18 18 18 18 18 7E 00 00",  # 1
        "00 7C C6 C6 0C 18 30 60 C6 FE 00 00",  # 2
        "00 7C C6 06 06 3C 06 06 C6 7C 00 00",  # 3
        "00 0C 1C 3C 6C CC FE 0C 0C 0C 00 00",  # 4
        "00 FE C0 C0 C0 FC 06 06 C6 7C 00 00",  # 5
        "00 7C C6 C0 C0 FC C6 C6 C6 7C 00 00",  # 6
        "00 FE C6 0C 18 30 30 30 30 30 00 00",  # 7
        "00 7C C6 C6 C6 7C C6 C6 C6 7C 00 00",  # 8
        "00 7C C6 C6 C6 7E 06 06 C6 7C 00 00",  # 9
        "00 00 00 0C 0C 00 00 0C 0C 00 00 00",  # :
        "00 00 00 0C 0C 00 00 0C 0C 0C 18 00",  # ;
        "00 0C 18 30 60 C0 60 30 18 0C 00 00",  # <
        "00 00 00 00 FE 00 FE 00 00 00 00 00",  # =
        "00 60 30 18 0C 06 0C 18 30 60 00 00",  # >
        "00 7C C6 C6 0C 18 18 00 18 18 00 00",  # ?
        "00 7C C6 C6 DE DE DE DC C0 7E 00 00",  # @
        "00 38 6C C6 C6 C6 FE C6 C6 C6 00 00",  # A
        "00 FC 66 66 66 7C 66 66 66 FC 00 00",  # B
        "00 3C 66 C0 C0 C0 C0 C0 66 3C 00 00",  # C
        "00 F8 6C 66 66 66 66 66 6C F8 00 00",  # D
        "00 FE 66 60 60 7C 60 60 66 FE 00 00",  # E
        "00 FE 66 60 60 7C 60 60 60 F0 00 00",  # F
        "00 7C C6 C6 C0 C0 CE C6 C6 7C 00 00",  # G
        "00 C6 C6 C6 C6 FE C6 C6 C6 C6 00 00",  # H
        "00 3C 18 18 18 18 18 18 18 3C 00 00",  # I
        "00 3C 18 18 18 18 18 D8 D8 70 00 00",  # J
        "00 C6 CC D8 F0 F0 D8 CC C6 C6 00 00",  # K
        "00 F0 60 60 60 60 60 62 66 FE 00 00",  # L
        "00 C6 C6 EE FE D6 D6 D6 C6 C6 00 00",  # M
        "00 C6 C6 E6 E6 F6 DE CE CE C6 00 00",  # N
        "00 7C C6 C6 C6 C6 C6 C6 C6 7C 00 00",  # O
        "00 FC 66 66 66 7C 60 60 60 F0 00 00",  # P
        "00 7C C6 C6 C6 C6 C6 C6 D6 7C 06 00",  # Q
        "00 FC 66 66 66 7C 78 6C 66 E6 00 00",  # R
        "00 7C C6 C0 60 38 0C 06 C6 7C 00 00",  # S
        "00 7E 5A 18 18 18 18 18 18 3C 00 00",  # T
        "00 C6 C6 C6 C6 C6 C6 C6 C6 7C 00 00",  # U
        "00 C6 C6 C6 C6 C6 C6 6C 38 10 00 00",  # V
        "00 C6 C6 D6 D6 D6 FE EE C6 C6 00 00",  # W
        "00 C6 C6 6C 38 38 38 6C C6 C6 00 00",  # X
        "00 66 66 66 66 3C 18 18 18 3C 00 00",  # Y
        "00 FE C6 8C 18 30 60 C2 C6 FE 00 00",  # Z
        "00 7C 60 60 60 60 60 60 60 7C 00 00",  # [
        "00 00 80 C0 60 30 18 0C 06 02 00 00",  # backslash
        "00 7C 0C 0C 0C 0C 0C 0C 0C 7C 00 00",  # ]
        "10 38 6C C6 00 00 00 00 00 00 00 00",  # ^
        "00 00 00 00 00 00 00 00 00 00 00 FF",  # _
        "18 18 18 0C 00 00 00 00 00 00 00 00",  # `
        "00 00 00 00 78 0C 7C CC DC 76 00 00",  # a
        "00 E0 60 60 7C 66 66 66 66 FC 00 00",  # b
        "00 00 00 00 7C C6 C0 C0 C6 7C 00 00",  # c
        "00 1C 0C 0C 7C CC CC CC CC 7E 00 00",  # d
        "00 00 00 00 7C C6 FE C0 C6 7C 00 00",  # e
        "00 1C 36 30 30 FC 30 30 30 78 00 00",  # f
        "00 00 00 00 76 CE C6 C6 7E 06 C6 7C",  # g
        "00 E0 60 60 6C 76 66 66 66 E6 00 00",  # h
        "00 18 18 00 38 18 18 18 18 3C 00 00",  # i
        "00 0C 0C 00 1C 0C 0C 0C 0C CC CC 78",  # j
        "00 E0 60 60 66 6C 78 6C 66 E6 00 00",  # k
        "00 38 18 18 18 18 18 18 18 3C 00 00",  # l
        "00 00 00 00 6C FE D6 D6 C6 C6 00 00",  # m
        "00 00 00 00 DC 66 66 66 66 66 00 00",  # n
        "00 00 00 00 7C C6 C6 C6 C6 7C 00 00",  # o
        "00 00 00 00 DC 66 66 66 7C 60 60 F0",  # p
        "00 00 00 00 76 CC CC CC 7C 0C 0C 1E",  # q
        "00 00 00 00 DC 66 60 60 60 F0 00 00",  # r
        "00 00 00 00 7C C6 70 1C C6 7C 00 00",  # s
        "00 30 30 30 FC 30 30 30 36 1C 00 00",  # t
        "00 00 00 00 CC CC CC CC CC 76 00 00",  # u
        "00 00 00 00 C6 C6 C6 6C 38 10 00 00",  # v
        "00 00 00 00 C6 C6 D6 D6 FE 6C 00 00",  # w
        "00 00 00 00 C6 6C 38 38 6C C6 00 00",  # x
        "00 00 00 00 C6 C6 C6 CE 76 06 C6 7C",  # y
        "00 00 00 00 FE 8C 18 30 62 FE 00 00",  # z
        "00 0E 18 18 18 70 18 18 18 0E 00 00",  # {
        "00 18 18 18 18 00 18 18 18 18 00 00",  # |
        "00 70 18 18 18 0E 18 18 18 70 00 00",  # }
        "00 76 DC 00 00 00 00 00 00 00 00 00",  # ~
    ]),
)