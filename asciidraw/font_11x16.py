"""An 11x16 bitmap font covering the printable ASCII range."""

from __future__ import annotations

from asciidraw.fonts import Font


def _table(rows: list[str]) -> tuple[bytes, ...]:
    return tuple(bytes.fromhex(row) for row in rows)


FONT_11X16 = Font(
    name="11x16",
    width=11,
    height=16,
    glyphs=_table([
        "0000 0000 0000 0000 0000 0000 0000 0000 0000 0000 0000",  # space
        "0000 0000 0000 007C 33FF 33FF 007C 0000 0000 0000 0000",  # !
        "0000 0000 003C 003C 0000 0000 003C 003C 0000 0000 0000",  # "
        "0200 1E10 1F90 03F0 027E 1E1E 1F90 03F0 027E 001E 0010",  # #
        "0000 0478 0CFC 0CCC 3FFF 3FFF 0CCC 0FCC 0788 0000 0000",  # $
        "3000 3838 1C38 0E38 0700 0380 01C0 38E0 3870 3838 001C",  # %
        "0000 1F00 3FB8 31FC 21C6 37E2 1E3E 1C1C 3600 2200 0000",  # &
        "0000 0000 0000 0027 003F 001F 0000 0000 0000 0000 0000",  # '
        "0000 0000 03F0 0FFC 1FFE 3807 2001 2001 0000 0000 0000",  # (
        "0000 0000 2001 2001 3807 1FFE 0FFC 03F0 0000 0000 0000",  # )
        "0000 0C98 0EB8 03E0 0FF8 0FF8 03E0 0EB8 0C98 0000 0000",  # *
        "0000 0180 0180 0180 0FF0 0FF0 0180 0180 0180 0000 0000",  # +
        "0000 0000 0000 B800 F800 7800 0000 0000 0000 0000 0000",  # ,
        "0000 0180 0180 0180 0180 0180 0180 0180 0180 0000 0000",  # -
        "0000 0000 0000 3800 3800 3800 0000 0000 0000 0000 0000",  # .
        "1800 1C00 0E00 0700 0380 01C0 00E0 0070 0038 001C 000E",  # /
        "07F8 1FFE 1E06 3303 3183 30C3 3063 3033 181E 1FFE 07F8",  # 0
        "0000 0000 300C 300C 300E 3FFF 3FFF 3000 3000 3000 0000",  # 1
        "301C 381E 3C07 3E03 3703 3383 31C3 30E3 3077 303E 301C",  # 2
        "0C0C 1C0E 3807 30C3 30C3 30C3 30C3 30C3 39E7 1F7E 0E3C",  # 3
        "03C0 03E0 0370 0338 031C 030E 0307 3FFF 3FFF 0300 0300",  # 4
        "0C3F 1C7F 3863 3063 3063 3063 3063 3063 38E3 1FC3 0F83",  # 5
        "0FC0 1FF0 39F8 30DC 30CE 30C7 30C3 30C3 39C3 1F80 0F00",  # 6
        "0003 0003 0003 3003 3C03 0F03 03C3 00F3 003F 000F 0003",  # 7
        "0F00 1FBC 39FE 30E7 30C3 30C3 30C3 30E7 39FE 1FBC 0F00",  # 8
        "003C 007E 30E7 30C3 30C3 38C3 1CC3 0EC3 07E7 03FE 00FC",  # 9
        "0000 0000 0000 1C70 1C70 1C70 0000 0000 0000 0000 0000",  # :
        "0000 0000 0000 9C70 FC70 7C70 0000 0000 0000 0000 0000",  # ;
        "0000 00C0 01E0 03F0 0738 0E1C 1C0E 3807 3003 0000 0000",  # <
        "0000 0660 0660 0660 0660 0660 0660 0660 0660 0660 0000",  # =
        "0000 3003 3807 1C0E 0E1C 0738 03F0 01E0 00C0 0000 0000",  # >
        "001C 001E 0007 0003 3783 37C3 00E3 0077 003E 001C 0000",  # ?
        "0FF8 1FFE 1807 33F3 37FB 361B 37FB 37FB 3607 03FE 01F8",  # @
        "3800 3F00 07E0 06FC 061F 061F 06FC 07E0 3F00 3800 0000",  # A
        "3FFF 3FFF 30C3 30C3 30C3 30C3 30E7 39FE 1FBC 0F00 0000",  # B
        "03F0 0FFC 1C0E 3807 3003 3003 3003 3807 1C0E 0C0C 0000",  # C
        "3FFF 3FFF 3003 3003 3003 3003 3807 1C0E 0FFC 03F0 0000",  # D
        "3FFF 3FFF 30C3 30C3 30C3 30C3 30C3 30C3 3003 3003 0000",  # E
        "3FFF 3FFF 00C3 00C3 00C3 00C3 00C3 00C3 0003 0003 0000",  # F
        "03F0 0FFC 1C0E 3807 3003 30C3 30C3 30C3 3FC7 3FC6 0000",  # G
        "3FFF 3FFF 00C0 00C0 00C0 00C0 00C0 00C0 3FFF 3FFF 0000",  # H
        "0000 0000 3003 3003 3FFF 3FFF 3003 3003 0000 0000 0000",  # I
        "0E00 1E00 3800 3000 3000 3000 3000 3800 1FFF 07FF 0000",  # J
        "3FFF 3FFF 00C0 01E0 03F0 0738 0E1C 1C0E 3807 3003 0000",  # K
        "3FFF 3FFF 3000 3000 3000 3000 3000 3000 3000 3000 0000",  # L
        "3FFF 3FFF 001E 0078 01E0 01E0 0078 001E 3FFF 3FFF 0000",  # M
        "3FFF 3FFF 000E 0038 00F0 03C0 0700 1C00 3FFF 3FFF 0000",  # N
        "03F0 0FFC 1C0E 3807 3003 3003 3807 1C0E 0FFC 03F0 0000",  # O
        "3FFF 3FFF 0183 0183 0183 0183 0183 01C7 00FE 007C 0000",  # P
        "03F0 0FFC 1C0E 3807 3003 3603 3E07 1C0E 3FFC 33F0 0000",  # Q
        "3FFF 3FFF 0183 0183 0383 0783 0F83 1DC7 38FE 307C 0000",  # R
        "0C3C 1C7E 38E7 30C3 30C3 30C3 30C3 39C7 1F8E 0F0C 0000",  # S
        "0000 0003 0003 0003 3FFF 3FFF 0003 0003 0003 0000 0000",  # T
        "07FF 1FFF 3800 3000 3000 3000 3000 3800 1FFF 07FF 0000",  # U
        "0007 003F 01F8 0FC0 3E00 3E00 0FC0 01F8 003F 0007 0000",  # V
        "3FFF 3FFF 1C00 0600 0380 0380 0600 1C00 3FFF 3FFF 0000",  # W
        "3003 3C0F 0E1C 0330 01E0 01E0 0330 0E1C 3C0F 3003 0000",  # X
        "0003 000F 003C 00F0 3FC0 3FC0 00F0 003C 000F 0003 0000",  # Y
        "3003 3C03 3E03 3303 31C3 30E3 3033 301F 300F 3003 0000",  # Z
        "0000 0000 3FFF 3FFF 3003 3003 3003 3003 0000 0000 0000",  # [
        "000E 001C 0038 0070 00E0 01C0 0380 0700 0E00 1C00 1800",  # backslash
        "0000 0000 3003 3003 3003 3003 3FFF 3FFF 0000 0000 0000",  # ]
        "0060 0070 0038 001C 000E 0007 000E 001C 0038 0070 0060",  # ^
        "C000 C000 C000 C000 C000 C000 C000 C000 C000 C000 C000",  # _
        "0000 0000 0000 0000 003E 007E 004E 0000 0000 0000 0000",  # `
        "1C00 3E40 3360 3360 3360 3360 3360 3360 3FE0 3FC0 0000",  # a
        "3FFF 3FFF 30C0 3060 3060 3060 3060 38E0 1FC0 0F80 0000",  # b
        "0F80 1FC0 38E0 3060 3060 3060 3060 3060 18C0 0880 0000",  # c
        "0F80 1FC0 38E0 3060 3060 3060 30E0 30C0 3FFF 3FFF 0000",  # d
        "0F80 1FC0 3BE0 3360 3360 3360 3360 3360 13C0 0180 0000",  # e
        "00C0 00C0 3FFC 3FFE 00C7 00C3 00C3 0003 0000 0000 0000",  # f
        "0380 C7C0 CEE0 CC60 CC60 CC60 CC60 E660 7FE0 3FE0 0000",  # g
        "3FFF 3FFF 00C0 0060 0060 0060 00E0 3FC0 3F80 0000 0000",  # h
        "0000 0000 3000 3060 3FEC 3FEC 3000 3000 0000 0000 0000",  # i
        "0000 0000 6000 E000 C000 C060 FFEC 7FEC 0000 0000 0000",  # j
        "0000 3FFF 3FFF 0300 0780 0FC0 1CE0 3860 3000 0000 0000",  # k
        "0000 0000 3000 3003 3FFF 3FFF 3000 3000 0000 0000 0000",  # l
        "3FE0 3FC0 00E0 00E0 3FC0 3FC0 00E0 00E0 3FC0 3F80 0000",  # m
        "0000 3FE0 3FE0 0060 0060 0060 0060 00E0 3FC0 3F80 0000",  # n
        "0F80 1FC0 38E0 3060 3060 3060 3060 38E0 1FC0 0F80 0000",  # o
        "FFE0 FFE0 0C60 1860 1860 1860 1860 1CE0 0FC0 0780 0000",  # p
        "0780 0FC0 1CE0 1860 1860 1860 1860 0C60 FFE0 FFE0 0000",  # q
        "0000 3FE0 3FE0 00C0 0060 0060 0060 0060 00E0 00C0 0000",  # r
        "11C0 33E0 3360 3360 3360 3360 3F60 1E40 0000 0000 0000",  # s
        "0060 0060 1FFE 3FFE 3060 3060 3060 3000 0000 0000 0000",  # t
        "0FE0 1FE0 3800 3000 3000 3000 3000 1800 3FE0 3FE0 0000",  # u
        "0060 01E0 0780 1E00 3800 3800 1E00 0780 01E0 0060 0000",  # v
        "07E0 1FE0 3800 1C00 0FE0 0FE0 1C00 3800 1FE0 07E0 0000",  # w
        "3060 38E0 1DC0 0F80 0700 0F80 1DC0 38E0 3060 0000 0000",  # x
        "0000 0060 81E0 E780 7E00 1E00 0780 01E0 0060 0000 0000",  # y
        "3060 3860 3C60 3660 3360 31E0 30E0 3060 3020 0000 0000",  # z
        "0000 0080 01C0 1FFC 3F7E 7007 6003 6003 6003 0000 0000",  # {
        "0000 0000 0000 0000 3FFF 3FFF 0000 0000 0000 0000 0000",  # |
        "0000 6003 6003 6003 7007 3F7E 1FFC 01C0 0080 0000 0000",  # }
        "0010 0018 000C 0004 000C 0018 0010 0018 000C 0004 0000",  # ~
    ]),
)
"""Each glyph holds 11 columns of 16 bits, two big-endian bytes per column."""