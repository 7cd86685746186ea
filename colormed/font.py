"""8x8 bitmap font used by the OLED display.

Each glyph is eight column bytes; bit ``j`` of column ``i`` is the pixel at
``(x + i, y + j)``.
"""

from __future__ import annotations

GLYPH_SIZE = 8

FONT = bytes(
    [
        0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,  # blank
        0x3E, 0x41, 0x41, 0x49, 0x41, 0x41, 0x3E, 0x00,  # 0
        0x00, 0x00, 0x42, 0x7F, 0x40, 0x00, 0x00, 0x00,  # 1
        0x30, 0x49, 0x49, 0x49, 0x49, 0x46, 0x00, 0x00,  # 2
        0x49, 0x49, 0x49, 0x49, 0x49, 0x49, 0x36, 0x00,  # 3
        0x3F, 0x20, 0x20, 0x78, 0x20, 0x20, 0x00, 0x00,  # 4
        0x4F, 0x49, 0x49, 0x49, 0x49, 0x30, 0x00, 0x00,  # 5
        0x3F, 0x48, 0x48, 0x48, 0x48, 0x48, 0x30, 0x00,  # 6
        0x01, 0x01, 0x01, 0x61, 0x31, 0x0D, 0x03, 0x00,  # 7
        0x36, 0x49, 0x49, 0x49, 0x49, 0x49, 0x36, 0x00,  # 8
        0x06, 0x09, 0x09, 0x09, 0x09, 0x09, 0x7F, 0x00,  # 9
        0x78, 0x14, 0x12, 0x11, 0x12, 0x14, 0x78, 0x00,  # A
        0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x7F, 0x00,  # B
        0x7E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x41, 0x00,  # C
        0x7F, 0x41, 0x41, 0x41, 0x41, 0x41, 0x7E, 0x00,  # D
        0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x49, 0x00,  # E
        0x7F, 0x09, 0x09, 0x09, 0x09, 0x01, 0x01, 0x00,  # F
        0x7F, 0x41, 0x41, 0x41, 0x51, 0x51, 0x73, 0x00,  # G
        0x7F, 0x08, 0x08, 0x08, 0x08, 0x08, 0x7F, 0x00,  # H
        0x00, 0x00, 0x00, 0x7F, 0x00, 0x00, 0x00, 0x00,  # I
        0x21, 0x41, 0x41, 0x3F, 0x01, 0x01, 0x01, 0x00,  # J
        0x00, 0x7F, 0x08, 0x08, 0x14, 0x22, 0x41, 0x00,  # K
        0x7F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x40, 0x00,  # L
        0x7F, 0x02, 0x04, 0x08, 0x04, 0x02, 0x7F, 0x00,  # M
        0x7F, 0x02, 0x04, 0x08, 0x10, 0x20, 0x7F, 0x00,  # N
        0x3E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x3E, 0x00,  # O
        0x7F, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E, 0x00,  # P
        0x3E, 0x41, 0x41, 0x49, 0x51, 0x61, 0x7E, 0x00,  # Q
        0x7F, 0x11, 0x11, 0x11, 0x31, 0x51, 0x0E, 0x00,  # R
        0x46, 0x49, 0x49, 0x49, 0x49, 0x30, 0x00, 0x00,  # S
        0x01, 0x01, 0x01, 0x7F, 0x01, 0x01, 0x01, 0x00,  # T
        0x3F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x3F, 0x00,  # U
        0x0F, 0x10, 0x20, 0x40, 0x20, 0x10, 0x0F, 0x00,  # V
        0x7F, 0x20, 0x10, 0x08, 0x10, 0x20, 0x7F, 0x00,  # W
        0x00, 0x41, 0x22, 0x14, 0x14, 0x22, 0x41, 0x00,  # X
        0x01, 0x02, 0x04, 0x78, 0x04, 0x02, 0x01, 0x00,  # Y
        0x41, 0x61, 0x59, 0x45, 0x43, 0x41, 0x00, 0x00,  # Z
        0x00, 0x20, 0x54, 0x54, 0x54, 0x78, 0x40, 0x00,  # a
        0x7F, 0x48, 0x44, 0x44, 0x44, 0x38, 0x00, 0x00,  # b
        0x38, 0x44, 0x44, 0x44, 0x44, 0x28, 0x00, 0x00,  # c
        0x38, 0x44, 0x44, 0x44, 0x48, 0x7F, 0x00, 0x00,  # d
        0x38, 0x54, 0x54, 0x54, 0x54, 0x18, 0x00, 0x00,  # e
        0x08, 0x7E, 0x09, 0x09, 0x01, 0x02, 0x00, 0x00,  # f
        0x18, 0xA4, 0xA4, 0xA4, 0xA4, 0x7C, 0x00, 0x00,  # g
        0x7F, 0x08, 0x04, 0x04, 0x04, 0x78, 0x00, 0x00,  # h
        0x00, 0x44, 0x7D, 0x40, 0x00, 0x00, 0x00, 0x00,  # i
        0x20, 0x40, 0x40, 0x44, 0x3D, 0x00, 0x00, 0x00,  # j
        0x7F, 0x10, 0x08, 0x14, 0x24, 0x40, 0x00, 0x00,  # k
        0x00, 0x41, 0x7F, 0x40, 0x00, 0x00, 0x00, 0x00,  # l
        0x7C, 0x04, 0x18, 0x04, 0x78, 0x00, 0x00, 0x00,  # m
        0x7C, 0x08, 0x04, 0x04, 0x78, 0x00, 0x00, 0x00,  # n
        0x38, 0x44, 0x44, 0x44, 0x38, 0x00, 0x00, 0x00,  # o
        0xFC, 0x24, 0x24, 0x24, 0x18, 0x00, 0x00, 0x00,  # p
        0x18, 0x24, 0x24, 0x24, 0xFC, 0x00, 0x00, 0x00,  # q
        0x7C, 0x08, 0x04, 0x04, 0x08, 0x00, 0x00, 0x00,  # r
        0x48, 0x54, 0x54, 0x54, 0x24, 0x00, 0x00, 0x00,  # s
        0x04, 0x3F, 0x44, 0x40, 0x20, 0x00, 0x00, 0x00,  # t
        0x3C, 0x40, 0x40, 0x20, 0x7C, 0x00, 0x00, 0x00,  # u
        0x1C, 0x20, 0x40, 0x20, 0x1C, 0x00, 0x00, 0x00,  # v
        0x3C, 0x40, 0x30, 0x40, 0x3C, 0x00, 0x00, 0x00,  # w
        0x44, 0x28, 0x10, 0x28, 0x44, 0x00, 0x00, 0x00,  # x
        0x1C, 0xA0, 0xA0, 0xA0, 0x7C, 0x00, 0x00, 0x00,  # y
        0x44, 0x64, 0x54, 0x4C, 0x44, 0x00, 0x00, 0x00,  # z
        0x00, 0x00, 0x5F, 0x5F, 0x00, 0x00, 0x00, 0x00,  # !
        0x00, 0x00, 0x36, 0x36, 0x00, 0x00, 0x00, 0x00,  # :
        0x00, 0x00, 0x00, 0x60, 0x60, 0x00, 0x00, 0x00,  # .
        0x00, 0x60, 0x10, 0x08, 0x04, 0x02, 0x01, 0x00,  # /
        0x00, 0x00, 0x00, 0x80, 0x60, 0x00, 0x00, 0x00,  # ,
        0x00, 0x08, 0x08, 0x08, 0x08, 0x08, 0x08, 0x00,  # -
        0x00, 0x00, 0x06, 0x59, 0x09, 0x06, 0x00, 0x00,  # ?
        0x00, 0x22, 0x14, 0x7F, 0x14, 0x22, 0x00, 0x00,  # *
        0x00, 0x08, 0x1C, 0x36, 0x41, 0x00, 0x00, 0x00,  # <
        0x10, 0x08, 0x04, 0x02, 0x04, 0x08, 0x10, 0x00,  # ^
    ]
)

_SPECIAL_SLOTS = {
    " ": 0,
    "!": 63,
    ":": 64,
    ".": 65,
    "/": 66,
    ",": 67,
    "-": 68,
    "?": 69,
    "*": 70,
    "<": 71,
    "^": 72,
}


def _slot(char: str) -> int | None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if "0" <= char <= "9":
        return ord(char) - ord("0") + 1
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 11
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 37
    return _SPECIAL_SLOTS.get(char)


def font_index(char: str) -> int | None:
    """Return the byte offset of ``char``'s glyph in FONT, or None if unsupported."""
    slot = _slot(char)
    return None if slot is None else slot * GLYPH_SIZE


def glyph(char: str) -> bytes:
    """Return the eight column bytes of ``char``; raise ValueError if unsupported."""
    index = font_index(char)
    if index is None:
        raise ValueError(f"character {char!r} has no glyph")
    return FONT[index:index + GLYPH_SIZE]