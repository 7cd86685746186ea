"""Frame buffer and command driver for an SSD1306 monochrome OLED display.

The display talks through a bus object exposing ``write(address, data)``,
where ``data`` is a ``bytes`` payload sent in one I2C transaction.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

from .font import GLYPH_SIZE, font_index, FONT

WIDTH = 128
HEIGHT = 64

_DATA_PREFIX = 0x40
_COMMAND_PREFIX = 0x80


class Command(IntEnum):
    """SSD1306 command opcodes."""

    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


class Bus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...


class SSD1306:
    """An SSD1306 display with a local frame buffer in vertical addressing order."""

    def __init__(
        self,
        bus: Bus,
        address: int,
        width: int = WIDTH,
        height: int = HEIGHT,
        external_vcc: bool = False,
    ) -> None:
        if not 0 < width <= 255 or not 0 < height <= 255 or height % 8:
            raise ValueError(f"unsupported display size {width}x{height}")
        self.bus = bus
        self.address = address
        self.width = width
        self.height = height
        self.pages = height // 8
        self.external_vcc = external_vcc
        self._buffer = bytearray(self.pages * width + 1)
        self._buffer[0] = _DATA_PREFIX

    @property
    def buffer(self) -> bytes:
        """The raw frame, including the leading data-control byte."""
        return bytes(self._buffer)

    def config(self) -> None:
        """Send the power-up configuration sequence."""
        sequence = (
            Command.SET_DISP | 0x00,
            Command.SET_MEM_ADDR, 0x01,
            Command.SET_DISP_START_LINE | 0x00,
            Command.SET_SEG_REMAP | 0x01,
            Command.SET_MUX_RATIO, HEIGHT - 1,
            Command.SET_COM_OUT_DIR | 0x08,
            Command.SET_DISP_OFFSET, 0x00,
            Command.SET_COM_PIN_CFG, 0x12,
            Command.SET_DISP_CLK_DIV, 0x80,
            Command.SET_PRECHARGE, 0xF1,
            Command.SET_VCOM_DESEL, 0x30,
            Command.SET_CONTRAST, 0xFF,
            Command.SET_ENTIRE_ON,
            Command.SET_NORM_INV,
            Command.SET_CHARGE_PUMP, 0x14,
            Command.SET_DISP | 0x01,
        )
        for value in sequence:
            self.command(value)

    def command(self, value: int) -> None:
        """Send a single command byte."""
        self.bus.write(self.address, bytes([_COMMAND_PREFIX, int(value) & 0xFF]))

    def send_data(self) -> None:
        """Push the whole frame buffer to the display."""
        for value in (
            Command.SET_COL_ADDR, 0, self.width - 1,
            Command.SET_PAGE_ADDR, 0, self.pages - 1,
        ):
            self.command(value)
        self.bus.write(self.address, bytes(self._buffer))

    def _locate(self, x: int, y: int) -> tuple[int, int] | None:
        x &= 0xFF
        y &= 0xFF
        if x >= self.width or y >= self.height:
            return None
        return (y >> 3) + x * self.pages + 1, y & 0b111

    def pixel(self, x: int, y: int, value: bool) -> None:
        """Set or clear one pixel; coordinates off the panel are ignored."""
        where = self._locate(x, y)
        if where is None:
            return
        index, bit = where
        if value:
            self._buffer[index] |= 1 << bit
        else:
            self._buffer[index] &= ~(1 << bit) & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether a pixel is lit; off-panel pixels read as unlit."""
        where = self._locate(x, y)
        if where is None:
            return False
        index, bit = where
        return bool(self._buffer[index] >> bit & 1)

    def fill(self, value: bool) -> None:
        """Set every pixel to ``value``."""
        byte = 0xFF if value else 0x00
        self._buffer[1:] = bytes([byte]) * (len(self._buffer) - 1)

    def rect(
        self,
        top: int,
        left: int,
        width: int,
        height: int,
        value: bool,
        fill: bool = False,
    ) -> None:
        """Draw a rectangle outline, optionally filled."""
        for x in range(left, left + width):
            self.pixel(x, top, value)
            self.pixel(x, top + height - 1, value)
        for y in range(top, top + height):
            self.pixel(left, y, value)
            self.pixel(left + width - 1, y, value)
        if fill:
            for x in range(left + 1, left + width - 1):
                for y in range(top + 1, top + height - 1):
                    self.pixel(x, y, value)

    def line(self, x0: int, y0: int, x1: int, y1: int, value: bool) -> None:
        """Draw a straight line with Bresenham's algorithm."""
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.pixel(x0, y0, value)
            if x0 == x1 and y0 == y1:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def hline(self, x0: int, x1: int, y: int, value: bool) -> None:
        """Draw a horizontal line from x0 to x1 inclusive."""
        for x in range(x0, x1 + 1):
            self.pixel(x, y, value)

    def vline(self, x: int, y0: int, y1: int, value: bool) -> None:
        """Draw a vertical line from y0 to y1 inclusive."""
        for y in range(y0, y1 + 1):
            self.pixel(x, y, value)

    def draw_char(self, char: str, x: int, y: int) -> None:
        """Draw one character; characters without a glyph are skipped."""
        index = font_index(char)
        if index is None:
            return
        for i, column in enumerate(FONT[index:index + GLYPH_SIZE]):
            for j in range(8):
                self.pixel((x + i) & 0xFF, (y + j) & 0xFF, bool(column & (1 << j)))

    def draw_string(self, text: str, x: int, y: int) -> None:
        """Draw text, wrapping to the next row near the right edge."""
        for char in text:
            self.draw_char(char, x, y)
            x = (x + 8) & 0xFF
            if x + 8 >= self.width:
                x = 0
                y = (y + 8) & 0xFF
            if y + 8 >= self.height:
                break

    def is_empty(self) -> bool:
        """Return True when no pixel is lit."""
        return not any(self._buffer[1:])

    def draw_filled_square(self, x: int, y: int) -> None:
        """Draw a solid 8x8 block and refresh the display."""
        for i in range(8):
            for j in range(8):
                self.pixel(x + j, y + i, True)
        self.send_data()

    def to_text(self) -> str:
        """Render the frame as rows of '#' (lit) and '.' (unlit)."""
        return "\n".join(
            "".join("#" if self.get_pixel(x, y) else "." for x in range(self.width))
            for y in range(self.height)
        )


def setup_ssd1306(bus: Bus, address: int) -> SSD1306:
    """Create, configure and clear a 128x64 display."""
    display = SSD1306(bus, address, WIDTH, HEIGHT, False)
    display.config()
    display.send_data()
    display.fill(False)
    display.send_data()
    return display