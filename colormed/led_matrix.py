"""Solid-colour frames for a 5x5 WS2812 LED matrix."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

NUM_PIXELS = 25
OUT_PIN = 7


class Color(IntEnum):
    """Colours the matrix can show, in menu order; OFF blanks it."""

    GREEN = 0
    RED = 1
    BLUE = 2
    YELLOW = 3
    PURPLE = 4
    OFF = 5


# (blue, red, green) intensities for each colour
_INTENSITIES = {
    Color.GREEN: (0.0, 0.0, 0.2),
    Color.RED: (0.0, 0.2, 0.0),
    Color.BLUE: (0.2, 0.0, 0.0),
    Color.YELLOW: (0.0, 0.6, 0.2),
    Color.PURPLE: (0.2, 0.2, 0.0),
    Color.OFF: (0.0, 0.0, 0.0),
}


def _channel(level: float) -> int:
    if not 0.0 <= level <= 1.0:
        raise ValueError(f"intensity must be within 0..1, got {level}")
    return int(level * 255)


def matrix_rgb(b: float, r: float, g: float) -> int:
    """Pack intensities in 0..1 into a 32-bit GRB word as the LED chain expects."""
    red, green, blue = _channel(r), _channel(g), _channel(b)
    return ((green << 24) | (red << 16) | (blue << 8)) & 0xFFFFFFFF


def frame_for(color: int) -> tuple[int, ...]:
    """Return the words for all pixels lit in ``color``; raise ValueError if unknown."""
    word = matrix_rgb(*_INTENSITIES[Color(color)])
    return (word,) * NUM_PIXELS


class LedMatrix:
    """A matrix that accepts pixel words one at a time through ``put(word)``."""

    def __init__(self, put: Callable[[int], None]) -> None:
        self._put = put

    def draw(self, color: int) -> None:
        """Light every pixel in ``color``."""
        for word in frame_for(color):
            self._put(word)