"""Colour-coded medication alarm clock: alarm book, OLED frame buffer, buttons, buzzer and LED matrix."""

__version__ = "0.1.0"