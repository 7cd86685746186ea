"""Square-wave tones on a passive buzzer."""

from __future__ import annotations

from typing import Callable

BUZZER_PIN = 10
CANCEL_BUTTON_PIN = 6

ALARM_DURATION_MS = 60000
ALARM_LOW_HZ = 500.0
ALARM_HIGH_HZ = 1000.0
ALARM_TONE_MS = 500


def cycle_count(frequency: float, duration_ms: int) -> int:
    """Return the number of whole wave cycles that fit into ``duration_ms``."""
    if frequency <= 0:
        raise ValueError(f"frequency must be positive, got {frequency}")
    if duration_ms < 0:
        raise ValueError(f"duration must not be negative, got {duration_ms}")
    return int((duration_ms * frequency) / 1000)


class Buzzer:
    """A buzzer driven by toggling its pin.

    ``write(level)`` drives the pin, ``sleep_us``/``sleep_ms`` wait,
    ``clock_ms()`` reads a millisecond clock and ``cancel_pressed()`` tells
    whether the cancel button is held.
    """

    def __init__(
        self,
        write: Callable[[bool], None],
        sleep_us: Callable[[int], None],
        sleep_ms: Callable[[int], None],
        clock_ms: Callable[[], int],
        cancel_pressed: Callable[[], bool],
    ) -> None:
        self._write = write
        self._sleep_us = sleep_us
        self._sleep_ms = sleep_ms
        self._clock_ms = clock_ms
        self._cancel_pressed = cancel_pressed

    def tone(self, frequency: float, duration_ms: int) -> None:
        """Play a square wave of ``frequency`` Hz for about ``duration_ms``."""
        cycles = cycle_count(frequency, duration_ms)
        half_period_us = int((1.0 / frequency) / 2 * 1e6)
        for _ in range(cycles):
            self._write(True)
            self._sleep_us(half_period_us)
            self._write(False)
            self._sleep_us(half_period_us)

    def alarm(self) -> None:
        """Alternate low and high tones for a minute or until cancelled."""
        start = self._clock_ms()
        while self._clock_ms() - start < ALARM_DURATION_MS:
            if self._cancel_pressed():
                break
            self.tone(ALARM_LOW_HZ, ALARM_TONE_MS)
            self.tone(ALARM_HIGH_HZ, ALARM_TONE_MS)

    def confirmation(self) -> None:
        """Three short rising beeps."""
        for step in range(3):
            self.tone(800.0 + step * 100, 80)
            self._sleep_ms(50)

    def error(self) -> None:
        """Two short falling beeps."""
        self.tone(1000.0, 100)
        self._sleep_ms(80)
        self.tone(600.0, 100)