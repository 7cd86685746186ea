"""Push buttons wired active-low with pull-ups."""

from __future__ import annotations

from typing import Callable

DEBOUNCE_MS = 50


class Button:
    """A push button read through ``read(pin)``, which returns the pin level.

    The pin is pulled up, so a pressed button reads as a low level.
    """

    def __init__(
        self,
        pin: int,
        read: Callable[[int], bool],
        sleep_ms: Callable[[int], None],
    ) -> None:
        self.pin = pin
        self._read = read
        self._sleep_ms = sleep_ms

    def is_pressed(self) -> bool:
        """Return True while the button is held down."""
        return not self._read(self.pin)

    def debounce(self) -> bool:
        """Return True after a full press-and-release, False if not pressed.

        A press must still be seen after a short settling delay; the call then
        waits until the button is released.
        """
        if not self.is_pressed():
            return False
        self._sleep_ms(DEBOUNCE_MS)
        if not self.is_pressed():
            return False
        while self.is_pressed():
            pass
        return True