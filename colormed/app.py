"""Medication alarm clock: shows the time, keeps alarms and lights a colour when one fires."""

from __future__ import annotations

import argparse
import time
from datetime import datetime, timedelta
from typing import Callable, Protocol, Sequence

from .alarms import Alarm, AlarmBook, AlarmLimitError, DuplicateAlarmError
from .buttons import Button
from .buzzer import Buzzer
from .led_matrix import Color, LedMatrix
from .ssd1306 import SSD1306, setup_ssd1306

DISPLAY_ADDRESS = 0x3C
CONFIG_BUTTON_PIN = 22
EDIT_BUTTON_PIN = 5
CONFIRM_BUTTON_PIN = 6

DEBOUNCE_US = 4000
COLOR_OPTIONS = ("1. Verde", "2. Vermelho", "3. Azul", "4. Amarelo", "5. Roxo")
DEFAULT_TIME = datetime(2025, 2, 26, 12, 13, 0)
MIN_VALID_YEAR = 2024


class Clock(Protocol):
    def now(self) -> datetime: ...

    def set(self, value: datetime) -> None: ...


def init_rtc(clock: Clock) -> datetime:
    """Make sure the clock holds a plausible time and return it.

    A clock reporting a year before 2024 is treated as reset and set to
    the default time.
    """
    current = clock.now()
    if current.year < MIN_VALID_YEAR:
        print("RTC zerado, definindo hora...")
        clock.set(DEFAULT_TIME)
        current = clock.now()
    return current


class ColorMed:
    """The alarm clock's state and screens."""

    def __init__(
        self,
        display: SSD1306,
        buzzer: Buzzer,
        matrix: LedMatrix,
        edit_button: Button,
        confirm_button: Button,
        clock: Clock,
        sleep_ms: Callable[[int], None],
    ) -> None:
        self.display = display
        self.buzzer = buzzer
        self.matrix = matrix
        self.edit_button = edit_button
        self.confirm_button = confirm_button
        self.clock = clock
        self._sleep_ms = sleep_ms
        self.alarms = AlarmBook()
        self.last_press_us = 0
        self.configuring = False
        self.in_configuration = False
        self.alarm_active = False
        self.hours = 0
        self.minutes = 0
        self.selected_color = 0

    def on_config_button(self, now_us: int) -> bool:
        """Handle a press of the configuration button; return whether setup is pending."""
        now_us &= 0xFFFFFFFF
        if (now_us - self.last_press_us) & 0xFFFFFFFF > DEBOUNCE_US:
            self.last_press_us = now_us
            if not self.in_configuration:
                self.configuring = True
        return self.configuring

    def _frame(self) -> None:
        self.display.fill(False)
        self.display.rect(1, 1, 126, 62, True, False)

    def display_time(self) -> str:
        """Show the current time (and the alarm banner if one is ringing); return the time text."""
        now = self.clock.now()
        text = f"{now.hour:02d}:{now.minute:02d}"
        self._frame()
        self.display.draw_string(text, 44, 28)
        if self.alarm_active:
            self.display.draw_string("ALARME ATIVO!", 10, 45)
        self.display.send_data()
        return text

    def configure_time(self, label: str, value: int, limit: int) -> int:
        """Let the user step ``value`` through 0..limit-1 until confirmed; return it."""
        editing_minutes = label == "Minutos:"
        arrow_x = 68 if editing_minutes else 44
        while not self.confirm_button.is_pressed():
            hours = self.hours if editing_minutes else value
            minutes = value if editing_minutes else self.minutes
            self._frame()
            self.display.draw_string(label, 10, 5)
            self.display.draw_string(f"{hours:02d}:{minutes:02d}", 44, 28)
            self.display.draw_string("^^", arrow_x, 40)
            self.display.send_data()
            if self.edit_button.debounce():
                value = (value + 1) % limit
                self._sleep_ms(20)
        self.buzzer.confirmation()
        self._sleep_ms(150)
        return value

    def show_color_list(self) -> None:
        """Show the colour menu with a marker on the selected entry."""
        self.display.fill(False)
        self.display.draw_string("Escolha uma cor", 0, 0)
        for row, option in enumerate(COLOR_OPTIONS):
            y = 10 + row * 10
            self.display.draw_string(option, 0, y)
            if row == self.selected_color:
                self.display.draw_char("<", 100, y)
        self.display.send_data()

    def configure_alarm(self) -> Alarm | None:
        """Run the hour, minute and colour screens and store the resulting alarm."""
        self.in_configuration = True
        self.hours = self.configure_time("Horas:", self.hours, 24)
        self.minutes = self.configure_time("Minutos:", self.minutes, 60)
        while not self.confirm_button.is_pressed():
            self.show_color_list()
            if self.edit_button.debounce():
                self.selected_color = (self.selected_color + 1) % len(COLOR_OPTIONS)
            if self.confirm_button.debounce():
                print(f"Cor selecionada: {COLOR_OPTIONS[self.selected_color]}")
                break
            self._sleep_ms(30)
        alarm = self.add_alarm(self.hours, self.minutes, self.selected_color)
        self.hours = self.minutes = self.selected_color = 0
        self.in_configuration = False
        self.configuring = False
        return alarm

    def _show_failure(self, lines: Sequence[tuple[str, int, int]]) -> None:
        self._frame()
        for text, x, y in lines:
            self.display.draw_string(text, x, y)
        self.display.send_data()
        self.buzzer.error()
        self._sleep_ms(2000)

    def add_alarm(self, hours: int, minutes: int, color: int) -> Alarm | None:
        """Store an alarm; on a duplicate or a full book show an error and return None."""
        try:
            alarm = self.alarms.add(hours, minutes, color)
        except DuplicateAlarmError:
            self._show_failure((("ALARME JA", 30, 20), (" EXISTE!", 30, 32)))
            return None
        except AlarmLimitError:
            self._show_failure((("LIMITE ATINGIDO", 5, 25),))
            return None
        self.buzzer.confirmation()
        print(f"Alarme salvo: {hours:02d}:{minutes:02d} | Cor: {color}")
        return alarm

    def check_alarms(self) -> list[Alarm]:
        """Ring every alarm due at the current second; return those that rang."""
        now = self.clock.now()
        due = self.alarms.due(now.hour, now.minute, now.second)
        for alarm in due:
            self.alarm_active = True
            self.in_configuration = True
            self.display_time()
            self.matrix.draw(alarm.color)
            self.buzzer.alarm()
            self.matrix.draw(Color.OFF)
            self.in_configuration = False
            self.alarm_active = False
        return due

    def step(self) -> None:
        """One pass of the main loop."""
        self.display_time()
        self.check_alarms()
        if self.configuring:
            self.configure_alarm()
        self._sleep_ms(10)


class _NullBus:
    def write(self, address: int, data: bytes) -> None:
        pass


class _SimulatedClock:
    """A clock that starts reset and runs with the monotonic clock."""

    def __init__(self) -> None:
        self._base = datetime(2000, 1, 1)
        self._started = time.monotonic()

    def now(self) -> datetime:
        elapsed = time.monotonic() - self._started
        return self._base + timedelta(seconds=elapsed)

    def set(self, value: datetime) -> None:
        self._base = value
        self._started = time.monotonic()


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000)


def _alarm_spec(text: str) -> tuple[int, int, int]:
    try:
        hours, minutes, color = (int(part) for part in text.split(":"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected HH:MM:COLOR, got {text!r}") from None
    if not (0 <= hours < 24 and 0 <= minutes < 60 and 0 <= color < len(COLOR_OPTIONS)):
        raise argparse.ArgumentTypeError(f"alarm out of range: {text!r}")
    return hours, minutes, color


def main(argv: Sequence[str] | None = None) -> int:
    """Run the clock on simulated peripherals and print the final screen."""
    parser = argparse.ArgumentParser(prog="colormed", description=__doc__)
    parser.add_argument("--steps", type=int, default=None,
                        help="number of main-loop passes (default: run forever)")
    parser.add_argument("--alarm", type=_alarm_spec, action="append", default=[],
                        metavar="HH:MM:COLOR", help="alarm to store before starting")
    args = parser.parse_args(argv)

    display = setup_ssd1306(_NullBus(), DISPLAY_ADDRESS)
    buzzer = Buzzer(
        write=lambda level: None,
        sleep_us=lambda us: time.sleep(us / 1e6),
        sleep_ms=_sleep_ms,
        clock_ms=lambda: int(time.monotonic() * 1000),
        cancel_pressed=lambda: False,
    )
    matrix = LedMatrix(lambda word: None)
    released = lambda pin: True  # noqa: E731
    clock = _SimulatedClock()
    app = ColorMed(
        display,
        buzzer,
        matrix,
        Button(EDIT_BUTTON_PIN, released, _sleep_ms),
        Button(CONFIRM_BUTTON_PIN, released, _sleep_ms),
        clock,
        _sleep_ms,
    )
    init_rtc(clock)
    _sleep_ms(500)
    for hours, minutes, color in args.alarm:
        app.add_alarm(hours, minutes, color)

    done = 0
    while args.steps is None or done < args.steps:
        app.step()
        done += 1
    print(display.to_text())
    return 0