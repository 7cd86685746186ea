"""A bounded book of daily alarms keyed by hour and minute."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

MAX_ALARMS = 10


@dataclass(frozen=True)
class Alarm:
    """An alarm at ``hours:minutes:seconds`` showing colour ``color``."""

    hours: int
    minutes: int
    color: int
    seconds: int = 0


class AlarmError(Exception):
    """Base class for alarm book errors."""


class DuplicateAlarmError(AlarmError):
    """An alarm already exists at that hour and minute."""


class AlarmLimitError(AlarmError):
    """The alarm book is full."""


class AlarmBook:
    """Alarms in the order they were added, at most ``capacity`` of them."""

    def __init__(self, capacity: int = MAX_ALARMS) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._alarms: list[Alarm] = []

    def add(self, hours: int, minutes: int, color: int) -> Alarm:
        """Store a new alarm and return it.

        Raises DuplicateAlarmError if one is already set for that time and
        AlarmLimitError if the book is full.
        """
        if any(a.hours == hours and a.minutes == minutes for a in self._alarms):
            raise DuplicateAlarmError(f"alarm already set for {hours:02d}:{minutes:02d}")
        if len(self._alarms) >= self.capacity:
            raise AlarmLimitError(f"no room for more than {self.capacity} alarms")
        alarm = Alarm(hours, minutes, color)
        self._alarms.append(alarm)
        return alarm

    def due(self, hour: int, minute: int, second: int) -> list[Alarm]:
        """Return the alarms that go off exactly at the given time."""
        return [
            a
            for a in self._alarms
            if a.hours == hour and a.minutes == minute and a.seconds == second
        ]

    def __len__(self) -> int:
        return len(self._alarms)

    def __iter__(self) -> Iterator[Alarm]:
        return iter(self._alarms)