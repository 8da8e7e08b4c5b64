"""Time of day with minute precision, written as ``HH:MM``."""

from __future__ import annotations

from dataclasses import dataclass


class InvalidTimeError(ValueError):
    """Raised when a time of day is malformed or out of range."""


@dataclass(frozen=True, order=True)
class ClockTime:
    """A time of day: hours 0-23 and minutes 0-59."""

    hours: int = 0
    minutes: int = 0

    def __post_init__(self) -> None:
        if not (0 <= self.hours <= 23 and 0 <= self.minutes <= 59):
            raise InvalidTimeError(
                "Invalid time values. Hours: 0-23, Minutes: 0-59"
            )

    @classmethod
    def from_minutes(cls, total: int) -> ClockTime:
        """Build a time from a count of minutes since midnight."""
        return cls(*divmod(total, 60))

    def total_minutes(self) -> int:
        """Minutes since midnight."""
        return self.hours * 60 + self.minutes

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"


def parse_time(text: str) -> ClockTime:
    """Parse an ``HH:MM`` string, raising InvalidTimeError if it is not one."""
    if len(text) != 5 or text[2] != ":":
        raise InvalidTimeError("Invalid time format. Expected HH:MM")
    try:
        hours = int(text[:2])
        minutes = int(text[3:])
    except ValueError as exc:
        raise InvalidTimeError(
            "Invalid time values. Hours: 0-23, Minutes: 0-59"
        ) from exc
    return ClockTime(hours, minutes)