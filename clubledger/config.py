"""Club settings: number of tables, opening hours and hourly rate."""

from __future__ import annotations

from dataclasses import dataclass

from clubledger.clocktime import ClockTime


@dataclass(frozen=True)
class ClubConfig:
    """Fixed parameters of the club for one working day."""

    num_tables: int
    start_time: ClockTime
    end_time: ClockTime
    hourly_rate: int

    def is_within_open_hours(self, time: ClockTime) -> bool:
        """Whether the time lies between opening and closing, inclusive."""
        return self.start_time <= time <= self.end_time