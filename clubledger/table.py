"""A gaming table with its revenue and occupancy record."""

from __future__ import annotations

from dataclasses import dataclass, field

from clubledger.clocktime import ClockTime


@dataclass
class Table:
    """A numbered table that tracks who sits there, its takings and time in use."""

    table_id: int
    occupied: bool = False
    start_time: ClockTime = field(default_factory=ClockTime)
    current_client: str = ""
    revenue: int = 0
    total_occupied_time: ClockTime = field(default_factory=ClockTime)

    def occupy(self, client_name: str, start_time: ClockTime) -> None:
        """Seat a client at the table from the given time."""
        self.occupied = True
        self.current_client = client_name
        self.start_time = start_time

    def free(self, end_time: ClockTime, hourly_rate: int) -> None:
        """Release the table, charging each started hour at the hourly rate."""
        minutes = end_time.total_minutes() - self.start_time.total_minutes()
        self.total_occupied_time = ClockTime.from_minutes(
            self.total_occupied_time.total_minutes() + minutes
        )
        self.revenue += (minutes + 59) // 60 * hourly_rate
        self.occupied = False
        self.current_client = ""