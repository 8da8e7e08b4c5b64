"""State of a single club visitor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Client:
    """A visitor: whether they are in the club, waiting, or at a table."""

    name: str
    in_club: bool = False
    in_waiting: bool = False
    at_table: bool = False
    table_id: int = 0

    def enter_club(self) -> None:
        """Mark the client as inside the club."""
        self.in_club = True

    def wait(self) -> None:
        """Put the client in the waiting list."""
        self.in_waiting = True

    def leave_waiting_list(self) -> None:
        """Take the client out of the waiting list."""
        self.in_waiting = False

    def sit_at_table(self, table_id: int) -> None:
        """Seat the client at the given table."""
        self.at_table = True
        self.table_id = table_id

    def leave_club(self) -> None:
        """Reset every state flag as the client leaves."""
        self.in_club = False
        self.in_waiting = False
        self.at_table = False
        self.table_id = 0