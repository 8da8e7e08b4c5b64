"""Replays a day of club events and produces the end-of-day report."""

from __future__ import annotations

import re
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

from clubledger.client import Client
from clubledger.clocktime import ClockTime, InvalidTimeError, parse_time
from clubledger.config import ClubConfig
from clubledger.events import (
    ClientArrived,
    ClientLeft,
    ClientLeftEndOfDay,
    ClientSat,
    ClientSatFromQueue,
    ClientWaiting,
    ErrorEvent,
    Event,
    EventId,
)
from clubledger.table import Table

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_ULONG_MAX = 2**64 - 1


class ClubInputError(Exception):
    """Raised when the input cannot be accepted; the message is what gets printed."""

    def __init__(self, line: str) -> None:
        super().__init__(line)
        self.line = line

    def __str__(self) -> str:
        return self.line


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def _leading_int(text: str) -> int:
    """Read an integer at the start of the text, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    return int(match.group(1))


def validate_client_name(name: str) -> bool:
    """A name is non-empty and made of ASCII letters, digits, '-' and '_'."""
    return bool(name) and all(
        (c.isascii() and c.isalnum()) or c in "-_" for c in name
    )


def parse_config(lines: Iterable[str]) -> ClubConfig:
    """Read the three configuration lines from the start of ``lines``.

    When ``lines`` is an iterator, exactly three lines are consumed from it.
    """
    it = iter(lines)

    num_tables_line = next(it, None)
    if num_tables_line is None:
        raise ClubInputError("Empty file")
    num_tables_line = _strip_newline(num_tables_line)
    try:
        num_tables = _leading_int(num_tables_line)
    except ValueError:
        raise ClubInputError(num_tables_line) from None
    if num_tables <= 0 or num_tables > _ULONG_MAX:
        raise ClubInputError(num_tables_line)

    times_line = next(it, None)
    if times_line is None:
        raise ClubInputError("Missing time configuration line")
    times_line = _strip_newline(times_line)
    tokens = times_line.split()
    if len(tokens) < 2:
        raise ClubInputError(times_line)
    try:
        open_time = parse_time(tokens[0])
        close_time = parse_time(tokens[1])
    except InvalidTimeError:
        raise ClubInputError(times_line) from None
    if close_time <= open_time:
        raise ClubInputError(times_line)

    rate_line = next(it, None)
    if rate_line is None:
        raise ClubInputError("Missing hourly rate line")
    rate_line = _strip_newline(rate_line)
    try:
        hourly_rate = _leading_int(rate_line)
    except ValueError:
        raise ClubInputError(rate_line) from None
    if not _INT_MIN <= hourly_rate <= _INT_MAX or hourly_rate <= 0:
        raise ClubInputError(rate_line)

    return ClubConfig(num_tables, open_time, close_time, hourly_rate)


def parse_event(line: str, config: ClubConfig) -> Event:
    """Parse one incoming event line, raising ClubInputError with the line if it is bad."""
    line = _strip_newline(line)
    tokens = line.split()
    try:
        time = parse_time(tokens[0] if tokens else "")
    except InvalidTimeError:
        raise ClubInputError(line) from None
    try:
        event_id = int(tokens[1])
    except (IndexError, ValueError):
        raise ClubInputError(line) from None

    name = tokens[2] if len(tokens) > 2 else ""
    if event_id not in (
        EventId.CLIENT_ARRIVED,
        EventId.CLIENT_SAT,
        EventId.CLIENT_WAITING,
        EventId.CLIENT_LEFT,
    ):
        raise ClubInputError(line)
    if not validate_client_name(name):
        raise ClubInputError(line)

    if event_id == EventId.CLIENT_ARRIVED:
        return ClientArrived(time, name)
    if event_id == EventId.CLIENT_WAITING:
        return ClientWaiting(time, name)
    if event_id == EventId.CLIENT_LEFT:
        return ClientLeft(time, name)

    try:
        table_id = int(tokens[3])
    except (IndexError, ValueError):
        raise ClubInputError(line) from None
    if not 1 <= table_id <= config.num_tables:
        raise ClubInputError(line)
    return ClientSat(time, name, table_id)


class ClubManager:
    """Keeps the state of the club and the log of events for one day."""

    def __init__(self, config: ClubConfig) -> None:
        self.config = config
        self.clients: dict[str, Client] = {}
        self.tables: list[Table] = [
            Table(number) for number in range(1, config.num_tables + 1)
        ]
        self.queue: deque[str] = deque()
        self.events: list[Event] = []

    def process(self, event: Event) -> None:
        """Record an incoming event and apply it."""
        self.events.append(event)
        if isinstance(event, ClientArrived):
            self._client_arrived(event)
        elif isinstance(event, ClientSat):
            self._client_sat(event)
        elif isinstance(event, ClientWaiting):
            self._client_waiting(event)
        elif isinstance(event, ClientLeft):
            self._client_left(event)

    def finalize_day(self) -> None:
        """Send every remaining client away at closing time, in name order."""
        close_time = self.config.end_time
        for name in sorted(self.clients):
            self.events.append(ClientLeftEndOfDay(close_time, name))
            client = self.clients[name]
            if client.at_table:
                self._table(client.table_id).free(close_time, self.config.hourly_rate)
            client.leave_club()
        self.clients.clear()
        self.queue.clear()

    def report(self) -> list[str]:
        """The output lines: opening time, events, closing time, table statistics."""
        lines = [str(self.config.start_time)]
        lines.extend(str(event) for event in self.events)
        lines.append(str(self.config.end_time))
        lines.extend(
            f"{table.table_id} {table.revenue} {table.total_occupied_time}"
            for table in self.tables
        )
        return lines

    def _table(self, table_id: int) -> Table:
        return self.tables[table_id - 1]

    def _error(self, time: ClockTime, message: str) -> None:
        self.events.append(ErrorEvent(time, message))

    def _has_free_table(self) -> bool:
        return any(not table.occupied for table in self.tables)

    def _remove_from_queue(self, name: str) -> None:
        self.queue = deque(waiting for waiting in self.queue if waiting != name)

    def _seat_from_queue(self, time: ClockTime, table_id: int) -> None:
        if not self.queue:
            return
        name = self.queue.popleft()
        client = self.clients.get(name)
        if client is not None:
            client.sit_at_table(table_id)
            self._table(table_id).occupy(name, time)
            self.events.append(ClientSatFromQueue(time, name, table_id))

    def _client_arrived(self, event: ClientArrived) -> None:
        name = event.client_name
        if name in self.clients:
            self._error(event.time, "YouShallNotPass")
            return
        if not self.config.is_within_open_hours(event.time):
            self._error(event.time, "NotOpenYet")
            return
        client = Client(name)
        client.enter_club()
        self.clients[name] = client

    def _client_sat(self, event: ClientSat) -> None:
        name = event.client_name
        client = self.clients.get(name)
        if client is None:
            self._error(event.time, "ClientUnknown")
            return
        table = self._table(event.table_id)
        if table.occupied:
            self._error(event.time, "PlaceIsBusy")
            return
        if client.at_table:
            self._table(client.table_id).free(event.time, self.config.hourly_rate)
        client.sit_at_table(event.table_id)
        table.occupy(name, event.time)
        self._remove_from_queue(name)

    def _client_waiting(self, event: ClientWaiting) -> None:
        name = event.client_name
        client = self.clients.get(name)
        if client is None:
            self._error(event.time, "ClientUnknown")
            return
        if self._has_free_table():
            self._error(event.time, "ICanWaitNoLonger!")
            return
        if len(self.queue) >= len(self.tables):
            self.events.append(ClientLeftEndOfDay(event.time, name))
            client.leave_club()
            del self.clients[name]
            return
        client.wait()
        self.queue.append(name)

    def _client_left(self, event: ClientLeft) -> None:
        name = event.client_name
        client = self.clients.get(name)
        if client is None:
            self._error(event.time, "ClientUnknown")
            return
        if client.at_table:
            table_id = client.table_id
            self._table(table_id).free(event.time, self.config.hourly_rate)
            self._seat_from_queue(event.time, table_id)
        client.leave_club()
        del self.clients[name]
        self._remove_from_queue(name)


def simulate(lines: Iterable[str]) -> list[str]:
    """Run a whole day from input lines and return the report lines."""
    it: Iterator[str] = iter(lines)
    config = parse_config(it)
    manager = ClubManager(config)
    for raw in it:
        line = _strip_newline(raw)
        event = parse_event(line, config)
        try:
            manager.process(event)
        except InvalidTimeError:
            raise ClubInputError(line) from None
    manager.finalize_day()
    return manager.report()


def run(path: str) -> list[str]:
    """Simulate the day described in the file at ``path``."""
    try:
        handle = open(path, encoding="utf-8", newline="")
    except OSError:
        raise ClubInputError(f"Failed to open file: {path}") from None
    with handle:
        return simulate(handle)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: report for the input file given as the argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("usage: clubledger <input_file>", file=sys.stderr)
        return 1
    try:
        lines = run(args[0])
    except ClubInputError as exc:
        print(exc)
        return 1
    for line in lines:
        print(line)
    return 0