"""Incoming and outgoing club events and their text form."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import ClassVar

from clubledger.clocktime import ClockTime


class EventId(IntEnum):
    """Numeric identifiers of event kinds."""

    CLIENT_ARRIVED = 1
    CLIENT_SAT = 2
    CLIENT_WAITING = 3
    CLIENT_LEFT = 4
    CLIENT_LEFT_END_OF_DAY = 11
    CLIENT_SAT_FROM_QUEUE = 12
    ERROR = 13


@dataclass(frozen=True)
class Event:
    """An event at a given time; printed as time, id, then its fields."""

    time: ClockTime
    event_id: ClassVar[EventId]

    def __str__(self) -> str:
        parts = [str(self.time), str(int(self.event_id))]
        parts.extend(
            str(getattr(self, f.name)) for f in fields(self) if f.name != "time"
        )
        return " ".join(parts)


@dataclass(frozen=True)
class ClientArrived(Event):
    """A client came to the club (incoming)."""

    client_name: str
    event_id: ClassVar[EventId] = EventId.CLIENT_ARRIVED


@dataclass(frozen=True)
class ClientSat(Event):
    """A client sat at a table (incoming)."""

    client_name: str
    table_id: int
    event_id: ClassVar[EventId] = EventId.CLIENT_SAT


@dataclass(frozen=True)
class ClientWaiting(Event):
    """A client is waiting for a table (incoming)."""

    client_name: str
    event_id: ClassVar[EventId] = EventId.CLIENT_WAITING


@dataclass(frozen=True)
class ClientLeft(Event):
    """A client left the club (incoming)."""

    client_name: str
    event_id: ClassVar[EventId] = EventId.CLIENT_LEFT


@dataclass(frozen=True)
class ClientLeftEndOfDay(Event):
    """A client had to leave (outgoing)."""

    client_name: str
    event_id: ClassVar[EventId] = EventId.CLIENT_LEFT_END_OF_DAY


@dataclass(frozen=True)
class ClientSatFromQueue(Event):
    """A waiting client took a freed table (outgoing)."""

    client_name: str
    table_id: int
    event_id: ClassVar[EventId] = EventId.CLIENT_SAT_FROM_QUEUE


@dataclass(frozen=True)
class ErrorEvent(Event):
    """An error raised while handling an event (outgoing)."""

    message: str
    event_id: ClassVar[EventId] = EventId.ERROR