from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypedDict


@dataclass
class Station:
    """A stop, point of interest or street returned by the stop finder."""

    id: str
    name: str
    type: str  # "stop", "poi", "street", ... as reported upstream
    city: str  # ref.place
    stateless: str  # Opaque token needed by follow-up requests


@dataclass
class ServingLine:
    """The line/vehicle serving a departure."""

    key: str
    code: str
    number: str
    symbol: str
    mot_type: str  # EFA means-of-transport code, e.g. "4" for tram
    realtime: bool  # True only when upstream realtime == "1"
    direction: str
    direction_from: str
    name: str
    delay: int | None = None


@dataclass
class Departure:
    """A single departure entry from a stop's departure board."""

    time: str  # Scheduled time, HH:MM
    realtime: str | None  # Real-time corrected HH:MM; None without realDateTime
    countdown: int | None  # Minutes until departure
    line: str
    direction: str
    platform: str
    via: str
    delay: int | None  # Minutes
    message: str
    vehicle_type: str
    monitored: bool  # realtimeTripStatus == "MONITORED"
    serving_line: ServingLine


@dataclass
class DepartureMessages:
    """Free-text messages attached to a departure board, grouped by scope."""

    general: list[str] = field(default_factory=list)
    stop: list[str] = field(default_factory=list)
    line: list[str] = field(default_factory=list)


@dataclass
class DepartureBoard:
    """Departures of one stop plus its messages."""

    stop_name: str
    departures: list[Departure]
    messages: DepartureMessages
    timestamp: str  # ISO-8601 UTC generation time


# The trip request JSON is passed through unchanged; these shapes only
# document what callers can expect to find in it.


class RouteStop(TypedDict, total=False):
    time: str
    station: str
    platform: str


class RouteSegment(TypedDict, total=False):
    departure: RouteStop
    arrival: RouteStop
    line: str
    direction: str
    means: str
    duration: str
    realtime: bool


class Route(TypedDict, total=False):
    duration: str
    fare: str
    segments: list[RouteSegment]
    changes: int


class RouteResponse(TypedDict, total=False):
    routes: list[Route]
    timestamp: str
