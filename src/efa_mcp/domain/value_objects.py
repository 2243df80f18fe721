from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum


class StationType(str, Enum):
    """Search categories accepted by the stop finder type_sf parameter.

    Using (str, Enum) for Python 3.10 compatibility (StrEnum requires 3.11+).
    """

    STOP = "stop"
    POI = "poi"
    STREET = "street"


class TripMode(str, Enum):
    """Optimisation modes accepted by the trip request itdTripMode parameter."""

    SHORTEST = "shortest"
    LEAST_CHANGES = "leastChanges"


@dataclass(frozen=True)
class Coordinates:
    """WGS84 position in decimal degrees."""

    lat: float
    lon: float


@dataclass
class DepartureBoardParams:
    """Request for a departure board of a single stop."""

    stop_id: str | list[str]
    use_realtime: bool = False
    max_results: int | None = None  # None -> 10
    included_means: list[int] = field(default_factory=list)
    excluded_means: list[int] = field(default_factory=list)
    filter_lines: list[str] = field(default_factory=list)
    show_platform: bool = False
    show_via: bool = False
    use_countdown: bool = False


@dataclass
class RouteParams:
    """Request for a trip between two named locations."""

    origin: str
    destination: str
    date: str | dt.date | None = None  # YYYYMMDD when given as string
    time: str | dt.time | dt.datetime | None = None  # HHMM when given as string
    is_arrival: bool = False
    use_realtime: bool = False
    trip_mode: TripMode | None = None


@dataclass
class StationSearchParams:
    """Request for a stop finder search."""

    query: str
    max_results: int | None = None
    type: StationType | None = None  # None -> StationType.STOP
    radius: int | None = None  # Metres; only sent together with coordinates
    coordinates: Coordinates | None = None
