from __future__ import annotations

import dataclasses
import json
import logging

from mcp import types
from mcp.server.fastmcp import FastMCP

from efa_mcp.application.departure_board_service import DepartureBoardService
from efa_mcp.application.route_service import RouteService
from efa_mcp.application.station_service import StationService
from efa_mcp.domain.exceptions import ApiError, ValidationError
from efa_mcp.domain.value_objects import (
    Coordinates,
    DepartureBoardParams,
    RouteParams,
    StationSearchParams,
    StationType,
    TripMode,
)
from efa_mcp.infrastructure.time_utils import parse_itd_date, parse_itd_time

logger = logging.getLogger(__name__)

_RESULT_URI = "mcp://efa-mcp/result"


def _as_resource(json_str: str) -> list[types.EmbeddedResource]:
    """Wrap a JSON string as an embedded resource so the LLM does not narrate it."""
    return [
        types.EmbeddedResource(
            type="resource",
            resource=types.TextResourceContents(
                uri=_RESULT_URI,  # type: ignore[arg-type]
                mimeType="application/json",
                text=json_str,
            ),
        )
    ]


def _error_json(message: str) -> str:
    return json.dumps({"error": message}, ensure_ascii=False)


def _handle_exception(exc: Exception) -> list[types.EmbeddedResource]:
    if isinstance(exc, ValidationError):
        return _as_resource(_error_json(str(exc)))
    if isinstance(exc, ApiError):
        if exc.status_code == 400:
            return _as_resource(_error_json("Invalid request. Please check your inputs."))
        if exc.status_code == 404:
            return _as_resource(_error_json("Resource not found."))
        if exc.status_code >= 500:
            return _as_resource(
                _error_json(f"Upstream API error ({exc.status_code}): {exc}")
            )
        return _as_resource(_error_json(str(exc)))
    if isinstance(exc, ValueError):
        return _as_resource(_error_json(str(exc)))
    logger.exception("Unexpected error in MCP tool: %s", exc)
    return _as_resource(_error_json("An unexpected error occurred."))


def _parse_station_type(station_type: str) -> StationType:
    try:
        return StationType(station_type.lower())
    except ValueError:
        raise ValueError(f"Unknown station type: {station_type}")


def _parse_trip_mode(trip_mode: str | None) -> TripMode | None:
    if trip_mode is None:
        return None
    for mode in TripMode:
        if mode.value.lower() == trip_mode.lower():
            return mode
    raise ValueError(f"Unknown trip mode: {trip_mode}")


def _parse_coordinates(lat: float | None, lon: float | None) -> Coordinates | None:
    if lat is None and lon is None:
        return None
    if lat is None or lon is None:
        raise ValueError("lat and lon must be given together")
    return Coordinates(lat=lat, lon=lon)


def register_tools(
    mcp: FastMCP,
    departure_svc: DepartureBoardService,
    route_svc: RouteService,
    station_svc: StationService,
) -> None:
    """Bind all @mcp.tool decorators. Called once during server setup."""

    @mcp.tool()
    async def search_stations(
        query: str,
        station_type: str = "stop",
        max_results: int | None = None,
        lat: float | None = None,
        lon: float | None = None,
        radius: int | None = None,
    ) -> list[types.EmbeddedResource]:
        """Search stops, points of interest or streets by name.

        An empty result means no match or a failed search.

        Args:
            query: Free-text search, e.g. "Stuttgart Hbf".
            station_type: One of "stop", "poi", "street" (default "stop").
            max_results: Optional cap on the number of hits.
            lat: Optional latitude to bias the search (requires lon).
            lon: Optional longitude to bias the search (requires lat).
            radius: Optional search radius in metres, only used with lat/lon.
        """
        try:
            if not query.strip():
                return _as_resource(_error_json("Query cannot be empty"))
            params = StationSearchParams(
                query=query.strip(),
                max_results=max_results,
                type=_parse_station_type(station_type),
                radius=radius,
                coordinates=_parse_coordinates(lat, lon),
            )
            stations = await station_svc.search_stations(params)
            result = {
                "stations": [dataclasses.asdict(s) for s in stations],
                "count": len(stations),
            }
            return _as_resource(json.dumps(result, ensure_ascii=False))
        except Exception as exc:
            return _handle_exception(exc)

    @mcp.tool()
    async def get_departure_board(
        stop_id: str,
        max_results: int = 10,
        use_realtime: bool = True,
        use_countdown: bool = False,
        show_platform: bool = False,
        show_via: bool = False,
        included_means: list[int] | None = None,
        excluded_means: list[int] | None = None,
        filter_lines: list[str] | None = None,
    ) -> list[types.EmbeddedResource]:
        """Get the next departures of a stop.

        Args:
            stop_id: Stop id from search_stations, e.g. "5006118".
            max_results: Maximum number of departures (default 10).
            use_realtime: Request real-time corrected times.
            use_countdown: Request minutes-until-departure.
            show_platform: Request platform information.
            show_via: Request via information.
            included_means: Optional EFA means-of-transport codes to include.
            excluded_means: Optional EFA means-of-transport codes to exclude.
            filter_lines: Optional line filters, e.g. ["U1", "S2"].
        """
        try:
            if not stop_id.strip():
                return _as_resource(_error_json("stop_id cannot be empty"))
            params = DepartureBoardParams(
                stop_id=stop_id.strip(),
                use_realtime=use_realtime,
                max_results=max_results,
                included_means=included_means or [],
                excluded_means=excluded_means or [],
                filter_lines=filter_lines or [],
                show_platform=show_platform,
                show_via=show_via,
                use_countdown=use_countdown,
            )
            board = await departure_svc.get_departure_board(params)
            result = dataclasses.asdict(board)
            result["count"] = len(board.departures)
            return _as_resource(json.dumps(result, ensure_ascii=False))
        except Exception as exc:
            return _handle_exception(exc)

    @mcp.tool()
    async def plan_route(
        origin: str,
        destination: str,
        date: str | None = None,
        time: str | None = None,
        is_arrival: bool = False,
        use_realtime: bool = False,
        trip_mode: str | None = None,
    ) -> list[types.EmbeddedResource]:
        """Plan a trip between two locations.

        Args:
            origin: Origin name, e.g. "Stuttgart".
            destination: Destination name, e.g. "Tübingen".
            date: Optional travel date as YYYYMMDD.
            time: Optional travel time as HHMM.
            is_arrival: Treat date/time as the arrival instead of departure.
            use_realtime: Request real-time data.
            trip_mode: Optional "shortest" or "leastChanges".
        """
        try:
            if not origin.strip() or not destination.strip():
                return _as_resource(_error_json("Origin and destination cannot be empty"))
            if date is not None:
                parse_itd_date(date)
            if time is not None:
                parse_itd_time(time)
            params = RouteParams(
                origin=origin.strip(),
                destination=destination.strip(),
                date=date,
                time=time,
                is_arrival=is_arrival,
                use_realtime=use_realtime,
                trip_mode=_parse_trip_mode(trip_mode),
            )
            route = await route_svc.get_route(params)
            return _as_resource(json.dumps(route, default=str, ensure_ascii=False))
        except Exception as exc:
            return _handle_exception(exc)
