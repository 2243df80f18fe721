from __future__ import annotations

import asyncio
import logging
from typing import Any

from efa_mcp.domain.entities import Station
from efa_mcp.domain.services import format_coord
from efa_mcp.domain.value_objects import StationSearchParams, StationType
from efa_mcp.infrastructure.debounce import Debouncer
from efa_mcp.infrastructure.efa_client import EfaClient

DEFAULT_DEBOUNCE_MS = 300


class StationService:
    """Stop finder (XML_STOPFINDER_REQUEST).

    Searches never raise: failures are logged and reported as an empty result,
    so an empty list means either "no matches" or "search failed".
    """

    ENDPOINT = "/XML_STOPFINDER_REQUEST"

    def __init__(
        self,
        client: EfaClient,
        debouncer: Debouncer[list[Station]] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._client = client
        self._debouncer: Debouncer[list[Station]] = debouncer if debouncer is not None else Debouncer()
        self._logger = logger or logging.getLogger(__name__)

    @staticmethod
    def transform_params(params: StationSearchParams) -> dict[str, Any]:
        """Map StationSearchParams to EFA wire parameters.

        coord/coordOutputFormat are only sent with coordinates, radius_sf only
        with coordinates and a radius.
        """
        wire: dict[str, Any] = {
            "outputFormat": "json",
            "language": "de",
            "locationServerActive": 1,
            "stateless": 1,
            "type_sf": StationType(params.type or StationType.STOP).value,
            "name_sf": params.query,
        }

        if params.max_results:
            wire["anyMaxSizeHitList"] = params.max_results

        if params.coordinates is not None:
            wire["coordOutputFormat"] = "WGS84[DD.ddddd]"
            wire["coord"] = format_coord(params.coordinates.lat, params.coordinates.lon)

            if params.radius:
                wire["radius_sf"] = params.radius

        return wire

    @classmethod
    def transform_response(cls, payload: Any) -> list[Station]:
        """Map a raw stop finder payload to Stations.

        Returns [] when stopFinder is missing or its points are missing or not a
        list. EFA sends a lone {"point": {...}} for single hits; that shape is
        not a list and yields [] too.
        """
        if not isinstance(payload, dict):
            return []
        stop_finder = payload.get("stopFinder")
        if not isinstance(stop_finder, dict):
            return []
        points = stop_finder.get("points")
        if not isinstance(points, list):
            return []
        return [cls._map_station(point) for point in points if isinstance(point, dict)]

    async def search_stations(self, params: StationSearchParams) -> list[Station]:
        """Search stations; returns [] on any failure."""
        try:
            self._logger.debug("Searching stations with params: %s", params)
            wire = self.transform_params(params)
            payload = await self._client.request(self.ENDPOINT, wire)
            return self.transform_response(payload)
        except Exception as exc:
            self._logger.error("Error in search_stations: %s", exc)
            return []

    def search_stations_with_debounce(
        self,
        params: StationSearchParams,
        delay_ms: int = DEFAULT_DEBOUNCE_MS,
    ) -> asyncio.Future[list[Station]]:
        """Debounced search_stations. Await the returned future.

        A newer call within delay_ms supersedes this one; the superseded future
        never settles, so callers must not wait on it without a timeout.
        """
        return self._debouncer.submit(lambda: self.search_stations(params), delay_ms)

    @staticmethod
    def _map_station(point: dict) -> Station:  # type: ignore[type-arg]
        ref = point.get("ref")
        if not isinstance(ref, dict):
            ref = {}
        return Station(
            id=ref.get("id") or "",
            name=point.get("name") or "",
            type=point.get("type") or "",
            city=ref.get("place") or "",
            stateless=point.get("stateless") or "",
        )
