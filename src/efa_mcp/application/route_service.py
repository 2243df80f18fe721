from __future__ import annotations

import logging
from typing import Any, cast

from efa_mcp.domain.entities import RouteResponse
from efa_mcp.domain.value_objects import RouteParams, TripMode
from efa_mcp.infrastructure.efa_client import EfaClient
from efa_mcp.infrastructure.time_utils import format_itd_date, format_itd_time


class RouteService:
    """Trip planner (XSLT_TRIP_REQUEST2).

    The trip JSON is returned as received: no reshaping, no validation.
    """

    ENDPOINT = "/XSLT_TRIP_REQUEST2"

    def __init__(self, client: EfaClient, logger: logging.Logger | None = None) -> None:
        self._client = client
        self._logger = logger or logging.getLogger(__name__)

    @staticmethod
    def transform_params(params: RouteParams) -> dict[str, Any]:
        """Map RouteParams to EFA wire parameters.

        Unset optional fields are omitted entirely.
        """
        wire: dict[str, Any] = {
            "name_origin": params.origin,
            "name_destination": params.destination,
            "outputFormat": "json",
        }

        if params.date:
            wire["itdDate"] = format_itd_date(params.date)

        if params.time:
            wire["itdTime"] = format_itd_time(params.time)

        if params.is_arrival:
            wire["itdTripDateTimeDepArr"] = "arr"

        if params.use_realtime:
            wire["useRealtime"] = 1

        if params.trip_mode:
            wire["itdTripMode"] = TripMode(params.trip_mode).value

        return wire

    async def get_route(self, params: RouteParams) -> RouteResponse:
        """Request a trip and return the upstream JSON unchanged."""
        wire = self.transform_params(params)
        self._logger.debug("Requesting route %s -> %s", params.origin, params.destination)
        return cast(RouteResponse, await self._client.request(self.ENDPOINT, wire))
