from __future__ import annotations

import logging
from typing import Any

from efa_mcp.domain.entities import Departure, DepartureBoard, DepartureMessages, ServingLine
from efa_mcp.domain.exceptions import InvalidResponseError, ValidationError
from efa_mcp.domain.services import as_list, format_efa_time, message_contents, parse_leading_int
from efa_mcp.domain.value_objects import DepartureBoardParams
from efa_mcp.infrastructure.efa_client import EfaClient
from efa_mcp.infrastructure.time_utils import now_iso

DEFAULT_LIMIT = 10


class DepartureBoardService:
    """Departure monitor (XSLT_DM_REQUEST) for a single stop."""

    ENDPOINT = "/XSLT_DM_REQUEST"

    def __init__(self, client: EfaClient, logger: logging.Logger | None = None) -> None:
        self._client = client
        self._logger = logger or logging.getLogger(__name__)

    @staticmethod
    def transform_params(params: DepartureBoardParams) -> dict[str, Any]:
        """Map a DepartureBoardParams to EFA wire parameters.

        Optional flags are only added when requested; empty filter lists are
        not sent at all.
        """
        wire: dict[str, Any] = {
            "outputFormat": "json",
            "language": "de",
            "stateless": 1,
            "mode": "direct",
            "type_dm": "stop",
            "name_dm": params.stop_id,
            "limit": params.max_results or DEFAULT_LIMIT,
            "useRealtime": 1,
            "locationServerActive": 1,
        }

        if params.use_realtime:
            wire["itdDateTimeDepArr"] = "dep"
            wire["itdLPxx_useRealtime"] = 1

        if params.use_countdown:
            wire["itdLPxx_showTimeMode"] = "countdown"

        if params.show_platform:
            wire["itdLPxx_showPlatform"] = 1

        if params.show_via:
            wire["itdLPxx_showVia"] = 1

        if params.included_means:
            wire["includedMeans"] = list(params.included_means)

        if params.excluded_means:
            wire["excludedMeans"] = list(params.excluded_means)

        if params.filter_lines:
            wire["line"] = "|".join(params.filter_lines)

        return wire

    @classmethod
    def transform_response(cls, payload: Any) -> DepartureBoard:
        """Map a raw XSLT_DM_REQUEST payload to a DepartureBoard.

        Raises InvalidResponseError when departureList is missing or null.
        """
        if not isinstance(payload, dict) or payload.get("departureList") is None:
            raise InvalidResponseError("Invalid response format: missing departureList")

        departures = [
            cls._map_departure(entry)
            for entry in as_list(payload["departureList"])
            if isinstance(entry, dict)
        ]

        return DepartureBoard(
            stop_name=payload.get("stopName") or "",
            departures=departures,
            messages=DepartureMessages(
                general=message_contents(payload.get("generalMessages")),
                stop=message_contents(payload.get("stopMessages")),
                line=message_contents(payload.get("lineMessages")),
            ),
            timestamp=now_iso(),
        )

    async def get_departure_board(self, params: DepartureBoardParams) -> DepartureBoard:
        """Fetch and map the departure board of params.stop_id.

        Errors are logged and re-raised unchanged.
        """
        try:
            self._logger.debug("Getting departure board with params: %s", params)
            wire = self.transform_params(params)
            payload = await self._client.request(self.ENDPOINT, wire)
            return self.transform_response(payload)
        except Exception as exc:
            self._logger.error("Error getting departure board: %s", exc)
            raise

    async def get_multi_stop_departure_board(
        self,
        stop_ids: list[str],
        **options: Any,
    ) -> DepartureBoard:
        """Departure board for several stops.

        Only the first stop id is queried: the result covers one stop even when
        more are supplied. options are the remaining DepartureBoardParams
        fields.
        """
        if not stop_ids:
            raise ValidationError("At least one stop id is required")
        return await self.get_departure_board(DepartureBoardParams(stop_id=stop_ids[0], **options))

    @staticmethod
    def _map_departure(raw: dict) -> Departure:  # type: ignore[type-arg]
        """Map a single departureList entry to the Departure domain entity.

        Key mappings:
        - raw["dateTime"]["time"] or hour/minute → time
        - raw["realDateTime"] → realtime (None when absent or empty)
        - raw["servingLine"]["number"] or ["symbol"] → line
        - raw["servingLine"]["motType"] → vehicle_type
        - raw["realtimeTripStatus"] == "MONITORED" → monitored
        """
        serving_line = raw.get("servingLine")
        if not isinstance(serving_line, dict):
            serving_line = {}
        date_time = raw.get("dateTime")
        # An empty realDateTime object carries no correction: realtime stays None.
        real_date_time = raw.get("realDateTime")

        scheduled = ""
        if isinstance(date_time, dict):
            scheduled = date_time.get("time") or format_efa_time(date_time)

        delay = parse_leading_int(serving_line.get("delay"))

        return Departure(
            time=scheduled or "",
            realtime=format_efa_time(real_date_time) if real_date_time else None,
            countdown=parse_leading_int(raw.get("countdown")),
            line=serving_line.get("number") or serving_line.get("symbol") or "",
            direction=serving_line.get("direction") or "",
            platform=raw.get("platform") or "",
            via=serving_line.get("via") or "",
            delay=delay,
            message=serving_line.get("message") or "",
            vehicle_type=serving_line.get("motType") or "",
            monitored=raw.get("realtimeTripStatus") == "MONITORED",
            serving_line=ServingLine(
                key=serving_line.get("key") or "",
                code=serving_line.get("code") or "",
                number=serving_line.get("number") or "",
                symbol=serving_line.get("symbol") or "",
                mot_type=serving_line.get("motType") or "",
                realtime=serving_line.get("realtime") == "1",
                direction=serving_line.get("direction") or "",
                direction_from=serving_line.get("directionFrom") or "",
                name=serving_line.get("name") or "",
                delay=delay,
            ),
        )
