from __future__ import annotations

import httpx
from mcp.server.fastmcp import FastMCP

from efa_mcp.application.departure_board_service import DepartureBoardService
from efa_mcp.application.route_service import RouteService
from efa_mcp.application.station_service import StationService
from efa_mcp.infrastructure.efa_client import DEFAULT_TIMEOUT, EfaClient
from efa_mcp.mcp.tools import register_tools


def create_mcp_app() -> FastMCP:
    """Create and configure the FastMCP application with all services wired."""
    http_client = httpx.AsyncClient(timeout=DEFAULT_TIMEOUT, follow_redirects=True)
    efa_client = EfaClient(http_client)

    departure_svc = DepartureBoardService(efa_client)
    route_svc = RouteService(efa_client)
    station_svc = StationService(efa_client)

    mcp = FastMCP("EFA Real-Time Monitor", stateless_http=True)
    register_tools(mcp, departure_svc, route_svc, station_svc)
    return mcp
