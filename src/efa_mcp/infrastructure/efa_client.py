from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from efa_mcp.domain.exceptions import ApiError
from efa_mcp.infrastructure.config import ApiConfig, get_api_config
from efa_mcp.infrastructure.headers import make_headers
from efa_mcp.infrastructure.query import build_query_string

DEFAULT_TIMEOUT = 15.0  # seconds, used when create_mcp_app builds the httpx client

logger = logging.getLogger(__name__)


class EfaClient:
    """HTTP gateway to the EFA real-time monitor.

    Every request merges the configured default parameters under the call's own
    parameters and issues exactly one GET. There is no retry and no caching.
    """

    def __init__(self, http_client: httpx.AsyncClient, config: ApiConfig | None = None) -> None:
        self._http = http_client
        self._config = config if config is not None else get_api_config()

    def build_url(self, endpoint: str, params: Mapping[str, Any] | None = None) -> str:
        """Return base URL + endpoint + query string of the merged parameters."""
        merged = {**self._config.default_params, **(params or {})}
        return f"{self._config.base_url}{endpoint}{build_query_string(merged)}"

    async def request(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET endpoint and return the decoded JSON body.

        Raises ApiError with the response's status for non-2xx answers, and
        ApiError(500, "Internal Error", ...) for any other failure.
        """
        url = self.build_url(endpoint, params)
        logger.debug("GET %s", url)
        try:
            response = await self._http.get(url, headers=make_headers())
            self._raise_for_status(response)
            return response.json()
        except ApiError:
            raise
        except Exception as exc:
            raise ApiError(
                500,
                "Internal Error",
                str(exc) or "Unknown error occurred",
            ) from exc

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Raise ApiError for non-2xx responses."""
        if not response.is_success:
            status_text = response.reason_phrase
            raise ApiError(
                response.status_code,
                status_text,
                f"API request failed: {status_text}",
            )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()
