from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

BASE_URL = "https://www.efa-bw.de/rtMonitor"


def _default_params() -> Mapping[str, Any]:
    return MappingProxyType(
        {
            "mode": "direct",
            "stateless": 1,
            "sRaLP": 1,
            "locationServerActive": 1,
            "outputFormat": "json",
        }
    )


@dataclass(frozen=True)
class ApiConfig:
    """Base URL and default query parameters for every EFA request.

    default_params are merged under each call's own parameters; explicit
    parameters win on key collision.
    """

    base_url: str = BASE_URL
    default_params: Mapping[str, Any] = field(default_factory=_default_params)


DEFAULT_CONFIG = ApiConfig()


def get_api_config() -> ApiConfig:
    """Return the process-wide API configuration."""
    return DEFAULT_CONFIG
