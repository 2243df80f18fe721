from __future__ import annotations

from enum import Enum
from typing import Any, Mapping
from urllib.parse import quote

# Characters encodeURIComponent leaves alone besides letters, digits and "-_.~"
_SAFE = "!*'()"


def _encode(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe=_SAFE)


def build_query_string(params: Mapping[str, Any]) -> str:
    """Encode params as a "?"-prefixed query string.

    None values are dropped. List and tuple values become one key=value pair
    per element, in order. Returns "" when no pair survives.
    """
    pairs: list[str] = []
    for key, value in params.items():
        if value is None:
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        pairs.extend(f"{_encode(key)}={_encode(v)}" for v in values)
    return "?" + "&".join(pairs) if pairs else ""
