from __future__ import annotations

import re
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(value: Any) -> int | None:
    """Return the integer at the start of value, or None.

    EFA sends numbers as strings ("5", "-1", "12 min"). Booleans, empty
    strings, None and non-numeric text all yield None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


def format_efa_time(date_time: Any) -> str:
    """Format an EFA dateTime object as HH:MM.

    Returns "" when date_time is not a mapping or hour/minute are missing.
    """
    if not isinstance(date_time, dict):
        return ""
    hour = date_time.get("hour")
    minute = date_time.get("minute")
    if hour in (None, "") or minute in (None, ""):
        return ""
    return f"{str(hour).zfill(2)}:{str(minute).zfill(2)}"


def as_list(value: Any) -> list[Any]:
    """Return value as a list.

    EFA collapses single-element arrays into a bare object; None becomes [].
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def message_contents(messages: Any) -> list[str]:
    """Extract the content text of each EFA message object."""
    return [
        m.get("content") or ""
        for m in as_list(messages)
        if isinstance(m, dict)
    ]


def format_coord(lat: float, lon: float) -> str:
    """Render a position as EFA "lon:lat" in WGS84[DD.ddddd]."""
    return f"{lon:.5f}:{lat:.5f}"
