from __future__ import annotations

from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

BERLIN_TZ: ZoneInfo = ZoneInfo("Europe/Berlin")


def now_iso() -> str:
    """Return the current UTC time as ISO-8601 with milliseconds, e.g. 2026-02-24T13:00:00.000Z."""
    now = datetime.now(tz=timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_itd_date(value: str | date) -> str:
    """Return the itdDate parameter value (YYYYMMDD).

    Strings are passed through unchanged. Aware datetimes are converted to
    Europe/Berlin first.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(BERLIN_TZ)
    return value.strftime("%Y%m%d")


def format_itd_time(value: str | time | datetime) -> str:
    """Return the itdTime parameter value (HHMM).

    Strings are passed through unchanged. Aware datetimes are converted to
    Europe/Berlin first.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(BERLIN_TZ)
    return value.strftime("%H%M")


def parse_itd_date(s: str) -> date:
    """Parse a YYYYMMDD string. Raises ValueError on malformed input."""
    try:
        return datetime.strptime(s, "%Y%m%d").date()
    except ValueError:
        raise ValueError(f"Invalid date {s!r}, expected YYYYMMDD")


def parse_itd_time(s: str) -> time:
    """Parse an HHMM string. Raises ValueError on malformed input."""
    try:
        return datetime.strptime(s, "%H%M").time()
    except ValueError:
        raise ValueError(f"Invalid time {s!r}, expected HHMM")
