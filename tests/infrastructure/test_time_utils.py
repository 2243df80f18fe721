"""Tests for time utility functions."""
from __future__ import annotations

from datetime import date, datetime, time, timezone

import pytest
from freezegun import freeze_time

from efa_mcp.infrastructure.time_utils import (
    BERLIN_TZ,
    format_itd_date,
    format_itd_time,
    now_iso,
    parse_itd_date,
    parse_itd_time,
)


@freeze_time("2026-02-24T13:00:00Z")
def test_now_iso_is_utc_with_milliseconds() -> None:
    assert now_iso() == "2026-02-24T13:00:00.000Z"


def test_format_itd_date_from_date() -> None:
    assert format_itd_date(date(2026, 2, 4)) == "20260204"


def test_format_itd_date_string_passthrough() -> None:
    assert format_itd_date("20260224") == "20260224"


def test_format_itd_date_aware_datetime_uses_berlin() -> None:
    """23:30 UTC on Feb 24 is already Feb 25 in Berlin (UTC+1)."""
    dt = datetime(2026, 2, 24, 23, 30, tzinfo=timezone.utc)
    assert format_itd_date(dt) == "20260225"


def test_format_itd_time_from_time() -> None:
    assert format_itd_time(time(7, 5)) == "0705"


def test_format_itd_time_aware_datetime_uses_berlin() -> None:
    dt = datetime(2026, 7, 15, 12, 0, tzinfo=timezone.utc)
    assert format_itd_time(dt) == "1400"


def test_format_itd_time_naive_datetime() -> None:
    assert format_itd_time(datetime(2026, 2, 24, 9, 45)) == "0945"


def test_parse_itd_date() -> None:
    assert parse_itd_date("20260224") == date(2026, 2, 24)


def test_parse_itd_date_invalid_raises() -> None:
    with pytest.raises(ValueError):
        parse_itd_date("2026-02-24")


def test_parse_itd_time() -> None:
    assert parse_itd_time("1430") == time(14, 30)


def test_parse_itd_time_invalid_raises() -> None:
    with pytest.raises(ValueError):
        parse_itd_time("25:00")


def test_berlin_tz_key() -> None:
    assert BERLIN_TZ.key == "Europe/Berlin"
