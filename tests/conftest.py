"""Shared pytest fixtures for the EFA real-time monitor test suite."""
from __future__ import annotations

import pytest


@pytest.fixture
def sample_departure_raw() -> dict:  # type: ignore[type-arg]
    """Sample departureList entry matching the XSLT_DM_REQUEST JSON schema."""
    return {
        "stopID": "5006118",
        "x": "9181617.00000",
        "y": "48784084.00000",
        "mapName": "WGS84[DD.ddddd]",
        "area": "1",
        "platform": "3",
        "platformName": "Gleis 3",
        "stopName": "Stuttgart Hauptbahnhof (tief)",
        "nameWO": "Hauptbahnhof (tief)",
        "countdown": "4",
        "realtimeTripStatus": "MONITORED",
        "dateTime": {
            "year": "2026",
            "month": "2",
            "day": "24",
            "weekday": "3",
            "hour": "14",
            "minute": "5",
        },
        "realDateTime": {
            "year": "2026",
            "month": "2",
            "day": "24",
            "weekday": "3",
            "hour": "14",
            "minute": "7",
        },
        "servingLine": {
            "key": "1201",
            "code": "3",
            "number": "S1",
            "symbol": "S1",
            "motType": "1",
            "realtime": "1",
            "direction": "Kirchheim (T)",
            "directionFrom": "Herrenberg",
            "name": "S-Bahn",
            "delay": "2",
            "destID": "5006114",
            "stateless": "ddb:92S01: :H:j26",
        },
    }


@pytest.fixture
def sample_departure_board_raw(sample_departure_raw: dict) -> dict:  # type: ignore[type-arg]
    """Sample XSLT_DM_REQUEST payload with one departure and messages."""
    return {
        "parameters": [{"name": "serverID", "value": "efa10"}],
        "stopName": "Stuttgart Hauptbahnhof (tief)",
        "departureList": [sample_departure_raw],
        "generalMessages": [{"content": "Baustelle am Wochenende"}],
        "stopMessages": [{"content": "Aufzug außer Betrieb"}],
        "lineMessages": [],
    }


@pytest.fixture
def sample_point_raw() -> dict:  # type: ignore[type-arg]
    """Sample stopFinder point matching the XML_STOPFINDER_REQUEST JSON schema."""
    return {
        "usage": "sf",
        "type": "stop",
        "name": "Stuttgart, Hauptbahnhof (tief)",
        "stateless": "5006118",
        "anyType": "stop",
        "ref": {
            "id": "5006118",
            "gid": "de:08111:6118",
            "omc": "8111000",
            "placeID": "6",
            "place": "Stuttgart",
            "coords": "9181617.00000,48784084.00000",
        },
    }


@pytest.fixture
def sample_stop_finder_raw(sample_point_raw: dict) -> dict:  # type: ignore[type-arg]
    """Sample XML_STOPFINDER_REQUEST payload with one point."""
    return {
        "parameters": [{"name": "serverID", "value": "efa10"}],
        "stopFinder": {
            "message": [{"name": "code", "value": "-8010"}],
            "input": {"input": "Stuttgart Hbf"},
            "points": [sample_point_raw],
        },
    }
