"""Shared test fixtures and sample API responses."""

from __future__ import annotations

from urllib.parse import unquote

import httpx
import pytest

BASE_URL = "https://api.openf1.org/v1"


SAMPLE_MEETING = {
    "circuit_key": 63,
    "circuit_short_name": "Sakhir",
    "country_code": "BRN",
    "country_key": 36,
    "country_name": "Bahrain",
    "date_start": "2023-03-03T11:30:00+00:00",
    "gmt_offset": "03:00:00",
    "location": "Sakhir",
    "meeting_key": 1219,
    "meeting_name": "Bahrain Grand Prix",
    "meeting_official_name": "FORMULA 1 GULF AIR BAHRAIN GRAND PRIX 2023",
    "year": 2023,
}

SAMPLE_SESSION = {
    "circuit_key": 63,
    "circuit_short_name": "Sakhir",
    "country_code": "BRN",
    "country_key": 36,
    "country_name": "Bahrain",
    "date_end": "2023-03-05T17:00:00",
    "date_start": "2023-03-05T15:00:00",
    "gmt_offset": "03:00:00",
    "location": "Sakhir",
    "meeting_key": 1219,
    "session_key": 7953,
    "session_name": "Race",
    "session_type": "Race",
    "year": 2023,
}

SAMPLE_DRIVER = {
    "broadcast_name": "M VERSTAPPEN",
    "country_code": "NED",
    "driver_number": 1,
    "first_name": "Max",
    "full_name": "Max VERSTAPPEN",
    "headshot_url": "https://example.com/ver.png",
    "last_name": "Verstappen",
    "meeting_key": 1219,
    "name_acronym": "VER",
    "session_key": 7953,
    "team_colour": "3671C6",
    "team_name": "Red Bull Racing",
}

SAMPLE_WEATHER = {
    "air_temperature": 27.8,
    "date": "2023-03-05T15:00:13.360000",
    "humidity": 49.0,
    "meeting_key": 1219,
    "pressure": 1017.4,
    "rainfall": 0,
    "session_key": 7953,
    "track_temperature": 32.1,
    "wind_direction": 220,
    "wind_speed": 1.3,
}

SAMPLE_RACE_CONTROL = {
    "category": "Flag",
    "date": "2023-03-05T15:03:00",
    "driver_number": None,
    "flag": "GREEN",
    "lap_number": 1,
    "meeting_key": 1219,
    "message": "GREEN LIGHT - PIT EXIT OPEN",
    "scope": "Track",
    "sector": None,
    "session_key": 7953,
}


def query_of(request: httpx.Request) -> str:
    """Return the decoded query string a request was sent with."""
    return unquote(request.url.query.decode())


@pytest.fixture
def base_url() -> str:
    return BASE_URL
