"""Tests for the module-level accessor functions."""

from __future__ import annotations

import inspect

import httpx
import pytest
import respx

from openf1_wrapper import OpenF1Client, api
from openf1_wrapper.exceptions import OpenF1APIError, OpenF1DecodeError
from openf1_wrapper.models import Meeting
from tests.conftest import (
    SAMPLE_DRIVER,
    SAMPLE_MEETING,
    SAMPLE_SESSION,
    SAMPLE_WEATHER,
    query_of,
)
from tests.factories import make_session

BASE_URL = "https://api.openf1.org/v1"


@respx.mock
def test_meetings_for_year() -> None:
    route = respx.get(f"{BASE_URL}/meetings").mock(
        return_value=httpx.Response(200, json=[SAMPLE_MEETING])
    )
    meetings = api.get_meetings_for_year(2023)
    assert query_of(route.calls.last.request) == "year=2023"
    assert meetings == [Meeting.model_validate(SAMPLE_MEETING)]
    assert meetings[0].meeting_key == 1219


@respx.mock
def test_meeting_to_sessions_to_drivers_chain() -> None:
    respx.get(f"{BASE_URL}/meetings").mock(
        return_value=httpx.Response(200, json=[SAMPLE_MEETING])
    )
    respx.get(f"{BASE_URL}/sessions").mock(
        return_value=httpx.Response(200, json=[SAMPLE_SESSION])
    )
    respx.get(f"{BASE_URL}/drivers").mock(
        return_value=httpx.Response(200, json=[SAMPLE_DRIVER])
    )
    meeting = api.get_meeting_for_meeting_key(1219)
    assert meeting is not None
    sessions = api.get_sessions_for_meeting(meeting)
    drivers = api.get_drivers_for_session(sessions[0])
    assert drivers[0].session_key == sessions[0].session_key
    assert [query_of(call.request) for call in respx.calls] == [
        "meeting_key=1219",
        "meeting_key=1219",
        "session_key=7953",
    ]


@respx.mock
def test_weather_for_session_key() -> None:
    respx.get(f"{BASE_URL}/sessions").mock(
        return_value=httpx.Response(200, json=[SAMPLE_SESSION])
    )
    respx.get(f"{BASE_URL}/weather").mock(
        return_value=httpx.Response(200, json=[SAMPLE_WEATHER])
    )
    weather = api.get_weather_for_session_key(7953)
    assert weather is not None
    assert weather.track_temperature == 32.1
    assert len(respx.calls) == 2


@respx.mock
def test_race_control_until_lap() -> None:
    route = respx.get(f"{BASE_URL}/race_control").mock(
        return_value=httpx.Response(200, json=[])
    )
    api.get_race_control_for_session_until_lap(make_session(session_key=9161), 12)
    assert query_of(route.calls.last.request) == "session_key=9161&lap_number<=12"


@respx.mock
def test_server_error_raises() -> None:
    respx.get(f"{BASE_URL}/drivers").mock(return_value=httpx.Response(500, text="oops"))
    with pytest.raises(OpenF1APIError):
        api.get_drivers_for_session_key(7953)


@respx.mock
def test_non_json_raises() -> None:
    respx.get(f"{BASE_URL}/sessions").mock(return_value=httpx.Response(200, text="oops"))
    with pytest.raises(OpenF1DecodeError):
        api.get_sessions_for_query("year=2023")


@respx.mock
def test_missing_session_key_raises_before_request() -> None:
    with pytest.raises(ValueError, match="session_key"):
        api.get_race_control_for_session(make_session(session_key=None))
    assert not respx.calls


def test_every_accessor_documented_and_mirrored_on_client() -> None:
    accessors = [
        name for name, fn in inspect.getmembers(api, inspect.isfunction)
        if name.startswith("get_") and fn.__module__ == api.__name__
    ]
    assert len(accessors) == 20
    for name in accessors:
        assert getattr(api, name).__doc__, f"{name} has no docstring"
        assert hasattr(OpenF1Client, name)
