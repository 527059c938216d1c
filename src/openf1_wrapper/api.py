"""Module-level accessors, each running on a short-lived OpenF1Client.

Handy for scripts and one-off lookups:

    from openf1_wrapper import api

    meetings = api.get_meetings_for_year(2023)
    sessions = api.get_sessions_for_meeting(meetings[0])

Code issuing many requests should hold an OpenF1Client open instead so the
connection pool is reused.
"""

from __future__ import annotations

from openf1_wrapper.client import OpenF1Client
from openf1_wrapper.models.driver import Driver
from openf1_wrapper.models.meeting import Meeting
from openf1_wrapper.models.race_control import RaceControl
from openf1_wrapper.models.session import Session
from openf1_wrapper.models.weather import Weather


def get_meetings_for_year(year: int) -> list[Meeting]:
    """Get all meetings held in ``year``."""
    with OpenF1Client() as f1:
        return f1.get_meetings_for_year(year)


def get_meeting_for_meeting_key(meeting_key: int) -> Meeting | None:
    """Get the meeting with ``meeting_key``, or None if the API has none."""
    with OpenF1Client() as f1:
        return f1.get_meeting_for_meeting_key(meeting_key)


def get_meetings_for_query(query: str) -> list[Meeting]:
    """Experimental raw-query passthrough, see OpenF1Client.get_meetings_for_query."""
    with OpenF1Client() as f1:
        return f1.get_meetings_for_query(query)


def get_sessions_for_meeting_key(meeting_key: int) -> list[Session]:
    """Get every session of the meeting with ``meeting_key``."""
    with OpenF1Client() as f1:
        return f1.get_sessions_for_meeting_key(meeting_key)


def get_sessions_for_meeting(meeting: Meeting) -> list[Session]:
    """Get every session of ``meeting``."""
    with OpenF1Client() as f1:
        return f1.get_sessions_for_meeting(meeting)


def get_session_for_session_key(session_key: int) -> Session | None:
    """Get the session with ``session_key``, or None if the API has none."""
    with OpenF1Client() as f1:
        return f1.get_session_for_session_key(session_key)


def get_sessions_for_query(query: str) -> list[Session]:
    """Experimental raw-query passthrough, see OpenF1Client.get_sessions_for_query."""
    with OpenF1Client() as f1:
        return f1.get_sessions_for_query(query)


def get_drivers_for_session_key(session_key: int) -> list[Driver]:
    """Get the drivers entered in the session with ``session_key``."""
    with OpenF1Client() as f1:
        return f1.get_drivers_for_session_key(session_key)


def get_drivers_for_session(session: Session) -> list[Driver]:
    """Get the drivers entered in ``session``."""
    with OpenF1Client() as f1:
        return f1.get_drivers_for_session(session)


def get_drivers_for_meeting_key(meeting_key: int) -> list[Driver]:
    """Get driver entries for every session of the meeting with ``meeting_key``."""
    with OpenF1Client() as f1:
        return f1.get_drivers_for_meeting_key(meeting_key)


def get_drivers_for_meeting(meeting: Meeting) -> list[Driver]:
    """Get driver entries for every session of ``meeting``."""
    with OpenF1Client() as f1:
        return f1.get_drivers_for_meeting(meeting)


def get_drivers_for_query(query: str) -> list[Driver]:
    """Experimental raw-query passthrough, see OpenF1Client.get_drivers_for_query."""
    with OpenF1Client() as f1:
        return f1.get_drivers_for_query(query)


def get_weather_for_session(session: Session) -> Weather | None:
    """Get the first weather sample in the five minutes after ``session`` starts."""
    with OpenF1Client() as f1:
        return f1.get_weather_for_session(session)


def get_weather_for_session_key(session_key: int) -> Weather | None:
    """Resolve the session with ``session_key``, then fetch its opening weather."""
    # Both requests share one client.
    with OpenF1Client() as f1:
        return f1.get_weather_for_session_key(session_key)


def get_weather_for_query(query: str) -> list[Weather]:
    """Experimental raw-query passthrough, see OpenF1Client.get_weather_for_query."""
    with OpenF1Client() as f1:
        return f1.get_weather_for_query(query)


def get_race_control_for_session_key(session_key: int) -> list[RaceControl]:
    """Get all race control events of the session with ``session_key``."""
    with OpenF1Client() as f1:
        return f1.get_race_control_for_session_key(session_key)


def get_race_control_for_session(session: Session) -> list[RaceControl]:
    """Get all race control events of ``session``."""
    with OpenF1Client() as f1:
        return f1.get_race_control_for_session(session)


def get_race_control_for_session_key_until_lap(session_key: int, lap: int) -> list[RaceControl]:
    """Get race control events up to and including ``lap``."""
    with OpenF1Client() as f1:
        return f1.get_race_control_for_session_key_until_lap(session_key, lap)


def get_race_control_for_session_until_lap(session: Session, lap: int) -> list[RaceControl]:
    """Get race control events of ``session`` up to and including ``lap``."""
    with OpenF1Client() as f1:
        return f1.get_race_control_for_session_until_lap(session, lap)


def get_race_control_for_query(query: str) -> list[RaceControl]:
    """Experimental raw-query passthrough, see OpenF1Client.get_race_control_for_query."""
    with OpenF1Client() as f1:
        return f1.get_race_control_for_query(query)
