"""Public client classes for the OpenF1 API."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from openf1_wrapper._http import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    AsyncTransport,
    SyncTransport,
)
from openf1_wrapper._query import Filter, build_query
from openf1_wrapper.exceptions import OpenF1ValidationError
from openf1_wrapper.models.driver import Driver
from openf1_wrapper.models.meeting import Meeting
from openf1_wrapper.models.race_control import RaceControl
from openf1_wrapper.models.session import Session
from openf1_wrapper.models.weather import Weather

logger = logging.getLogger(__name__)

MEETINGS = "meetings"
SESSIONS = "sessions"
DRIVERS = "drivers"
WEATHER = "weather"
RACE_CONTROL = "race_control"

T = TypeVar("T")


def _validate_list(model_type: type[T], data: Any) -> list[T]:
    """Validate a decoded JSON array against a record model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except ValidationError as exc:
        raise OpenF1ValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


def _first(records: list[T]) -> T | None:
    return records[0] if records else None


def _require(name: str, value: Any) -> None:
    if value is None:
        raise ValueError(f"{name} is required, got None")


def _key_query(**filters: Any) -> str:
    """Build a query whose filters must all be present.

    Raises:
        ValueError: If any filter is None, since build_query would drop it
            and widen the request to the whole resource.
    """
    for name, value in filters.items():
        _require(name, value)
    return build_query(**filters)


def _weather_query(session: Session) -> str:
    _require("session_key", session.session_key)
    start, end = session.weather_window()
    return build_query(
        session_key=session.session_key,
        date=Filter(gte=start, lte=end),
    )


def _until_lap_query(session_key: int, lap: int) -> str:
    _require("lap", lap)
    return _key_query(session_key=session_key, lap_number=Filter(lte=lap))


class OpenF1Client:
    """Synchronous client for the OpenF1 API.

    Usage:
        f1 = OpenF1Client()
        meetings = f1.get_meetings_for_year(2023)
        f1.close()

        # Or as a context manager:
        with OpenF1Client() as f1:
            weather = f1.get_weather_for_session_key(9161)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> OpenF1Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def _get(self, resource: str, model: type[T], query: str) -> list[T]:
        data = self._transport.get(resource, query)
        return _validate_list(model, data)

    # ── Meetings ───────────────────────────────────────────────

    def get_meetings_for_year(self, year: int) -> list[Meeting]:
        """Get all meetings held in ``year``."""
        return self._get(MEETINGS, Meeting, _key_query(year=year))

    def get_meeting_for_meeting_key(self, meeting_key: int) -> Meeting | None:
        """Get the meeting with ``meeting_key``, or None if the API has none."""
        return _first(self._get(MEETINGS, Meeting, _key_query(meeting_key=meeting_key)))

    def get_meetings_for_query(self, query: str) -> list[Meeting]:
        """Get meetings for a raw query string.

        Experimental: the query is sent verbatim. Prefer a typed accessor.
        """
        return self._get(MEETINGS, Meeting, query)

    # ── Sessions ───────────────────────────────────────────────

    def get_sessions_for_meeting_key(self, meeting_key: int) -> list[Session]:
        """Get every session of the meeting with ``meeting_key``."""
        return self._get(SESSIONS, Session, _key_query(meeting_key=meeting_key))

    def get_sessions_for_meeting(self, meeting: Meeting) -> list[Session]:
        """Get every session of ``meeting``."""
        return self.get_sessions_for_meeting_key(meeting.meeting_key)

    def get_session_for_session_key(self, session_key: int) -> Session | None:
        """Get the session with ``session_key``, or None if the API has none."""
        return _first(self._get(SESSIONS, Session, _key_query(session_key=session_key)))

    def get_sessions_for_query(self, query: str) -> list[Session]:
        """Get sessions for a raw query string.

        Experimental: the query is sent verbatim. Prefer a typed accessor.
        """
        return self._get(SESSIONS, Session, query)

    # ── Drivers ────────────────────────────────────────────────

    def get_drivers_for_session_key(self, session_key: int) -> list[Driver]:
        """Get the drivers entered in the session with ``session_key``."""
        return self._get(DRIVERS, Driver, _key_query(session_key=session_key))

    def get_drivers_for_session(self, session: Session) -> list[Driver]:
        """Get the drivers entered in ``session``."""
        return self.get_drivers_for_session_key(session.session_key)

    def get_drivers_for_meeting_key(self, meeting_key: int) -> list[Driver]:
        """Get driver entries for every session of the meeting with ``meeting_key``."""
        return self._get(DRIVERS, Driver, _key_query(meeting_key=meeting_key))

    def get_drivers_for_meeting(self, meeting: Meeting) -> list[Driver]:
        """Get driver entries for every session of ``meeting``."""
        return self.get_drivers_for_meeting_key(meeting.meeting_key)

    def get_drivers_for_query(self, query: str) -> list[Driver]:
        """Get drivers for a raw query string.

        Experimental: the query is sent verbatim. Prefer a typed accessor.
        """
        return self._get(DRIVERS, Driver, query)

    # ── Weather ────────────────────────────────────────────────

    def get_weather_for_session(self, session: Session) -> Weather | None:
        """Get the first weather sample in the five minutes after ``session`` starts.

        Raises:
            ValueError: If ``session`` has no ``session_key`` or ``date_start``.
        """
        return _first(self._get(WEATHER, Weather, _weather_query(session)))

    def get_weather_for_session_key(self, session_key: int) -> Weather | None:
        """Resolve the session with ``session_key``, then fetch its opening weather.

        Makes two sequential requests. Returns None without a weather request
        when the session is unknown.
        """
        session = self.get_session_for_session_key(session_key)
        if session is None:
            logger.debug("No session %s, skipping weather lookup", session_key)
            return None
        return self.get_weather_for_session(session)

    def get_weather_for_query(self, query: str) -> list[Weather]:
        """Get weather samples for a raw query string.

        Experimental: the query is sent verbatim. Prefer a typed accessor.
        """
        return self._get(WEATHER, Weather, query)

    # ── Race control ───────────────────────────────────────────

    def get_race_control_for_session_key(self, session_key: int) -> list[RaceControl]:
        """Get all race control events of the session with ``session_key``."""
        return self._get(RACE_CONTROL, RaceControl, _key_query(session_key=session_key))

    def get_race_control_for_session(self, session: Session) -> list[RaceControl]:
        """Get all race control events of ``session``."""
        return self.get_race_control_for_session_key(session.session_key)

    def get_race_control_for_session_key_until_lap(
        self, session_key: int, lap: int,
    ) -> list[RaceControl]:
        """Get race control events up to and including ``lap``."""
        return self._get(RACE_CONTROL, RaceControl, _until_lap_query(session_key, lap))

    def get_race_control_for_session_until_lap(
        self, session: Session, lap: int,
    ) -> list[RaceControl]:
        """Get race control events of ``session`` up to and including ``lap``."""
        return self.get_race_control_for_session_key_until_lap(session.session_key, lap)

    def get_race_control_for_query(self, query: str) -> list[RaceControl]:
        """Get race control events for a raw query string.

        Experimental: the query is sent verbatim. Prefer a typed accessor.
        """
        return self._get(RACE_CONTROL, RaceControl, query)


class AsyncOpenF1Client:
    """Asynchronous client for the OpenF1 API.

    Usage:
        async with AsyncOpenF1Client() as f1:
            drivers = await f1.get_drivers_for_session_key(9161)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncOpenF1Client:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def _get(self, resource: str, model: type[T], query: str) -> list[T]:
        data = await self._transport.get(resource, query)
        return _validate_list(model, data)

    # ── Meetings ───────────────────────────────────────────────

    async def get_meetings_for_year(self, year: int) -> list[Meeting]:
        """Get all meetings held in ``year``."""
        return await self._get(MEETINGS, Meeting, _key_query(year=year))

    async def get_meeting_for_meeting_key(self, meeting_key: int) -> Meeting | None:
        """Get the meeting with ``meeting_key``, or None if the API has none."""
        return _first(await self._get(MEETINGS, Meeting, _key_query(meeting_key=meeting_key)))

    async def get_meetings_for_query(self, query: str) -> list[Meeting]:
        """Get meetings for a raw query string (experimental)."""
        return await self._get(MEETINGS, Meeting, query)

    # ── Sessions ───────────────────────────────────────────────

    async def get_sessions_for_meeting_key(self, meeting_key: int) -> list[Session]:
        """Get every session of the meeting with ``meeting_key``."""
        return await self._get(SESSIONS, Session, _key_query(meeting_key=meeting_key))

    async def get_sessions_for_meeting(self, meeting: Meeting) -> list[Session]:
        """Get every session of ``meeting``."""
        return await self.get_sessions_for_meeting_key(meeting.meeting_key)

    async def get_session_for_session_key(self, session_key: int) -> Session | None:
        """Get the session with ``session_key``, or None if the API has none."""
        return _first(await self._get(SESSIONS, Session, _key_query(session_key=session_key)))

    async def get_sessions_for_query(self, query: str) -> list[Session]:
        """Get sessions for a raw query string (experimental)."""
        return await self._get(SESSIONS, Session, query)

    # ── Drivers ────────────────────────────────────────────────

    async def get_drivers_for_session_key(self, session_key: int) -> list[Driver]:
        """Get the drivers entered in the session with ``session_key``."""
        return await self._get(DRIVERS, Driver, _key_query(session_key=session_key))

    async def get_drivers_for_session(self, session: Session) -> list[Driver]:
        """Get the drivers entered in ``session``."""
        return await self.get_drivers_for_session_key(session.session_key)

    async def get_drivers_for_meeting_key(self, meeting_key: int) -> list[Driver]:
        """Get driver entries for every session of the meeting with ``meeting_key``."""
        return await self._get(DRIVERS, Driver, _key_query(meeting_key=meeting_key))

    async def get_drivers_for_meeting(self, meeting: Meeting) -> list[Driver]:
        """Get driver entries for every session of ``meeting``."""
        return await self.get_drivers_for_meeting_key(meeting.meeting_key)

    async def get_drivers_for_query(self, query: str) -> list[Driver]:
        """Get drivers for a raw query string (experimental)."""
        return await self._get(DRIVERS, Driver, query)

    # ── Weather ────────────────────────────────────────────────

    async def get_weather_for_session(self, session: Session) -> Weather | None:
        """Get the first weather sample in the five minutes after ``session`` starts."""
        return _first(await self._get(WEATHER, Weather, _weather_query(session)))

    async def get_weather_for_session_key(self, session_key: int) -> Weather | None:
        """Resolve the session with ``session_key``, then fetch its opening weather."""
        session = await self.get_session_for_session_key(session_key)
        if session is None:
            logger.debug("No session %s, skipping weather lookup", session_key)
            return None
        return await self.get_weather_for_session(session)

    async def get_weather_for_query(self, query: str) -> list[Weather]:
        """Get weather samples for a raw query string (experimental)."""
        return await self._get(WEATHER, Weather, query)

    # ── Race control ───────────────────────────────────────────

    async def get_race_control_for_session_key(self, session_key: int) -> list[RaceControl]:
        """Get all race control events of the session with ``session_key``."""
        return await self._get(RACE_CONTROL, RaceControl, _key_query(session_key=session_key))

    async def get_race_control_for_session(self, session: Session) -> list[RaceControl]:
        """Get all race control events of ``session``."""
        return await self.get_race_control_for_session_key(session.session_key)

    async def get_race_control_for_session_key_until_lap(
        self, session_key: int, lap: int,
    ) -> list[RaceControl]:
        """Get race control events up to and including ``lap``."""
        return await self._get(RACE_CONTROL, RaceControl, _until_lap_query(session_key, lap))

    async def get_race_control_for_session_until_lap(
        self, session: Session, lap: int,
    ) -> list[RaceControl]:
        """Get race control events of ``session`` up to and including ``lap``."""
        return await self.get_race_control_for_session_key_until_lap(session.session_key, lap)

    async def get_race_control_for_query(self, query: str) -> list[RaceControl]:
        """Get race control events for a raw query string (experimental)."""
        return await self._get(RACE_CONTROL, RaceControl, query)
