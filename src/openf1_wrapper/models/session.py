"""Session model (practice, qualifying, sprint, race)."""

from __future__ import annotations

from datetime import datetime, timedelta

from openf1_wrapper.models._base import Record

WEATHER_WINDOW = timedelta(minutes=5)


class Session(Record):
    """A single on-track session within a meeting, keyed by ``session_key``."""

    session_key: int | None = None
    session_name: str | None = None
    session_type: str | None = None
    meeting_key: int | None = None
    year: int | None = None
    date_start: datetime | None = None
    date_end: datetime | None = None
    gmt_offset: str | None = None
    location: str | None = None
    circuit_key: int | None = None
    circuit_short_name: str | None = None
    country_code: str | None = None
    country_key: int | None = None
    country_name: str | None = None

    def weather_window(self, length: timedelta = WEATHER_WINDOW) -> tuple[datetime, datetime]:
        """Return the ``(start, end)`` interval opening at the session start.

        Raises:
            ValueError: If the session has no ``date_start``.
        """
        if self.date_start is None:
            raise ValueError(f"Session {self.session_key} has no date_start")
        return self.date_start, self.date_start + length
