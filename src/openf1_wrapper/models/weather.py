"""Weather sample model."""

from __future__ import annotations

from datetime import datetime

from openf1_wrapper.models._base import Record


class Weather(Record):
    """One track weather sample (roughly one per minute)."""

    session_key: int | None = None
    meeting_key: int | None = None
    date: datetime | None = None
    air_temperature: float | None = None
    track_temperature: float | None = None
    humidity: float | None = None
    pressure: float | None = None
    rainfall: bool | None = None
    wind_direction: int | None = None
    wind_speed: float | None = None
