"""Race control event model."""

from __future__ import annotations

from datetime import datetime

from openf1_wrapper.models._base import Record


class RaceControl(Record):
    """Flag, message or incident issued by race control during a session."""

    session_key: int | None = None
    meeting_key: int | None = None
    date: datetime | None = None
    lap_number: int | None = None
    category: str | None = None
    flag: str | None = None
    scope: str | None = None
    sector: int | None = None
    driver_number: int | None = None
    message: str | None = None
