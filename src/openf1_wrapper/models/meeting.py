"""Meeting (Grand Prix weekend) model."""

from __future__ import annotations

from datetime import datetime

from openf1_wrapper.models._base import Record


class Meeting(Record):
    """One Grand Prix weekend or test event, keyed by ``meeting_key``."""

    meeting_key: int | None = None
    meeting_name: str | None = None
    meeting_official_name: str | None = None
    year: int | None = None
    date_start: datetime | None = None
    gmt_offset: str | None = None
    location: str | None = None
    circuit_key: int | None = None
    circuit_short_name: str | None = None
    country_code: str | None = None
    country_key: int | None = None
    country_name: str | None = None
