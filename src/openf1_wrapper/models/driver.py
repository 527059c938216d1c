"""Driver information model."""

from __future__ import annotations

from openf1_wrapper.models._base import Record


class Driver(Record):
    """Driver identity and team for one session."""

    driver_number: int | None = None
    session_key: int | None = None
    meeting_key: int | None = None
    broadcast_name: str | None = None
    full_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    name_acronym: str | None = None
    country_code: str | None = None
    headshot_url: str | None = None
    team_name: str | None = None
    team_colour: str | None = None
