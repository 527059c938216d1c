"""openf1_wrapper — typed Python wrapper for the OpenF1 API."""

import logging

from openf1_wrapper._query import Filter, build_query
from openf1_wrapper.client import AsyncOpenF1Client, OpenF1Client
from openf1_wrapper.exceptions import (
    OpenF1APIError,
    OpenF1ConnectionError,
    OpenF1DecodeError,
    OpenF1Error,
    OpenF1TimeoutError,
    OpenF1ValidationError,
)
from openf1_wrapper.models import Driver, Meeting, RaceControl, Session, Weather

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AsyncOpenF1Client",
    "Driver",
    "Filter",
    "Meeting",
    "OpenF1APIError",
    "OpenF1Client",
    "OpenF1ConnectionError",
    "OpenF1DecodeError",
    "OpenF1Error",
    "OpenF1TimeoutError",
    "OpenF1ValidationError",
    "RaceControl",
    "Session",
    "Weather",
    "build_query",
]

__version__ = "0.1.0"
