"""OpenF1 record models."""

from openf1_wrapper.models.driver import Driver
from openf1_wrapper.models.meeting import Meeting
from openf1_wrapper.models.race_control import RaceControl
from openf1_wrapper.models.session import Session
from openf1_wrapper.models.weather import Weather

__all__ = [
    "Driver",
    "Meeting",
    "RaceControl",
    "Session",
    "Weather",
]
