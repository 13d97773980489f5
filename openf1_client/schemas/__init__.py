"""Response and filter records for every API resource."""

from .base import Record, FilterRecord
from .session import Meeting, MeetingFilter, Session, SessionFilter, Driver, DriverFilter
from .telemetry import CarData, CarDataFilter, Location, LocationFilter
from .timing import (
    Lap,
    LapFilter,
    Interval,
    IntervalFilter,
    Position,
    PositionFilter,
    Pit,
    PitFilter,
    Stint,
    StintFilter,
)
from .events import (
    RaceControl,
    RaceControlFilter,
    TeamRadio,
    TeamRadioFilter,
    Weather,
    WeatherFilter,
)

__all__ = [
    # Base
    "Record",
    "FilterRecord",
    # Session
    "Meeting",
    "MeetingFilter",
    "Session",
    "SessionFilter",
    "Driver",
    "DriverFilter",
    # Telemetry
    "CarData",
    "CarDataFilter",
    "Location",
    "LocationFilter",
    # Timing
    "Lap",
    "LapFilter",
    "Interval",
    "IntervalFilter",
    "Position",
    "PositionFilter",
    "Pit",
    "PitFilter",
    "Stint",
    "StintFilter",
    # Events
    "RaceControl",
    "RaceControlFilter",
    "TeamRadio",
    "TeamRadioFilter",
    "Weather",
    "WeatherFilter",
]
