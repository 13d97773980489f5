"""Lap, interval, position, pit and stint schemas."""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import Field

from .base import FilterRecord, Record


class Lap(Record):
    """Timing for one lap of one driver."""

    date_start: Optional[datetime] = Field(None, description="Approximate lap start (UTC)")
    driver_number: int = Field(0, description="Car number")
    duration_sector_1: float = Field(0.0, description="Sector 1 time in seconds")
    duration_sector_2: float = Field(0.0, description="Sector 2 time in seconds")
    duration_sector_3: float = Field(0.0, description="Sector 3 time in seconds")
    i1_speed: int = Field(0, description="Speed at intermediate 1, km/h")
    i2_speed: int = Field(0, description="Speed at intermediate 2, km/h")
    is_pit_out_lap: bool = Field(False, description="Whether the lap started in the pit lane")
    lap_duration: float = Field(0.0, description="Lap time in seconds")
    lap_number: int = Field(0, description="Lap number")
    meeting_key: int = Field(0, description="Meeting identifier")
    segments_sector_1: List[Optional[int]] = Field(default_factory=list, description="Mini-sector codes, sector 1")
    segments_sector_2: List[Optional[int]] = Field(default_factory=list, description="Mini-sector codes, sector 2")
    segments_sector_3: List[Optional[int]] = Field(default_factory=list, description="Mini-sector codes, sector 3")
    session_key: int = Field(0, description="Session identifier")
    st_speed: int = Field(0, description="Speed at the speed trap, km/h")


class LapFilter(FilterRecord):
    date_start: Optional[datetime] = None
    driver_number: int = 0
    i1_speed: int = 0
    i2_speed: int = 0
    lap_number: int = 0
    meeting_key: int = 0
    session_key: int = 0
    st_speed: int = 0


class Interval(Record):
    """Gap data during a race, updated about every 4 seconds.

    Gaps are seconds, or a string such as ``+1 LAP`` for lapped cars.
    """

    date: Optional[datetime] = Field(None, description="Sample time (UTC)")
    driver_number: int = Field(0, description="Car number")
    gap_to_leader: Union[float, str, None] = Field(None, description="Gap to the race leader")
    interval: Union[float, str, None] = Field(None, description="Gap to the car ahead")
    meeting_key: int = Field(0, description="Meeting identifier")
    session_key: int = Field(0, description="Session identifier")


class IntervalFilter(FilterRecord):
    date: Optional[datetime] = None
    driver_number: int = 0
    meeting_key: int = 0
    session_key: int = 0


class Position(Record):
    """Driver position change."""

    date: Optional[datetime] = Field(None, description="Time of the change (UTC)")
    driver_number: int = Field(0, description="Car number")
    meeting_key: int = Field(0, description="Meeting identifier")
    position: int = Field(0, description="Position, starting at 1")
    session_key: int = Field(0, description="Session identifier")


class PositionFilter(FilterRecord):
    date: Optional[datetime] = None
    driver_number: int = 0
    meeting_key: int = 0
    position: int = 0
    session_key: int = 0


class Pit(Record):
    """Time spent in the pit lane."""

    date: Optional[datetime] = Field(None, description="Pit entry time (UTC)")
    driver_number: int = Field(0, description="Car number")
    lap_number: int = Field(0, description="Lap of the pit stop")
    meeting_key: int = Field(0, description="Meeting identifier")
    pit_duration: float = Field(0.0, description="Pit lane time in seconds")
    session_key: int = Field(0, description="Session identifier")


class PitFilter(FilterRecord):
    date: Optional[datetime] = None
    driver_number: int = 0
    lap_number: int = 0
    meeting_key: int = 0
    session_key: int = 0


class Stint(Record):
    """A run of consecutive laps on one set of tyres."""

    compound: str = Field("", description="Tyre compound, e.g. SOFT")
    driver_number: int = Field(0, description="Car number")
    lap_end: int = Field(0, description="Last lap of the stint")
    lap_start: int = Field(0, description="First lap of the stint")
    meeting_key: int = Field(0, description="Meeting identifier")
    session_key: int = Field(0, description="Session identifier")
    stint_number: int = Field(0, description="Stint number, starting at 1")
    tyre_age_at_start: int = Field(0, description="Tyre age in laps at stint start")


class StintFilter(FilterRecord):
    compound: str = ""
    driver_number: int = 0
    lap_end: int = 0
    lap_start: int = 0
    meeting_key: int = 0
    session_key: int = 0
    stint_number: int = 0
    tyre_age_at_start: int = 0
