"""Race control, team radio and weather schemas."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import FilterRecord, Record


class RaceControl(Record):
    """Race control message: flags, safety car, incidents."""

    category: str = Field("", description="CarEvent, Drs, Flag, SafetyCar, Other")
    date: Optional[datetime] = Field(None, description="Message time (UTC)")
    driver_number: int = Field(0, description="Car number, when the message concerns one car")
    flag: str = Field("", description="Flag, e.g. GREEN, YELLOW, CHEQUERED")
    lap_number: int = Field(0, description="Lap of the message")
    meeting_key: int = Field(0, description="Meeting identifier")
    message: str = Field("", description="Message text")
    scope: str = Field("", description="Track, Driver or Sector")
    sector: Optional[int] = Field(None, description="Mini-sector, when scope is Sector")
    session_key: int = Field(0, description="Session identifier")


class RaceControlFilter(FilterRecord):
    category: str = ""
    date: Optional[datetime] = None
    driver_number: int = 0
    flag: str = ""
    lap_number: int = 0
    meeting_key: int = 0
    message: str = ""
    scope: str = ""
    session_key: int = 0


class TeamRadio(Record):
    """A recorded radio exchange between a driver and the team."""

    date: Optional[datetime] = Field(None, description="Recording time (UTC)")
    driver_number: int = Field(0, description="Car number")
    meeting_key: int = Field(0, description="Meeting identifier")
    recording_url: str = Field("", description="Audio file URL")
    session_key: int = Field(0, description="Session identifier")


class TeamRadioFilter(FilterRecord):
    date: Optional[datetime] = None
    driver_number: int = 0
    meeting_key: int = 0
    recording_url: str = ""
    session_key: int = 0


class Weather(Record):
    """Track weather, updated every minute."""

    air_temperature: float = Field(0.0, description="Air temperature, Celsius")
    date: Optional[datetime] = Field(None, description="Sample time (UTC)")
    humidity: float = Field(0.0, description="Relative humidity, percent")
    meeting_key: int = Field(0, description="Meeting identifier")
    pressure: float = Field(0.0, description="Air pressure, mbar")
    rainfall: int = Field(0, description="Whether there is rainfall")
    session_key: int = Field(0, description="Session identifier")
    track_temperature: float = Field(0.0, description="Track temperature, Celsius")
    wind_direction: int = Field(0, description="Wind direction in degrees, 0-359")
    wind_speed: float = Field(0.0, description="Wind speed, m/s")


class WeatherFilter(FilterRecord):
    date: Optional[datetime] = None
    meeting_key: int = 0
    rainfall: int = 0
    session_key: int = 0
    wind_direction: int = 0
