"""Car telemetry and on-track location schemas."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from .base import FilterRecord, Record


class CarData(Record):
    """Car telemetry sample, about 3.7 Hz per car."""

    brake: int = Field(0, description="Brake pedal, 0 or 100")
    date: Optional[datetime] = Field(None, description="Sample time (UTC)")
    driver_number: int = Field(0, description="Car number")
    drs: int = Field(0, description="DRS status: 0/1 off, 8 eligible, 10/12/14 on")
    meeting_key: int = Field(0, description="Meeting identifier")
    n_gear: int = Field(0, description="Gear, 0 = neutral")
    rpm: int = Field(0, description="Engine revolutions per minute")
    session_key: int = Field(0, description="Session identifier")
    speed: int = Field(0, description="Speed in km/h")
    throttle: int = Field(0, description="Throttle pedal, percent")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "brake": 0,
                "date": "2023-09-15T13:08:19.923000+00:00",
                "driver_number": 55,
                "drs": 12,
                "meeting_key": 1219,
                "n_gear": 8,
                "rpm": 11141,
                "session_key": 9159,
                "speed": 315,
                "throttle": 99,
            }
        }
    )


class CarDataFilter(FilterRecord):
    brake: int = 0
    date: Optional[datetime] = None
    driver_number: int = 0
    drs: int = 0
    meeting_key: int = 0
    n_gear: int = 0
    rpm: int = 0
    session_key: int = 0
    speed: int = 0
    throttle: int = 0


class Location(Record):
    """Approximate car position on the circuit, about 3.7 Hz per car."""

    date: Optional[datetime] = Field(None, description="Sample time (UTC)")
    driver_number: int = Field(0, description="Car number")
    meeting_key: int = Field(0, description="Meeting identifier")
    session_key: int = Field(0, description="Session identifier")
    x: int = Field(0, description="Cartesian x in the circuit frame")
    y: int = Field(0, description="Cartesian y in the circuit frame")
    z: int = Field(0, description="Cartesian z in the circuit frame")


class LocationFilter(FilterRecord):
    date: Optional[datetime] = None
    driver_number: int = 0
    meeting_key: int = 0
    session_key: int = 0
    x: int = 0
    y: int = 0
    z: int = 0
