"""Meeting, session and driver schemas."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from .base import FilterRecord, Record


class Meeting(Record):
    """A Grand Prix weekend or testing event."""

    circuit_key: int = Field(0, description="Circuit identifier")
    circuit_short_name: str = Field("", description="Short circuit name")
    country_code: str = Field("", description="ISO country code")
    country_key: int = Field(0, description="Country identifier")
    country_name: str = Field("", description="Country name")
    date_start: Optional[datetime] = Field(None, description="Meeting start (UTC)")
    gmt_offset: str = Field("", description="Local offset from GMT, e.g. 08:00:00")
    location: str = Field("", description="City or area of the circuit")
    meeting_key: int = Field(0, description="Meeting identifier")
    meeting_name: str = Field("", description="Meeting name")
    meeting_official_name: str = Field("", description="Official meeting name")
    year: int = Field(0, description="Season year")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "circuit_key": 61,
                "circuit_short_name": "Singapore",
                "country_code": "SGP",
                "country_key": 157,
                "country_name": "Singapore",
                "date_start": "2023-09-15T09:30:00+00:00",
                "gmt_offset": "08:00:00",
                "location": "Marina Bay",
                "meeting_key": 1219,
                "meeting_name": "Singapore Grand Prix",
                "meeting_official_name": "FORMULA 1 SINGAPORE AIRLINES SINGAPORE GRAND PRIX 2023",
                "year": 2023,
            }
        }
    )


class MeetingFilter(FilterRecord):
    circuit_key: int = 0
    circuit_short_name: str = ""
    country_code: str = ""
    country_key: int = 0
    country_name: str = ""
    date_start: Optional[datetime] = None
    gmt_offset: str = ""
    location: str = ""
    meeting_key: int = 0
    meeting_name: str = ""
    meeting_official_name: str = ""
    year: int = 0


class Session(Record):
    """A practice, qualifying, sprint or race session within a meeting."""

    circuit_key: int = Field(0, description="Circuit identifier")
    circuit_short_name: str = Field("", description="Short circuit name")
    country_code: str = Field("", description="ISO country code")
    country_key: int = Field(0, description="Country identifier")
    country_name: str = Field("", description="Country name")
    date_end: Optional[datetime] = Field(None, description="Session end (UTC)")
    date_start: Optional[datetime] = Field(None, description="Session start (UTC)")
    gmt_offset: str = Field("", description="Local offset from GMT")
    location: str = Field("", description="City or area of the circuit")
    meeting_key: int = Field(0, description="Meeting identifier")
    session_key: int = Field(0, description="Session identifier")
    session_name: str = Field("", description="Session name, e.g. Practice 1")
    session_type: str = Field("", description="Session type, e.g. Race")
    year: int = Field(0, description="Season year")


class SessionFilter(FilterRecord):
    circuit_key: int = 0
    circuit_short_name: str = ""
    country_code: str = ""
    country_key: int = 0
    country_name: str = ""
    date_end: Optional[datetime] = None
    date_start: Optional[datetime] = None
    gmt_offset: str = ""
    location: str = ""
    meeting_key: int = 0
    session_key: int = 0
    session_name: str = ""
    session_type: str = ""
    year: int = 0


class Driver(Record):
    """A driver as entered in one session."""

    broadcast_name: str = Field("", description="Name shown on the broadcast")
    country_code: str = Field("", description="Driver nationality code")
    driver_number: int = Field(0, description="Car number")
    first_name: str = Field("", description="First name")
    full_name: str = Field("", description="Full name")
    headshot_url: str = Field("", description="Headshot image URL")
    last_name: str = Field("", description="Last name")
    meeting_key: int = Field(0, description="Meeting identifier")
    name_acronym: str = Field("", description="Three-letter acronym, e.g. VER")
    session_key: int = Field(0, description="Session identifier")
    team_colour: str = Field("", description="Team colour as hex RGB")
    team_name: str = Field("", description="Team name")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "broadcast_name": "L HAMILTON",
                "country_code": "GBR",
                "driver_number": 44,
                "first_name": "Lewis",
                "full_name": "Lewis HAMILTON",
                "last_name": "Hamilton",
                "meeting_key": 1219,
                "name_acronym": "HAM",
                "session_key": 9158,
                "team_colour": "6CD3BF",
                "team_name": "Mercedes",
            }
        }
    )


class DriverFilter(FilterRecord):
    broadcast_name: str = ""
    country_code: str = ""
    driver_number: int = 0
    first_name: str = ""
    full_name: str = ""
    headshot_url: str = ""
    last_name: str = ""
    meeting_key: int = 0
    name_acronym: str = ""
    session_key: int = 0
    team_colour: str = ""
    team_name: str = ""

    def has_identifier(self) -> bool:
        """Whether at least one field that singles out a driver is set."""
        return bool(
            self.driver_number
            or self.first_name
            or self.last_name
            or self.full_name
            or self.name_acronym
        )
