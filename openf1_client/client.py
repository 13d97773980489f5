"""OpenF1 API client: one accessor per resource call shape."""

from typing import List, Optional, Sequence, Type, TypeVar, Union

from openf1_client.conf.settings import Settings, settings as default_settings
from openf1_client.exceptions import AmbiguousResult, MissingIdentifier, NotFound
from openf1_client.query.params import (
    LATEST,
    QueryParam,
    build_params,
    concat_params,
    driver_params,
    latest_session_params,
)
from openf1_client.query.url import build_url
from openf1_client.schemas import (
    CarData,
    CarDataFilter,
    Driver,
    DriverFilter,
    Interval,
    IntervalFilter,
    Lap,
    LapFilter,
    Location,
    LocationFilter,
    Meeting,
    MeetingFilter,
    Pit,
    PitFilter,
    Position,
    PositionFilter,
    RaceControl,
    RaceControlFilter,
    Record,
    Session,
    SessionFilter,
    Stint,
    StintFilter,
    TeamRadio,
    TeamRadioFilter,
    Weather,
    WeatherFilter,
)
from openf1_client.transport.decode import decode_records
from openf1_client.transport.http import Fetcher, HTTPFetcher
from openf1_client.utils.logging_utils import get_logger
from openf1_client.utils.time_utils import sort_key

logger = get_logger(__name__)

R = TypeVar("R", bound=Record)

DriverLike = Union[Driver, DriverFilter]

# Resource paths, relative to settings.base_url
CAR_DATA_PATH = "/car_data"
DRIVERS_PATH = "/drivers"
INTERVALS_PATH = "/intervals"
LAPS_PATH = "/laps"
LOCATION_PATH = "/location"
MEETINGS_PATH = "/meetings"
PIT_PATH = "/pit"
POSITION_PATH = "/position"
RACE_CONTROL_PATH = "/race_control"
SESSIONS_PATH = "/sessions"
STINTS_PATH = "/stints"
TEAM_RADIO_PATH = "/team_radio"
WEATHER_PATH = "/weather"


def most_recent(records: Sequence[R], date_field: str) -> R:
    """Pick the record with the latest timestamp.

    The first record wins ties; records without a timestamp rank lowest.

    Raises:
        NotFound: If records is empty
    """
    if not records:
        raise NotFound("no records returned")
    return max(records, key=lambda record: sort_key(getattr(record, date_field)))


class OpenF1Client:
    """Synchronous client for the OpenF1 API.

    Usage:
        client = OpenF1Client()
        laps = client.get_laps(LapFilter(driver_number=44, session_key=9158))

        # Or as a context manager:
        with OpenF1Client() as client:
            weather = client.get_latest_weather()

    Pass ``fetcher`` to substitute the transport, e.g. in tests.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetcher: Optional[Fetcher] = None,
    ):
        self.settings = settings or default_settings
        self.fetcher = fetcher if fetcher is not None else HTTPFetcher(self.settings)

    def __enter__(self) -> "OpenF1Client":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the transport, when it holds anything."""
        close = getattr(self.fetcher, "close", None)
        if close is not None:
            close()

    def resource_url(self, path: str) -> str:
        """Absolute URL of a resource path under the configured base."""
        return self.settings.base_url.rstrip("/") + path

    def _get(self, path: str, model: Type[R], params: Sequence[QueryParam]) -> List[R]:
        url = build_url(self.resource_url(path), params)
        return decode_records(self.fetcher(url), model)

    def _get_latest_for_driver(self, path: str, model: Type[R], driver: DriverLike) -> List[R]:
        params = concat_params(driver_params(driver), latest_session_params())
        return self._get(path, model, params)

    # Car data

    def get_car_data(self, car_data: Optional[CarDataFilter] = None) -> List[CarData]:
        """Car telemetry samples matching the filter."""
        return self._get(CAR_DATA_PATH, CarData, build_params(car_data))

    def get_latest_car_data_by_driver(self, driver: DriverLike) -> List[CarData]:
        """Car telemetry for one driver in the latest session."""
        return self._get_latest_for_driver(CAR_DATA_PATH, CarData, driver)

    # Drivers

    def get_drivers(self, driver: Optional[DriverFilter] = None) -> List[Driver]:
        """Driver entries matching the filter."""
        return self._get(DRIVERS_PATH, Driver, build_params(driver))

    def get_driver(self, driver: DriverFilter) -> Driver:
        """Resolve a filter to exactly one driver entry.

        Without a meeting or session key the lookup is scoped to the latest
        session.

        Raises:
            MissingIdentifier: If no number or name field is set
            NotFound: If no driver matches
            AmbiguousResult: If more than one driver matches
        """
        if not driver.has_identifier():
            raise MissingIdentifier(
                "search fields for a single driver not met, set at least one of "
                "driver_number, first_name, last_name, full_name, name_acronym"
            )

        params = build_params(driver)
        if not driver.meeting_key and not driver.session_key:
            params = concat_params(params, latest_session_params())

        drivers = self._get(DRIVERS_PATH, Driver, params)
        if not drivers:
            raise NotFound("driver not found")
        if len(drivers) > 1:
            raise AmbiguousResult(
                f"{len(drivers)} drivers matched, expected one", count=len(drivers)
            )

        logger.debug(f"Resolved driver {drivers[0].driver_number} ({drivers[0].name_acronym})")
        return drivers[0]

    def get_latest_drivers(self) -> List[Driver]:
        """Every driver entered in the latest session."""
        return self._get(DRIVERS_PATH, Driver, latest_session_params())

    # Intervals

    def get_intervals(self, interval: Optional[IntervalFilter] = None) -> List[Interval]:
        """Gaps to the leader and the car ahead matching the filter."""
        return self._get(INTERVALS_PATH, Interval, build_params(interval))

    def get_all_drivers_current_intervals(self) -> List[Interval]:
        """Interval samples for every driver in the latest session."""
        return self._get(INTERVALS_PATH, Interval, latest_session_params())

    def get_driver_current_intervals(self, driver: DriverLike) -> List[Interval]:
        """Interval samples for one driver in the latest session."""
        return self._get_latest_for_driver(INTERVALS_PATH, Interval, driver)

    # Laps

    def get_laps(self, lap: Optional[LapFilter] = None) -> List[Lap]:
        """Lap records matching the filter."""
        return self._get(LAPS_PATH, Lap, build_params(lap))

    def get_latest_laps(self) -> List[Lap]:
        """Every lap of the latest session."""
        return self._get(LAPS_PATH, Lap, latest_session_params())

    def get_latest_laps_by_driver(self, driver: DriverLike) -> List[Lap]:
        """Laps of one driver in the latest session."""
        return self._get_latest_for_driver(LAPS_PATH, Lap, driver)

    # Location

    def get_locations(self, location: Optional[LocationFilter] = None) -> List[Location]:
        """Car positions on track matching the filter."""
        return self._get(LOCATION_PATH, Location, build_params(location))

    def get_all_drivers_latest_locations(self) -> List[Location]:
        """Track positions of every car in the latest session."""
        return self._get(LOCATION_PATH, Location, latest_session_params())

    def get_driver_latest_location(self, driver: DriverLike) -> List[Location]:
        """Track positions of one car in the latest session."""
        return self._get_latest_for_driver(LOCATION_PATH, Location, driver)

    # Meetings

    def get_meetings(self, meeting: Optional[MeetingFilter] = None) -> List[Meeting]:
        """Meetings matching the filter."""
        return self._get(MEETINGS_PATH, Meeting, build_params(meeting))

    def get_latest_meeting(self) -> Meeting:
        """The most recent meeting by start date.

        Raises:
            NotFound: If the API returns no meeting
        """
        meetings = self._get(MEETINGS_PATH, Meeting, [QueryParam("meeting_key", LATEST)])
        try:
            return most_recent(meetings, "date_start")
        except NotFound:
            raise NotFound("no latest meeting returned") from None

    # Pit

    def get_pits(self, pit: Optional[PitFilter] = None) -> List[Pit]:
        """Pit stops matching the filter."""
        return self._get(PIT_PATH, Pit, build_params(pit))

    def get_all_drivers_latest_pits(self) -> List[Pit]:
        """Every pit stop of the latest session."""
        return self._get(PIT_PATH, Pit, latest_session_params())

    def get_driver_latest_pits(self, driver: DriverLike) -> List[Pit]:
        """Pit stops of one driver in the latest session."""
        return self._get_latest_for_driver(PIT_PATH, Pit, driver)

    # Position

    def get_positions(self, position: Optional[PositionFilter] = None) -> List[Position]:
        """Race position changes matching the filter."""
        return self._get(POSITION_PATH, Position, build_params(position))

    def get_all_drivers_latest_positions(self) -> List[Position]:
        """Position changes of every driver in the latest session."""
        return self._get(POSITION_PATH, Position, latest_session_params())

    def get_driver_latest_positions(self, driver: DriverLike) -> List[Position]:
        """Position changes of one driver in the latest session."""
        return self._get_latest_for_driver(POSITION_PATH, Position, driver)

    # Race control

    def get_race_control(self, race_control: Optional[RaceControlFilter] = None) -> List[RaceControl]:
        """Race control messages matching the filter."""
        return self._get(RACE_CONTROL_PATH, RaceControl, build_params(race_control))

    def get_all_drivers_latest_race_control(self) -> List[RaceControl]:
        """Race control messages of the latest session."""
        return self._get(RACE_CONTROL_PATH, RaceControl, latest_session_params())

    def get_driver_latest_race_control(self, driver: DriverLike) -> List[RaceControl]:
        """Race control messages about one driver in the latest session."""
        return self._get_latest_for_driver(RACE_CONTROL_PATH, RaceControl, driver)

    # Sessions

    def get_sessions(self, session: Optional[SessionFilter] = None) -> List[Session]:
        """Sessions matching the filter."""
        return self._get(SESSIONS_PATH, Session, build_params(session))

    def get_latest_session(self) -> Session:
        """The live or most recently started session.

        Raises:
            NotFound: If the API returns no session
        """
        sessions = self._get(SESSIONS_PATH, Session, latest_session_params())
        try:
            return most_recent(sessions, "date_start")
        except NotFound:
            raise NotFound("no latest session returned") from None

    # Stints

    def get_stints(self, stint: Optional[StintFilter] = None) -> List[Stint]:
        """Stints matching the filter."""
        return self._get(STINTS_PATH, Stint, build_params(stint))

    def get_all_drivers_latest_stints(self) -> List[Stint]:
        """Every stint of the latest session."""
        return self._get(STINTS_PATH, Stint, latest_session_params())

    def get_driver_latest_stints(self, driver: DriverLike) -> List[Stint]:
        """Stints of one driver in the latest session."""
        return self._get_latest_for_driver(STINTS_PATH, Stint, driver)

    # Team radio

    def get_team_radio(self, team_radio: Optional[TeamRadioFilter] = None) -> List[TeamRadio]:
        """Team radio clips matching the filter."""
        return self._get(TEAM_RADIO_PATH, TeamRadio, build_params(team_radio))

    def get_all_drivers_latest_team_radio(self) -> List[TeamRadio]:
        """Every team radio clip of the latest session."""
        return self._get(TEAM_RADIO_PATH, TeamRadio, latest_session_params())

    def get_driver_latest_team_radio(self, driver: DriverLike) -> List[TeamRadio]:
        """Team radio clips of one driver in the latest session."""
        return self._get_latest_for_driver(TEAM_RADIO_PATH, TeamRadio, driver)

    # Weather

    def get_weather(self, weather: Optional[WeatherFilter] = None) -> List[Weather]:
        """Weather samples matching the filter."""
        return self._get(WEATHER_PATH, Weather, build_params(weather))

    def get_latest_weather(self) -> Weather:
        """The most recent weather sample of the latest session.

        Raises:
            NotFound: If the API returns no sample
        """
        samples = self._get(WEATHER_PATH, Weather, latest_session_params())
        try:
            return most_recent(samples, "date")
        except NotFound:
            raise NotFound("no latest weather sample returned") from None
