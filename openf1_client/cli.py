"""Command line access to the OpenF1 API.

Usage:
    openf1-client laps --session-key 9158 --driver-number 44
    openf1-client weather --latest
    openf1-client car_data --latest --driver-number 1 --output data/car.csv --format csv
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Type

import orjson

from openf1_client.client import OpenF1Client
from openf1_client.conf.settings import settings
from openf1_client.exceptions import OpenF1Error
from openf1_client.schemas import (
    CarDataFilter,
    DriverFilter,
    FilterRecord,
    IntervalFilter,
    LapFilter,
    LocationFilter,
    MeetingFilter,
    PitFilter,
    PositionFilter,
    RaceControlFilter,
    Record,
    SessionFilter,
    StintFilter,
    TeamRadioFilter,
    WeatherFilter,
)
from openf1_client.utils.io_utils import records_to_dicts, save_csv, save_json
from openf1_client.utils.logging_utils import get_logger, setup_logger

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class ResourceCommand:
    """How one resource maps onto client accessors."""

    filter_cls: Type[FilterRecord]
    query: Callable[[OpenF1Client, FilterRecord], List[Record]]
    latest: Optional[Callable[[OpenF1Client], List[Record]]]
    latest_for_driver: Optional[Callable[[OpenF1Client, DriverFilter], List[Record]]]


RESOURCES: Dict[str, ResourceCommand] = {
    "car_data": ResourceCommand(
        CarDataFilter,
        OpenF1Client.get_car_data,
        None,
        OpenF1Client.get_latest_car_data_by_driver,
    ),
    "drivers": ResourceCommand(
        DriverFilter,
        OpenF1Client.get_drivers,
        OpenF1Client.get_latest_drivers,
        lambda client, driver: [client.get_driver(driver)],
    ),
    "intervals": ResourceCommand(
        IntervalFilter,
        OpenF1Client.get_intervals,
        OpenF1Client.get_all_drivers_current_intervals,
        OpenF1Client.get_driver_current_intervals,
    ),
    "laps": ResourceCommand(
        LapFilter,
        OpenF1Client.get_laps,
        OpenF1Client.get_latest_laps,
        OpenF1Client.get_latest_laps_by_driver,
    ),
    "location": ResourceCommand(
        LocationFilter,
        OpenF1Client.get_locations,
        OpenF1Client.get_all_drivers_latest_locations,
        OpenF1Client.get_driver_latest_location,
    ),
    "meetings": ResourceCommand(
        MeetingFilter,
        OpenF1Client.get_meetings,
        lambda client: [client.get_latest_meeting()],
        None,
    ),
    "pit": ResourceCommand(
        PitFilter,
        OpenF1Client.get_pits,
        OpenF1Client.get_all_drivers_latest_pits,
        OpenF1Client.get_driver_latest_pits,
    ),
    "position": ResourceCommand(
        PositionFilter,
        OpenF1Client.get_positions,
        OpenF1Client.get_all_drivers_latest_positions,
        OpenF1Client.get_driver_latest_positions,
    ),
    "race_control": ResourceCommand(
        RaceControlFilter,
        OpenF1Client.get_race_control,
        OpenF1Client.get_all_drivers_latest_race_control,
        OpenF1Client.get_driver_latest_race_control,
    ),
    "sessions": ResourceCommand(
        SessionFilter,
        OpenF1Client.get_sessions,
        lambda client: [client.get_latest_session()],
        None,
    ),
    "stints": ResourceCommand(
        StintFilter,
        OpenF1Client.get_stints,
        OpenF1Client.get_all_drivers_latest_stints,
        OpenF1Client.get_driver_latest_stints,
    ),
    "team_radio": ResourceCommand(
        TeamRadioFilter,
        OpenF1Client.get_team_radio,
        OpenF1Client.get_all_drivers_latest_team_radio,
        OpenF1Client.get_driver_latest_team_radio,
    ),
    "weather": ResourceCommand(
        WeatherFilter,
        OpenF1Client.get_weather,
        lambda client: [client.get_latest_weather()],
        None,
    ),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openf1-client",
        description="Query the OpenF1 telemetry API",
    )

    parser.add_argument("resource", choices=sorted(RESOURCES), help="API resource")

    parser.add_argument(
        "--latest",
        action="store_true",
        help="Scope the query to the latest meeting and session",
    )

    parser.add_argument("--driver-number", type=int, default=0, help="Car number")
    parser.add_argument("--meeting-key", type=int, default=0, help="Meeting identifier")
    parser.add_argument("--session-key", type=int, default=0, help="Session identifier")

    parser.add_argument(
        "--output",
        type=Path,
        help="Write records to this file instead of stdout",
    )

    parser.add_argument(
        "--format",
        choices=["json", "csv"],
        default="json",
        help="Output file format (default: json)",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level.upper(),
        help=f"Log level (default: {settings.log_level})",
    )

    return parser


def fetch_records(client: OpenF1Client, args: argparse.Namespace) -> List[Record]:
    """Dispatch parsed arguments to the matching client accessor."""
    command = RESOURCES[args.resource]

    if args.latest:
        if args.driver_number:
            if command.latest_for_driver is None:
                raise SystemExit(f"{args.resource} has no per-driver latest query")
            return command.latest_for_driver(client, DriverFilter(driver_number=args.driver_number))
        if command.latest is None:
            raise SystemExit(f"{args.resource} --latest needs --driver-number")
        return command.latest(client)

    selectors = {
        "driver_number": args.driver_number,
        "meeting_key": args.meeting_key,
        "session_key": args.session_key,
    }
    fields = command.filter_cls.model_fields
    filter_record = command.filter_cls(
        **{name: value for name, value in selectors.items() if value and name in fields}
    )
    return command.query(client, filter_record)


def write_records(records: Sequence[Record], output: Optional[Path], fmt: str) -> None:
    if output is None:
        sys.stdout.write(orjson.dumps(records_to_dicts(records), option=orjson.OPT_INDENT_2).decode())
        sys.stdout.write("\n")
    elif fmt == "csv":
        save_csv(records, output)
    else:
        save_json(records, output)


def main(argv: Optional[Sequence[str]] = None, client: Optional[OpenF1Client] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    log_file = "openf1_client.log" if settings.log_to_file else None
    setup_logger("openf1_client", log_file=log_file).setLevel(args.log_level)

    owns_client = client is None
    client = client or OpenF1Client(settings)
    try:
        records = fetch_records(client, args)
    except OpenF1Error as e:
        logger.error(f"{args.resource}: {type(e).__name__}: {e}")
        return 1
    finally:
        if owns_client:
            client.close()

    logger.info(f"{args.resource}: {len(records)} records")
    write_records(records, args.output, args.format)
    if args.output is not None:
        logger.info(f"Saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
