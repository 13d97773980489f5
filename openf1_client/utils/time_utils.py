"""Timestamp helpers for query encoding and record ordering."""

from datetime import datetime, timezone
from typing import Optional, Union

# Query format accepted by the API: RFC 3339, UTC, second precision
WIRE_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def to_utc(ts: datetime) -> datetime:
    """Normalize a datetime to UTC.

    Naive datetimes are taken to already be UTC.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def format_timestamp(ts: datetime) -> str:
    """Format a datetime as a query value.

    Args:
        ts: Timestamp, naive (UTC) or aware

    Returns:
        String like ``2023-09-16T13:03:35Z``
    """
    return to_utc(ts).strftime(WIRE_TIMESTAMP_FORMAT)


def parse_timestamp(ts: Union[str, datetime]) -> datetime:
    """Parse timestamp to an aware UTC datetime.

    Args:
        ts: ISO 8601 string (``Z`` suffix accepted) or datetime

    Returns:
        datetime in UTC

    Raises:
        ValueError: If ts cannot be parsed
    """
    if isinstance(ts, datetime):
        return to_utc(ts)
    elif isinstance(ts, str):
        text = ts.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        return to_utc(datetime.fromisoformat(text))
    else:
        raise ValueError(f"Cannot parse timestamp of type {type(ts)}: {ts}")


def sort_key(ts: Optional[datetime]) -> datetime:
    """Ordering key that ranks missing timestamps lowest."""
    if ts is None:
        return datetime.min.replace(tzinfo=timezone.utc)
    return to_utc(ts)
