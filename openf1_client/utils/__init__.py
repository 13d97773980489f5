"""Utility modules for the OpenF1 client."""

from .logging_utils import setup_logger, get_logger
from .time_utils import (
    to_utc,
    format_timestamp,
    parse_timestamp,
    sort_key,
)
from .io_utils import (
    ensure_dir,
    records_to_dicts,
    records_to_frame,
    save_json,
    load_json,
    save_csv,
)

__all__ = [
    # Logging
    "setup_logger",
    "get_logger",
    # Time
    "to_utc",
    "format_timestamp",
    "parse_timestamp",
    "sort_key",
    # IO
    "ensure_dir",
    "records_to_dicts",
    "records_to_frame",
    "save_json",
    "load_json",
    "save_csv",
]
