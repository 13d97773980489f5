"""Typed client for the OpenF1 motorsport telemetry API."""

from .client import OpenF1Client
from .conf.settings import Settings, settings
from .exceptions import (
    OpenF1Error,
    InvalidURL,
    TransportError,
    DecodeError,
    MissingIdentifier,
    NotFound,
    AmbiguousResult,
    UnsupportedFilterField,
)
from .query import QueryParam, build_params, build_url, latest_session_params, concat_params
from .schemas import *  # noqa: F401,F403
from .schemas import __all__ as _schema_names

__version__ = "0.1.0"

__all__ = [
    "OpenF1Client",
    "Settings",
    "settings",
    # Errors
    "OpenF1Error",
    "InvalidURL",
    "TransportError",
    "DecodeError",
    "MissingIdentifier",
    "NotFound",
    "AmbiguousResult",
    "UnsupportedFilterField",
    # Query
    "QueryParam",
    "build_params",
    "build_url",
    "latest_session_params",
    "concat_params",
    *_schema_names,
]
