"""Query string construction."""

from .params import (
    LATEST,
    QueryParam,
    FieldKind,
    FieldSpec,
    field_table,
    build_params,
    latest_session_params,
    driver_params,
    concat_params,
)
from .url import build_url

__all__ = [
    "LATEST",
    "QueryParam",
    "FieldKind",
    "FieldSpec",
    "field_table",
    "build_params",
    "latest_session_params",
    "driver_params",
    "concat_params",
    "build_url",
]
