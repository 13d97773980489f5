"""Conversion of filter records into ordered query parameters.

Every filter class is described by a field table of
``(attribute, wire name, kind)`` entries, built once from the pydantic field
definitions and cached. Encoding walks that table, so the same code serves
every resource.
"""

import types
from datetime import datetime
from enum import Enum
from functools import lru_cache
from itertools import chain
from typing import Any, Iterable, List, NamedTuple, Optional, Tuple, Type, Union, get_args, get_origin

from openf1_client.exceptions import MissingIdentifier, UnsupportedFilterField
from openf1_client.schemas.base import FilterRecord
from openf1_client.schemas.session import Driver, DriverFilter
from openf1_client.utils.time_utils import format_timestamp

# Pseudo identifier the API resolves to the live or most recent meeting/session
LATEST = "latest"


class QueryParam(NamedTuple):
    """One key/value pair of a query string."""

    key: str
    value: str


class FieldKind(str, Enum):
    """Value kinds a filter field may hold."""

    INTEGER = "integer"
    STRING = "string"
    TIMESTAMP = "timestamp"


class FieldSpec(NamedTuple):
    """Encoding entry for one filter field."""

    attribute: str
    wire_name: str
    kind: FieldKind


def _classify(annotation: Any) -> Optional[FieldKind]:
    """Map a field annotation to its kind, or None when it has no query form."""
    if get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) != 1:
            return None
        annotation = members[0]

    if not isinstance(annotation, type):
        return None
    # bool subclasses int but has no agreed query form
    if issubclass(annotation, bool):
        return None
    if issubclass(annotation, int):
        return FieldKind.INTEGER
    if issubclass(annotation, str):
        return FieldKind.STRING
    if issubclass(annotation, datetime):
        return FieldKind.TIMESTAMP
    return None


@lru_cache(maxsize=None)
def field_table(filter_cls: Type[FilterRecord]) -> Tuple[FieldSpec, ...]:
    """Build the encoding table for a filter class, in declaration order.

    Args:
        filter_cls: FilterRecord subclass

    Returns:
        Tuple of FieldSpec entries

    Raises:
        UnsupportedFilterField: If a field is not int, str or datetime
    """
    specs = []
    for name, info in filter_cls.model_fields.items():
        kind = _classify(info.annotation)
        if kind is None:
            raise UnsupportedFilterField(
                f"{filter_cls.__name__}.{name} has type {info.annotation!r}; "
                f"filter fields must be int, str or datetime"
            )
        specs.append(FieldSpec(attribute=name, wire_name=info.alias or name, kind=kind))
    return tuple(specs)


def _encode_value(value: Any, kind: FieldKind) -> Optional[str]:
    """Encode one field value, None when it is the zero value."""
    if kind is FieldKind.INTEGER:
        return str(int(value)) if value else None
    if kind is FieldKind.STRING:
        if isinstance(value, Enum):
            value = value.value
        return str(value) if value else None
    if value is None:
        return None
    return format_timestamp(value)


def build_params(filter_record: Optional[FilterRecord]) -> List[QueryParam]:
    """Encode the set fields of a filter record as query parameters.

    Args:
        filter_record: Any FilterRecord instance (None = no constraints)

    Returns:
        List of QueryParam in field declaration order; empty when nothing is set
    """
    if filter_record is None:
        return []

    params = []
    for spec in field_table(type(filter_record)):
        encoded = _encode_value(getattr(filter_record, spec.attribute), spec.kind)
        if encoded is not None:
            params.append(QueryParam(spec.wire_name, encoded))
    return params


def latest_session_params() -> List[QueryParam]:
    """Sentinel pairs selecting the live or most recent meeting and session."""
    return [
        QueryParam("meeting_key", LATEST),
        QueryParam("session_key", LATEST),
    ]


def driver_params(driver: Union[Driver, DriverFilter]) -> List[QueryParam]:
    """Single ``driver_number`` pair for a per-driver lookup.

    Raises:
        MissingIdentifier: If the driver number is not set
    """
    if not driver.driver_number:
        raise MissingIdentifier("provided driver is missing a driver number")
    return [QueryParam("driver_number", str(driver.driver_number))]


def concat_params(*sequences: Iterable[QueryParam]) -> List[QueryParam]:
    """Join parameter sequences from several sources, keeping their order."""
    return list(chain.from_iterable(sequences))
