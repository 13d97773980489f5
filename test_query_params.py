"""Tests for filter record encoding and the latest-session convention."""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import List, Optional
from urllib.parse import parse_qsl, urlsplit

import pytest
from pydantic import ValidationError

from openf1_client import schemas
from openf1_client.exceptions import MissingIdentifier, UnsupportedFilterField
from openf1_client.query import (
    FieldKind,
    QueryParam,
    build_params,
    build_url,
    concat_params,
    driver_params,
    field_table,
    latest_session_params,
)
from openf1_client.schemas import Driver, DriverFilter, FilterRecord, LapFilter, RaceControlFilter

BASE = "https://api.openf1.org/v1/laps"

FILTER_CLASSES = [
    getattr(schemas, name)
    for name in schemas.__all__
    if name.endswith("Filter") and name != "FilterRecord"
]

SAMPLE_TIME = datetime(2023, 9, 16, 13, 3, 35, tzinfo=timezone.utc)


def sample_value(kind: FieldKind):
    if kind is FieldKind.INTEGER:
        return 7
    if kind is FieldKind.STRING:
        return "SOFT"
    return SAMPLE_TIME


def single_field_cases() -> list:
    return [
        pytest.param(cls, spec, id=f"{cls.__name__}.{spec.attribute}")
        for cls in FILTER_CLASSES
        for spec in field_table(cls)
    ]


def test_every_resource_has_a_filter():
    assert len(FILTER_CLASSES) == 13


@pytest.mark.parametrize("filter_cls", FILTER_CLASSES, ids=lambda cls: cls.__name__)
def test_zero_filter_encodes_to_nothing(filter_cls):
    params = build_params(filter_cls())

    assert params == []
    assert build_url(BASE, params) == BASE


def test_none_filter_encodes_to_nothing():
    assert build_params(None) == []


@pytest.mark.parametrize("filter_cls,spec", single_field_cases())
def test_single_field_gives_single_pair(filter_cls, spec):
    record = filter_cls(**{spec.attribute: sample_value(spec.kind)})

    params = build_params(record)

    assert len(params) == 1
    assert params[0].key == spec.wire_name


@pytest.mark.parametrize("filter_cls", FILTER_CLASSES, ids=lambda cls: cls.__name__)
def test_filter_fields_are_response_fields(filter_cls):
    response_cls = getattr(schemas, filter_cls.__name__[: -len("Filter")])

    assert set(filter_cls.model_fields) <= set(response_cls.model_fields)


def test_driver_number_scenario():
    params = build_params(LapFilter(driver_number=44))

    assert params == [QueryParam("driver_number", "44")]
    assert build_url(BASE, params) == BASE + "?driver_number=44"


def test_pairs_follow_declaration_order():
    params = build_params(LapFilter(session_key=9158, lap_number=8, driver_number=44))

    assert [p.key for p in params] == ["driver_number", "lap_number", "session_key"]


def test_round_trip_through_query_string():
    record = RaceControlFilter(
        category="Flag",
        date=SAMPLE_TIME,
        driver_number=1,
        flag="BLUE",
        message="WAVED BLUE FLAG FOR CAR 2 (SAR)",
        session_key=9158,
    )

    url = build_url(BASE, build_params(record))
    recovered = dict(parse_qsl(urlsplit(url).query))

    assert recovered == {
        "category": "Flag",
        "date": "2023-09-16T13:03:35Z",
        "driver_number": "1",
        "flag": "BLUE",
        "message": "WAVED BLUE FLAG FOR CAR 2 (SAR)",
        "session_key": "9158",
    }
    assert int(recovered["driver_number"]) == record.driver_number
    assert datetime.fromisoformat(recovered["date"].replace("Z", "+00:00")) == record.date


def test_timestamp_is_normalized_to_utc():
    local = datetime(2023, 9, 16, 21, 3, 35, tzinfo=timezone(timedelta(hours=8)))

    params = build_params(LapFilter(date_start=local))

    assert params == [QueryParam("date_start", "2023-09-16T13:03:35Z")]


def test_timestamp_encoding_is_idempotent():
    first = build_params(LapFilter(date_start=SAMPLE_TIME))[0].value
    reparsed = datetime.fromisoformat(first.replace("Z", "+00:00"))
    second = build_params(LapFilter(date_start=reparsed))[0].value

    assert first == second


def test_naive_timestamp_is_taken_as_utc():
    params = build_params(LapFilter(date_start=datetime(2023, 9, 16, 13, 3, 35, 250000)))

    assert params[0].value == "2023-09-16T13:03:35Z"


def test_negative_integer_is_a_constraint():
    assert build_params(LapFilter(lap_number=-1)) == [QueryParam("lap_number", "-1")]


def test_str_enum_value_encodes_as_its_value():
    class Compound(str, Enum):
        SOFT = "SOFT"
        HARD = "HARD"

    class CompoundFilter(FilterRecord):
        driver_number: int = 0
        compound: str = ""

    params = build_params(CompoundFilter(driver_number=1, compound=Compound.SOFT))

    assert params == [QueryParam("driver_number", "1"), QueryParam("compound", "SOFT")]
    assert "compound=SOFT" in build_url(BASE, params)


def test_unknown_filter_field_is_rejected():
    with pytest.raises(ValidationError):
        LapFilter(lap_duration=90.5)


def test_unsupported_field_type_is_a_design_error():
    class RatioFilter(FilterRecord):
        driver_number: int = 0
        ratio: float = 0.0

    with pytest.raises(UnsupportedFilterField, match="RatioFilter.ratio"):
        build_params(RatioFilter(driver_number=1))


def test_bool_field_is_unsupported():
    class FlagFilter(FilterRecord):
        is_pit_out_lap: bool = False

    with pytest.raises(UnsupportedFilterField):
        field_table(FlagFilter)


def test_list_field_is_unsupported():
    class SegmentsFilter(FilterRecord):
        segments: Optional[List[int]] = None

    with pytest.raises(TypeError):
        field_table(SegmentsFilter)


def test_field_table_is_cached():
    assert field_table(LapFilter) is field_table(LapFilter)


def test_latest_session_pairs_are_fixed():
    assert latest_session_params() == [
        QueryParam("meeting_key", "latest"),
        QueryParam("session_key", "latest"),
    ]


def test_driver_selector_comes_first():
    params = concat_params(driver_params(DriverFilter(driver_number=44)), latest_session_params())

    assert len(params) == 3
    assert params[0] == QueryParam("driver_number", "44")
    assert [p.key for p in params[1:]] == ["meeting_key", "session_key"]


def test_driver_params_accepts_response_record():
    assert driver_params(Driver(driver_number=16)) == [QueryParam("driver_number", "16")]


def test_driver_params_requires_number():
    with pytest.raises(MissingIdentifier):
        driver_params(DriverFilter(last_name="Hamilton"))
