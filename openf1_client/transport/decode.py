"""JSON response decoding into typed records."""

from functools import lru_cache
from typing import List, Type, TypeVar

import orjson
from pydantic import TypeAdapter, ValidationError

from openf1_client.exceptions import DecodeError
from openf1_client.schemas.base import Record

R = TypeVar("R", bound=Record)


@lru_cache(maxsize=None)
def _list_adapter(model: Type[Record]) -> TypeAdapter:
    return TypeAdapter(List[model])


def decode_records(raw: bytes, model: Type[R]) -> List[R]:
    """Decode a JSON array body into records.

    Args:
        raw: Response body
        model: Record class of each element

    Returns:
        List of records, possibly empty

    Raises:
        DecodeError: If raw is not JSON or not an array of compatible objects
    """
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise DecodeError(f"Response is not valid JSON: {e}") from e

    try:
        return _list_adapter(model).validate_python(data)
    except ValidationError as e:
        raise DecodeError(
            f"Response does not match list[{model.__name__}]: {e}"
        ) from e


def decode_record(raw: bytes, model: Type[R]) -> R:
    """Decode a JSON object body into one record.

    Raises:
        DecodeError: If raw is not JSON or not a compatible object
    """
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise DecodeError(f"Response is not valid JSON: {e}") from e

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Response does not match {model.__name__}: {e}") from e
