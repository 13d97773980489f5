"""Base classes for response records and filter records."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class Record(BaseModel):
    """One decoded unit of telemetry or metadata.

    Keys the model does not declare are ignored. Missing keys and JSON nulls
    both leave the field at its zero value.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class FilterRecord(BaseModel):
    """Optional selectors for one resource.

    A field left at its zero value (0, "", None) is not a constraint. Only
    int, str and datetime fields are allowed; see query.params.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)
