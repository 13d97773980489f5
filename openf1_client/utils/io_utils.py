"""Export helpers for decoded records."""

from pathlib import Path
from typing import Any, Dict, List, Sequence

import orjson
import pandas as pd
from pydantic import BaseModel


def ensure_dir(path: str | Path) -> Path:
    """Ensure directory exists, create if needed.

    Args:
        path: Directory path

    Returns:
        Path object
    """
    path_obj = Path(path)
    path_obj.mkdir(parents=True, exist_ok=True)
    return path_obj


def records_to_dicts(records: Sequence[BaseModel]) -> List[Dict[str, Any]]:
    """Convert records to plain dicts keyed by wire attribute name.

    Timestamps become ISO 8601 strings.
    """
    return [record.model_dump(mode="json", by_alias=True) for record in records]


def records_to_frame(records: Sequence[BaseModel]) -> pd.DataFrame:
    """Convert records to a DataFrame, one row per record.

    Timestamp columns keep their datetime type. An empty sequence gives an
    empty frame.
    """
    rows = [record.model_dump(by_alias=True) for record in records]
    return pd.DataFrame(rows)


def save_json(records: Sequence[BaseModel], file_path: str | Path, pretty: bool = True) -> None:
    """Save records as a JSON array.

    Args:
        records: Decoded records
        file_path: Output file path
        pretty: Whether to indent the output
    """
    path_obj = Path(file_path)
    ensure_dir(path_obj.parent)

    option = orjson.OPT_INDENT_2 if pretty else 0
    with open(path_obj, "wb") as f:
        f.write(orjson.dumps(records_to_dicts(records), option=option))


def load_json(file_path: str | Path) -> Any:
    """Load JSON file.

    Args:
        file_path: Path to JSON file

    Returns:
        Loaded data
    """
    with open(file_path, "rb") as f:
        return orjson.loads(f.read())


def save_csv(records: Sequence[BaseModel], file_path: str | Path) -> None:
    """Save records as CSV with wire names as the header row."""
    path_obj = Path(file_path)
    ensure_dir(path_obj.parent)
    records_to_frame(records).to_csv(path_obj, index=False)
