"""Request URL composition."""

from typing import Dict, Iterable
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from openf1_client.exceptions import InvalidURL
from .params import QueryParam


def build_url(base: str, params: Iterable[QueryParam]) -> str:
    """Merge query parameters into a resource URL.

    A repeated key keeps its first position and takes its last value. Query
    pairs already present on ``base`` come first.

    Args:
        base: Absolute http(s) URL of the resource
        params: Parameters to append

    Returns:
        Request URL; ``base`` unchanged when there are no parameters

    Raises:
        InvalidURL: If base is not an absolute http(s) URL
    """
    try:
        parts = urlsplit(base)
    except ValueError as e:
        raise InvalidURL(f"Cannot parse URL {base!r}: {e}") from e

    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidURL(f"Expected an absolute http(s) URL, got {base!r}")

    params = list(params)
    if not params:
        return base

    merged: Dict[str, str] = dict(parse_qsl(parts.query, keep_blank_values=True))
    for key, value in params:
        merged[key] = value

    return urlunsplit(parts._replace(query=urlencode(merged)))
