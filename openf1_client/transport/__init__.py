"""Fetching and decoding API responses."""

from .http import Fetcher, HTTPFetcher
from .decode import decode_records, decode_record

__all__ = [
    "Fetcher",
    "HTTPFetcher",
    "decode_records",
    "decode_record",
]
