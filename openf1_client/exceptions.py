"""Exception hierarchy for the OpenF1 client."""

from typing import Optional


class OpenF1Error(Exception):
    """Base class for every error raised by the client."""


class InvalidURL(OpenF1Error, ValueError):
    """Base resource path is not a well-formed absolute URL."""


class TransportError(OpenF1Error):
    """Network failure, timeout, or (when enabled) a non-2xx response."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class DecodeError(OpenF1Error, ValueError):
    """Response body is not JSON or does not match the expected record shape."""


class MissingIdentifier(OpenF1Error, ValueError):
    """A lookup was requested without the selector field it needs."""


class NotFound(OpenF1Error):
    """A lookup expected to resolve to one record resolved to none."""


class AmbiguousResult(OpenF1Error):
    """A lookup expected to resolve to one record resolved to several."""

    def __init__(self, message: str, count: int):
        self.count = count
        super().__init__(message)


class UnsupportedFilterField(OpenF1Error, TypeError):
    """A filter class declares a field that cannot be sent as a query parameter."""
