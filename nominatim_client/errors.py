"""Exceptions raised by the Nominatim client."""
from typing import Optional


class NominatimError(Exception):
    """Base exception for all client errors."""


class InvalidUrl(NominatimError, ValueError):
    """Raised when a base URL cannot be parsed as an absolute http(s) URL."""

    def __init__(self, url):
        self.url = url
        super().__init__(f"Invalid base URL: {url!r}")


class RequestFailed(NominatimError):
    """Raised on network errors and non-2xx HTTP responses."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class RequestTimeout(RequestFailed):
    """Raised when the configured timeout elapses before a response arrives."""


class ParseFailed(NominatimError):
    """Raised when the response body is not the expected JSON shape."""


class NotFound(NominatimError):
    """Raised when a reverse lookup has no result for the coordinate."""
