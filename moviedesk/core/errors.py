"""Failures raised by the movie API client."""
from typing import Optional


class MovieServiceError(Exception):
    """Base class for movie API failures."""


class NetworkFailure(MovieServiceError):
    """The request never reached the server, or no response arrived."""


class ServerError(MovieServiceError):
    """The server answered with a non-2xx status or an unreadable body."""

    def __init__(self, status_code: Optional[int], message: str = "") -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}" if message else f"HTTP {status_code}")
