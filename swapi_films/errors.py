"""Errors raised while fetching, decoding and looking up films."""

from typing import Optional


class FilmsError(Exception):
    """Base class for every error raised by the film loaders."""


class NetworkError(FilmsError):
    """Transport-level failure: unreachable host, timeout or a non-2xx status."""

    def __init__(self, url: str, message: str, status: Optional[int] = None):
        self.url = url
        self.message = message
        self.status = status
        super().__init__(f"Failed to fetch {url}: {message}")


class DecodeError(FilmsError):
    """The response body does not match the expected record shape."""

    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(f"Failed to decode {url}: {message}")


class MissingDataError(FilmsError, LookupError):
    """No film is mapped for the requested key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Missing data for episode {key!r}")
