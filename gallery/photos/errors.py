"""Failure kinds of a single photo request cycle."""

from __future__ import annotations


class PhotoFetchError(Exception):
    """Base class for everything that can go wrong fetching one photo batch."""

    kind = "fetch_failed"


class RequestFailed(PhotoFetchError):
    """The image API answered with a non-success status."""

    kind = "request_failed"

    def __init__(self, status: int) -> None:
        super().__init__(f"API request failed with status {status}")
        self.status = status


class DecodeFailed(PhotoFetchError):
    """The response body is not a list of photo records."""

    kind = "decode_failed"


class NetworkError(PhotoFetchError):
    """Transport-level failure (DNS, connect, read, timeout)."""

    kind = "network_error"
