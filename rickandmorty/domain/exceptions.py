"""Failures raised by the API client.

The client reports what went wrong on the wire and nothing more; turning
these into user-facing messages is the repository's job.
"""


class TransportError(Exception):
    """Base class for all API client failures."""
    pass


class ConnectivityError(TransportError):
    """The API could not be reached (no network, refused, timed out)."""
    pass


class ProtocolError(TransportError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        super().__init__(message or f"HTTP {status_code}")


class DecodeError(TransportError):
    """The response body could not be parsed into the expected shape."""
    pass
