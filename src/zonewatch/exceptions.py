"""Custom exception hierarchy for zonewatch."""

from __future__ import annotations


class ZoneWatchError(Exception):
    """Base exception for all zonewatch errors."""


class ZoneWatchConfigError(ZoneWatchError):
    """Invalid configuration value."""


class ZoneWatchTransportError(ZoneWatchError):
    """HTTP-level failure (network, non-2xx, invalid JSON).

    For non-2xx responses the message is the response body text, as
    returned by the server.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class InvalidBoundsError(ZoneWatchError):
    """A layer has no usable geometry to compute bounds from."""


class ClientNotStartedError(ZoneWatchError):
    """Client used outside of its ``async with`` block."""
