"""Per-endpoint response ordering.

Polls are never cancelled, so a slow response from an earlier tick can
arrive after a faster one from a later tick. The sequencer numbers every
dispatch and accepts a response only if it is newer than the last one
applied for the same endpoint.
"""

from __future__ import annotations


class ResponseSequencer:
    def __init__(self) -> None:
        self._dispatched: dict[str, int] = {}
        self._applied: dict[str, int] = {}

    def dispatch(self, endpoint: str) -> int:
        """Return the sequence number for a request about to be sent."""
        seq = self._dispatched.get(endpoint, 0) + 1
        self._dispatched[endpoint] = seq
        return seq

    def accept(self, endpoint: str, seq: int) -> bool:
        """Record *seq* as applied if it is the newest seen; report whether it was."""
        if seq <= self._applied.get(endpoint, 0):
            return False
        self._applied[endpoint] = seq
        return True

    def last_applied(self, endpoint: str) -> int:
        return self._applied.get(endpoint, 0)
