"""Alert feed model."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from zonewatch.models._base import Timestamp, ZoneWatchBaseModel


class Alert(ZoneWatchBaseModel):
    """An alert derived server-side from an incoming message.

    Parameters
    ----------
    id : str or None
        Server-assigned identifier, if any.
    tipo : str
        Alert type (e.g. ``"lluvia"``).
    zona : str
        Zone name the alert applies to.
    timestamp : datetime
        When the alert was produced (timezone aware).
    mensaje : str
        Message body.
    severidad : str
        ``"crítica"``, ``"alta"`` or any other value.
    extracto : str or None
        Matched excerpt of the source message; empty means absent.
    """

    id: str | None = None
    tipo: str = ""
    zona: str = ""
    timestamp: Timestamp
    mensaje: str = ""
    severidad: str = ""
    extracto: str | None = None

    @field_validator("extracto", mode="before")
    @classmethod
    def _empty_extract(cls, value: Any) -> Any:
        if isinstance(value, str) and not value:
            return None
        return value
