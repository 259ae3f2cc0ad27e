"""Data models for zone-monitoring server payloads."""

from zonewatch.models._base import ZoneWatchBaseModel, parse_timestamp
from zonewatch.models.alert import Alert
from zonewatch.models.style import VisualStyle
from zonewatch.models.zone import ZoneCollection, ZoneFeature, ZoneProperties

__all__ = [
    "Alert",
    "VisualStyle",
    "ZoneCollection",
    "ZoneFeature",
    "ZoneProperties",
    "ZoneWatchBaseModel",
    "parse_timestamp",
]
