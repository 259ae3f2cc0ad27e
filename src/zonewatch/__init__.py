"""zonewatch - Async sync client for a zone-monitoring map and alert feed."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("zonewatch")
except PackageNotFoundError:
    __version__ = "0+local"
from zonewatch.classify import ColorCategory, classify_severity, classify_status
from zonewatch.client import ZoneWatchClient
from zonewatch.config import ZoneWatchConfig
from zonewatch.exceptions import (
    ClientNotStartedError,
    InvalidBoundsError,
    ZoneWatchConfigError,
    ZoneWatchError,
    ZoneWatchTransportError,
)
from zonewatch.models import Alert, VisualStyle, ZoneCollection, ZoneFeature, ZoneProperties
from zonewatch.page import AlertListView, MessageForm, PageShell
from zonewatch.render import MemoryMapEngine

__all__ = [
    "__version__",
    "Alert",
    "AlertListView",
    "ClientNotStartedError",
    "ColorCategory",
    "InvalidBoundsError",
    "MemoryMapEngine",
    "MessageForm",
    "PageShell",
    "VisualStyle",
    "ZoneCollection",
    "ZoneFeature",
    "ZoneProperties",
    "ZoneWatchClient",
    "ZoneWatchConfig",
    "ZoneWatchConfigError",
    "ZoneWatchError",
    "ZoneWatchTransportError",
    "classify_severity",
    "classify_status",
]
