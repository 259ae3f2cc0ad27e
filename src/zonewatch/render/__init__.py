"""Map engine interface and the bundled in-memory engine."""

from zonewatch.render.engine import GeoJsonLayer, LatLngBounds, MapEngine, MapHandle
from zonewatch.render.memory import MemoryGeoJsonLayer, MemoryMap, MemoryMapEngine, RenderedFeature

__all__ = [
    "GeoJsonLayer",
    "LatLngBounds",
    "MapEngine",
    "MapHandle",
    "MemoryGeoJsonLayer",
    "MemoryMap",
    "MemoryMapEngine",
    "RenderedFeature",
]
