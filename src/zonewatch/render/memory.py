"""In-memory map engine.

Keeps rendered features, their styles and popups as plain Python objects.
Used for headless runs and as the reference engine in tests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from zonewatch.config import TileLayerConfig
from zonewatch.exceptions import InvalidBoundsError
from zonewatch.models.style import VisualStyle
from zonewatch.models.zone import ZoneCollection, ZoneFeature
from zonewatch.render.engine import LatLngBounds, PopupCallback, StyleCallback

_logger = logging.getLogger(__name__)


def _is_position(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) >= 2
        and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value[:2])
    )


def _iter_coordinates(coords: Any) -> Iterator[tuple[float, float]]:
    """Yield ``(lng, lat)`` pairs from arbitrarily nested GeoJSON coordinates."""
    if _is_position(coords):
        yield float(coords[0]), float(coords[1])
        return
    if isinstance(coords, (list, tuple)):
        for item in coords:
            yield from _iter_coordinates(item)


def iter_positions(geometry: dict[str, Any] | None) -> Iterator[tuple[float, float]]:
    """Yield ``(lng, lat)`` pairs of a GeoJSON geometry (collections included)."""
    if not isinstance(geometry, dict):
        return
    if geometry.get("type") == "GeometryCollection":
        for child in geometry.get("geometries") or []:
            yield from iter_positions(child)
        return
    yield from _iter_coordinates(geometry.get("coordinates"))


@dataclass
class RenderedFeature:
    """One drawn zone with the style and popup it was drawn with."""

    feature: ZoneFeature
    style: VisualStyle
    popup: str


class MemoryGeoJsonLayer:
    """GeoJSON layer that stores drawn features in a list."""

    def __init__(self, style: StyleCallback, popup: PopupCallback) -> None:
        self._style = style
        self._popup = popup
        self.features: list[RenderedFeature] = []

    def add_data(self, collection: ZoneCollection) -> None:
        for feature in collection.features:
            self.features.append(RenderedFeature(feature, self._style(feature), self._popup(feature)))

    def clear_layers(self) -> None:
        self.features.clear()

    def get_bounds(self) -> LatLngBounds:
        lats: list[float] = []
        lngs: list[float] = []
        for rendered in self.features:
            for lng, lat in iter_positions(rendered.feature.geometry):
                lngs.append(lng)
                lats.append(lat)
        if not lats:
            raise InvalidBoundsError("Bounds are not valid.")
        return LatLngBounds(south=min(lats), west=min(lngs), north=max(lats), east=max(lngs))


@dataclass
class FitCall:
    bounds: LatLngBounds
    padding: tuple[int, int]


@dataclass
class MemoryMap:
    """Map state: viewport, tile layers and GeoJSON layers."""

    element_id: str
    center: tuple[float, float] | None = None
    zoom: int | None = None
    tile_layers: list[TileLayerConfig] = field(default_factory=list)
    layers: list[MemoryGeoJsonLayer] = field(default_factory=list)
    fit_calls: list[FitCall] = field(default_factory=list)
    removed: bool = False

    def set_view(self, center: tuple[float, float], zoom: int) -> None:
        self.center = center
        self.zoom = zoom

    def add_tile_layer(self, tiles: TileLayerConfig) -> None:
        self.tile_layers.append(tiles)

    def add_geojson_layer(
        self,
        collection: ZoneCollection,
        *,
        style: StyleCallback,
        popup: PopupCallback,
    ) -> MemoryGeoJsonLayer:
        layer = MemoryGeoJsonLayer(style, popup)
        layer.add_data(collection)
        self.layers.append(layer)
        return layer

    def fit_bounds(self, bounds: LatLngBounds, *, padding: tuple[int, int]) -> None:
        self.fit_calls.append(FitCall(bounds, padding))
        self.center = bounds.center

    def remove(self) -> None:
        self.layers.clear()
        self.removed = True


class MemoryMapEngine:
    """Engine creating :class:`MemoryMap` instances."""

    def __init__(self) -> None:
        self.maps: list[MemoryMap] = []

    def create_map(self, element_id: str) -> MemoryMap:
        _logger.debug("Creating in-memory map in #%s", element_id)
        created = MemoryMap(element_id=element_id)
        self.maps.append(created)
        return created
