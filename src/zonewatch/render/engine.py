"""Map engine interface.

The reconciler only needs a handful of operations from a map engine:
create a map in a container, frame a view, add a tile layer, build a
GeoJSON layer with per-feature style/popup callbacks, and fit the view to
a layer's bounds. Any engine implementing these protocols can be plugged
into :class:`zonewatch.client.ZoneWatchClient`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from zonewatch.config import TileLayerConfig
from zonewatch.models.style import VisualStyle
from zonewatch.models.zone import ZoneCollection, ZoneFeature

StyleCallback = Callable[[ZoneFeature], VisualStyle]
PopupCallback = Callable[[ZoneFeature], str]


@dataclass(frozen=True)
class LatLngBounds:
    """Axis-aligned geographic bounds in degrees."""

    south: float
    west: float
    north: float
    east: float

    @property
    def center(self) -> tuple[float, float]:
        return ((self.south + self.north) / 2.0, (self.west + self.east) / 2.0)


class GeoJsonLayer(Protocol):
    """A live layer of zone features bound to a map."""

    def add_data(self, collection: ZoneCollection) -> None:
        ...

    def clear_layers(self) -> None:
        ...

    def get_bounds(self) -> LatLngBounds:
        """Bounds of all features; raises ``InvalidBoundsError`` when empty."""
        ...


class MapHandle(Protocol):
    """A created map instance."""

    def set_view(self, center: tuple[float, float], zoom: int) -> None:
        ...

    def add_tile_layer(self, tiles: TileLayerConfig) -> None:
        ...

    def add_geojson_layer(
        self,
        collection: ZoneCollection,
        *,
        style: StyleCallback,
        popup: PopupCallback,
    ) -> GeoJsonLayer:
        ...

    def fit_bounds(self, bounds: LatLngBounds, *, padding: tuple[int, int]) -> None:
        ...

    def remove(self) -> None:
        ...


class MapEngine(Protocol):
    """Factory for maps inside a page container element."""

    def create_map(self, element_id: str) -> MapHandle:
        ...
